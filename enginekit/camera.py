"""Camera component producing projection and view matrices."""

from __future__ import annotations

import enum
import math

import numpy as np

from .glmath import ortho, perspective
from .scene import Component
from .transform import Transform


class ProjectionType(enum.Enum):
    PERSPECTIVE = "perspective"
    ORTHOGRAPHIC = "orthographic"


class Camera(Component):
    """Projection settings; the projection matrix is refreshed on update."""

    def __init__(self) -> None:
        super().__init__()
        self._projection_type = ProjectionType.PERSPECTIVE
        self._fov = 45.0
        self._aspect_ratio = 16.0 / 9.0
        self._near_plane = 0.1
        self._far_plane = 1000.0
        self._ortho = (-10.0, 10.0, -10.0, 10.0)
        self._projection = np.eye(4)
        self._dirty = True

    def update(self, delta_time: float) -> None:
        if self._dirty:
            self._update_projection_matrix()

    def set_perspective(self, fov_degrees, aspect_ratio, near_plane, far_plane) -> None:
        self._projection_type = ProjectionType.PERSPECTIVE
        self._fov = fov_degrees
        self._aspect_ratio = aspect_ratio
        self._near_plane = near_plane
        self._far_plane = far_plane
        self._dirty = True

    def set_orthographic(self, left, right, bottom, top, near_plane, far_plane) -> None:
        self._projection_type = ProjectionType.ORTHOGRAPHIC
        self._ortho = (left, right, bottom, top)
        self._near_plane = near_plane
        self._far_plane = far_plane
        self._dirty = True

    @property
    def projection_type(self) -> ProjectionType:
        return self._projection_type

    @projection_type.setter
    def projection_type(self, value: ProjectionType) -> None:
        self._projection_type = value
        self._dirty = True

    @property
    def fov(self) -> float:
        return self._fov

    @fov.setter
    def fov(self, degrees: float) -> None:
        self._fov = degrees
        self._dirty = True

    @property
    def aspect_ratio(self) -> float:
        return self._aspect_ratio

    @aspect_ratio.setter
    def aspect_ratio(self, ratio: float) -> None:
        self._aspect_ratio = ratio
        self._dirty = True

    @property
    def near_plane(self) -> float:
        return self._near_plane

    @near_plane.setter
    def near_plane(self, value: float) -> None:
        self._near_plane = value
        self._dirty = True

    @property
    def far_plane(self) -> float:
        return self._far_plane

    @far_plane.setter
    def far_plane(self, value: float) -> None:
        self._far_plane = value
        self._dirty = True

    @property
    def projection_matrix(self) -> np.ndarray:
        """The projection matrix as of the last update."""
        return self._projection.copy()

    def view_matrix(self) -> np.ndarray:
        """Inverse of the owning transform's world matrix, or identity."""
        transform = self._sibling(Transform)
        if transform is None:
            return np.eye(4)
        return np.linalg.inv(transform.world_matrix())

    def _update_projection_matrix(self) -> None:
        if self._projection_type is ProjectionType.PERSPECTIVE:
            self._projection = perspective(
                math.radians(self._fov),
                self._aspect_ratio,
                self._near_plane,
                self._far_plane,
            )
        else:
            self._projection = ortho(*self._ortho, self._near_plane, self._far_plane)
        self._dirty = False