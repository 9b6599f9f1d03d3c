"""Position, rotation and scale of an entity, with an optional parent."""

from __future__ import annotations

import numpy as np

from .glmath import Quat, quat_from_euler, scale_matrix, translation_matrix
from .scene import Component


class Transform(Component):
    """Spatial placement of an entity.

    The world matrix is cached and recomputed on :meth:`update` when any
    property has changed since the last update.
    """

    def __init__(self) -> None:
        super().__init__()
        self._position = np.zeros(3)
        self._rotation = Quat()
        self._scale = np.ones(3)
        self._parent: Transform | None = None
        self._dirty = True
        self._world = np.eye(4)

    def update(self, delta_time: float) -> None:
        if self._dirty:
            self._update_world_matrix()

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value) -> None:
        self._position = np.array(value, dtype=float).reshape(3)
        self._dirty = True

    def translate(self, delta) -> None:
        self._position = self._position + np.asarray(delta, dtype=float)
        self._dirty = True

    @property
    def rotation(self) -> Quat:
        return self._rotation

    @rotation.setter
    def rotation(self, value: Quat) -> None:
        self._rotation = value
        self._dirty = True

    @property
    def rotation_euler(self) -> np.ndarray:
        """Rotation as (pitch, yaw, roll) in degrees."""
        return np.degrees(self._rotation.euler_angles())

    @rotation_euler.setter
    def rotation_euler(self, degrees) -> None:
        self._rotation = quat_from_euler(np.radians(np.asarray(degrees, dtype=float)))
        self._dirty = True

    def rotate(self, euler) -> None:
        """Apply a rotation given as Euler angles in degrees."""
        delta = quat_from_euler(np.radians(np.asarray(euler, dtype=float)))
        self._rotation = delta * self._rotation
        self._dirty = True

    @property
    def scale(self) -> np.ndarray:
        return self._scale.copy()

    @scale.setter
    def scale(self, value) -> None:
        self._scale = np.array(value, dtype=float).reshape(3)
        self._dirty = True

    @property
    def parent(self) -> Transform | None:
        return self._parent

    @parent.setter
    def parent(self, value: Transform | None) -> None:
        self._parent = value
        self._dirty = True

    @property
    def forward(self) -> np.ndarray:
        """The local +Z axis in world orientation."""
        return self._rotation.rotate_vector((0.0, 0.0, 1.0))

    @property
    def up(self) -> np.ndarray:
        """The local +Y axis in world orientation."""
        return self._rotation.rotate_vector((0.0, 1.0, 0.0))

    def local_matrix(self) -> np.ndarray:
        return (
            translation_matrix(self._position)
            @ self._rotation.to_matrix()
            @ scale_matrix(self._scale)
        )

    def world_matrix(self) -> np.ndarray:
        """The world matrix as of the last update."""
        return self._world.copy()

    def _update_world_matrix(self) -> None:
        if self._parent is not None:
            self._world = self._parent.world_matrix() @ self.local_matrix()
        else:
            self._world = self.local_matrix()
        self._dirty = False