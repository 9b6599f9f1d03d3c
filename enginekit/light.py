"""Light component describing directional, point and spot lights."""

from __future__ import annotations

import enum

import numpy as np

from .glmath import normalize
from .scene import Component
from .transform import Transform


class LightType(enum.Enum):
    DIRECTIONAL = "directional"
    POINT = "point"
    SPOT = "spot"


class Light(Component):
    """A light source; direction and position come from the owning transform."""

    def __init__(self, light_type: LightType = LightType.DIRECTIONAL) -> None:
        super().__init__()
        self.light_type = light_type
        self.color = np.ones(3)
        self.intensity = 1.0
        self.range = 10.0
        self.spot_angle = 45.0

    def update(self, delta_time: float) -> None:
        """Lights hold no per-frame state."""

    def direction(self) -> np.ndarray:
        """Direction the light shines in; straight down without a transform."""
        transform = self._sibling(Transform)
        if transform is None:
            return np.array([0.0, -1.0, 0.0])
        rotated = transform.rotation.to_matrix() @ np.array([0.0, 0.0, 1.0, 0.0])
        return -normalize(rotated[:3])

    def position(self) -> np.ndarray:
        """Position of the light; the origin without a transform."""
        transform = self._sibling(Transform)
        if transform is None:
            return np.zeros(3)
        return transform.position