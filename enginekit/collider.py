"""Collision shapes: axis-aligned boxes and spheres."""

from __future__ import annotations

import abc
import enum
import math
from dataclasses import dataclass

import numpy as np

from .scene import Component
from .transform import Transform


class ColliderType(enum.Enum):
    BOX = "box"
    SPHERE = "sphere"
    CAPSULE = "capsule"


@dataclass(frozen=True)
class Contact:
    """Result of a narrow-phase test: where, along which normal, how deep."""

    point: np.ndarray
    normal: np.ndarray
    depth: float


class Collider(Component, abc.ABC):
    """Base class for collision shapes placed by the owning entity's transform."""

    def __init__(self, collider_type: ColliderType) -> None:
        super().__init__()
        self._type = collider_type
        self.trigger = False
        self.restitution = 0.6
        self.friction = 0.5

    @property
    def collider_type(self) -> ColliderType:
        return self._type

    def set_material(self, restitution: float, friction: float) -> None:
        self.restitution = restitution
        self.friction = friction

    @abc.abstractmethod
    def check_collision(self, other: Collider) -> Contact | None:
        """Return the contact with ``other``, or None when they do not touch."""

    @abc.abstractmethod
    def bounds(self) -> tuple[np.ndarray, np.ndarray]:
        """Return the (min, max) corners of the world-space bounding box."""

    def _position(self) -> np.ndarray:
        transform = self._sibling(Transform)
        if transform is None:
            raise RuntimeError("collider requires a Transform on its entity")
        return transform.position


class BoxCollider(Collider):
    """An axis-aligned box centred on the entity's position."""

    def __init__(self) -> None:
        super().__init__(ColliderType.BOX)
        self._size = np.ones(3)

    @property
    def size(self) -> np.ndarray:
        return self._size.copy()

    @size.setter
    def size(self, value) -> None:
        self._size = np.array(value, dtype=float).reshape(3)

    def check_collision(self, other: Collider) -> Contact | None:
        if not isinstance(other, BoxCollider):
            return None

        min1, max1 = self.bounds()
        min2, max2 = other.bounds()
        if not (np.all(min1 <= max2) and np.all(max1 >= min2)):
            return None

        center1 = (min1 + max1) * 0.5
        center2 = (min2 + max2) * 0.5
        delta = center2 - center1
        overlap = (max1 - min1 + max2 - min2) * 0.5 - np.abs(delta)

        if overlap[0] < overlap[1] and overlap[0] < overlap[2]:
            axis = 0
        elif overlap[1] < overlap[2]:
            axis = 1
        else:
            axis = 2

        depth = float(overlap[axis])
        normal = np.zeros(3)
        normal[axis] = -1.0 if delta[axis] < 0 else 1.0
        point = center1 + normal * depth * 0.5
        return Contact(point, normal, depth)

    def bounds(self) -> tuple[np.ndarray, np.ndarray]:
        position = self._position()
        half = self._size * 0.5
        return position - half, position + half


class SphereCollider(Collider):
    """A sphere centred on the entity's position."""

    def __init__(self) -> None:
        super().__init__(ColliderType.SPHERE)
        self.radius = 0.5

    def check_collision(self, other: Collider) -> Contact | None:
        if not isinstance(other, SphereCollider):
            return None

        pos1 = self._position()
        pos2 = other._position()
        radius_sum = self.radius + other.radius
        delta = pos2 - pos1
        dist_squared = float(np.dot(delta, delta))
        if dist_squared > radius_sum * radius_sum:
            return None

        dist = math.sqrt(dist_squared)
        normal = delta / dist if dist > 0 else np.array([0.0, 1.0, 0.0])
        depth = radius_sum - dist
        point = pos1 + normal * (self.radius - depth * 0.5)
        return Contact(point, normal, depth)

    def bounds(self) -> tuple[np.ndarray, np.ndarray]:
        position = self._position()
        extent = np.full(3, float(self.radius))
        return position - extent, position + extent