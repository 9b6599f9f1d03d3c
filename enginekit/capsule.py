"""Capsule collision shape: a segment swept by a sphere."""

from __future__ import annotations

import numpy as np

from .collider import BoxCollider, Collider, ColliderType, Contact, SphereCollider
from .transform import Transform

_EPSILON = 0.0001
_FALLBACK_NORMAL = (0.0, 1.0, 0.0)


def _contact_normal(dist: np.ndarray, dist_len: float) -> np.ndarray:
    if dist_len > _EPSILON:
        return dist / dist_len
    return np.array(_FALLBACK_NORMAL)


class CapsuleCollider(Collider):
    """A capsule centred on the entity, its axis along the transform's up vector."""

    def __init__(self) -> None:
        super().__init__(ColliderType.CAPSULE)
        self.radius = 0.5
        self.height = 2.0

    def _transform(self) -> Transform:
        transform = self._sibling(Transform)
        if transform is None:
            raise RuntimeError("collider requires a Transform on its entity")
        return transform

    def segment(self) -> tuple[np.ndarray, np.ndarray]:
        """Return the (start, end) points of the capsule's central axis."""
        transform = self._transform()
        position = transform.position
        up = transform.up
        half = self.height * 0.5
        return position - up * half, position + up * half

    def check_collision(self, other: Collider) -> Contact | None:
        if isinstance(other, CapsuleCollider):
            return self._against_capsule(other)
        if isinstance(other, SphereCollider):
            return self._against_sphere(other)
        if isinstance(other, BoxCollider):
            return self._against_box(other)
        return None

    def _against_capsule(self, other: CapsuleCollider) -> Contact | None:
        start1, end1 = self.segment()
        start2, end2 = other.segment()

        d1 = end1 - start1
        d2 = end2 - start2
        r = start1 - start2

        a = float(np.dot(d1, d1))
        b = float(np.dot(d1, d2))
        c = float(np.dot(d2, d2))
        d = float(np.dot(d1, r))
        e = float(np.dot(d2, r))

        denom = a * c - b * b
        t1 = 0.0
        t2 = 0.0
        if denom > _EPSILON:
            t1 = min(max((b * e - c * d) / denom, 0.0), 1.0)
            t2 = (b * t1 + e) / c
            if t2 < 0.0:
                t2 = 0.0
                t1 = min(max(-d / a, 0.0), 1.0)
            elif t2 > 1.0:
                t2 = 1.0
                t1 = min(max((b - d) / a, 0.0), 1.0)

        c1 = start1 + d1 * t1
        c2 = start2 + d2 * t2

        dist = c2 - c1
        dist_len = float(np.linalg.norm(dist))
        min_dist = self.radius + other.radius
        if dist_len >= min_dist:
            return None

        normal = _contact_normal(dist, dist_len)
        return Contact(c1 + normal * self.radius, normal, min_dist - dist_len)

    def _against_sphere(self, sphere: SphereCollider) -> Contact | None:
        start, end = self.segment()
        center = sphere._position()

        d = end - start
        length_sq = float(np.dot(d, d))
        t = float(np.dot(center - start, d)) / length_sq if length_sq > 0.0 else 0.0
        t = min(max(t, 0.0), 1.0)
        closest = start + d * t

        dist = center - closest
        dist_len = float(np.linalg.norm(dist))
        min_dist = self.radius + sphere.radius
        if dist_len >= min_dist:
            return None

        normal = _contact_normal(dist, dist_len)
        return Contact(closest + normal * self.radius, normal, min_dist - dist_len)

    def _against_box(self, box: BoxCollider) -> Contact | None:
        # Simplified test: only the segment's start point is compared with the box.
        start, _ = self.segment()
        box_min, box_max = box.bounds()
        closest = np.clip(start, box_min, box_max)

        dist = closest - start
        dist_len = float(np.linalg.norm(dist))
        if dist_len >= self.radius:
            return None

        normal = _contact_normal(dist, dist_len)
        return Contact(start + normal * self.radius, normal, self.radius - dist_len)

    def bounds(self) -> tuple[np.ndarray, np.ndarray]:
        position = self._transform().position
        extent = np.full(3, float(self.radius))
        extent[1] += self.height * 0.5
        return position - extent, position + extent