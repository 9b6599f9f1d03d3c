"""Rigid body integration, collision response and ray casts."""

from __future__ import annotations

import functools
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from .collider import Collider, SphereCollider
from .glmath import normalize
from .transform import Transform

if TYPE_CHECKING:
    from .rigidbody import RigidBody

_CORRECTION_PERCENT = 0.2
_CORRECTION_SLOP = 0.01


@dataclass(frozen=True)
class RaycastHit:
    collider: Collider
    point: np.ndarray
    normal: np.ndarray
    distance: float


class PhysicsSystem:
    """Holds registered bodies and colliders and steps them together."""

    def __init__(self) -> None:
        self._rigid_bodies: list[RigidBody] = []
        self._colliders: list[Collider] = []
        self.initialize()

    def initialize(self) -> None:
        """Reset gravity and solver iterations to their defaults."""
        self._gravity = np.array([0.0, -9.81, 0.0])
        self.solver_iterations = 4

    @property
    def gravity(self) -> np.ndarray:
        return self._gravity.copy()

    @gravity.setter
    def gravity(self, value) -> None:
        self._gravity = np.array(value, dtype=float).reshape(3)

    @property
    def rigid_bodies(self) -> tuple[RigidBody, ...]:
        return tuple(self._rigid_bodies)

    @property
    def colliders(self) -> tuple[Collider, ...]:
        return tuple(self._colliders)

    def update(self, delta_time: float) -> None:
        for body in list(self._rigid_bodies):
            if not body.kinematic:
                body.update(delta_time)
        self._detect_collisions()

    def add_rigid_body(self, body: RigidBody) -> None:
        if body is not None and not any(b is body for b in self._rigid_bodies):
            self._rigid_bodies.append(body)

    def remove_rigid_body(self, body: RigidBody) -> None:
        for index, candidate in enumerate(self._rigid_bodies):
            if candidate is body:
                del self._rigid_bodies[index]
                return

    def add_collider(self, collider: Collider) -> None:
        if collider is not None and not any(c is collider for c in self._colliders):
            self._colliders.append(collider)

    def remove_collider(self, collider: Collider) -> None:
        for index, candidate in enumerate(self._colliders):
            if candidate is collider:
                del self._colliders[index]
                return

    def _body_of(self, entity) -> RigidBody | None:
        if entity is None:
            return None
        return next((b for b in self._rigid_bodies if b.entity is entity), None)

    def _detect_collisions(self) -> None:
        collisions = []
        for i, collider_a in enumerate(self._colliders):
            for collider_b in self._colliders[i + 1:]:
                min_a, max_a = collider_a.bounds()
                min_b, max_b = collider_b.bounds()
                if np.any(max_a < min_b) or np.any(min_a > max_b):
                    continue
                contact = collider_a.check_collision(collider_b)
                if contact is not None:
                    collisions.append((collider_a, collider_b, contact))

        for collider_a, collider_b, contact in collisions:
            self._respond(collider_a, collider_b, contact)

    def _respond(self, collider_a, collider_b, contact) -> None:
        entity_a, entity_b = collider_a.entity, collider_b.entity
        body_a, body_b = self._body_of(entity_a), self._body_of(entity_b)
        if body_a is None and body_b is None:
            return

        relative = np.zeros(3)
        if body_a is not None:
            relative = relative + body_a.velocity
        if body_b is not None:
            relative = relative - body_b.velocity

        restitution = min(collider_a.restitution, collider_b.restitution)
        vel_along_normal = float(np.dot(relative, contact.normal))
        if vel_along_normal > 0:
            return

        magnitude = -(1.0 + restitution) * vel_along_normal
        inverse_mass = sum(1.0 / b.mass for b in (body_a, body_b) if b is not None)
        magnitude /= inverse_mass
        impulse = magnitude * contact.normal

        dynamic_a = body_a is not None and not body_a.kinematic
        dynamic_b = body_b is not None and not body_b.kinematic
        if dynamic_a:
            body_a.add_impulse(-impulse)
        if dynamic_b:
            body_b.add_impulse(impulse)

        share = 2.0 if dynamic_a and dynamic_b else 1.0
        correction = (
            max(contact.depth - _CORRECTION_SLOP, 0.0)
            / share
            * _CORRECTION_PERCENT
            * contact.normal
        )
        if dynamic_a:
            transform = entity_a.get_component(Transform)
            transform.position = transform.position - correction
        if dynamic_b:
            transform = entity_b.get_component(Transform)
            transform.position = transform.position + correction

    def raycast(self, origin, direction, max_distance: float = 1000.0) -> RaycastHit | None:
        """Return the nearest sphere hit along the ray within ``max_distance``."""
        origin = np.asarray(origin, dtype=float)
        unit = normalize(direction)
        closest = max_distance
        best: RaycastHit | None = None

        for collider in self._colliders:
            if not isinstance(collider, SphereCollider):
                continue
            transform = collider.entity.get_component(Transform) if collider.entity else None
            if transform is None:
                raise RuntimeError("collider requires a Transform on its entity")
            center = transform.position
            radius = collider.radius

            oc = origin - center
            a = float(np.dot(unit, unit))
            b = 2.0 * float(np.dot(oc, unit))
            c = float(np.dot(oc, oc)) - radius * radius
            discriminant = b * b - 4 * a * c
            if not discriminant > 0:
                continue
            t = (-b - math.sqrt(discriminant)) / (2.0 * a)
            if 0 < t < closest:
                closest = t
                point = origin + unit * t
                best = RaycastHit(collider, point, normalize(point - center), t)

        return best


@functools.lru_cache(maxsize=None)
def default_physics_system() -> PhysicsSystem:
    """Return the shared physics system used when none is given."""
    return PhysicsSystem()