"""Rigid body component integrated by a physics system."""

from __future__ import annotations

import numpy as np

from .glmath import Quat
from .physics_system import PhysicsSystem, default_physics_system
from .scene import Component
from .transform import Transform

_MIN_MASS = 0.0001


def _clamp01(value: float) -> float:
    return min(max(value, 0.0), 1.0)


class RigidBody(Component):
    """Mass, velocity and accumulated forces; registers itself with ``physics``."""

    def __init__(self, physics: PhysicsSystem | None = None) -> None:
        super().__init__()
        self._physics = physics if physics is not None else default_physics_system()
        self._mass = 1.0
        self._drag = 0.01
        self._angular_drag = 0.05
        self.use_gravity = True
        self._kinematic = False
        self._freeze_rotation = False
        self._velocity = np.zeros(3)
        self._angular_velocity = np.zeros(3)
        self._forces = np.zeros(3)
        self._torques = np.zeros(3)
        self._physics.add_rigid_body(self)

    def detach(self) -> None:
        """Unregister this body from its physics system."""
        self._physics.remove_rigid_body(self)

    @property
    def mass(self) -> float:
        return self._mass

    @mass.setter
    def mass(self, value: float) -> None:
        self._mass = max(value, _MIN_MASS)

    @property
    def drag(self) -> float:
        return self._drag

    @drag.setter
    def drag(self, value: float) -> None:
        self._drag = _clamp01(value)

    @property
    def angular_drag(self) -> float:
        return self._angular_drag

    @angular_drag.setter
    def angular_drag(self, value: float) -> None:
        self._angular_drag = _clamp01(value)

    @property
    def kinematic(self) -> bool:
        return self._kinematic

    @kinematic.setter
    def kinematic(self, value: bool) -> None:
        self._kinematic = value
        if value:
            self._velocity = np.zeros(3)
            self._angular_velocity = np.zeros(3)

    @property
    def freeze_rotation(self) -> bool:
        return self._freeze_rotation

    @freeze_rotation.setter
    def freeze_rotation(self, value: bool) -> None:
        self._freeze_rotation = value
        if value:
            self._angular_velocity = np.zeros(3)

    @property
    def velocity(self) -> np.ndarray:
        return self._velocity.copy()

    @velocity.setter
    def velocity(self, value) -> None:
        self._velocity = np.array(value, dtype=float).reshape(3)

    @property
    def angular_velocity(self) -> np.ndarray:
        return self._angular_velocity.copy()

    @angular_velocity.setter
    def angular_velocity(self, value) -> None:
        if not self._freeze_rotation:
            self._angular_velocity = np.array(value, dtype=float).reshape(3)

    def add_force(self, force) -> None:
        self._forces = self._forces + np.asarray(force, dtype=float)

    def add_torque(self, torque) -> None:
        if not self._freeze_rotation:
            self._torques = self._torques + np.asarray(torque, dtype=float)

    def add_impulse(self, impulse) -> None:
        if not self._kinematic:
            self._velocity = self._velocity + np.asarray(impulse, dtype=float) / self._mass

    def add_angular_impulse(self, impulse) -> None:
        if not self._kinematic and not self._freeze_rotation:
            self._angular_velocity = self._angular_velocity + np.asarray(impulse, dtype=float)

    def update(self, delta_time: float) -> None:
        if self._kinematic:
            return
        transform = self._sibling(Transform)
        if transform is None:
            return

        acceleration = self._forces / self._mass
        if self.use_gravity:
            acceleration = acceleration + self._physics.gravity

        self._velocity = (self._velocity + acceleration * delta_time) * (1.0 - self._drag)
        transform.position = transform.position + self._velocity * delta_time

        if not self._freeze_rotation:
            self._angular_velocity = (
                self._angular_velocity + self._torques * delta_time
            ) * (1.0 - self._angular_drag)
            spin = self._angular_velocity * delta_time
            delta = Quat(0.0, float(spin[0]), float(spin[1]), float(spin[2]))
            transform.rotation = transform.rotation * delta

        self._forces = np.zeros(3)
        self._torques = np.zeros(3)