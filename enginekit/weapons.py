"""Weapon inventory, firing, reloading and recoil."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

import numpy as np

from .glmath import quat_from_axis_angle
from .physics_system import PhysicsSystem, RaycastHit, default_physics_system
from .scene import Component
from .transform import Transform

_PI = 3.14159
_RECOIL_DAMPING = 0.9
_RECOIL_IMPULSE_SCALE = 0.1


@dataclass
class WeaponData:
    name: str = ""
    damage: float = 0.0
    fire_rate: float = 1.0
    reload_time: float = 0.0
    magazine_size: int = 0
    range: float = 100.0
    spread: float = 0.0
    automatic: bool = False
    recoil_vertical: float = 0.0
    recoil_horizontal: float = 0.0
    recoil_recovery: float = 0.0
    idle_anim: str = ""
    fire_anim: str = ""
    reload_anim: str = ""


class WeaponSystem(Component):
    """Holds weapons, fires ray casts along the owner's aim and tracks ammunition."""

    def __init__(
        self,
        rng: random.Random | None = None,
        physics: PhysicsSystem | None = None,
    ) -> None:
        super().__init__()
        self._rng = rng if rng is not None else random.Random()
        self._physics = physics if physics is not None else default_physics_system()
        self._weapons: list[WeaponData] = []
        self._current = 0
        self._firing = False
        self._reloading = False
        self._fire_timer = 0.0
        self._reload_timer = 0.0
        self._current_ammo = 0
        self._total_ammo = 0
        self._current_recoil = np.zeros(2)
        self._recoil_velocity = np.zeros(2)
        self.last_hit: RaycastHit | None = None

    @property
    def weapons(self) -> tuple[WeaponData, ...]:
        return tuple(self._weapons)

    @property
    def current_index(self) -> int:
        return self._current

    @property
    def active_weapon(self) -> WeaponData:
        if not self._weapons:
            raise LookupError("no weapons have been added")
        return self._weapons[self._current]

    @property
    def firing(self) -> bool:
        return self._firing

    @property
    def reloading(self) -> bool:
        return self._reloading

    @property
    def current_ammo(self) -> int:
        return self._current_ammo

    @property
    def total_ammo(self) -> int:
        return self._total_ammo

    @property
    def current_recoil(self) -> np.ndarray:
        return self._current_recoil.copy()

    def update(self, delta_time: float) -> None:
        if not self._weapons:
            return

        if self._fire_timer > 0.0:
            self._fire_timer -= delta_time

        if self._reloading:
            self._reload_timer -= delta_time
            if self._reload_timer <= 0.0:
                self._reloading = False
                needed = self.active_weapon.magazine_size - self._current_ammo
                available = min(needed, self._total_ammo)
                self._current_ammo += available
                self._total_ammo -= available

        if self._firing and self._can_fire():
            self._fire()

        self._handle_recoil(delta_time)

    def add_weapon(self, data: WeaponData) -> None:
        self._weapons.append(data)
        if len(self._weapons) == 1:
            self._current_ammo = data.magazine_size
            self._total_ammo = data.magazine_size * 3

    def switch_weapon(self, index: int) -> None:
        if 0 <= index < len(self._weapons) and index != self._current:
            self._current = index
            self._firing = False
            self._reloading = False
            self._fire_timer = 0.0
            self._current_recoil = np.zeros(2)

    def next_weapon(self) -> None:
        if self._weapons:
            self.switch_weapon((self._current + 1) % len(self._weapons))

    def previous_weapon(self) -> None:
        if self._weapons:
            count = len(self._weapons)
            self.switch_weapon((self._current - 1 + count) % count)

    def start_firing(self) -> None:
        self._firing = True
        if self._can_fire():
            self._fire()

    def stop_firing(self) -> None:
        self._firing = False

    def reload(self) -> None:
        if not self._weapons:
            return
        weapon = self.active_weapon
        if (
            not self._reloading
            and self._current_ammo < weapon.magazine_size
            and self._total_ammo > 0
        ):
            self._reloading = True
            self._reload_timer = weapon.reload_time
            self._firing = False

    def _can_fire(self) -> bool:
        return (
            bool(self._weapons)
            and not self._reloading
            and self._fire_timer <= 0.0
            and self._current_ammo > 0
            and (self.active_weapon.automatic or not self._firing)
        )

    def _fire(self) -> None:
        transform = self._sibling(Transform)
        if transform is None:
            raise RuntimeError("weapon system requires a Transform on its entity")
        weapon = self.active_weapon

        self._current_ammo -= 1
        self._fire_timer = 1.0 / weapon.fire_rate

        spread_angle = weapon.spread * (_PI / 180.0)
        random_angle = self._rng.random() * 2.0 * _PI
        random_radius = self._rng.random() * spread_angle
        local = np.array(
            [
                math.cos(random_angle) * math.sin(random_radius),
                math.sin(random_angle) * math.sin(random_radius),
                math.cos(random_radius),
                0.0,
            ]
        )
        direction = (transform.rotation.to_matrix() @ local)[:3]

        self.last_hit = self._physics.raycast(transform.position, direction, weapon.range)
        self._apply_recoil()

    def _apply_recoil(self) -> None:
        weapon = self.active_weapon
        horizontal = (self._rng.random() - 0.5) * weapon.recoil_horizontal
        vertical = weapon.recoil_vertical
        self._recoil_velocity = (
            self._recoil_velocity
            + np.array([horizontal, vertical]) * _RECOIL_IMPULSE_SCALE
        )

    def _handle_recoil(self, delta_time: float) -> None:
        recovery = self.active_weapon.recoil_recovery * delta_time
        force = -self._current_recoil * recovery
        self._recoil_velocity = (self._recoil_velocity + force * delta_time) * _RECOIL_DAMPING
        self._current_recoil = self._current_recoil + self._recoil_velocity

        transform = self._sibling(Transform)
        if transform is not None:
            rotation = transform.rotation
            rotation = rotation * quat_from_axis_angle(
                float(self._current_recoil[1]), (1.0, 0.0, 0.0)
            )
            rotation = rotation * quat_from_axis_angle(
                float(self._current_recoil[0]), (0.0, 1.0, 0.0)
            )
            transform.rotation = rotation