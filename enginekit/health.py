"""Health, damage and regeneration for an entity."""

from __future__ import annotations

from typing import Callable, Optional

from .scene import Component, Entity

DamageCallback = Callable[[float, Optional[Entity]], None]
HealCallback = Callable[[float], None]
DeathCallback = Callable[[Optional[Entity]], None]


class HealthSystem(Component):
    """Tracks hit points and reports damage, healing and death through callbacks."""

    def __init__(self) -> None:
        super().__init__()
        self._max_health = 100.0
        self._health = 100.0
        self.damage_multiplier = 1.0
        self.regeneration = 0.0
        self.invulnerable = False
        self._damage_callback: DamageCallback | None = None
        self._heal_callback: HealCallback | None = None
        self._death_callback: DeathCallback | None = None

    @property
    def max_health(self) -> float:
        return self._max_health

    @max_health.setter
    def max_health(self, value: float) -> None:
        self._max_health = value
        if self._health > value:
            self._health = value

    @property
    def health(self) -> float:
        return self._health

    @health.setter
    def health(self, value: float) -> None:
        self._health = min(max(value, 0.0), self._max_health)

    @property
    def is_alive(self) -> bool:
        return self._health > 0

    def on_damage(self, callback: DamageCallback) -> None:
        self._damage_callback = callback

    def on_heal(self, callback: HealCallback) -> None:
        self._heal_callback = callback

    def on_death(self, callback: DeathCallback) -> None:
        self._death_callback = callback

    def take_damage(self, amount: float, damager: Entity | None = None) -> None:
        if self.invulnerable or amount <= 0 or not self.is_alive:
            return
        actual = amount * self.damage_multiplier
        self._health = max(0.0, self._health - actual)
        if self._damage_callback is not None:
            self._damage_callback(actual, damager)
        if self._health <= 0 and self._death_callback is not None:
            self._death_callback(damager)

    def heal(self, amount: float) -> None:
        if amount <= 0 or not self.is_alive:
            return
        previous = self._health
        self._health = min(self._max_health, self._health + amount)
        actual = self._health - previous
        if actual > 0 and self._heal_callback is not None:
            self._heal_callback(actual)

    def update(self, delta_time: float) -> None:
        if self.regeneration > 0 and self._health < self._max_health and self.is_alive:
            self.heal(self.regeneration * delta_time)