"""Entities, their components, and scenes holding entities."""

from __future__ import annotations

from typing import TypeVar


class Component:
    """Base class for behaviour attached to an entity."""

    def __init__(self) -> None:
        self.entity: Entity | None = None

    def update(self, delta_time: float) -> None:
        """Advance this component by ``delta_time`` seconds."""

    def render(self) -> bool:
        """Draw this component and report whether anything was drawn.

        The base component has nothing to draw.
        """
        return False

    def _sibling(self, component_type):
        """Return another component of the owning entity, or None."""
        if self.entity is None:
            return None
        return self.entity.get_component(component_type)


C = TypeVar("C", bound=Component)


class Entity:
    """A named object owning an ordered list of components."""

    def __init__(self, name: str = "Entity") -> None:
        self.name = name
        self._components: list[Component] = []

    @property
    def components(self) -> tuple[Component, ...]:
        return tuple(self._components)

    def update(self, delta_time: float) -> None:
        for component in self._components:
            component.update(delta_time)

    def add_component(self, component: C) -> C:
        """Attach ``component`` to this entity and return it."""
        if not isinstance(component, Component):
            raise TypeError("components must derive from Component")
        component.entity = self
        self._components.append(component)
        return component

    def get_component(self, component_type: type[C]) -> C | None:
        """Return the first component that is an instance of ``component_type``."""
        return next(
            (c for c in self._components if isinstance(c, component_type)), None
        )


class Scene:
    """A collection of entities updated and rendered together."""

    def __init__(self) -> None:
        self._entities: list[Entity] = []

    @property
    def entities(self) -> tuple[Entity, ...]:
        return tuple(self._entities)

    def update(self, delta_time: float) -> None:
        for entity in self._entities:
            entity.update(delta_time)

    def render(self) -> int:
        """Render every component of every entity; return how many drew something."""
        drawn = 0
        for entity in self._entities:
            for component in entity.components:
                if component.render():
                    drawn += 1
        return drawn

    def create_entity(self, name: str = "Entity") -> Entity:
        entity = Entity(name)
        self._entities.append(entity)
        return entity

    def destroy_entity(self, entity: Entity) -> None:
        """Remove ``entity``; unknown entities are ignored."""
        for index, candidate in enumerate(self._entities):
            if candidate is entity:
                del self._entities[index]
                return