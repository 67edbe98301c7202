"""Entity-component-system core: entities, components, systems, scripts and their manager."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, TypeVar

from starforge.transform import Transform
from starforge.utils import Vector3i

__all__ = [
    "MAX_COMPONENTS",
    "MAX_ENTITIES",
    "MAX_SYSTEMS",
    "Component",
    "Entity",
    "Manager",
    "Script",
    "System",
]

MAX_COMPONENTS = 32
MAX_ENTITIES = 5000
MAX_SYSTEMS = 32

C = TypeVar("C", bound="Component")
S = TypeVar("S", bound="System")
Sc = TypeVar("Sc", bound="Script")


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


class Component:
    """Data attached to an entity; ``entity`` is set when it is attached."""

    entity: Optional["Entity"] = None
    initialized: bool = False

    def init(self) -> None:
        """Hook called once the component is attached; marks it initialised."""
        self.initialized = True


class Entity:
    """An object in the world: a transform plus components and scripts."""

    def __init__(self, scene: Any = None) -> None:
        self._alive = True
        self._scene = scene
        self._components: list[Component] = []
        self._component_map: dict[type, Component] = {}
        self._scripts: list["Script"] = []
        self.id = 0
        self.lifetime = 0.0
        self.transform = Transform()
        self.grid_position = Vector3i()

    @property
    def scene(self) -> Any:
        return self._scene

    @property
    def components(self) -> tuple[Component, ...]:
        return tuple(self._components)

    @property
    def scripts(self) -> tuple["Script", ...]:
        return tuple(self._scripts)

    def update(self, delta_time: float) -> None:
        """Per-frame hook; accumulates the time the entity has been updated for."""
        self.lifetime += delta_time

    def destroy(self) -> None:
        """Mark the entity dead; the manager removes it on its next refresh."""
        self._alive = False

    def is_alive(self) -> bool:
        return self._alive

    def update_grid(self, cell_size: int) -> None:
        """Place the entity in the spatial grid cell that holds its position."""
        x, y, z = (int(v) for v in self.transform.position)
        self.grid_position = Vector3i(
            _trunc_div(x, cell_size),
            _trunc_div(y, cell_size),
            _trunc_div(z, cell_size),
        )

    def get_script(self, script_type: type[Sc]) -> Optional[Sc]:
        """Return the first attached script that is a ``script_type``, or None."""
        return next((s for s in self._scripts if isinstance(s, script_type)), None)


class System(ABC):
    """Logic that runs over the manager's entities every frame."""

    @abstractmethod
    def init(self) -> None:
        """Called once when the manager is initialised."""

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Called every frame."""


class Script(ABC):
    """Behaviour bound to one entity."""

    entity: Optional[Entity] = None
    manager: Optional["Manager"] = None
    last_collision: Optional[Entity] = None

    @abstractmethod
    def init(self) -> None:
        """Called once when the manager is initialised."""

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Called every frame."""

    def on_collide(self, other: Entity) -> None:
        """Called when the script's entity collides with ``other``; remembers it."""
        self.last_collision = other


class Manager:
    """Owns entities, systems and scripts, and drives their updates."""

    def __init__(self) -> None:
        self._scene: Any = None
        self._entities: list[Entity] = []
        self._systems: list[System] = []
        self._system_map: dict[type, System] = {}
        self._scripts: list[Optional[Script]] = []
        self._script_index: dict[type, list[Entity]] = {}
        self._next_id = 0

    @property
    def scene(self) -> Any:
        return self._scene

    @property
    def entities(self) -> tuple[Entity, ...]:
        return tuple(self._entities)

    @property
    def systems(self) -> tuple[System, ...]:
        return tuple(self._systems)

    @property
    def scripts(self) -> tuple[Script, ...]:
        return tuple(s for s in self._scripts if s is not None)

    def init(self) -> None:
        """Initialise every script, then every system."""
        self._scripts = [s for s in self._scripts if s is not None]
        for script in list(self._scripts):
            script.init()
        for system in list(self._systems):
            system.init()

    def update(self, delta_time: float) -> None:
        """Update systems, then entities, then scripts, then drop dead entities."""
        for system in list(self._systems):
            system.update(delta_time)
        for entity in list(self._entities):
            entity.update(delta_time)
        for script in list(self._scripts):
            if script is not None:
                script.update(delta_time)
        self.refresh()

    def refresh(self) -> None:
        """Remove dead entities together with their components."""
        alive: list[Entity] = []
        for entity in self._entities:
            if entity.is_alive():
                alive.append(entity)
            else:
                entity._components.clear()
                entity._component_map.clear()
        self._entities = alive

    @staticmethod
    def is_entity_dead(entity: Entity) -> bool:
        return not entity.is_alive()

    def set_scene(self, scene: Any) -> None:
        self._scene = scene

    def create_entity(self) -> Entity:
        """Create an entity in the manager's scene and register it."""
        entity = Entity(self._scene)
        self._next_id += 1
        entity.id = self._next_id
        self._entities.append(entity)
        return entity

    def add_component(self, entity: Entity, component: C) -> C:
        """Attach ``component`` to ``entity``, initialise it and return it."""
        if not isinstance(component, Component):
            raise TypeError("component must be a Component instance")
        component.entity = entity
        entity._components.append(component)
        entity._component_map[type(component)] = component
        component.init()
        return component

    def get_component(self, entity: Entity, component_type: type[C]) -> C:
        """Return the ``component_type`` component of ``entity``.

        Raises KeyError when the entity has none.
        """
        try:
            return entity._component_map[component_type]  # type: ignore[return-value]
        except KeyError:
            raise KeyError(f"entity has no {component_type.__name__} component") from None

    def remove_component(self, entity: Entity, component_type: type[Component]) -> None:
        entity._component_map.pop(component_type, None)
        entity._components = [c for c in entity._components if type(c) is not component_type]

    def has_component(self, entity: Entity, component_type: type[Component]) -> bool:
        return component_type in entity._component_map

    def find_entity_with_component(self, component_type: type[Component]) -> Optional[Entity]:
        return next((e for e in self._entities if self.has_component(e, component_type)), None)

    def add_system(self, system_type: type[S], *args: Any, **kwargs: Any) -> S:
        """Create and register a ``system_type``; an existing one is returned instead."""
        if not (isinstance(system_type, type) and issubclass(system_type, System)):
            raise TypeError("system_type must be a subclass of System")
        existing = self._system_map.get(system_type)
        if existing is not None:
            return existing  # type: ignore[return-value]
        if len(self._systems) >= MAX_SYSTEMS:
            raise RuntimeError("exceeded max number of systems")
        system = system_type(*args, **kwargs)
        self._system_map[system_type] = system
        self._systems.append(system)
        return system

    def get_system(self, system_type: type[S]) -> S:
        """Return the registered ``system_type``; raises KeyError when absent."""
        try:
            return self._system_map[system_type]  # type: ignore[return-value]
        except KeyError:
            raise KeyError(f"system {system_type.__name__} not found") from None

    def attach_script(self, entity: Optional[Entity], script: Optional[Script]) -> None:
        """Bind ``script`` to ``entity``; does nothing if either is missing."""
        if entity is None or script is None:
            return
        script.entity = entity
        script.manager = self
        self._scripts.append(script)
        entity._scripts.append(script)
        self._script_index.setdefault(type(script), []).append(entity)

    def has_script(self, entity: Entity, script_type: type[Script]) -> bool:
        return any(isinstance(s, script_type) for s in entity._scripts)

    def find_entity_with_script(self, script_type: type[Script]) -> Optional[Entity]:
        """First entity a script of exactly ``script_type`` was attached to."""
        entities = self._script_index.get(script_type)
        return entities[0] if entities else None