"""The entity-component system facade."""

from __future__ import annotations

import dataclasses
from collections import deque
from typing import Any, TypeVar

from .component_array import Component
from .component_manager import ComponentManager
from .system import System, SystemManager
from .types import INVALID_INDEX, ECSError, Entity, Signature

MAX_ENTITIES = 1000

C = TypeVar("C", bound=Component)
S = TypeVar("S", bound=System)


class ECS:
    """Creates entities and routes component and system operations."""

    def __init__(self, max_entities: int = MAX_ENTITIES) -> None:
        if max_entities <= 0:
            raise ValueError("max_entities must be positive")
        self._row_size = max_entities
        self._free: deque[int] = deque()
        self._rows: list[list[Entity]] = []
        self.component_manager = ComponentManager()
        self.system_manager = SystemManager()

    def _capacity(self) -> int:
        return len(self._rows) * self._row_size

    def _stored(self, index: int) -> Entity:
        row, column = divmod(index, self._row_size)
        return self._rows[row][column]

    def _slot(self, entity: Entity) -> Entity:
        if not 0 <= entity.index < self._capacity():
            raise ECSError("entity index out of range")
        stored = self._stored(entity.index)
        if stored != entity or not stored.alive:
            raise ECSError("entity does not exist")
        return stored

    def create_entity(self) -> Entity:
        """Return a handle to a fresh entity."""
        if not self._free:
            start = self._capacity()
            self._rows.append(
                [Entity(start + i, 0) for i in range(self._row_size)]
            )
            self._free.extend(range(start, start + self._row_size))
        stored = self._stored(self._free.popleft())
        stored.alive = True
        return dataclasses.replace(stored)

    def destroy_entity(self, entity: Entity) -> None:
        """Destroy ``entity``, freeing its components; its handles become stale."""
        stored = self._slot(entity)
        for system in list(self.system_manager.systems.values()):
            if entity in system.entities:
                system.on_destroy_entity(entity)
        self.component_manager.entity_destroyed(stored)
        self.system_manager.entity_destroyed(entity)
        stored.version += 1
        stored.alive = False
        stored.signature.reset()
        stored.component_index[:] = [INVALID_INDEX] * len(stored.component_index)
        self._free.append(entity.index)

    def register_component(self, component_type: type) -> None:
        self.component_manager.register_component(component_type)

    def add_component(self, entity: Entity, component_type: type[C]) -> C:
        stored = self._slot(entity)
        component = self.component_manager.add_component(stored, component_type)
        self.system_manager.entity_signature_changed(entity)
        return component

    def get_component(self, entity: Entity, component_type: type[C]) -> C:
        stored = self._slot(entity)
        return self.component_manager.get_component(stored, component_type)

    def get_component_at(self, data_index: int, array_index: int) -> Component:
        return self.component_manager.get_component_at(data_index, array_index)

    def remove_component(self, entity: Entity, component_type: type) -> None:
        self.component_manager.remove_component(entity, component_type)
        self.system_manager.entity_signature_changed(entity)

    def register_system(self, system_type: type[S], *args: Any, **kwargs: Any) -> S:
        return self.system_manager.register_system(system_type, *args, **kwargs)

    def set_system_signature(self, system_type: type, signature: Signature) -> None:
        self.system_manager.set_system_signature(system_type, signature)

    def bit_position(self, component_type: type) -> int:
        return self.component_manager.bit_position(component_type)

    def entity_signature(self, entity: Entity) -> Signature:
        """Return a copy of the entity's current signature."""
        return self._slot(entity).signature.copy()

    def is_component_attached(self, entity: Entity, component_type: type) -> bool:
        return entity.signature.test(self.bit_position(component_type))

    def is_entity_valid(self, entity: Entity) -> bool:
        if not 0 <= entity.index < self._capacity():
            return False
        stored = self._stored(entity.index)
        return stored == entity and stored.alive