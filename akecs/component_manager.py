"""Registry of component types and their storage."""

from __future__ import annotations

from typing import TypeVar

from .component_array import Component, ComponentArray
from .types import SIGNATURE_SIZE, ECSError, Entity

C = TypeVar("C", bound=Component)


class ComponentManager:
    """Maps component types to bit positions and storage arrays."""

    def __init__(self) -> None:
        self._bit_positions: dict[type, int] = {}
        self._arrays: dict[type, ComponentArray] = {}
        self._arrays_in_order: list[ComponentArray] = []

    @property
    def next_bit_position(self) -> int:
        return len(self._arrays_in_order)

    def register_component(self, component_type: type[C]) -> None:
        """Register a new component type, giving it the next bit position."""
        if component_type in self._bit_positions:
            raise ECSError(f"component {component_type.__name__} already registered")
        position = self.next_bit_position
        if position >= SIGNATURE_SIZE:
            raise ECSError("no free signature bit for another component type")
        array: ComponentArray[C] = ComponentArray(component_type, position)
        self._bit_positions[component_type] = position
        self._arrays[component_type] = array
        self._arrays_in_order.append(array)

    def component_array(self, component_type: type[C]) -> ComponentArray[C]:
        """Return the storage for ``component_type``."""
        try:
            return self._arrays[component_type]
        except KeyError:
            raise ECSError(
                f"component {component_type.__name__} not registered before use"
            ) from None

    def bit_position(self, component_type: type) -> int:
        """Return the signature bit assigned to ``component_type``."""
        try:
            return self._bit_positions[component_type]
        except KeyError:
            raise ECSError(
                f"no such component is registered: {component_type.__name__}"
            ) from None

    def add_component(self, entity: Entity, component_type: type[C]) -> C:
        return self.component_array(component_type).insert(entity)

    def remove_component(self, entity: Entity, component_type: type) -> None:
        self.component_array(component_type).remove(entity)

    def get_component(self, entity: Entity, component_type: type[C]) -> C:
        return self.component_array(component_type).get(entity)

    def get_component_at(self, data_index: int, array_index: int) -> Component:
        """Return the component at ``data_index`` in the array registered
        ``array_index``-th."""
        return self._arrays_in_order[array_index].get_at(data_index)

    def entity_destroyed(self, entity: Entity) -> None:
        """Free every component attached to ``entity``."""
        for array in self._arrays.values():
            array.entity_destroyed(entity)