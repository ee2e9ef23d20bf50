"""Pooled storage for one component type."""

from __future__ import annotations

from typing import Generic, TypeVar

from .types import INVALID_ENTITY, INVALID_INDEX, ECSError, Entity

MAX_ELEMENTS = 1000


class Component:
    """Base class for component data.

    Subclasses must be constructible without arguments. The storage
    records the owning entity, bit position and slot index on each instance.
    """

    eid = INVALID_ENTITY
    bit_position = 0
    component_index = INVALID_INDEX

    def reset(self) -> None:
        """Restore the component to its freshly constructed state."""
        vars(self).clear()
        self.__init__()  # type: ignore[misc]


C = TypeVar("C", bound=Component)


class ComponentArray(Generic[C]):
    """Stores components of one type in fixed-size rows with a free list."""

    def __init__(
        self,
        component_type: type[C],
        bit_position: int = 0,
        row_size: int = MAX_ELEMENTS,
    ) -> None:
        if row_size <= 0:
            raise ValueError("row_size must be positive")
        self.component_type = component_type
        self.bit_position = bit_position
        self._row_size = row_size
        self._rows: list[list[C]] = []
        self._free: list[int] = []

    def __len__(self) -> int:
        return len(self._rows) * self._row_size - len(self._free)

    def _grow(self) -> None:
        base = len(self._rows) * self._row_size
        self._rows.append([self.component_type() for _ in range(self._row_size)])
        self._free.extend(range(base, base + self._row_size))

    def insert(self, entity: Entity) -> C:
        """Attach a component to ``entity`` and return it."""
        if entity.signature.test(self.bit_position):
            raise ECSError("component already attached to this entity")
        if not self._free:
            self._grow()
        index = self._free.pop()
        entity.component_index[self.bit_position] = index
        entity.signature.set(self.bit_position, True)
        component = self.get_at(index)
        component.eid = entity
        component.bit_position = self.bit_position
        component.component_index = index
        return component

    def remove(self, entity: Entity) -> None:
        """Detach the component from ``entity`` and return its slot to the pool."""
        if not entity.signature.test(self.bit_position):
            raise ECSError("trying to remove a component that is not attached")
        index = entity.component_index[self.bit_position]
        self.get_at(index).reset()
        entity.signature.set(self.bit_position, False)
        entity.component_index[self.bit_position] = INVALID_INDEX
        self._free.append(index)

    def get(self, entity: Entity) -> C:
        """Return the component attached to ``entity``."""
        if not entity.signature.test(self.bit_position):
            raise ECSError("no such component is attached to the given entity")
        return self.get_at(entity.component_index[self.bit_position])

    def get_at(self, data_index: int) -> C:
        """Return the component stored at slot ``data_index``."""
        row, column = divmod(data_index, self._row_size)
        return self._rows[row][column]

    def entity_destroyed(self, entity: Entity) -> None:
        """Free the entity's component, if it has one."""
        if entity.signature.test(self.bit_position):
            self.remove(entity)