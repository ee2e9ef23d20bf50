"""Systems and the manager that tracks which entities they process."""

from __future__ import annotations

from typing import Any, TypeVar

from .types import ECSError, Entity, Signature


class System:
    """Holds the entities whose signature matches the system's.

    ``leaving`` holds members that have been announced for destruction and
    have not yet been dropped from ``entities``.
    """

    def __init__(self) -> None:
        self.entities: set[Entity] = set()
        self.leaving: set[Entity] = set()

    def on_add_entity(self, entity: Entity) -> None:
        """Called after ``entity`` is (re)confirmed as a member."""
        self.entities.add(entity)
        self.leaving.discard(entity)

    def on_destroy_entity(self, entity: Entity) -> None:
        """Called before a member ``entity`` is destroyed."""
        if entity in self.entities:
            self.leaving.add(entity)

    def after_destroy_entity(self) -> None:
        """Called after an entity leaves, or might have left, the system."""
        self.leaving &= self.entities


S = TypeVar("S", bound=System)


class SystemManager:
    """Registers systems and keeps their entity sets in step with signatures."""

    def __init__(self) -> None:
        self.systems: dict[type, System] = {}
        self._signatures: dict[type, Signature] = {}

    def register_system(self, system_type: type[S], *args: Any, **kwargs: Any) -> S:
        """Create and register a system of ``system_type``."""
        if system_type in self.systems:
            raise ECSError(f"system {system_type.__name__} registered more than once")
        system = system_type(*args, **kwargs)
        self.systems[system_type] = system
        return system

    def get_system(self, system_type: type[S]) -> S:
        try:
            return self.systems[system_type]  # type: ignore[return-value]
        except KeyError:
            raise ECSError(
                f"trying to fetch a non existing system: {system_type.__name__}"
            ) from None

    def set_system_signature(self, system_type: type, signature: Signature) -> None:
        """Set the components a system requires; may be set only once."""
        if system_type not in self.systems:
            raise ECSError("trying to set signature before registering the system")
        if system_type in self._signatures:
            raise ECSError("system's signature already set")
        self._signatures[system_type] = signature.copy()

    def entity_signature_changed(self, entity: Entity) -> None:
        """Add or drop ``entity`` from each system according to its signature."""
        entity_sig = entity.signature
        for system_type, system in self.systems.items():
            system_sig = self._signatures.setdefault(system_type, Signature())
            if system_sig.issubset(entity_sig):
                system.entities.add(entity)
                system.on_add_entity(entity)
            else:
                system.entities.discard(entity)
                system.after_destroy_entity()

    def entity_destroyed(self, entity: Entity) -> None:
        """Drop ``entity`` from every system."""
        for system in self.systems.values():
            system.entities.discard(entity)
            system.after_destroy_entity()