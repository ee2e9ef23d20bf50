"""Core value types: entity handles and component signatures."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import total_ordering

INVALID_INDEX = (1 << 64) - 1
SIGNATURE_SIZE = 32


class ECSError(Exception):
    """Raised when the entity-component system is used incorrectly."""


class Signature:
    """A fixed-size set of bits naming the components an entity carries."""

    __slots__ = ("_bits",)

    def __init__(self, bits: int = 0) -> None:
        if not 0 <= bits < 1 << SIGNATURE_SIZE:
            raise ValueError(f"signature bits must fit in {SIGNATURE_SIZE} bits")
        self._bits = bits

    @staticmethod
    def _check(position: int) -> None:
        if not 0 <= position < SIGNATURE_SIZE:
            raise IndexError(f"bit position {position} out of range")

    def test(self, position: int) -> bool:
        """Return whether the bit at ``position`` is set."""
        self._check(position)
        return bool(self._bits >> position & 1)

    def set(self, position: int, value: bool = True) -> None:
        """Set or clear the bit at ``position``."""
        self._check(position)
        if value:
            self._bits |= 1 << position
        else:
            self._bits &= ~(1 << position)

    def reset(self) -> None:
        """Clear every bit."""
        self._bits = 0

    def issubset(self, other: Signature) -> bool:
        """Return whether every bit set here is also set in ``other``."""
        return self._bits & other._bits == self._bits

    def copy(self) -> Signature:
        return Signature(self._bits)

    def __and__(self, other: Signature) -> Signature:
        return Signature(self._bits & other._bits)

    def __or__(self, other: Signature) -> Signature:
        return Signature(self._bits | other._bits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Signature):
            return NotImplemented
        return self._bits == other._bits

    __hash__ = None  # type: ignore[assignment]

    def __int__(self) -> int:
        return self._bits

    def __len__(self) -> int:
        return SIGNATURE_SIZE

    def __repr__(self) -> str:
        return f"Signature(0b{self._bits:0{SIGNATURE_SIZE}b})"


def _invalid_component_indices() -> list[int]:
    return [INVALID_INDEX] * SIGNATURE_SIZE


@total_ordering
@dataclass(eq=False)
class Entity:
    """A handle to an entity; identity is its index and version.

    Handles to the same entity share their signature and component indices.
    """

    index: int = INVALID_INDEX
    version: int = INVALID_INDEX
    signature: Signature = field(default_factory=Signature, repr=False)
    component_index: list[int] = field(
        default_factory=_invalid_component_indices, repr=False
    )
    alive: bool = field(default=False, repr=False)

    @property
    def _key(self) -> tuple[int, int]:
        return (self.index, self.version)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self._key == other._key

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self._key < other._key

    def __hash__(self) -> int:
        return hash(self._key)


INVALID_ENTITY = Entity(INVALID_INDEX, INVALID_INDEX)