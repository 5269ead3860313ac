"""
Value and ValueType for representing the slots of a key's value stack.
"""

from dataclasses import dataclass
from enum import IntEnum


class ValueType(IntEnum):
    """Type of a slot stored in a key's value stack."""

    REGULAR = 0  # Normal value
    TOMBSTONE = 1  # Explicitly unset
    UNASSIGNED = 2  # Base slot for a key first written inside a transaction


@dataclass(frozen=True)
class Value:
    """
    A single slot in a key's value stack.

    Attributes:
        data: The stored token (None for tombstones and unassigned slots).
        type: Whether this is a regular value, a tombstone or an unassigned base.
    """

    data: str | None
    type: ValueType = ValueType.REGULAR

    @classmethod
    def regular(cls, data: str) -> "Value":
        return cls(data=data, type=ValueType.REGULAR)

    @classmethod
    def tombstone(cls) -> "Value":
        return cls(data=None, type=ValueType.TOMBSTONE)

    @classmethod
    def unassigned(cls) -> "Value":
        return cls(data=None, type=ValueType.UNASSIGNED)

    def is_tombstone(self) -> bool:
        return self.type == ValueType.TOMBSTONE

    def is_unassigned(self) -> bool:
        return self.type == ValueType.UNASSIGNED

    def is_regular(self) -> bool:
        return self.type == ValueType.REGULAR
