"""Value objects for the accounts domain.

Value objects are immutable descriptors that provide type safety and
domain semantics for identifiers.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    """Identifier for a User aggregate.

    The value is assigned by the credential store on insert and is
    always a positive integer.
    """

    value: int

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValueError(f"Invalid UserId: {self.value}")

    def __str__(self) -> str:
        """Return string representation."""
        return str(self.value)
