"""Password hashing port for the accounts bounded context."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class PasswordHasher(Protocol):
    """One-way adaptive password hash with constant-time verification."""

    def hash(self, plaintext: str) -> str:
        """Hash a password with a fresh salt."""
        ...

    def verify(self, plaintext: str, hashed: str) -> bool:
        """Check a password against a stored hash in constant time."""
        ...
