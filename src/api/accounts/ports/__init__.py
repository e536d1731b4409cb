"""Ports (interfaces) for the accounts bounded context.

Ports define the contracts for repositories and domain services without
specifying implementation details. This allows for dependency inversion
and makes the domain layer independent of infrastructure.
"""

from accounts.ports.exceptions import (
    AccountError,
    DuplicateUsernameError,
    InvalidCredentialsError,
    StoreUnavailableError,
)
from accounts.ports.repositories import IUserRepository
from accounts.ports.security import PasswordHasher

__all__ = [
    "AccountError",
    "DuplicateUsernameError",
    "InvalidCredentialsError",
    "IUserRepository",
    "PasswordHasher",
    "StoreUnavailableError",
]
