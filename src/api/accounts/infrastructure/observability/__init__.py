"""Domain-Oriented Observability for accounts infrastructure.

Probes for repository operations following Domain-Oriented Observability patterns.
"""

from accounts.infrastructure.observability.repository_probe import (
    DefaultUserRepositoryProbe,
    UserRepositoryProbe,
)

__all__ = [
    "UserRepositoryProbe",
    "DefaultUserRepositoryProbe",
]
