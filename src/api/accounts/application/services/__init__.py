"""Application services for the accounts bounded context.

Application services orchestrate domain aggregates, repositories, and
other infrastructure to fulfill use cases. They are the "front door" to
the accounts context.
"""

from accounts.application.services.account_service import AccountService

__all__ = [
    "AccountService",
]
