"""Domain exceptions for the accounts bounded context.

These exceptions are the complete failure taxonomy of account creation
and credential verification. Every one of them is terminal for the
operation that raised it; none are retried. The presentation layer maps
them onto transport status codes.
"""


class AccountError(Exception):
    """Base class for all account operation failures."""

    pass


class DuplicateUsernameError(AccountError):
    """Raised when registering a username that is already taken.

    Raised both when the pre-insert lookup finds the username and when the
    unique index rejects a concurrent insert of the same username.
    """

    pass


class InvalidCredentialsError(AccountError):
    """Raised when a username/password pair does not verify.

    Covers both "no such user" and "wrong password". The two cases are
    deliberately merged and carry the same message so callers cannot use
    the error to enumerate usernames.
    """

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class StoreUnavailableError(AccountError):
    """Raised when the credential store cannot be reached or a write fails.

    Wraps any infrastructure failure other than a username uniqueness
    violation. The original exception is chained as ``__cause__``.
    """

    pass
