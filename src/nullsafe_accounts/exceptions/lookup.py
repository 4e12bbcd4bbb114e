"""Lookup exceptions: absent elements and violated presence requirements.

Two failure kinds never share a base below the package root:

    NoSuchElementError  - a collection or a chain of sources had nothing
                          to offer (a ``LookupError``)
    IllegalStateError   - an operation required a user that was not there
                          (a ``RuntimeError``)
"""

from typing import Optional

from .base import NullSafeAccountsError


class NoSuchElementError(NullSafeAccountsError, LookupError):
    """Raised when a required element could not be found."""

    def __init__(self, message: str = "No value present", source: Optional[str] = None):
        details = {"source": source} if source else None
        super().__init__(message, details=details)
        self.source = source


class IllegalStateError(NullSafeAccountsError, RuntimeError):
    """Raised when an operation runs without the user it requires."""

    pass


class UserNotFoundError(IllegalStateError):
    """Raised when a deposit targets a source that yields no user."""

    def __init__(self, message: str = "User not found!"):
        super().__init__(message)


class NoUserProvidedError(IllegalStateError):
    """Raised when a user is required but the source provides none."""

    def __init__(self, message: str = "No User provided!"):
        super().__init__(message)


class InvalidAmountError(NullSafeAccountsError, ValueError):
    """Raised when a monetary amount is negative."""

    def __init__(self, amount):
        super().__init__(
            f"Amount must be a finite non-negative number: {amount}",
            details={"amount": str(amount)},
        )
        self.amount = amount
