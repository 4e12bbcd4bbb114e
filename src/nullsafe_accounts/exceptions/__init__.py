"""Exception hierarchy for Nullsafe Accounts."""

from .base import NullSafeAccountsError
from .config import ConfigurationError, InvalidConfigError
from .lookup import (
    IllegalStateError,
    InvalidAmountError,
    NoSuchElementError,
    NoUserProvidedError,
    UserNotFoundError,
)

__all__ = [
    "NullSafeAccountsError",
    "NoSuchElementError",
    "IllegalStateError",
    "UserNotFoundError",
    "NoUserProvidedError",
    "InvalidAmountError",
    "ConfigurationError",
    "InvalidConfigError",
]
