"""Null-safe lookups over user and bank account sources.

Absence is reported in one of two ways and the choice is part of each
function's contract:

    - ``None`` when nothing is a legitimate outcome (``retrieve_balance``,
      ``retrieve_credit_balance``, ``retrieve_gmail_user``)
    - an exception when the caller required a value:
      ``IllegalStateError`` subclasses for a missing user, and
      ``NoSuchElementError`` when a fallback chain is exhausted
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Callable, Optional

from .config import AccountsConfig, get_config
from .exceptions import (
    InvalidAmountError,
    NoSuchElementError,
    NoUserProvidedError,
    UserNotFoundError,
)
from .logging_config import get_logger
from .models import Amount, User, generate_user, to_decimal
from .sources import BankAccountSource, UserSink, UserSource

logger = get_logger(__name__)


def wrap_string(text: Optional[str]) -> Optional[str]:
    """Wrap ``text`` as an optional; ``None`` stays empty."""
    return text


def wrap_user(user: Optional[User]) -> Optional[User]:
    """Wrap ``user`` as an optional; ``None`` stays empty."""
    return user


def deposit(
    source: UserSource, amount: Amount, config: Optional[AccountsConfig] = None
) -> None:
    """Add ``amount`` to the balance of the user yielded by ``source``.

    The user record is mutated in place.

    Raises:
        InvalidAmountError: If ``amount`` is negative, NaN, infinite or not a number.
        UserNotFoundError: If ``source`` yields no user.
    """
    config = config or get_config()
    try:
        value = to_decimal(amount)
    except InvalidOperation:
        raise InvalidAmountError(amount)
    if not value.is_finite() or value < 0:
        raise InvalidAmountError(amount)

    user = source.get_user()
    if user is None:
        raise UserNotFoundError(config.user_not_found_message)

    user.balance += value
    logger.debug("Deposited %s to user %s, balance now %s", value, user.id, user.balance)


def get_user(source: UserSource, default_user: User) -> User:
    """Return the user from ``source``, or ``default_user`` untouched."""
    user = source.get_user()
    return user if user is not None else default_user


def process_user(source: UserSource, sink: UserSink) -> None:
    """Dispatch to exactly one of ``sink.on_user`` or ``sink.on_absence``."""
    user = source.get_user()
    if user is not None:
        sink.on_user(user)
    else:
        sink.on_absence()


def get_or_generate_user(
    source: UserSource, generator: Callable[[], User] = generate_user
) -> User:
    """Return the user from ``source``, generating one only when absent.

    ``generator`` is not called at all when the source provides a user.
    """
    user = source.get_user()
    if user is not None:
        return user

    logger.debug("No user provided, generating a placeholder")
    return generator()


def retrieve_balance(source: UserSource) -> Optional[Decimal]:
    """Return the balance of the provided user, or ``None``."""
    user = source.get_user()
    if user is None:
        return None
    return user.balance


def require_user(source: UserSource, config: Optional[AccountsConfig] = None) -> User:
    """Return the user from ``source``.

    Raises:
        NoUserProvidedError: If ``source`` yields no user.
    """
    user = source.get_user()
    if user is None:
        raise NoUserProvidedError((config or get_config()).no_user_provided_message)
    return user


def retrieve_credit_balance(source: BankAccountSource) -> Optional[Decimal]:
    """Return the credit balance of the provided account, or ``None``.

    A missing account and an account without a credit balance give the
    same result.
    """
    account = source.get_bank_account()
    if account is None:
        return None
    return account.credit_balance


def retrieve_gmail_user(
    source: UserSource, config: Optional[AccountsConfig] = None
) -> Optional[User]:
    """Return the provided user only if their email is a Gmail address."""
    suffix = (config or get_config()).gmail_suffix
    user = source.get_user()
    if user is None or not user.email:
        return None
    return user if user.email.endswith(suffix) else None


def get_user_with_fallback(primary: UserSource, fallback: UserSource) -> User:
    """Return the user from ``primary``, else from ``fallback``.

    ``fallback`` is only queried when ``primary`` yields nothing.

    Raises:
        NoSuchElementError: If neither source yields a user.
    """
    user = primary.get_user()
    if user is not None:
        return user

    logger.debug("Primary source empty, querying fallback")
    user = fallback.get_user()
    if user is not None:
        return user

    raise NoSuchElementError("No user in primary or fallback source", source="fallback")
