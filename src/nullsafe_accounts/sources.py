"""Capabilities that supply users and bank accounts, and consume lookups.

Sources yield an optional value on demand; sinks receive the outcome of a
presence check. Any object with the right methods satisfies the protocols,
so test doubles need no base class.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Protocol, runtime_checkable

from .config import AccountsConfig, get_config
from .logging_config import get_logger
from .models import BankAccount, User

logger = get_logger(__name__)


@runtime_checkable
class UserSource(Protocol):
    """Yields zero or one user each time it is queried."""

    def get_user(self) -> Optional[User]: ...


@runtime_checkable
class BankAccountSource(Protocol):
    """Yields zero or one bank account each time it is queried."""

    def get_bank_account(self) -> Optional[BankAccount]: ...


@runtime_checkable
class UserSink(Protocol):
    """Receives either the present user or notice of its absence."""

    def on_user(self, user: User) -> None: ...

    def on_absence(self) -> None: ...


@dataclass(frozen=True)
class StaticUserSource:
    """Always yields the same user, or nothing."""

    user: Optional[User] = None

    def get_user(self) -> Optional[User]:
        return self.user


@dataclass(frozen=True)
class StaticBankAccountSource:
    """Always yields the same bank account, or nothing."""

    account: Optional[BankAccount] = None

    def get_bank_account(self) -> Optional[BankAccount]:
        return self.account


class CallableUserSource:
    """Adapts a zero-argument callable into a ``UserSource``."""

    def __init__(self, factory: Callable[[], Optional[User]]) -> None:
        self._factory = factory

    def get_user(self) -> Optional[User]:
        return self._factory()


class CallableBankAccountSource:
    """Adapts a zero-argument callable into a ``BankAccountSource``."""

    def __init__(self, factory: Callable[[], Optional[BankAccount]]) -> None:
        self._factory = factory

    def get_bank_account(self) -> Optional[BankAccount]:
        return self._factory()


class LoggingUserSink:
    """Sink that reports outcomes through the package logger.

    Override ``on_user`` to act on the user; absence is reported with the
    configured "no user found" message.
    """

    def __init__(self, config: Optional[AccountsConfig] = None) -> None:
        self.config = config or get_config()

    def on_user(self, user: User) -> None:
        logger.debug("Processing user %s (%s)", user.id, user.name)

    def on_absence(self) -> None:
        logger.info("%s", self.config.no_user_found_message)
