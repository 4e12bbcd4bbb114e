"""User and bank account records."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from .config import AccountsConfig, get_config

Amount = Union[Decimal, int, float, str]


def to_decimal(value: Amount) -> Decimal:
    """Convert an int, float, numeric string or Decimal to Decimal."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # str() keeps the shortest repr instead of the binary expansion
        return Decimal(str(value))
    return Decimal(value)


@dataclass
class User:
    """A user holding a mutable balance.

    Equality compares all fields, so a freshly generated placeholder equals
    any other placeholder built from the same configuration.
    """

    id: int
    name: str
    email: str
    balance: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        self.balance = to_decimal(self.balance)


@dataclass
class BankAccount:
    """A bank account that may reference a user and a credit balance.

    Both fields are optional; an account built without arguments has
    neither.
    """

    user: Optional[User] = None
    credit_balance: Optional[Decimal] = None

    def __post_init__(self) -> None:
        if self.credit_balance is not None:
            self.credit_balance = to_decimal(self.credit_balance)


def generate_user(config: Optional[AccountsConfig] = None) -> User:
    """Build a new placeholder user from the configured sentinel values."""
    config = config or get_config()
    return User(
        id=config.placeholder_id,
        name=config.placeholder_name,
        email=config.placeholder_email,
        balance=config.placeholder_balance,
    )
