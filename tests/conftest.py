"""Shared test fixtures for Nullsafe Accounts tests."""

from decimal import Decimal

import pytest

from nullsafe_accounts.models import BankAccount, User
from nullsafe_accounts.sources import StaticBankAccountSource, StaticUserSource


@pytest.fixture
def users():
    """Four users with balances 200, 300, 400, 100."""
    return [
        User(1, "Justin", "justin.butler@gmail.com", Decimal("200")),
        User(2, "Olivia", "cardenas@mail.com", Decimal("300")),
        User(3, "Nolan", "nolandonovan@gmail.com", Decimal("400")),
        User(4, "Lucas", "lucas.lynn@yahoo.com", Decimal("100")),
    ]


@pytest.fixture
def bank_accounts(users):
    """One account per user, credit balance equal to the user's balance."""
    return [BankAccount(user, user.balance) for user in users]


@pytest.fixture
def user():
    """A single user with a zero balance."""
    return User(7, "Ada", "ada@gmail.com", Decimal("0"))


@pytest.fixture
def empty_user_source():
    return StaticUserSource()


@pytest.fixture
def empty_account_source():
    return StaticBankAccountSource()
