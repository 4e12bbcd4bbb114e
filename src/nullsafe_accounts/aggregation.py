"""Balance aggregation over in-memory collections of users and accounts.

Selections return records and raise on empty input; value summaries are
computed as float64 and return ``None`` (min/max) or ``0.0`` (sums) for
empty input. Any iterable is accepted and read once.
"""

from typing import Iterable, Optional

import numpy as np

from .exceptions import NoSuchElementError
from .models import BankAccount, User


def _balances(users: Iterable[User]) -> np.ndarray:
    return np.fromiter((float(u.balance) for u in users), dtype=np.float64)


def get_user_with_max_balance(users: Iterable[User]) -> User:
    """Return the user with the greatest balance.

    Ties go to the first user holding the maximum. Balances are compared as
    Decimals, so no precision is lost to float conversion.

    Raises:
        NoSuchElementError: If ``users`` is empty.
    """
    users = list(users)
    if not users:
        raise NoSuchElementError("Cannot select max balance from empty user list")
    # max() keeps the first of equal keys
    return max(users, key=lambda u: u.balance)


def find_min_balance_value(users: Iterable[User]) -> Optional[float]:
    """Return the lowest balance as float, or ``None`` for no users."""
    balances = _balances(users)
    if balances.size == 0:
        return None
    return float(np.min(balances))


def find_max_balance_value(users: Iterable[User]) -> Optional[float]:
    """Return the highest balance as float, or ``None`` for no users."""
    balances = _balances(users)
    if balances.size == 0:
        return None
    return float(np.max(balances))


def calculate_total_balance(users: Iterable[User]) -> float:
    """Sum all user balances as float."""
    return float(np.sum(_balances(users)))


def calculate_total_credit_balance(accounts: Iterable[BankAccount]) -> float:
    """Sum credit balances as float; accounts without one count as zero."""
    credits = np.fromiter(
        (float(a.credit_balance) for a in accounts if a.credit_balance is not None),
        dtype=np.float64,
    )
    return float(np.sum(credits))
