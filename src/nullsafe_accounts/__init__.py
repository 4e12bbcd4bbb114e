"""
Nullsafe Accounts - optional-value handling over user and bank account records

Small, stateless helpers that look users and bank accounts up through
possibly-empty sources, fall back between them, and aggregate balances
over in-memory collections.
"""

__version__ = "0.1.0"

from .aggregation import (
    calculate_total_balance,
    calculate_total_credit_balance,
    find_max_balance_value,
    find_min_balance_value,
    get_user_with_max_balance,
)
from .exceptions import (
    IllegalStateError,
    NoSuchElementError,
    NoUserProvidedError,
    NullSafeAccountsError,
    UserNotFoundError,
)
from .models import BankAccount, User, generate_user
from .optionals import (
    deposit,
    get_or_generate_user,
    get_user,
    get_user_with_fallback,
    process_user,
    require_user,
    retrieve_balance,
    retrieve_credit_balance,
    retrieve_gmail_user,
    wrap_string,
    wrap_user,
)
from .sources import (
    BankAccountSource,
    CallableBankAccountSource,
    CallableUserSource,
    LoggingUserSink,
    StaticBankAccountSource,
    StaticUserSource,
    UserSink,
    UserSource,
)

__all__ = [
    # Records
    "User",
    "BankAccount",
    "generate_user",
    # Capabilities
    "UserSource",
    "BankAccountSource",
    "UserSink",
    "StaticUserSource",
    "StaticBankAccountSource",
    "CallableUserSource",
    "CallableBankAccountSource",
    "LoggingUserSink",
    # Optional lookups
    "wrap_string",
    "wrap_user",
    "deposit",
    "get_user",
    "process_user",
    "get_or_generate_user",
    "retrieve_balance",
    "require_user",
    "retrieve_credit_balance",
    "retrieve_gmail_user",
    "get_user_with_fallback",
    # Aggregation
    "get_user_with_max_balance",
    "find_min_balance_value",
    "find_max_balance_value",
    "calculate_total_credit_balance",
    "calculate_total_balance",
    # Errors
    "NullSafeAccountsError",
    "NoSuchElementError",
    "IllegalStateError",
    "UserNotFoundError",
    "NoUserProvidedError",
]
