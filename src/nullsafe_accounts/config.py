"""Configuration for Nullsafe Accounts.

Settings are a frozen dataclass validated on construction. There is no file
or environment discovery: callers build an override with ``load_config`` and
pass it where a non-default is needed.

Example:
    >>> config = load_config(gmail_suffix="@example.com")
    >>> config.gmail_suffix
    '@example.com'
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from decimal import Decimal, InvalidOperation
from typing import Any

from .exceptions import ConfigurationError, InvalidConfigError


@dataclass(frozen=True)
class AccountsConfig:
    """Fixed messages, filters and placeholder values.

    Attributes:
        Filtering:
            gmail_suffix: Email suffix accepted by ``retrieve_gmail_user``

        Failure messages:
            no_user_provided_message: Message of ``NoUserProvidedError``
            user_not_found_message: Message of ``UserNotFoundError``
            no_user_found_message: Logged by ``LoggingUserSink.on_absence``

        Placeholder user (returned by ``generate_user``):
            placeholder_id, placeholder_name, placeholder_email,
            placeholder_balance
    """

    # Filtering
    gmail_suffix: str = "@gmail.com"

    # Failure messages
    no_user_provided_message: str = "No User provided!"
    user_not_found_message: str = "User not found!"
    no_user_found_message: str = "No user found"

    # Placeholder user
    placeholder_id: int = 1
    placeholder_name: str = "Mark"
    placeholder_email: str = "m@gmail.com"
    placeholder_balance: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.gmail_suffix.startswith("@"):
            raise InvalidConfigError("gmail_suffix", self.gmail_suffix, "must start with '@'")

        for name in ("no_user_provided_message", "user_not_found_message", "no_user_found_message"):
            if not getattr(self, name):
                raise InvalidConfigError(name, getattr(self, name), "must not be empty")

        if self.placeholder_id < 0:
            raise InvalidConfigError("placeholder_id", self.placeholder_id, "must be non-negative")

        # Accept ints and numeric strings, store a Decimal
        try:
            balance = Decimal(str(self.placeholder_balance))
        except InvalidOperation:
            raise InvalidConfigError(
                "placeholder_balance", self.placeholder_balance, "must be a decimal number"
            )
        object.__setattr__(self, "placeholder_balance", balance)


_DEFAULT_CONFIG = AccountsConfig()


def get_config() -> AccountsConfig:
    """Return the default configuration."""
    return _DEFAULT_CONFIG


def load_config(**overrides: Any) -> AccountsConfig:
    """Build a validated configuration from keyword overrides.

    Args:
        **overrides: Field values replacing the defaults

    Returns:
        Validated AccountsConfig instance

    Raises:
        ConfigurationError: If a key is unknown or a value is invalid
    """
    known = {f.name for f in fields(AccountsConfig)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ConfigurationError(
            f"Unknown configuration keys: {', '.join(unknown)}",
            details={"known": ", ".join(sorted(known))},
        )

    try:
        return AccountsConfig(**overrides)
    except (TypeError, AttributeError) as e:
        raise ConfigurationError(f"Invalid configuration: {e}")
