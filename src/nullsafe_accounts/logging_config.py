"""
Logging configuration for Nullsafe Accounts.

Library modules only obtain loggers through ``get_logger``; an application
that wants to see lookup outcomes (for example the "No user found" notice of
``LoggingUserSink``) installs a handler once with ``setup_logging``.
"""

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "nullsafe_accounts"


def setup_logging(
    level: Union[int, str] = logging.INFO, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Attach a rich stderr handler to the nullsafe_accounts logger.

    Only the package logger is configured; the root logger and handlers
    owned by the application are left alone. Calling this again replaces
    the handlers installed by the previous call.

    Args:
        level: Threshold for package records. INFO shows sink notices,
               DEBUG also shows each lookup decision.
        log_file: Optional file path that receives the same records

    Returns:
        Configured nullsafe_accounts logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_nullsafe_accounts", False):
            logger.removeHandler(handler)
            handler.close()

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            markup=False,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        handlers.append(file_handler)

    for handler in handlers:
        handler._nullsafe_accounts = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Module name (e.g., 'nullsafe_accounts.optionals')
              If None, returns the root nullsafe_accounts logger

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)

    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    return logging.getLogger(name)
