"""Tests for logging setup."""

import logging

from rich.logging import RichHandler

from nullsafe_accounts.logging_config import get_logger, setup_logging
from nullsafe_accounts.optionals import process_user
from nullsafe_accounts.sources import LoggingUserSink, StaticUserSource


class TestGetLogger:
    def test_root(self):
        assert get_logger().name == "nullsafe_accounts"

    def test_prefixes_name(self):
        assert get_logger("optionals").name == "nullsafe_accounts.optionals"

    def test_keeps_qualified_name(self):
        assert get_logger("nullsafe_accounts.models").name == "nullsafe_accounts.models"


class TestSetupLogging:
    def teardown_method(self):
        logger = logging.getLogger("nullsafe_accounts")
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)

    def test_default_level_is_info(self):
        assert setup_logging().level == logging.INFO

    def test_explicit_level(self):
        assert setup_logging(logging.DEBUG).level == logging.DEBUG
        assert setup_logging("WARNING").level == logging.WARNING

    def test_rich_handler_on_package_logger(self):
        logger = setup_logging()
        assert sum(isinstance(h, RichHandler) for h in logger.handlers) == 1
        assert not any(isinstance(h, RichHandler) for h in logging.getLogger().handlers)

    def test_repeated_setup_replaces_handlers(self):
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_absence_notice_reaches_stderr(self, capsys):
        setup_logging()
        process_user(StaticUserSource(), LoggingUserSink())
        assert "No user found" in capsys.readouterr().err

    def test_debug_hidden_at_default_level(self, capsys, user):
        setup_logging()
        LoggingUserSink().on_user(user)
        assert "Processing user" not in capsys.readouterr().err

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "accounts.log"
        logger = setup_logging(logging.DEBUG, log_file=str(log_file))
        logger.debug("hello file")
        for handler in logger.handlers:
            handler.flush()
        assert "hello file" in log_file.read_text()
