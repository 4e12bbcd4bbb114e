"""Tests for source adapters and the logging sink."""

import logging

from nullsafe_accounts.config import load_config
from nullsafe_accounts.models import BankAccount
from nullsafe_accounts.sources import (
    BankAccountSource,
    CallableBankAccountSource,
    CallableUserSource,
    LoggingUserSink,
    StaticBankAccountSource,
    StaticUserSource,
    UserSink,
    UserSource,
)


class TestProtocols:
    def test_static_sources_satisfy_protocols(self, user):
        assert isinstance(StaticUserSource(user), UserSource)
        assert isinstance(StaticBankAccountSource(), BankAccountSource)

    def test_callable_sources_satisfy_protocols(self):
        assert isinstance(CallableUserSource(lambda: None), UserSource)
        assert isinstance(CallableBankAccountSource(lambda: None), BankAccountSource)

    def test_logging_sink_satisfies_protocol(self):
        assert isinstance(LoggingUserSink(), UserSink)


class TestCallableSources:
    def test_factory_called_per_query(self, user):
        calls = []

        def factory():
            calls.append(1)
            return user

        source = CallableUserSource(factory)
        assert source.get_user() is user
        assert source.get_user() is user
        assert len(calls) == 2

    def test_bank_account_factory(self):
        account = BankAccount(credit_balance=10)
        assert CallableBankAccountSource(lambda: account).get_bank_account() is account


class TestLoggingUserSink:
    def test_absence_logs_message(self, caplog):
        with caplog.at_level(logging.INFO, logger="nullsafe_accounts"):
            LoggingUserSink().on_absence()
        assert "No user found" in caplog.messages

    def test_absence_uses_configured_message(self, caplog):
        sink = LoggingUserSink(load_config(no_user_found_message="Nobody"))
        with caplog.at_level(logging.INFO, logger="nullsafe_accounts"):
            sink.on_absence()
        assert "Nobody" in caplog.messages

    def test_on_user_logs_at_debug(self, caplog, user):
        with caplog.at_level(logging.DEBUG, logger="nullsafe_accounts"):
            LoggingUserSink().on_user(user)
        assert any("Ada" in m for m in caplog.messages)
