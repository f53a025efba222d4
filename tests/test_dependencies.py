"""
Tests for the dependency injection container.
"""
from unittest.mock import MagicMock

from banking.dependencies import (
    get_account_repository,
    get_clock,
    get_deposit_use_case,
    get_print_statement_use_case,
    get_statement_formatter,
    get_withdraw_use_case,
    reset_account_repository,
)
from banking.infrastructure.clock.system_clock import SystemClock
from banking.infrastructure.console.console_printer import ConsoleStatementPrinter
from banking.infrastructure.formatting.text_formatter import TextStatementFormatter
from banking.infrastructure.persistence.in_memory_repository import InMemoryAccountRepository


class TestDependencies:
    """Factory wiring."""

    def setup_method(self):
        reset_account_repository()

    def test_repository_is_shared(self):
        """Every use case sees the same accounts."""
        deposit = get_deposit_use_case()
        withdraw = get_withdraw_use_case()
        print_statement = get_print_statement_use_case()

        assert isinstance(deposit.account_repository, InMemoryAccountRepository)
        assert deposit.account_repository is withdraw.account_repository
        assert withdraw.account_repository is print_statement.account_repository

    def test_reset_drops_accounts(self):
        """reset_account_repository() starts over."""
        first = get_account_repository()
        opened = first.open_account()

        reset_account_repository()

        assert get_account_repository() is not first
        assert get_account_repository().find(opened.id) is None

    def test_defaults(self):
        """Production adapters are used unless overridden."""
        use_case = get_print_statement_use_case()

        assert isinstance(get_clock(), SystemClock)
        assert isinstance(get_statement_formatter(), TextStatementFormatter)
        assert isinstance(use_case.printer, ConsoleStatementPrinter)

    def test_overrides(self):
        """Injected collaborators win, even an empty repository."""
        repository = InMemoryAccountRepository()
        clock = MagicMock()

        use_case = get_deposit_use_case(repository=repository, clock=clock)

        assert use_case.account_repository is repository
        assert use_case.clock is clock
