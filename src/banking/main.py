#!/usr/bin/env python3
"""
Bank Account Kata CLI
"""
import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from . import __version__
from .application.commands import Deposit, Withdraw, PrintStatement
from .config import settings
from .dependencies import (
    get_account_repository,
    get_deposit_use_case,
    get_withdraw_use_case,
    get_print_statement_use_case,
    get_statement_printer,
)
from .domain.result import Failure
from .infrastructure.clock.fixed_clock import FixedClock
from .logging_config import configure_logging

console = Console()
logger = logging.getLogger(__name__)

DEMO_OPERATIONS = [
    (datetime(2022, 1, 12), Deposit, Decimal("1000")),
    (datetime(2022, 1, 18), Deposit, Decimal("2000")),
    (datetime(2022, 1, 19), Withdraw, Decimal("500")),
]

SHELL_HELP = "Commands: deposit <amount>, withdraw <amount>, statement, balance, help, quit"


def report_failure(result) -> bool:
    """Print a failed result; returns True when there was one"""
    if isinstance(result, Failure):
        console.print(f"[red]Error:[/red] {escape(result.message)}", highlight=False)
        return True
    return False


@click.group()
@click.version_option(version=__version__)
@click.option('--log-level', default=None,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Override LOG_LEVEL')
def cli(log_level: Optional[str]):
    """
    🏦 Bank Account Kata - deposits, withdrawals and statements

    Accounts live in memory for the lifetime of the command.
    """
    configure_logging(log_level)


@cli.command()
def demo():
    """Replay the three-transaction acceptance scenario and print the statement"""
    repository = get_account_repository()
    account = repository.open_account()
    clock = FixedClock(DEMO_OPERATIONS[0][0])

    deposit_use_case = get_deposit_use_case(clock=clock)
    withdraw_use_case = get_withdraw_use_case(clock=clock)

    for moment, command, amount in DEMO_OPERATIONS:
        clock.set(moment)
        if command is Deposit:
            result = deposit_use_case.execute(Deposit(account_id=account.id, amount=amount))
        else:
            result = withdraw_use_case.execute(Withdraw(account_id=account.id, amount=amount))
        if report_failure(result):
            raise SystemExit(1)

    printer = get_statement_printer(console)
    use_case = get_print_statement_use_case(printer=printer)
    report_failure(use_case.execute(PrintStatement(account_id=account.id)))


@cli.command()
@click.option('--account-id', type=click.UUID, default=None,
              help='Account identifier (default: DEFAULT_ACCOUNT_ID or a new one)')
def shell(account_id: Optional[UUID]):
    """Interactive session on a single account"""
    repository = get_account_repository()
    account = repository.open_account(account_id or settings.DEFAULT_ACCOUNT_ID)

    deposit_use_case = get_deposit_use_case()
    withdraw_use_case = get_withdraw_use_case()
    print_use_case = get_print_statement_use_case(printer=get_statement_printer(console))

    console.print(f"Account [bold]{account.id}[/bold] opened")
    console.print(SHELL_HELP, highlight=False)

    while True:
        try:
            line = click.prompt("bank", prompt_suffix="> ", default="", show_default=False)
        except click.Abort:
            break

        parts = line.split()
        if not parts:
            continue
        action, args = parts[0].lower(), parts[1:]

        if action in ("quit", "exit"):
            break
        if action == "help":
            console.print(SHELL_HELP, highlight=False)
            continue
        if action == "statement":
            report_failure(print_use_case.execute(PrintStatement(account_id=account.id)))
            continue
        if action == "balance":
            current = repository.find(account.id)
            console.print(f"Balance: {current.balance:.2f}", highlight=False)
            continue
        if action not in ("deposit", "withdraw"):
            console.print(f"[red]Unknown command:[/red] {escape(action)}", highlight=False)
            continue
        if len(args) != 1:
            console.print(f"[red]Usage:[/red] {escape(action)} <amount>", highlight=False)
            continue

        try:
            if action == "deposit":
                result = deposit_use_case.execute(Deposit(account_id=account.id, amount=args[0]))
            else:
                result = withdraw_use_case.execute(Withdraw(account_id=account.id, amount=args[0]))
        except ValidationError:
            logger.debug(f"[shell] rejected input {line!r}")
            console.print(f"[red]Error:[/red] '{escape(args[0])}' is not a number", highlight=False)
            continue

        if not report_failure(result):
            console.print(f"OK, balance {result.value.balance:.2f}", highlight=False)

    console.print("Goodbye.")


if __name__ == '__main__':
    cli()
