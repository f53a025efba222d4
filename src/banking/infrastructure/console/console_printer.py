"""
Infrastructure Adapter: Console Statement Printer
Implements IStatementPrinter on a rich console
"""

from typing import Optional

from rich.console import Console

from ...application.ports.statement_printer import IStatementPrinter


class ConsoleStatementPrinter(IStatementPrinter):
    """Writes statements verbatim to the terminal"""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def write(self, text: str) -> None:
        # Statement columns are fixed width: no markup, no highlighting, no wrapping
        self.console.print(
            text,
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True
        )
