from .console_printer import ConsoleStatementPrinter

__all__ = ["ConsoleStatementPrinter"]
