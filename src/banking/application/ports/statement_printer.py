"""
Port: Statement Printer Interface
Output sink for rendered statements
"""

from abc import ABC, abstractmethod


class IStatementPrinter(ABC):
    """Interface for statement output"""

    @abstractmethod
    def write(self, text: str) -> None:
        """Send text to the output"""
        pass
