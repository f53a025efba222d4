"""
Port: Clock Interface
Source of transaction timestamps
"""

from abc import ABC, abstractmethod
from datetime import datetime


class IClock(ABC):
    """Interface for the current time"""

    @abstractmethod
    def now(self) -> datetime:
        pass
