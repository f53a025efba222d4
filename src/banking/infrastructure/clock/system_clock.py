"""
Infrastructure Adapter: System Clock
"""

from datetime import datetime

from ...application.ports.clock import IClock


class SystemClock(IClock):
    """Local wall-clock time"""

    def now(self) -> datetime:
        return datetime.now()
