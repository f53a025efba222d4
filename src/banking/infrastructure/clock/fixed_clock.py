"""
Infrastructure Adapter: Fixed Clock
Returns a settable moment; used for replays and tests
"""

from datetime import datetime

from ...application.ports.clock import IClock


class FixedClock(IClock):
    """Clock that always answers the moment it was last set to"""

    def __init__(self, moment: datetime):
        self.moment = moment

    def now(self) -> datetime:
        return self.moment

    def set(self, moment: datetime) -> None:
        self.moment = moment
