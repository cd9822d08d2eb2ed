"""Clock adapter using the system wall clock."""

from datetime import datetime

from ..ports.clock import ClockPort


class SystemClock(ClockPort):
    """Local wall-clock time (naive)."""

    def now(self) -> datetime:
        return datetime.now()
