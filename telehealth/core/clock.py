from datetime import datetime


class SystemClock:
    """Reads the device's local wall clock."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock:
    """Always returns the same instant."""

    def __init__(self, instant: datetime):
        self.instant = instant

    def now(self) -> datetime:
        return self.instant
