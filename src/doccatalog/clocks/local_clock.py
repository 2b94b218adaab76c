"""Wall-clock and fixed clocks."""

from datetime import datetime, timedelta


class SystemClock:
    """Reads the local wall clock."""

    def now(self) -> datetime:
        return datetime.now().astimezone()


class FixedClock:
    """A clock that only moves when told to. Useful for tests and demos."""

    def __init__(self, moment: datetime):
        if moment.tzinfo is None:
            moment = moment.astimezone()
        self._moment = moment

    def now(self) -> datetime:
        return self._moment

    def advance(self, **kwargs: float) -> datetime:
        """Move the clock forward by a ``timedelta(**kwargs)``."""
        self._moment = self._moment + timedelta(**kwargs)
        return self._moment
