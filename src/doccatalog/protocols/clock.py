"""Protocol for time sources."""

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Supplies the upload timestamp for newly ingested documents."""

    def now(self) -> datetime:
        """Return the current time (timezone-aware)."""
        ...
