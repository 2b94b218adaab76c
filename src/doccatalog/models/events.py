"""Announcements produced by catalog state transitions."""

from dataclasses import dataclass
from enum import Enum


class EventKind(str, Enum):
    UPLOADED = "uploaded"
    REMOVED = "removed"


@dataclass(frozen=True)
class CatalogEvent:
    """A fire-and-forget notification for the view to surface.

    ``count`` is the number of files uploaded, or the number of records
    actually removed (a removal of an unknown id still announces itself,
    with a count of zero).
    """

    kind: EventKind
    count: int
    message: str
