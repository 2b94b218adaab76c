"""Protocol for document identifier generators."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class IdGenerator(Protocol):
    """Produces identifiers for new document records.

    Implementations must never hand out the same identifier twice.
    """

    def new_id(self) -> str:
        ...
