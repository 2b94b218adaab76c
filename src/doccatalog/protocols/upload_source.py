"""Protocol for upload sources."""

from pathlib import Path
from typing import Iterator, Protocol, runtime_checkable

from doccatalog.models import FileDescriptor


@runtime_checkable
class UploadSource(Protocol):
    """Protocol for things that turn local input into file descriptors.

    Implementations handle different input kinds (single file, folder, zip).
    Uses structural subtyping - no inheritance required.
    """

    @property
    def source_type(self) -> str:
        """Return identifier for this source type (e.g., 'zip', 'folder')."""
        ...

    def can_handle(self, source: Path) -> bool:
        """Check if this source can read the given path."""
        ...

    def descriptors(self, source: Path) -> Iterator[FileDescriptor]:
        """Yield one descriptor per file found at the source.

        Only metadata is read; file contents are never loaded.
        """
        ...
