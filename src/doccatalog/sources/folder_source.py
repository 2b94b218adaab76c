"""Source for local folders."""

import logging
import os
from pathlib import Path
from typing import Iterator

from doccatalog.models import FileDescriptor
from doccatalog.utils.mime import guess_type

logger = logging.getLogger(__name__)

SKIP_NAMES = {
    "__pycache__",
    "node_modules",
    ".git",
    ".svn",
    ".hg",
    "venv",
    ".venv",
    "env",
    ".env",
    "dist",
    "build",
    ".tox",
    ".pytest_cache",
    ".mypy_cache",
    ".ruff_cache",
}


class FolderSource:
    """A dropped folder: every file beneath it, recursively."""

    source_type = "folder"

    def can_handle(self, source: Path) -> bool:
        """Check if this is an existing directory."""
        return source.is_dir()

    def descriptors(self, source: Path) -> Iterator[FileDescriptor]:
        """Yield descriptors for files in a folder, in a stable order.

        Args:
            source: Path to the folder

        Yields:
            FileDescriptor for each file; names are the plain file names
        """
        for root, dirs, files in os.walk(source):
            dirs.sort()
            for filename in sorted(files):
                full_path = Path(root) / filename
                rel_path = full_path.relative_to(source)

                if self._should_skip(rel_path):
                    continue

                try:
                    size = full_path.stat().st_size
                except OSError as e:
                    logger.warning(f"Cannot stat {full_path}: {e}")
                    continue

                yield FileDescriptor(name=filename, size=size, type=guess_type(filename))

    def _should_skip(self, path: Path) -> bool:
        """Skip hidden files, build artifacts and version control."""
        return any(part.startswith(".") or part in SKIP_NAMES for part in path.parts)
