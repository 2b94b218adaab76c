"""Upload sources: turn local paths into file descriptors."""

import logging
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Optional

from doccatalog.models import FileDescriptor
from doccatalog.protocols import UploadSource
from doccatalog.sources.file_source import FileSource
from doccatalog.sources.folder_source import FolderSource
from doccatalog.sources.zip_source import ZipSource

logger = logging.getLogger(__name__)

# Registry of available sources, checked in order. A zip archive is uploaded
# as a single file unless archive expansion is asked for.
_SOURCES: list[UploadSource] = [
    FolderSource(),
    FileSource(),
]
_ARCHIVE_SOURCE = ZipSource()


def get_source(path: Path | str, expand_archives: bool = False) -> Optional[UploadSource]:
    """Find a source that can read the given path.

    Args:
        path: A file, folder or zip archive
        expand_archives: List the members of a zip archive instead of the
            archive itself

    Returns:
        An UploadSource instance that can handle the path, or None
    """
    source_path = Path(path)
    candidates = [_ARCHIVE_SOURCE, *_SOURCES] if expand_archives else _SOURCES
    for source in candidates:
        if source.can_handle(source_path):
            return source
    return None


def register_source(source: UploadSource) -> None:
    """Register a custom source (for plugins/extensions).

    Custom sources are tried before the built-in ones.
    """
    _SOURCES.insert(0, source)


def collect_descriptors(
    paths: Iterable[Path | str],
    expand_archives: bool = False,
    on_skip: Callable[[Path], None] | None = None,
) -> list[FileDescriptor]:
    """Gather one upload batch from several paths.

    Paths that no source can read are logged, reported to ``on_skip``
    and left out of the batch.
    """
    batch: list[FileDescriptor] = []
    for path in paths:
        source_path = Path(path)
        source = get_source(source_path, expand_archives)
        if source is None:
            logger.warning(f"Skipping unreadable path: {source_path}")
            if on_skip is not None:
                on_skip(source_path)
            continue
        batch.extend(source.descriptors(source_path))
    return batch


__all__ = [
    "get_source",
    "register_source",
    "collect_descriptors",
    "FileSource",
    "FolderSource",
    "ZipSource",
]
