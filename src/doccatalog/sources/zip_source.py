"""Source for ZIP archive files."""

import logging
import zipfile
from pathlib import Path, PurePosixPath
from typing import Iterator

from doccatalog.models import FileDescriptor
from doccatalog.utils.mime import guess_type

logger = logging.getLogger(__name__)


class ZipSource:
    """A dropped ZIP archive: one descriptor per member file."""

    source_type = "zip"

    def can_handle(self, source: Path) -> bool:
        """Check if this is a zip file."""
        return source.suffix.lower() == ".zip" and source.is_file()

    def descriptors(self, source: Path) -> Iterator[FileDescriptor]:
        """Yield descriptors for the files inside a ZIP archive.

        Only the archive's directory is read; members are not extracted.
        A corrupt archive is logged and yields nothing.
        """
        try:
            with zipfile.ZipFile(source, "r") as zf:
                members = [info for info in zf.infolist() if not info.is_dir()]
        except (zipfile.BadZipFile, OSError) as e:
            logger.warning(f"Cannot read archive {source}: {e}")
            return

        for info in members:
            name = PurePosixPath(info.filename).name
            yield FileDescriptor(name=name, size=info.file_size, type=guess_type(name))
