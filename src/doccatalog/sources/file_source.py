"""Source for a single picked file."""

import logging
from pathlib import Path
from typing import Iterator

from doccatalog.models import FileDescriptor
from doccatalog.utils.mime import guess_type

logger = logging.getLogger(__name__)


class FileSource:
    """A single regular file, as chosen in a file picker."""

    source_type = "file"

    def can_handle(self, source: Path) -> bool:
        return source.is_file()

    def descriptors(self, source: Path) -> Iterator[FileDescriptor]:
        try:
            size = source.stat().st_size
        except OSError as e:
            logger.warning(f"Cannot stat {source}: {e}")
            return
        yield FileDescriptor(name=source.name, size=size, type=guess_type(source.name))
