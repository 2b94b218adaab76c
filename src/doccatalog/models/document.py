"""Core data models for file descriptors and document records."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class FileDescriptor:
    """Raw metadata for one file, as delivered by an upload source."""

    name: str
    size: int
    type: str = ""

    @classmethod
    def coerce(cls, value: "FileDescriptor | Mapping[str, Any]") -> "FileDescriptor":
        """Accept either a descriptor or a ``{name, size, type}`` mapping."""
        if isinstance(value, FileDescriptor):
            return value
        return cls(
            name=value.get("name", ""),
            size=value.get("size", 0),
            type=value.get("type") or "",
        )


@dataclass(frozen=True)
class DocumentRecord:
    """A document in the catalog: file metadata plus identity and upload time."""

    id: str
    name: str
    size: int
    type: str
    uploaded_at: datetime


@dataclass(frozen=True)
class DocumentCard:
    """A visible document annotated with its display labels."""

    id: str
    name: str
    size_label: str
    icon: str
    glyph: str
    uploaded_label: str
