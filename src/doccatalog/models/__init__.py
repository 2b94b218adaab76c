"""Data models for DocCatalog."""

from doccatalog.models.document import DocumentCard, DocumentRecord, FileDescriptor
from doccatalog.models.events import CatalogEvent, EventKind

__all__ = [
    "FileDescriptor",
    "DocumentRecord",
    "DocumentCard",
    "CatalogEvent",
    "EventKind",
]
