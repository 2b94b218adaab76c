"""The in-memory document catalog."""

from doccatalog.catalog.catalog import DocumentCatalog, EventListener
from doccatalog.catalog.state import (
    CatalogState,
    Transition,
    build_cards,
    clear,
    ingest,
    remove,
    set_search_query,
    visible_documents,
)

__all__ = [
    "DocumentCatalog",
    "EventListener",
    "CatalogState",
    "Transition",
    "ingest",
    "remove",
    "clear",
    "set_search_query",
    "visible_documents",
    "build_cards",
]
