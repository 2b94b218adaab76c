"""Catalog state and its pure transitions.

Every transition takes a ``CatalogState`` and returns a new one; nothing here
mutates in place or renders notifications. Announcements come back as
``CatalogEvent`` values for the caller to surface.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from doccatalog.messages import translate
from doccatalog.models import CatalogEvent, DocumentCard, DocumentRecord, EventKind, FileDescriptor
from doccatalog.protocols import Clock, IdGenerator
from doccatalog.utils import classify_icon, format_size, format_upload_date

DescriptorLike = FileDescriptor | Mapping[str, Any]


@dataclass(frozen=True)
class CatalogState:
    """Documents (newest batch first) and the current search text."""

    documents: tuple[DocumentRecord, ...] = ()
    search_query: str = ""


@dataclass(frozen=True)
class Transition:
    """Result of an operation: the next state plus events to announce."""

    state: CatalogState
    events: list[CatalogEvent] = field(default_factory=list)


def ingest(
    state: CatalogState,
    descriptors: Iterable[DescriptorLike] | None,
    *,
    clock: Clock,
    ids: IdGenerator,
    locale: str | None = None,
) -> Transition:
    """Prepend a batch of new records built from raw descriptors.

    An empty or missing batch leaves the state untouched and announces nothing.
    All records of a batch share one timestamp.
    """
    batch = [FileDescriptor.coerce(d) for d in descriptors or ()]
    if not batch:
        return Transition(state)

    uploaded_at = clock.now()
    records = tuple(
        DocumentRecord(
            id=ids.new_id(),
            name=descriptor.name,
            size=descriptor.size,
            type=descriptor.type,
            uploaded_at=uploaded_at,
        )
        for descriptor in batch
    )
    event = CatalogEvent(
        kind=EventKind.UPLOADED,
        count=len(records),
        message=translate("uploaded", locale, count=len(records)),
    )
    return Transition(replace(state, documents=records + state.documents), [event])


def remove(state: CatalogState, doc_id: str, *, locale: str | None = None) -> Transition:
    """Drop the record with ``doc_id``, if any.

    The removal is always announced, even when no record matched.
    """
    kept = tuple(doc for doc in state.documents if doc.id != doc_id)
    removed = len(state.documents) - len(kept)
    event = CatalogEvent(
        kind=EventKind.REMOVED,
        count=removed,
        message=translate("removed", locale),
    )
    next_state = replace(state, documents=kept) if removed else state
    return Transition(next_state, [event])


def clear(state: CatalogState, *, locale: str | None = None) -> Transition:
    """Drop every record; the search text is kept."""
    event = CatalogEvent(
        kind=EventKind.REMOVED,
        count=len(state.documents),
        message=translate("cleared", locale),
    )
    return Transition(replace(state, documents=()), [event])


def set_search_query(state: CatalogState, text: str | None) -> CatalogState:
    return replace(state, search_query=text or "")


def visible_documents(state: CatalogState) -> tuple[DocumentRecord, ...]:
    """Documents whose name contains the search text, ignoring case."""
    query = state.search_query.casefold()
    if not query:
        return state.documents
    return tuple(doc for doc in state.documents if query in doc.name.casefold())


def build_cards(
    documents: Iterable[DocumentRecord], locale: str | None = None
) -> list[DocumentCard]:
    """Annotate records with the labels a view renders."""
    cards = []
    for doc in documents:
        icon = classify_icon(doc.type)
        cards.append(
            DocumentCard(
                id=doc.id,
                name=doc.name,
                size_label=format_size(doc.size),
                icon=icon.value,
                glyph=icon.glyph,
                uploaded_label=format_upload_date(doc.uploaded_at, locale),
            )
        )
    return cards
