"""Stateful catalog wrapper used by the view and the CLI."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator

from doccatalog.catalog import state as transitions
from doccatalog.catalog.state import CatalogState, DescriptorLike, Transition
from doccatalog.clocks import SystemClock
from doccatalog.ids import UuidIdGenerator
from doccatalog.messages import resolve_locale
from doccatalog.models import CatalogEvent, DocumentCard, DocumentRecord
from doccatalog.protocols import Clock, IdGenerator

logger = logging.getLogger(__name__)

EventListener = Callable[[CatalogEvent], None]


class DocumentCatalog:
    """Owns the authoritative catalog state for one session.

    The clock and id generator are injected so sessions can be replayed
    deterministically. ``ingest``/``remove``/``clear`` return the events to
    announce; subscribed listeners also receive them once the new state is
    in place.
    """

    def __init__(
        self,
        clock: Clock | None = None,
        ids: IdGenerator | None = None,
        locale: str | None = None,
    ):
        self.clock = clock or SystemClock()
        self.ids = ids or UuidIdGenerator()
        self.locale = resolve_locale(locale)
        self._state = CatalogState()
        self._listeners: list[EventListener] = []

    @property
    def state(self) -> CatalogState:
        return self._state

    @property
    def documents(self) -> tuple[DocumentRecord, ...]:
        return self._state.documents

    @property
    def search_query(self) -> str:
        return self._state.search_query

    def __len__(self) -> int:
        return len(self._state.documents)

    def __iter__(self) -> Iterator[DocumentRecord]:
        return iter(self._state.documents)

    def get(self, doc_id: str) -> DocumentRecord | None:
        for doc in self._state.documents:
            if doc.id == doc_id:
                return doc
        return None

    def subscribe(self, listener: EventListener) -> None:
        """Register a callback for every announced event."""
        self._listeners.append(listener)

    def ingest(self, descriptors: Iterable[DescriptorLike] | None) -> list[CatalogEvent]:
        """Add a batch of files, newest first."""
        transition = transitions.ingest(
            self._state, descriptors, clock=self.clock, ids=self.ids, locale=self.locale
        )
        if transition.events:
            logger.debug(f"Ingested {transition.events[0].count} documents")
        return self._apply(transition)

    def remove(self, doc_id: str) -> list[CatalogEvent]:
        transition = transitions.remove(self._state, doc_id, locale=self.locale)
        logger.debug(f"Remove {doc_id}: {transition.events[0].count} record(s) dropped")
        return self._apply(transition)

    def clear(self) -> list[CatalogEvent]:
        return self._apply(transitions.clear(self._state, locale=self.locale))

    def set_search_query(self, text: str | None) -> None:
        self._state = transitions.set_search_query(self._state, text)

    def visible_documents(self) -> tuple[DocumentRecord, ...]:
        return transitions.visible_documents(self._state)

    def cards(self) -> list[DocumentCard]:
        """Visible documents with their display labels."""
        return transitions.build_cards(self.visible_documents(), self.locale)

    def total_size(self) -> int:
        return sum(doc.size for doc in self._state.documents)

    def _apply(self, transition: Transition) -> list[CatalogEvent]:
        self._state = transition.state
        for event in transition.events:
            for listener in self._listeners:
                listener(event)
        return transition.events
