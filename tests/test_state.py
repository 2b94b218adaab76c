import pytest

from doccatalog.catalog import (
    CatalogState,
    build_cards,
    clear,
    ingest,
    remove,
    set_search_query,
    visible_documents,
)
from doccatalog.ids import CounterIdGenerator
from doccatalog.models import EventKind, FileDescriptor


def _ingest(state, descriptors, clock, ids=None, locale="en"):
    return ingest(state, descriptors, clock=clock, ids=ids or CounterIdGenerator(), locale=locale)


def test_ingest_prepends_batch_in_input_order(clock) -> None:
    ids = CounterIdGenerator()
    first = _ingest(CatalogState(), [FileDescriptor("old.txt", 1, "text/plain")], clock, ids)
    second = _ingest(
        first.state,
        [FileDescriptor("x.txt", 2, "text/plain"), FileDescriptor("y.txt", 3, "text/plain")],
        clock,
        ids,
    )

    assert [d.name for d in second.state.documents] == ["x.txt", "y.txt", "old.txt"]
    assert [d.id for d in second.state.documents] == ["doc-2", "doc-3", "doc-1"]


def test_ingest_does_not_mutate_previous_state(clock) -> None:
    before = CatalogState()
    after = _ingest(before, [FileDescriptor("a.txt", 1)], clock)

    assert before.documents == ()
    assert len(after.state.documents) == 1


def test_ingest_empty_or_missing_batch_is_noop(clock) -> None:
    state = _ingest(CatalogState(), [FileDescriptor("a.txt", 1)], clock).state

    for batch in ([], None, iter(())):
        transition = _ingest(state, batch, clock)
        assert transition.state is state
        assert transition.events == []


def test_ingest_copies_fields_verbatim(clock) -> None:
    transition = _ingest(CatalogState(), [FileDescriptor("  spaced .PDF ", -7, "weird/TYPE")], clock)
    record = transition.state.documents[0]

    assert record.name == "  spaced .PDF "
    assert record.size == -7
    assert record.type == "weird/TYPE"
    assert record.uploaded_at == clock.now()


def test_ingest_accepts_mappings(clock) -> None:
    transition = _ingest(
        CatalogState(),
        [{"name": "a.txt", "size": 500, "type": "text/plain"}, {"name": "b", "size": 1}],
        clock,
    )

    assert [d.type for d in transition.state.documents] == ["text/plain", ""]


def test_ingest_announces_batch_size(clock) -> None:
    transition = _ingest(
        CatalogState(), [FileDescriptor("a", 1), FileDescriptor("b", 2)], clock, locale="ru"
    )

    (event,) = transition.events
    assert event.kind is EventKind.UPLOADED
    assert event.count == 2
    assert event.message == "Загружено файлов: 2"


def test_ingest_is_atomic_when_descriptors_fail(clock) -> None:
    state = _ingest(CatalogState(), [FileDescriptor("keep.txt", 1)], clock).state

    def broken():
        yield FileDescriptor("new.txt", 1)
        raise OSError("disk went away")

    with pytest.raises(OSError):
        _ingest(state, broken(), clock)

    assert [d.name for d in state.documents] == ["keep.txt"]


def test_remove_keeps_order_of_others(clock) -> None:
    state = _ingest(
        CatalogState(),
        [FileDescriptor("a", 1), FileDescriptor("b", 1), FileDescriptor("c", 1)],
        clock,
    ).state

    transition = remove(state, "doc-2")

    assert [d.name for d in transition.state.documents] == ["a", "c"]
    assert transition.events[0].count == 1


def test_remove_unknown_id_still_announces(clock) -> None:
    state = _ingest(CatalogState(), [FileDescriptor("a", 1)], clock).state

    transition = remove(state, "missing", locale="ru")

    assert transition.state is state
    (event,) = transition.events
    assert event.kind is EventKind.REMOVED
    assert event.count == 0
    assert event.message == "Файл удалён"


def test_clear_keeps_search_query(clock) -> None:
    state = _ingest(CatalogState(), [FileDescriptor("a", 1), FileDescriptor("b", 1)], clock).state
    state = set_search_query(state, "a")

    transition = clear(state, locale="en")

    assert transition.state.documents == ()
    assert transition.state.search_query == "a"
    assert transition.events[0].count == 2


def test_set_search_query_leaves_documents_alone(clock) -> None:
    state = _ingest(CatalogState(), [FileDescriptor("a", 1)], clock).state

    queried = set_search_query(state, "zzz")

    assert queried.documents is state.documents
    assert set_search_query(queried, None).search_query == ""


def test_visible_documents_filters_case_insensitively(clock) -> None:
    state = _ingest(
        CatalogState(),
        [FileDescriptor("Report.pdf", 1), FileDescriptor("notes.txt", 1)],
        clock,
    ).state

    assert [d.name for d in visible_documents(set_search_query(state, "report"))] == ["Report.pdf"]
    assert [d.name for d in visible_documents(set_search_query(state, "REPORT"))] == ["Report.pdf"]
    assert [d.name for d in visible_documents(set_search_query(state, "PORT.P"))] == ["Report.pdf"]
    assert visible_documents(set_search_query(state, "xyz")) == ()
    assert visible_documents(state) == state.documents


def test_build_cards_annotates_records(clock) -> None:
    state = _ingest(CatalogState(), [FileDescriptor("b.png", 2048, "image/png")], clock).state

    (card,) = build_cards(state.documents, "en")

    assert card.id == "doc-1"
    assert card.size_label == "2 KB"
    assert card.icon == "Image"
    assert card.uploaded_label == "Oct 17"
