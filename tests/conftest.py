from datetime import datetime, timezone

import pytest

from doccatalog.catalog import DocumentCatalog
from doccatalog.clocks import FixedClock
from doccatalog.ids import CounterIdGenerator

UPLOAD_TIME = datetime(2026, 10, 17, 12, 30, tzinfo=timezone.utc)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(UPLOAD_TIME)


@pytest.fixture
def catalog(clock: FixedClock) -> DocumentCatalog:
    return DocumentCatalog(clock=clock, ids=CounterIdGenerator(), locale="en")


@pytest.fixture
def sample_tree(tmp_path):
    """A small folder with a hidden file and a skipped build directory."""
    (tmp_path / "a.txt").write_text("hello")
    (tmp_path / "b.png").write_bytes(b"\x89PNG" + b"\x00" * 60)
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "Report.pdf").write_bytes(b"%PDF-1.4" + b"0" * 2040)
    (tmp_path / ".secret").write_text("hidden")
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "node_modules" / "lib.js").write_text("ignored")
    return tmp_path
