"""Catalog Deck - a TUI for uploading, browsing and searching documents."""

from __future__ import annotations

import shlex
from datetime import datetime
from pathlib import Path

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.coordinate import Coordinate
from textual.widgets import (
    Button,
    DataTable,
    DirectoryTree,
    Footer,
    Header,
    Input,
    Label,
    Log,
    Rule,
    Static,
)

from doccatalog.catalog import DocumentCatalog
from doccatalog.messages import translate
from doccatalog.models import CatalogEvent, DocumentCard
from doccatalog.sources import collect_descriptors
from doccatalog.utils import format_size


class StatsPanel(Static):
    """Catalog totals."""

    def __init__(self, display_locale: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self.display_locale = display_locale

    def compose(self) -> ComposeResult:
        yield Static(id="stats-content")

    def update_display(self, total: int, visible: int, total_bytes: int) -> None:
        documents, size, total_label, visible_label = (
            translate(key, self.display_locale)
            for key in ("stats_documents", "stats_size", "stats_total", "stats_visible")
        )
        content = self.query_one("#stats-content", Static)
        content.update(f"""[b]{documents}[/b]
  {total_label:<9}[cyan]{total:,}[/]
  {visible_label:<9}[green]{visible:,}[/]

[b]{size}[/b]
  {total_label:<9}[cyan]{format_size(total_bytes)}[/]""")


class DocumentTable(DataTable):
    """Visible documents, one row per card, keyed by document id."""

    def __init__(self, column_labels: tuple[str, ...], **kwargs) -> None:
        super().__init__(**kwargs)
        self.column_labels = column_labels

    def show_cards(self, cards: list[DocumentCard]) -> None:
        if not self.columns:
            self.add_columns(*self.column_labels)
        self.clear()
        for card in cards:
            self.add_row(
                card.glyph,
                Text(card.name),
                card.size_label,
                card.uploaded_label,
                key=card.id,
            )

    def highlighted_id(self) -> str | None:
        """Id of the document under the cursor, if any."""
        if self.row_count == 0:
            return None
        row_key = self.coordinate_to_cell_key(Coordinate(self.cursor_row, 0)).row_key
        return row_key.value


class CatalogDeck(App):
    """The DocCatalog deck: picker on the right, searchable documents in the center."""

    CSS = """
    Screen {
        background: $surface;
    }

    #main-container {
        layout: horizontal;
        height: 100%;
    }

    #left-panel {
        width: 32;
        background: $surface-darken-1;
        border-right: solid $primary-darken-2;
        padding: 1;
    }

    #center-panel {
        width: 1fr;
        padding: 1;
    }

    #right-panel {
        width: 36;
        background: $surface-darken-1;
        border-left: solid $primary-darken-2;
        padding: 1;
    }

    StatsPanel {
        height: auto;
        padding: 1;
        background: $surface-darken-2;
        border: round $primary;
        margin-bottom: 1;
    }

    #drop-input, #search-input {
        margin-bottom: 1;
    }

    #action-buttons {
        layout: horizontal;
        height: 3;
        margin-bottom: 1;
    }

    #action-buttons Button {
        margin-right: 1;
    }

    DocumentTable {
        height: 1fr;
        border: round $primary-darken-1;
    }

    #empty-state {
        height: 1fr;
        content-align: center middle;
        color: $text-muted;
    }

    #log-panel {
        height: 10;
        border: round $primary-darken-2;
        background: $surface-darken-2;
    }

    .section-title {
        text-style: bold;
        color: $text;
        margin-bottom: 1;
    }

    DirectoryTree {
        height: 100%;
        border: round $primary-darken-1;
        background: $surface-darken-2;
    }
    """

    BINDINGS = [
        Binding("delete", "remove_selected", "Remove", show=True),
        Binding("x", "remove_selected", "Remove", show=False),
        Binding("/", "focus_search", "Search", show=True),
        Binding("c", "clear", "Clear", show=True),
        Binding("q", "quit", "Quit", show=True),
    ]

    TITLE = "DocCatalog"

    def __init__(
        self,
        catalog: DocumentCatalog | None = None,
        start_dir: Path | None = None,
        expand_archives: bool = False,
    ):
        super().__init__()
        self.catalog = catalog if catalog is not None else DocumentCatalog()
        self.start_dir = start_dir or Path.cwd()
        self.expand_archives = expand_archives
        self.empty_message = ""
        self.catalog.subscribe(self._announce)

    def _t(self, key: str, **params: object) -> str:
        return translate(key, self.catalog.locale, **params)

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Container(id="main-container"):
            # Left panel - totals and drop target
            with Vertical(id="left-panel"):
                yield Label(self._t("catalog_heading"), classes="section-title")
                yield StatsPanel(self.catalog.locale)
                yield Rule()
                yield Input(placeholder=self._t("drop_placeholder"), id="drop-input")
                with Horizontal(id="action-buttons"):
                    yield Button(self._t("upload_button"), id="upload-btn", variant="success")
                    yield Button(self._t("clear_button"), id="clear-btn", variant="warning")

            # Center panel - searchable documents
            with Vertical(id="center-panel"):
                yield Label(self._t("title").upper(), classes="section-title")
                yield Input(placeholder=self._t("search_placeholder"), id="search-input")
                yield DocumentTable(
                    ("", self._t("column_name"), self._t("column_size"), self._t("column_date")),
                    id="documents",
                    cursor_type="row",
                )
                yield Static(self._t("empty_catalog"), id="empty-state")
                yield Rule()
                yield Label(self._t("log_heading"), classes="section-title")
                yield Log(id="log-panel", highlight=True, auto_scroll=True)

            # Right panel - file picker
            with Vertical(id="right-panel"):
                yield Label(self._t("files_heading"), classes="section-title")
                yield DirectoryTree(self.start_dir, id="dir-tree")

        yield Footer()

    def on_mount(self) -> None:
        self.sub_title = self._t("subtitle")
        self.refresh_documents()
        self._log(self._t("deck_ready"))

    def _log(self, message: str) -> None:
        """Add a message to the log panel."""
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.query_one("#log-panel", Log).write_line(f"[{timestamp}] {message}")

    def _announce(self, event: CatalogEvent) -> None:
        self.notify(event.message)
        self._log(event.message)

    def refresh_documents(self) -> None:
        """Re-render the table from the catalog's visible documents."""
        cards = self.catalog.cards()
        table = self.query_one("#documents", DocumentTable)
        table.show_cards(cards)

        empty = self.query_one("#empty-state", Static)
        if cards:
            empty.display = False
            table.display = True
        else:
            self.empty_message = self._t("nothing_found" if len(self.catalog) else "empty_catalog")
            empty.update(self.empty_message)
            empty.display = True
            table.display = False

        self.query_one("#search-input", Input).display = len(self.catalog) > 0
        self.query_one(StatsPanel).update_display(
            len(self.catalog), len(cards), self.catalog.total_size()
        )

    def upload(self, paths: list[Path]) -> None:
        """Ingest everything readable under ``paths`` as one batch."""
        batch = collect_descriptors(
            paths,
            expand_archives=self.expand_archives,
            on_skip=lambda path: self._log(self._t("unreadable", path=path)),
        )
        if not batch:
            return
        self.catalog.ingest(batch)
        self.refresh_documents()

    def on_directory_tree_file_selected(self, event: DirectoryTree.FileSelected) -> None:
        """A picked file is uploaded straight away."""
        self.upload([Path(event.path)])

    def on_directory_tree_directory_selected(
        self, event: DirectoryTree.DirectorySelected
    ) -> None:
        """A picked directory goes to the drop input for confirmation."""
        self.query_one("#drop-input", Input).value = shlex.quote(str(event.path))

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "search-input":
            self.catalog.set_search_query(event.value)
            self.refresh_documents()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "drop-input":
            self.action_upload()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "upload-btn":
            self.action_upload()
        elif event.button.id == "clear-btn":
            self.action_clear()

    def action_upload(self) -> None:
        """Upload the paths typed (or picked) into the drop input."""
        drop = self.query_one("#drop-input", Input)
        try:
            paths = [Path(p) for p in shlex.split(drop.value)]
        except ValueError as e:
            self._log(f"ERROR: {e}")
            return
        if not paths:
            return
        drop.value = ""
        self.upload(paths)

    def action_remove_selected(self) -> None:
        doc_id = self.query_one("#documents", DocumentTable).highlighted_id()
        if doc_id is None:
            return
        self.catalog.remove(doc_id)
        self.refresh_documents()

    def action_clear(self) -> None:
        """Drop every document and reset the search."""
        self.catalog.clear()
        self.query_one("#search-input", Input).value = ""
        self.catalog.set_search_query("")
        self.refresh_documents()

    def action_focus_search(self) -> None:
        self.query_one("#search-input", Input).focus()


def main(
    catalog: DocumentCatalog | None = None,
    start_dir: Path | None = None,
    expand_archives: bool = False,
) -> None:
    """Run the Catalog Deck TUI."""
    app = CatalogDeck(catalog, start_dir, expand_archives)
    app.run()


if __name__ == "__main__":
    main()
