"""CLI entry point for DocCatalog."""

import argparse
import json
import logging
import sys
from collections import Counter
from pathlib import Path

from doccatalog.catalog import DocumentCatalog
from doccatalog.config import AppConfig, load_config
from doccatalog.ids import get_id_generator
from doccatalog.messages import SUPPORTED_LOCALES, translate
from doccatalog.sources import collect_descriptors
from doccatalog.utils import format_size

logger = logging.getLogger(__name__)


def build_catalog(config: AppConfig) -> DocumentCatalog:
    """Create an empty catalog wired from configuration."""
    return DocumentCatalog(ids=get_id_generator(config.id_strategy), locale=config.locale)


def load(config: AppConfig, sources: list[str], expand_archives: bool = False) -> DocumentCatalog:
    """Ingest the given paths as one batch.

    Exits with status 1 when nothing could be read.
    """
    catalog = build_catalog(config)
    batch = collect_descriptors([Path(s) for s in sources], expand_archives=expand_archives)
    if not batch:
        for source in sources:
            logger.error(translate("unreadable", config.locale, path=source))
        sys.exit(1)

    for event in catalog.ingest(batch):
        logger.info(event.message)
    return catalog


def list_documents(
    config: AppConfig,
    sources: list[str],
    search: str = "",
    as_json: bool = False,
    expand_archives: bool = False,
) -> None:
    """Print the documents matching ``search``.

    Args:
        config: Loaded configuration
        sources: Files, folders or zip archives to upload
        search: Case-insensitive name filter
        as_json: Print JSON instead of a table
        expand_archives: Upload the members of zip archives
    """
    catalog = load(config, sources, expand_archives)
    catalog.set_search_query(search)
    cards = catalog.cards()

    if as_json:
        rows = [
            {
                "id": card.id,
                "name": card.name,
                "size": card.size_label,
                "icon": card.icon,
                "uploaded": card.uploaded_label,
            }
            for card in cards
        ]
        print(json.dumps(rows, ensure_ascii=False, indent=2))
        return

    if not cards:
        print(translate("nothing_found", config.locale))
        return

    name_width = max(len(card.name) for card in cards)
    size_width = max(len(card.size_label) for card in cards)
    for card in cards:
        print(
            f"{card.icon:<8}  {card.name:<{name_width}}  "
            f"{card.size_label:>{size_width}}  {card.uploaded_label}"
        )


def info(config: AppConfig, sources: list[str], expand_archives: bool = False) -> None:
    """Show a summary of what the sources would add to a catalog."""
    catalog = load(config, sources, expand_archives)
    icons = Counter(card.icon for card in catalog.cards())

    print(f"Documents: {len(catalog)}")
    print(f"  Size: {format_size(catalog.total_size())}")
    print()
    print("By type:")
    for icon, count in icons.most_common():
        print(f"  {icon}: {count}")


def deck(config: AppConfig, expand_archives: bool = False) -> None:
    """Launch the Catalog Deck TUI."""
    from doccatalog.deck import main as deck_main

    deck_main(build_catalog(config), config.start_dir, expand_archives)


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    # Options shared by every command
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--locale",
        choices=SUPPORTED_LOCALES,
        help="Display locale (default: DOCCATALOG_LOCALE or ru)",
    )
    common.add_argument(
        "--expand-archives",
        action="store_true",
        help="Upload the files inside .zip archives instead of the archives",
    )

    parser = argparse.ArgumentParser(
        prog="doccatalog",
        description="DocCatalog - upload, browse and search documents",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # deck command
    deck_parser = subparsers.add_parser(
        "deck",
        parents=[common],
        help="Launch the interactive catalog TUI",
    )
    deck_parser.add_argument(
        "start_dir",
        nargs="?",
        help="Directory shown in the file picker (default: DOCCATALOG_START_DIR or cwd)",
    )

    # list command
    list_parser = subparsers.add_parser(
        "list",
        parents=[common],
        help="Upload paths and print the matching documents",
    )
    list_parser.add_argument("sources", nargs="+", help="Files, folders or .zip archives")
    list_parser.add_argument("-s", "--search", default="", help="Filter by name")
    list_parser.add_argument("--json", action="store_true", help="Print JSON")

    # info command
    info_parser = subparsers.add_parser(
        "info",
        parents=[common],
        help="Summarize what a set of paths would upload",
    )
    info_parser.add_argument("sources", nargs="+", help="Files, folders or .zip archives")

    args = parser.parse_args(argv)

    config = load_config().override(
        locale=args.locale,
        start_dir=getattr(args, "start_dir", None),
    )
    logging.basicConfig(
        level=config.log_level,
        format="%(message)s",
    )

    if args.command == "deck":
        deck(config, args.expand_archives)
    elif args.command == "list":
        list_documents(config, args.sources, args.search, args.json, args.expand_archives)
    elif args.command == "info":
        info(config, args.sources, args.expand_archives)


if __name__ == "__main__":
    main()
