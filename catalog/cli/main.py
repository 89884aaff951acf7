"""Main entry point for the catalog CLI."""
from __future__ import annotations

import json
import logging
import sys

from catalog.cli import __version__
from catalog.cli.repl import Repl
from catalog.config import settings
from catalog.kernel.errors import CatalogError
from catalog.kernel.loader import load_collections_from_dir, load_sample_collections, load_transitions
from catalog.kernel.query import ProductQuery
from catalog.kernel.renderer import render
from catalog.kernel.types import RenderOptions


def print_help():
    """Print help message."""
    print(f"""
Catalog CLI v{__version__}

Usage:
  catalog [options]

Options:
  --data DIR        Load users.json, categories.json, products.json from DIR
                    (default: bundled sample data)
  --html            Render HTML instead of a text table
  --replay FILE     Apply a JSON list of transitions before printing
  --no-repl         Print the table once and exit
  -h, --help        Show this help
  -v, --version     Show version

Environment:
  CATALOG_DATA_DIR    Same as --data
  CATALOG_CHANNEL     "text" (default) or "html"
  CATALOG_LOG_LEVEL   Logging level (default: WARNING)
  CATALOG_PAGE_TITLE  Heading shown above the table

REPL Commands:
  /search <text>    Filter by product name
  /clear            Clear the search box (resets all filters)
  /owner <id|all>   Show one owner's products
  /category <id>    Toggle a category
  /categories       Show all categories
  /sort <column>    Cycle sort on id, name, category or user
  /reset            Reset all filters
  /view             Render the table as text
  /html             Render the table as HTML
  /state            Show the current filter state
  /help             Show REPL help
  /quit             Exit REPL
""")


def parse_args(args: list[str]) -> dict:
    """
    Parse command line arguments.

    Returns dict with:
        data_dir: str | None
        html: bool
        replay_file: str | None
        repl: bool | None (None = only when stdin is a terminal)
        show_help: bool
        show_version: bool
    """
    result = {
        "data_dir": None,
        "html": False,
        "replay_file": None,
        "repl": None,
        "show_help": False,
        "show_version": False,
    }

    i = 0
    while i < len(args):
        arg = args[i]

        if arg == "--data":
            if i + 1 < len(args):
                result["data_dir"] = args[i + 1]
                i += 1
            else:
                print("Error: --data requires a directory")
                sys.exit(1)
        elif arg == "--replay":
            if i + 1 < len(args):
                result["replay_file"] = args[i + 1]
                i += 1
            else:
                print("Error: --replay requires a file")
                sys.exit(1)
        elif arg == "--html":
            result["html"] = True
        elif arg == "--no-repl":
            result["repl"] = False
        elif arg in ("--help", "-h"):
            result["show_help"] = True
        elif arg in ("--version", "-v"):
            result["show_version"] = True
        elif arg.startswith("-"):
            print(f"Unknown option: {arg}")
            print("Run 'catalog --help' for usage.")
            sys.exit(1)
        else:
            print(f"Unknown command: {arg}")
            print("Run 'catalog --help' for usage.")
            sys.exit(1)

        i += 1

    return result


def load_query(data_dir: str | None) -> ProductQuery:
    """Load the collections and join them. Load errors propagate."""
    if data_dir:
        collections = load_collections_from_dir(data_dir)
    else:
        collections = load_sample_collections()
    return ProductQuery(collections)


def main(argv: list[str] | None = None) -> int:
    """Main entry point. Returns the process exit status."""
    args = parse_args(sys.argv[1:] if argv is None else argv)

    # Handle help and version first
    if args["show_help"]:
        print_help()
        return 0

    if args["show_version"]:
        print(f"catalog {__version__}")
        return 0

    level = settings.LOG_LEVEL.strip().upper()
    if level not in logging.getLevelNamesMapping():
        print(f"Error: invalid log level: {settings.LOG_LEVEL!r}")
        return 1

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    data_dir = args["data_dir"] or settings.DATA_DIR or None
    try:
        query = load_query(data_dir)
        if args["replay_file"]:
            for transition in load_transitions(args["replay_file"]):
                query.dispatch(transition)
    except CatalogError as e:
        print(f"Error: invalid catalog data: {e}")
        return 1
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error: failed to read catalog data: {e}")
        return 1

    channel = "html" if args["html"] else settings.CHANNEL
    options = RenderOptions(channel=channel, title=settings.PAGE_TITLE)
    print(render(query.snapshot(), options))

    use_repl = args["repl"]
    if use_repl is None:
        use_repl = sys.stdin.isatty()

    if use_repl:
        Repl(query, options).start()

    return 0


def run():
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
