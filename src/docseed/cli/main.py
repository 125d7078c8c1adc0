"""CLI entry point for docseed."""

import argparse
import json
import sys
from pathlib import Path
from typing import NoReturn

from loguru import logger

from ..app import create_application
from ..core.config import Config


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="docseed",
        description="Markdown document cache - seed a SQLite store from front-matter documents",
    )
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log output (-v info, -vv debug)",
    )
    parser.add_argument("--docs-dir", type=Path, help="Documents directory (default: probe)")
    parser.add_argument("--db-path", type=Path, help="Store file (default: ../data/documents.sqlite)")

    subparsers = parser.add_subparsers(dest="command", required=False)

    subparsers.add_parser("list", help="List document metadata as JSON")

    show_parser = subparsers.add_parser("show", help="Show one document as JSON")
    show_parser.add_argument("slug", help="Document slug")

    subparsers.add_parser("slugs", help="Print all slugs, one per line")
    subparsers.add_parser("seed", help="Rebuild the store from the documents directory")

    return parser


def configure_logging(verbosity: int) -> None:
    """Route loguru output to stderr at a level chosen by -v flags."""
    level = {0: "WARNING", 1: "INFO"}.get(verbosity, "DEBUG")
    logger.remove()
    logger.add(sys.stderr, level=level)


def build_config(args: argparse.Namespace) -> Config:
    """Environment configuration, overridden by command-line flags."""
    config = Config.from_env()
    if args.docs_dir is not None:
        config.docs_dir = args.docs_dir
    if args.db_path is not None:
        config.db_path = args.db_path
    return config


def run_command(args: argparse.Namespace, config: Config) -> None:
    """Execute a parsed subcommand, writing results to stdout."""
    with create_application(config) as app:
        if args.command == "list":
            documents = [meta.to_dict() for meta in app.get_all_documents()]
            print(json.dumps(documents, indent=2, ensure_ascii=False))
        elif args.command == "show":
            info = app.get_document_by_slug(args.slug)
            print(json.dumps(info.to_dict(), indent=2, ensure_ascii=False))
        elif args.command == "slugs":
            for slug in app.get_all_slugs():
                print(slug)
        elif args.command == "seed":
            result = app.reseed()
            print(f"Seeded {result.documents_written} documents from {result.source_dir}")


def main() -> NoReturn:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()
    configure_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        run_command(args, build_config(args))
        sys.exit(0)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
