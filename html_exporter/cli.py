"""
Command-line interface for HTML Exporter.

Usage:
    html-exporter styles page.html
    html-exporter styles page.html --json
    html-exporter styles page.html --on-inline-error skip
    html-exporter version
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from .config import InlineErrorPolicy, StyleMapConfig
from .document import HtmlDocument
from .exceptions import HtmlExporterError
from .utils.elements import tag_name
from .utils.logger import configure_logging
from .version import __version__

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="html-exporter",
        description="HTML Exporter - resolve the effective CSS style of HTML elements",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  html-exporter styles page.html
  html-exporter styles page.html --json
  html-exporter version
        """,
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Log level (default: WARNING)"
    )

    # Also accepted after the subcommand name.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=argparse.SUPPRESS,
        help="Log level (default: WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    styles_parser = subparsers.add_parser(
        "styles", parents=[common], help="Print the resolved style of every element"
    )
    styles_parser.add_argument("input", help="Input HTML file")
    styles_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON"
    )
    styles_parser.add_argument(
        "--on-inline-error",
        choices=[policy.value for policy in InlineErrorPolicy],
        default=None,
        help="What to do with malformed style attributes (default: raise)"
    )
    styles_parser.add_argument(
        "--sizing-attribute",
        default=None,
        help="Attribute that distinguishes otherwise identical elements (default: width)"
    )

    subparsers.add_parser("version", parents=[common], help="Show version information")
    return parser


def cmd_styles(args) -> int:
    """Handle styles command."""
    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1

    config = StyleMapConfig.from_env(
        inline_error_policy=args.on_inline_error,
        sizing_attribute=args.sizing_attribute,
    )
    document = HtmlDocument.from_file(input_path, config=config)

    rows = [
        {
            "path": document.element_path(element),
            "tag": tag_name(element),
            "class": element.get("class") or "",
            "style": style.to_dict(),
        }
        for element, style in document.iter_styles()
    ]

    if args.json:
        print(json.dumps(rows, indent=2, ensure_ascii=False))
        return 0

    table = Table(title=str(input_path))
    table.add_column("Element")
    table.add_column("Class")
    table.add_column("Style")
    for row in rows:
        declarations = "; ".join(f"{name}: {value}" for name, value in row["style"].items())
        table.add_row(row["path"], row["class"], declarations)
    Console().print(table)
    return 0


def cmd_version(args) -> int:
    """Handle version command."""
    print(f"html-exporter {__version__}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "styles":
        handler = cmd_styles
    elif args.command == "version":
        handler = cmd_version
    else:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except HtmlExporterError as exc:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
