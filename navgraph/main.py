"""Main CLI entry point for navgraph.

Provides commands: build, show
"""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from navgraph.cli.build import build_command
from navgraph.cli.show import show_command
from navgraph.export import EXPORT_FORMATS

logger = logging.getLogger("navgraph.cli")


def setup_logging(
    verbose: bool = False,
    console: Optional[Console] = None,
    log_file: Optional[str] = None,
) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for coordinated output (optional).
        log_file: Also write log records to this file (optional).
    """
    level = logging.DEBUG if verbose else logging.WARNING

    handlers: list[logging.Handler] = [
        RichHandler(
            console=console or Console(stderr=True),
            show_time=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            log_time_format="[%H:%M:%S]",
        )
    ]

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as e:
            logger.warning("Failed to set up file logging: %s", e)
        else:
            file_handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
            )
            handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=handlers,
        force=True,
    )


def _add_build_options(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        "root",
        help="Workspace root to scan for .xaml files",
    )
    subparser.add_argument(
        "-c",
        "--config",
        help=(
            "Optional navigation configuration. Can be a path to a TOML/JSON "
            "file or an inline TOML/JSON string. When omitted, built-in "
            "defaults are used."
        ),
    )
    subparser.add_argument(
        "--two-pass",
        action="store_true",
        help=(
            "Resolve navigation targets against all views instead of only "
            "views discovered earlier in the scan"
        ),
    )
    subparser.add_argument(
        "--max-files",
        type=int,
        help="Maximum number of markup files to include (1-100, default: 100)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for all commands."""
    parser = argparse.ArgumentParser(
        prog="navgraph",
        description="Navgraph - XAML Navigation Graph Builder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--log-file",
        help="Output log to file (optional), in addition to the console.",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Build command
    build_parser_ = subparsers.add_parser(
        "build",
        help="Scan a workspace and write its navigation graph",
    )
    _add_build_options(build_parser_)
    build_parser_.add_argument(
        "-o",
        "--output",
        required=True,
        help="Output graph file",
    )
    build_parser_.add_argument(
        "-f",
        "--format",
        choices=list(EXPORT_FORMATS),
        default="json",
        help=(
            "Output format (default: json; node_link writes networkx "
            "node-link JSON, graphml writes GraphML)"
        ),
    )

    # Show command
    show_parser = subparsers.add_parser(
        "show",
        help="Scan a workspace and print its navigation graph",
    )
    _add_build_options(show_parser)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose, log_file=args.log_file)

    if args.command == "build":
        return build_command(args)
    elif args.command == "show":
        return show_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
