"""
Command line entry point for the Library Desk.

Usage:
    library-desk [--no-sample-data] [--log-level LEVEL]
"""

import argparse
import logging
import sys

from rich.console import Console

from .config import DeskConfig, get_config
from .observability import initialize_observability
from .sample_data import load_sample_data
from .services.circulation import CirculationDesk
from .shell import LibraryShell

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="library-desk",
        description="In-memory library catalog and circulation desk",
    )
    parser.add_argument(
        "--no-sample-data",
        action="store_true",
        help="Start with an empty catalog and no members",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Override the configured logging level",
    )
    return parser


def configure_logging(level: str) -> None:
    # Logs go to stderr so they never interleave with the menu on stdout
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def create_desk(config: DeskConfig, sample_data: bool = True) -> CirculationDesk:
    """Create a desk, optionally pre-populated with the sample catalog."""
    desk = CirculationDesk(config=config)
    if sample_data:
        load_sample_data(desk)
    return desk


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    """Main entry point for the interactive desk."""
    args = build_parser().parse_args(argv)
    config = get_config()

    configure_logging(args.log_level or ("DEBUG" if config.is_development else config.log_level))
    initialize_observability(config)

    desk = create_desk(config, sample_data=config.load_sample_data and not args.no_sample_data)
    shell = LibraryShell(desk, console=console)

    shell.console.print("Welcome to the Library Management System!", style="bold green")
    try:
        shell.run()
    except KeyboardInterrupt:
        shell.console.print()
        shell.console.print("Exiting system. Goodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
