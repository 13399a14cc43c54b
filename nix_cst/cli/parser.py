import argparse
from pathlib import Path

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def with_file_argument(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """Read the Nix source from a file, or from standard input by default.

    Only the path is parsed here; `main` reads it as bytes so that line
    endings survive the round trip.
    """
    parser.add_argument(
        "-f",
        "--file",
        type=Path,
        default=None,
        help="Nix file to read (default: standard input)",
    )
    return parser


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nix-cst",
        description="Parse Nix source into a lossless concrete syntax tree.",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Set the logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command")

    dump = with_file_argument(
        subparsers.add_parser("dump", help="Print the syntax tree of the source")
    )
    dump.add_argument(
        "--trivia",
        action="store_true",
        help="Include whitespace and comments in the dump",
    )
    with_file_argument(
        subparsers.add_parser("rebuild", help="Print the source regenerated from the tree")
    )
    with_file_argument(
        subparsers.add_parser(
            "test", help="Check that the tree rebuilds the source exactly"
        )
    )
    with_file_argument(
        subparsers.add_parser("check", help="Only report whether the source parses")
    )
    return parser


__all__ = ["build_parser", "with_file_argument"]
