"""
Command-line entry point: parse a Nix buffer and report on it.
"""

import logging
import sys
from pathlib import Path

from nix_cst.cli.parser import build_parser
from nix_cst.color import colorize_nix, colorize_python
from nix_cst.diagnostics import ParseFailure
from nix_cst.dump import dump
from nix_cst.parser import parse

logger = logging.getLogger(__name__)


def _report(failure: ParseFailure, filename: str) -> None:
    location = f"{filename}:{failure.line}:{failure.column}"
    print(f"{location}: {failure.render()}", file=sys.stderr)


def _read_source(path: Path | None) -> tuple[bytes, str]:
    if path is None:
        return sys.stdin.buffer.read(), "<stdin>"
    return path.read_bytes(), str(path)


def main(args=None) -> int:
    """Return CLI exit codes so automation can distinguish success from failure."""
    parser = build_parser()
    args = parser.parse_args(args)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s: %(message)s",
    )

    if args.command is None:
        parser.print_help(sys.stderr)
        return 2

    try:
        original, filename = _read_source(args.file)
    except OSError as error:
        print(f"nix-cst: cannot read {args.file}: {error.strerror}", file=sys.stderr)
        return 2
    logger.debug("Read %d bytes from %s", len(original), filename)
    result = parse(original)

    match args.command:
        case "dump":
            if isinstance(result, ParseFailure):
                _report(result, filename)
                return 1
            print(colorize_python(dump(result, include_trivia=args.trivia)))
            return 0
        case "rebuild":
            if isinstance(result, ParseFailure):
                _report(result, filename)
                return 1
            print(colorize_nix(result.rebuild()), end="")
            return 0
        case "test":
            if isinstance(result, ParseFailure):
                print("Fail")
                return 1
            if result.rebuild().encode("utf-8") == original:
                print("OK")
                return 0
            print("Fail")
            return 1
        case "check":
            if isinstance(result, ParseFailure):
                _report(result, filename)
                return 1
            return 0
        case _:
            parser.print_help(sys.stderr)
            return 2
