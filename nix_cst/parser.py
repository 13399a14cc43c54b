import logging
from pathlib import Path

from nix_cst.config import ParserOptions
from nix_cst.diagnostics import Diagnostics, FailureKind, ParseFailure
from nix_cst.exceptions import NixSyntaxError
from nix_cst.expressions.source_code import NixSourceCode
from nix_cst.grammar import Grammar

logger = logging.getLogger(__name__)


def _source_text(source: str | bytes | Path) -> str:
    # Files are read as bytes so that `\r\n` is not translated on the way in.
    if isinstance(source, Path):
        source = source.read_bytes()
    if isinstance(source, bytes):
        return source.decode("utf-8")
    if isinstance(source, str):
        return source
    raise ValueError(f"Cannot parse source of type {type(source).__name__}")


def _decode_failure(error: UnicodeDecodeError) -> ParseFailure:
    """Report undecodable input at the first bad byte, as a lexical failure."""
    data = bytes(error.object)
    text = data.decode("utf-8", errors="replace")
    position = len(data[: error.start].decode("utf-8"))
    diagnostics = Diagnostics()
    diagnostics.expect(position, "UTF-8 text", FailureKind.LEXICAL)
    return diagnostics.failure(text)


def parse(
    source: str | bytes | Path, options: ParserOptions | None = None
) -> NixSourceCode | ParseFailure:
    """Parse Nix source code into its lossless syntax tree.

    Invalid input is not an exception: a `ParseFailure` describing the
    furthest point the parser reached is returned instead.
    """
    try:
        text = _source_text(source)
    except UnicodeDecodeError as error:
        logger.debug("Source is not valid UTF-8 at byte %d", error.start)
        return _decode_failure(error)
    grammar = Grammar(text, options)
    logger.debug("Parsing %d characters", len(text))
    try:
        result = grammar.source_code()
    except RecursionError:
        logger.debug("Interpreter recursion limit reached at offset %d", grammar.pos)
        grammar.diagnostics.abort(
            grammar.pos, "less deeply nested input", FailureKind.DEPTH
        )
        result = None
    if result is None:
        failure = grammar.diagnostics.failure(text)
        logger.debug("Parse failed: %s", failure.message)
        return failure
    return result


def parse_file(
    path: str | Path, options: ParserOptions | None = None
) -> NixSourceCode | ParseFailure:
    return parse(Path(path), options)


def parse_or_raise(
    source: str | bytes | Path, options: ParserOptions | None = None
) -> NixSourceCode:
    """Like `parse`, raising `NixSyntaxError` on invalid input."""
    result = parse(source, options)
    if isinstance(result, ParseFailure):
        filename = str(source) if isinstance(source, Path) else None
        raise NixSyntaxError(result, filename)
    return result


__all__ = ["parse", "parse_file", "parse_or_raise"]
