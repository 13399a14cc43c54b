from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MAX_DEPTH = 32


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Knobs for a single parse call.

    `max_depth` bounds how deeply expressions may nest (parentheses, lists,
    sets, bodies); deeper input is reported as a parse failure instead of
    exhausting the interpreter stack. One level costs up to about sixteen
    interpreter frames, so at Python's default recursion limit of 1000 a
    `max_depth` above roughly 60 is never reached: the `RecursionError` comes
    first and is reported as the same depth failure, without the limit in
    its message. `legacy_inequality` accepts `!==` as a spelling of `!=`.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    legacy_inequality: bool = True

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")


__all__ = ["DEFAULT_MAX_DEPTH", "ParserOptions"]
