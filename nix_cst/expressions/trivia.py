"""Insignificant source content: spaces, newlines and comments."""

from __future__ import annotations

from dataclasses import dataclass

from nix_cst.expressions.expression import NixExpression


@dataclass(frozen=True, slots=True)
class TriviaPart(NixExpression):
    """A single run of trivia, stored as its raw source text."""

    text: str

    def rebuild(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class HorizontalSpace(TriviaPart):
    """Run of spaces and tabs."""


@dataclass(frozen=True, slots=True)
class VerticalSpace(TriviaPart):
    """Run of line breaks."""

    @property
    def newline_count(self) -> int:
        return self.text.count("\n") or self.text.count("\r")


@dataclass(frozen=True, slots=True)
class LineComment(TriviaPart):
    """`# ...` comment; the terminating newline is not part of it."""

    @property
    def body(self) -> str:
        return self.text[1:]


@dataclass(frozen=True, slots=True)
class BlockComment(TriviaPart):
    """`/* ... */` comment, possibly unterminated at end of input."""

    @property
    def terminated(self) -> bool:
        return len(self.text) >= 4 and self.text.endswith("*/")

    @property
    def doc(self) -> bool:
        return self.text.startswith("/**") and self.text != "/**/"

    @property
    def body(self) -> str:
        if self.terminated:
            return self.text[2:-2]
        return self.text[2:]


@dataclass(frozen=True, slots=True)
class Trivia(NixExpression):
    """Adjacent trivia runs merged into one unit."""

    parts: tuple[TriviaPart, ...]

    def rebuild(self) -> str:
        return "".join(part.text for part in self.parts)

    @property
    def comments(self) -> tuple[LineComment | BlockComment, ...]:
        return tuple(
            part
            for part in self.parts
            if isinstance(part, (LineComment, BlockComment))
        )

    @property
    def newline_count(self) -> int:
        """Count line breaks so a formatter can keep blank-line intent."""
        return sum(
            part.newline_count
            for part in self.parts
            if isinstance(part, VerticalSpace)
        )

    @property
    def has_empty_line(self) -> bool:
        return any(
            isinstance(part, VerticalSpace) and part.newline_count > 1
            for part in self.parts
        )


__all__ = [
    "BlockComment",
    "HorizontalSpace",
    "LineComment",
    "Trivia",
    "TriviaPart",
    "VerticalSpace",
]
