"""String literals and their interpolations."""

from __future__ import annotations

from dataclasses import dataclass

from nix_cst.expressions.expression import NixExpression, rebuild_optional
from nix_cst.expressions.trivia import Trivia

_ESCAPES = {"n": "\n", "r": "\r", "t": "\t"}


@dataclass(frozen=True, slots=True)
class StringText(NixExpression):
    """Literal run inside a string, raw newlines included."""

    text: str

    def rebuild(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class StringEscape(NixExpression):
    """Backslash escape in a quoted string; `char` is the escaped character."""

    char: str

    def rebuild(self) -> str:
        return f"\\{self.char}"


@dataclass(frozen=True, slots=True)
class IndentedEscape(NixExpression):
    """Escape inside an indented string: `'''`, `''$` or `''\\` + character."""

    text: str

    @property
    def value(self) -> str:
        """Return the characters the escape stands for."""
        if self.text == "'''":
            return "''"
        if self.text == "''$":
            return "$"
        escaped = self.text[3:]
        return _ESCAPES.get(escaped, escaped)

    def rebuild(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Interpolation(NixExpression):
    """`${ expression }` splice (antiquotation)."""

    expression: NixExpression
    after_open: Trivia | None = None
    before_close: Trivia | None = None

    def rebuild(self) -> str:
        return (
            "${"
            + rebuild_optional(self.after_open)
            + self.expression.rebuild()
            + rebuild_optional(self.before_close)
            + "}"
        )


StringPart = StringText | StringEscape | Interpolation
IndentedStringPart = StringText | IndentedEscape | Interpolation


@dataclass(frozen=True, slots=True)
class QuotedString(NixExpression):
    parts: tuple[StringPart, ...] = ()

    @property
    def interpolations(self) -> tuple[Interpolation, ...]:
        return tuple(part for part in self.parts if isinstance(part, Interpolation))

    @property
    def is_static(self) -> bool:
        return not self.interpolations

    @property
    def value(self) -> str:
        """Unescaped content of a string without interpolations."""
        if not self.is_static:
            raise ValueError("String contains interpolations")
        return "".join(
            part.text if isinstance(part, StringText) else _unescape(part.char)
            for part in self.parts
            if isinstance(part, (StringText, StringEscape))
        )

    def rebuild(self) -> str:
        return '"' + "".join(part.rebuild() for part in self.parts) + '"'


@dataclass(frozen=True, slots=True)
class IndentedString(NixExpression):
    """`''`-delimited string; raw content is kept, no dedentation happens here."""

    parts: tuple[IndentedStringPart, ...] = ()

    @property
    def interpolations(self) -> tuple[Interpolation, ...]:
        return tuple(part for part in self.parts if isinstance(part, Interpolation))

    @property
    def text(self) -> str:
        """Raw literal content with interpolations left out."""
        return "".join(
            part.rebuild()
            for part in self.parts
            if not isinstance(part, Interpolation)
        )

    def rebuild(self) -> str:
        return "''" + "".join(part.rebuild() for part in self.parts) + "''"


def _unescape(char: str) -> str:
    return _ESCAPES.get(char, char)


__all__ = [
    "IndentedEscape",
    "IndentedString",
    "IndentedStringPart",
    "Interpolation",
    "QuotedString",
    "StringEscape",
    "StringPart",
    "StringText",
]
