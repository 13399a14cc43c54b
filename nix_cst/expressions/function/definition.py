"""Function definitions and their argument patterns."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from nix_cst.expressions.expression import NixExpression, rebuild_optional
from nix_cst.expressions.identifier import Identifier
from nix_cst.expressions.trivia import Trivia


class AliasPosition(Enum):
    BEFORE = "before"
    AFTER = "after"


@dataclass(frozen=True, slots=True)
class SimplePattern(NixExpression):
    """Bare identifier argument: `x: ...`."""

    identifier: Identifier

    @property
    def names(self) -> tuple[str, ...]:
        return (self.identifier.name,)

    def rebuild(self) -> str:
        return self.identifier.rebuild()


@dataclass(frozen=True, slots=True)
class Formal(NixExpression):
    """One `name ? default` entry of a set pattern.

    Without a default, `after_name` is the trivia before the comma or the
    closing brace; with one, it is the trivia before `?` and `after_default`
    takes that role.
    """

    name: Identifier
    default: NixExpression | None = None
    after_name: Trivia | None = None
    after_question: Trivia | None = None
    after_default: Trivia | None = None
    comma: bool = False
    after_comma: Trivia | None = None

    def rebuild(self) -> str:
        rebuilt = self.name.rebuild() + rebuild_optional(self.after_name)
        if self.default is not None:
            rebuilt += (
                "?"
                + rebuild_optional(self.after_question)
                + self.default.rebuild()
                + rebuild_optional(self.after_default)
            )
        if self.comma:
            rebuilt += "," + rebuild_optional(self.after_comma)
        return rebuilt


@dataclass(frozen=True, slots=True)
class Ellipses(NixExpression):
    after: Trivia | None = None

    def rebuild(self) -> str:
        return "..." + rebuild_optional(self.after)


@dataclass(frozen=True, slots=True)
class SetPattern(NixExpression):
    """Destructuring argument `{ a, b ? 1, ... }`, optionally aliased.

    A leading alias (`args@{ ... }`) is written without trivia; a trailing
    one (`{ ... } @ args`) keeps its surrounding trivia.
    """

    formals: tuple[Formal, ...] = ()
    ellipsis: Ellipses | None = None
    alias: Identifier | None = None
    alias_position: AliasPosition | None = None
    after_open: Trivia | None = None
    before_at: Trivia | None = None
    after_at: Trivia | None = None

    def __post_init__(self) -> None:
        """Keep alias and alias position consistent."""
        if (self.alias is None) != (self.alias_position is None):
            raise ValueError("An alias requires an alias position and vice versa")

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(formal.name.name for formal in self.formals)

    @property
    def has_ellipsis(self) -> bool:
        return self.ellipsis is not None

    def children(self) -> Iterator[NixExpression]:
        if self.alias_position is AliasPosition.BEFORE:
            yield self.alias
        yield from self.formals
        if self.ellipsis is not None:
            yield self.ellipsis
        if self.alias_position is AliasPosition.AFTER:
            yield self.alias

    def rebuild(self) -> str:
        body = (
            "{"
            + rebuild_optional(self.after_open)
            + "".join(formal.rebuild() for formal in self.formals)
            + rebuild_optional(self.ellipsis)
            + "}"
        )
        if self.alias_position is AliasPosition.BEFORE:
            return f"{self.alias.rebuild()}@{body}"
        if self.alias_position is AliasPosition.AFTER:
            return (
                body
                + rebuild_optional(self.before_at)
                + "@"
                + rebuild_optional(self.after_at)
                + self.alias.rebuild()
            )
        return body


Pattern = SimplePattern | SetPattern


@dataclass(frozen=True, slots=True)
class FunctionDefinition(NixExpression):
    pattern: Pattern
    body: NixExpression
    before_colon: Trivia | None = None
    after_colon: Trivia | None = None

    def rebuild(self) -> str:
        return (
            self.pattern.rebuild()
            + rebuild_optional(self.before_colon)
            + ":"
            + rebuild_optional(self.after_colon)
            + self.body.rebuild()
        )


__all__ = [
    "AliasPosition",
    "Ellipses",
    "Formal",
    "FunctionDefinition",
    "Pattern",
    "SetPattern",
    "SimplePattern",
]
