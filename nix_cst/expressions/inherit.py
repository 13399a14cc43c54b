from __future__ import annotations

from dataclasses import dataclass

from nix_cst.expressions.expression import NixExpression, rebuild_optional
from nix_cst.expressions.parenthesis import Parenthesis
from nix_cst.expressions.trivia import Trivia


@dataclass(frozen=True, slots=True)
class Inherit(NixExpression):
    """`inherit (source) a b;` clause.

    `items` interleaves the attribute names with the trivia found between
    the keyword (or the source) and the semicolon.
    """

    source: Parenthesis | None = None
    items: tuple[NixExpression, ...] = ()
    after_keyword: Trivia | None = None
    after_semicolon: Trivia | None = None

    @property
    def names(self) -> tuple[NixExpression, ...]:
        return tuple(item for item in self.items if not isinstance(item, Trivia))

    def rebuild(self) -> str:
        return (
            "inherit"
            + rebuild_optional(self.after_keyword)
            + rebuild_optional(self.source)
            + "".join(item.rebuild() for item in self.items)
            + ";"
            + rebuild_optional(self.after_semicolon)
        )


__all__ = ["Inherit"]
