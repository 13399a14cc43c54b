from __future__ import annotations

from dataclasses import dataclass

from nix_cst.expressions.expression import NixExpression, rebuild_optional
from nix_cst.expressions.trivia import Trivia


@dataclass(frozen=True, slots=True)
class Binding(NixExpression):
    """`name = value;` pair inside a set or a let block.

    `after_semicolon` holds the trivia up to the next binding or the closing
    token of the enclosing construct.
    """

    name: NixExpression
    value: NixExpression
    before_equals: Trivia | None = None
    after_equals: Trivia | None = None
    before_semicolon: Trivia | None = None
    after_semicolon: Trivia | None = None

    def rebuild(self) -> str:
        return (
            self.name.rebuild()
            + rebuild_optional(self.before_equals)
            + "="
            + rebuild_optional(self.after_equals)
            + self.value.rebuild()
            + rebuild_optional(self.before_semicolon)
            + ";"
            + rebuild_optional(self.after_semicolon)
        )


__all__ = ["Binding"]
