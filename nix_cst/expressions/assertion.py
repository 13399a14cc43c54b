from __future__ import annotations

from dataclasses import dataclass

from nix_cst.expressions.expression import NixExpression, rebuild_optional
from nix_cst.expressions.trivia import Trivia


@dataclass(frozen=True, slots=True)
class Assertion(NixExpression):
    """`assert <condition>; <body>`."""

    condition: NixExpression
    body: NixExpression
    after_assert: Trivia | None = None
    before_semicolon: Trivia | None = None
    after_semicolon: Trivia | None = None

    def rebuild(self) -> str:
        return (
            "assert"
            + rebuild_optional(self.after_assert)
            + self.condition.rebuild()
            + rebuild_optional(self.before_semicolon)
            + ";"
            + rebuild_optional(self.after_semicolon)
            + self.body.rebuild()
        )


__all__ = ["Assertion"]
