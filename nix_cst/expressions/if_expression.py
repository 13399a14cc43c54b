from __future__ import annotations

from dataclasses import dataclass

from nix_cst.expressions.expression import NixExpression, rebuild_optional
from nix_cst.expressions.trivia import Trivia


@dataclass(frozen=True, slots=True)
class IfExpression(NixExpression):
    condition: NixExpression
    consequence: NixExpression
    alternative: NixExpression
    after_if: Trivia | None = None
    before_then: Trivia | None = None
    after_then: Trivia | None = None
    before_else: Trivia | None = None
    after_else: Trivia | None = None

    def rebuild(self) -> str:
        return (
            "if"
            + rebuild_optional(self.after_if)
            + self.condition.rebuild()
            + rebuild_optional(self.before_then)
            + "then"
            + rebuild_optional(self.after_then)
            + self.consequence.rebuild()
            + rebuild_optional(self.before_else)
            + "else"
            + rebuild_optional(self.after_else)
            + self.alternative.rebuild()
        )


__all__ = ["IfExpression"]
