from __future__ import annotations

from dataclasses import dataclass

from nix_cst.expressions.expression import NixExpression, rebuild_optional
from nix_cst.expressions.operator import UnaryOperator
from nix_cst.expressions.trivia import Trivia


@dataclass(frozen=True, slots=True)
class UnaryExpression(NixExpression):
    operator: UnaryOperator
    operand: NixExpression
    after_operator: Trivia | None = None

    def rebuild(self) -> str:
        """Reconstruct unary expression while retaining operator spacing."""
        return (
            self.operator.token
            + rebuild_optional(self.after_operator)
            + self.operand.rebuild()
        )


__all__ = ["UnaryExpression"]
