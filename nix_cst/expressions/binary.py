from __future__ import annotations

from dataclasses import dataclass

from nix_cst.expressions.expression import NixExpression, rebuild_optional
from nix_cst.expressions.operator import BinaryOperator
from nix_cst.expressions.trivia import Trivia


@dataclass(frozen=True, slots=True)
class BinaryExpression(NixExpression):
    """Infix operation, attribute selection included.

    For `SELECT` and `HAS_ATTR` the right side is an attribute name (or an
    `AttrPath` for dotted has-attr operands). `SELECT_DEFAULT` wraps a select
    on the left and the `or` fallback on the right. `token` is only set when
    the source spelled the operator differently from its canonical token.
    """

    operator: BinaryOperator
    left: NixExpression
    right: NixExpression
    before_operator: Trivia | None = None
    after_operator: Trivia | None = None
    token: str | None = None

    @property
    def operator_token(self) -> str:
        return self.token or self.operator.token

    def rebuild(self) -> str:
        """Reconstruct binary expression."""
        return (
            self.left.rebuild()
            + rebuild_optional(self.before_operator)
            + self.operator_token
            + rebuild_optional(self.after_operator)
            + self.right.rebuild()
        )


__all__ = ["BinaryExpression"]
