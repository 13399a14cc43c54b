"""Parenthesized expressions with preserved inner whitespace."""

from __future__ import annotations

from dataclasses import dataclass

from nix_cst.expressions.expression import NixExpression, rebuild_optional
from nix_cst.expressions.trivia import Trivia


@dataclass(frozen=True, slots=True)
class Parenthesis(NixExpression):
    value: NixExpression
    after_open: Trivia | None = None
    before_close: Trivia | None = None

    def rebuild(self) -> str:
        return (
            "("
            + rebuild_optional(self.after_open)
            + self.value.rebuild()
            + rebuild_optional(self.before_close)
            + ")"
        )


__all__ = ["Parenthesis"]
