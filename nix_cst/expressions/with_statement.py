from __future__ import annotations

from dataclasses import dataclass

from nix_cst.expressions.expression import NixExpression, rebuild_optional
from nix_cst.expressions.trivia import Trivia


@dataclass(frozen=True, slots=True)
class WithStatement(NixExpression):
    """`with <environment>; <body>`."""

    environment: NixExpression
    body: NixExpression
    after_with: Trivia | None = None
    before_semicolon: Trivia | None = None
    after_semicolon: Trivia | None = None

    def rebuild(self) -> str:
        return (
            "with"
            + rebuild_optional(self.after_with)
            + self.environment.rebuild()
            + rebuild_optional(self.before_semicolon)
            + ";"
            + rebuild_optional(self.after_semicolon)
            + self.body.rebuild()
        )


__all__ = ["WithStatement"]
