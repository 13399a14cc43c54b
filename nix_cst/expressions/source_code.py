from __future__ import annotations

from dataclasses import dataclass

from nix_cst.expressions.expression import NixExpression, rebuild_optional
from nix_cst.expressions.trivia import Trivia


@dataclass(frozen=True, slots=True)
class NixSourceCode(NixExpression):
    """Root of a parsed buffer.

    An empty or comment-only buffer has no expression and keeps all of its
    content in `leading`.
    """

    expression: NixExpression | None = None
    leading: Trivia | None = None
    trailing: Trivia | None = None

    def rebuild(self) -> str:
        return (
            rebuild_optional(self.leading)
            + rebuild_optional(self.expression)
            + rebuild_optional(self.trailing)
        )


__all__ = ["NixSourceCode"]
