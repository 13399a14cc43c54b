from __future__ import annotations

from dataclasses import dataclass

from nix_cst.expressions.expression import NixExpression, rebuild_optional
from nix_cst.expressions.trivia import Trivia


@dataclass(frozen=True, slots=True)
class FunctionCall(NixExpression):
    """Application by juxtaposition: `function argument`."""

    function: NixExpression
    argument: NixExpression
    between: Trivia | None = None

    def rebuild(self) -> str:
        return (
            self.function.rebuild()
            + rebuild_optional(self.between)
            + self.argument.rebuild()
        )


__all__ = ["FunctionCall"]
