from __future__ import annotations

from dataclasses import dataclass

from nix_cst.expressions.binding import Binding
from nix_cst.expressions.expression import NixExpression, rebuild_optional
from nix_cst.expressions.inherit import Inherit
from nix_cst.expressions.trivia import Trivia


@dataclass(frozen=True, slots=True)
class LetExpression(NixExpression):
    """`let <bindings> in <body>`.

    With no bindings, `after_let` holds all trivia up to `in`.
    """

    bindings: tuple[Binding | Inherit, ...]
    body: NixExpression
    after_let: Trivia | None = None
    after_in: Trivia | None = None

    def rebuild(self) -> str:
        return (
            "let"
            + rebuild_optional(self.after_let)
            + "".join(binding.rebuild() for binding in self.bindings)
            + "in"
            + rebuild_optional(self.after_in)
            + self.body.rebuild()
        )


__all__ = ["LetExpression"]
