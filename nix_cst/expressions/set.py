from __future__ import annotations

from dataclasses import dataclass

from nix_cst.expressions.binding import Binding
from nix_cst.expressions.expression import NixExpression, rebuild_optional
from nix_cst.expressions.inherit import Inherit
from nix_cst.expressions.trivia import Trivia


@dataclass(frozen=True, slots=True)
class AttributeSet(NixExpression):
    """`{ ... }` or `rec { ... }`.

    Trivia after each binding's semicolon belongs to that binding, so only
    the trivia after `rec` and after the opening brace live here.
    """

    bindings: tuple[Binding | Inherit, ...] = ()
    recursive: bool = False
    after_rec: Trivia | None = None
    after_open: Trivia | None = None

    def rebuild(self) -> str:
        prefix = "rec" + rebuild_optional(self.after_rec) if self.recursive else ""
        return (
            prefix
            + "{"
            + rebuild_optional(self.after_open)
            + "".join(binding.rebuild() for binding in self.bindings)
            + "}"
        )


__all__ = ["AttributeSet"]
