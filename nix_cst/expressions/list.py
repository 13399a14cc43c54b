from __future__ import annotations

from dataclasses import dataclass

from nix_cst.expressions.expression import NixExpression
from nix_cst.expressions.trivia import Trivia


@dataclass(frozen=True, slots=True)
class NixList(NixExpression):
    """`[ ... ]` with its elements interleaved with the trivia between them."""

    items: tuple[NixExpression, ...] = ()

    @property
    def elements(self) -> tuple[NixExpression, ...]:
        return tuple(item for item in self.items if not isinstance(item, Trivia))

    def rebuild(self) -> str:
        return "[" + "".join(item.rebuild() for item in self.items) + "]"


__all__ = ["NixList"]
