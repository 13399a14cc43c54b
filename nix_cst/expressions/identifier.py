from __future__ import annotations

from dataclasses import dataclass

from nix_cst.expressions.expression import NixExpression


@dataclass(frozen=True, slots=True)
class Identifier(NixExpression):
    name: str

    def rebuild(self) -> str:
        """Reconstruct identifier."""
        return self.name


__all__ = ["Identifier"]
