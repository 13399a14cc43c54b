from __future__ import annotations

from dataclasses import dataclass

from nix_cst.expressions.expression import NixExpression


@dataclass(frozen=True, slots=True)
class Uri(NixExpression):
    """Unquoted URI literal such as `https://example.com/a`."""

    protocol: str
    remainder: str

    def rebuild(self) -> str:
        return f"{self.protocol}:{self.remainder}"


__all__ = ["Uri"]
