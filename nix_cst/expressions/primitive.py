from __future__ import annotations

from dataclasses import dataclass

from nix_cst.expressions.expression import NixExpression


@dataclass(frozen=True, slots=True)
class IntegerPrimitive(NixExpression):
    """Integer literal, kept as its digit string."""

    digits: str

    @property
    def value(self) -> int:
        return int(self.digits)

    def rebuild(self) -> str:
        return self.digits


@dataclass(frozen=True, slots=True)
class FloatPrimitive(NixExpression):
    """Float literal split around its mandatory dot.

    `fractional_part` holds everything after the dot, exponent included, so
    `1.e4` is `("1", "e4")` and `.45` is `("", "45")`.
    """

    integer_part: str
    fractional_part: str

    @property
    def value(self) -> float:
        return float(f"{self.integer_part or '0'}.{self.fractional_part}")

    def rebuild(self) -> str:
        return f"{self.integer_part}.{self.fractional_part}"


@dataclass(frozen=True, slots=True)
class BooleanPrimitive(NixExpression):
    value: bool

    def rebuild(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True, slots=True)
class NullPrimitive(NixExpression):
    @property
    def value(self) -> None:
        return None

    def rebuild(self) -> str:
        return "null"


__all__ = [
    "BooleanPrimitive",
    "FloatPrimitive",
    "IntegerPrimitive",
    "NullPrimitive",
]
