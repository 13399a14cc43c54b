"""Operator vocabulary and the precedence table driving the grammar."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class UnaryOperator(Enum):
    NEGATE = "-"
    NOT = "!"

    @property
    def token(self) -> str:
        return self.value


class BinaryOperator(Enum):
    SELECT = "."
    SELECT_DEFAULT = "or"
    HAS_ATTR = "?"
    CONCAT = "++"
    MUL = "*"
    DIV = "/"
    ADD = "+"
    SUB = "-"
    MERGE = "//"
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="
    EQ = "=="
    NEQ = "!="
    AND = "&&"
    OR = "||"
    IMPLIES = "->"

    @property
    def token(self) -> str:
        """Canonical spelling of the operator."""
        return self.value


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"
    NONE = "none"


class Arity(Enum):
    UNARY = 1
    BINARY = 2


@dataclass(frozen=True, slots=True)
class OperatorSpec:
    """One row of the precedence table.

    `attribute_operand` marks operators whose right side is an attribute path
    rather than an expression. The call operator has no tokens.
    """

    name: str
    operator: BinaryOperator | UnaryOperator | None
    tokens: tuple[str, ...]
    precedence: int
    associativity: Associativity
    arity: Arity = Arity.BINARY
    attribute_operand: bool = False

    @property
    def is_infix(self) -> bool:
        return (
            self.arity is Arity.BINARY
            and bool(self.tokens)
            and self.operator not in (BinaryOperator.SELECT, BinaryOperator.SELECT_DEFAULT)
        )


# `!==` is a legacy spelling of inequality, accepted behind ParserOptions.
LEGACY_INEQUALITY = "!=="

OPERATORS: tuple[OperatorSpec, ...] = (
    OperatorSpec("select", BinaryOperator.SELECT, (".",), 15, Associativity.LEFT, attribute_operand=True),
    OperatorSpec("select default", BinaryOperator.SELECT_DEFAULT, ("or",), 15, Associativity.NONE),
    OperatorSpec("call", None, (), 14, Associativity.LEFT),
    OperatorSpec("negation", UnaryOperator.NEGATE, ("-",), 13, Associativity.NONE, Arity.UNARY),
    OperatorSpec("has attribute", BinaryOperator.HAS_ATTR, ("?",), 12, Associativity.NONE, attribute_operand=True),
    OperatorSpec("list concatenation", BinaryOperator.CONCAT, ("++",), 11, Associativity.RIGHT),
    OperatorSpec("multiplication", BinaryOperator.MUL, ("*",), 10, Associativity.LEFT),
    OperatorSpec("division", BinaryOperator.DIV, ("/",), 10, Associativity.LEFT),
    OperatorSpec("addition", BinaryOperator.ADD, ("+",), 9, Associativity.LEFT),
    OperatorSpec("subtraction", BinaryOperator.SUB, ("-",), 9, Associativity.LEFT),
    OperatorSpec("boolean negation", UnaryOperator.NOT, ("!",), 8, Associativity.NONE, Arity.UNARY),
    OperatorSpec("set merge", BinaryOperator.MERGE, ("//",), 7, Associativity.RIGHT),
    OperatorSpec("less than", BinaryOperator.LT, ("<",), 6, Associativity.NONE),
    OperatorSpec("less or equal", BinaryOperator.LE, ("<=",), 6, Associativity.NONE),
    OperatorSpec("greater than", BinaryOperator.GT, (">",), 6, Associativity.NONE),
    OperatorSpec("greater or equal", BinaryOperator.GE, (">=",), 6, Associativity.NONE),
    OperatorSpec("equality", BinaryOperator.EQ, ("==",), 5, Associativity.NONE),
    OperatorSpec("inequality", BinaryOperator.NEQ, ("!=", LEGACY_INEQUALITY), 5, Associativity.NONE),
    OperatorSpec("logical and", BinaryOperator.AND, ("&&",), 4, Associativity.LEFT),
    OperatorSpec("logical or", BinaryOperator.OR, ("||",), 3, Associativity.LEFT),
    OperatorSpec("logical implication", BinaryOperator.IMPLIES, ("->",), 2, Associativity.RIGHT),
)

SPECS_BY_NAME: dict[str, OperatorSpec] = {spec.name: spec for spec in OPERATORS}
SPECS_BY_OPERATOR: dict[BinaryOperator | UnaryOperator, OperatorSpec] = {
    spec.operator: spec for spec in OPERATORS if spec.operator is not None
}

CALL = SPECS_BY_NAME["call"]
LOWEST_PRECEDENCE = min(spec.precedence for spec in OPERATORS)


def infix_tokens(*, legacy_inequality: bool) -> tuple[tuple[str, OperatorSpec], ...]:
    """Infix tokens ordered longest first so `//` wins over `/`."""
    pairs = [
        (token, spec)
        for spec in OPERATORS
        if spec.is_infix
        for token in spec.tokens
        if legacy_inequality or token != LEGACY_INEQUALITY
    ]
    return tuple(sorted(pairs, key=lambda pair: len(pair[0]), reverse=True))


def prefix_tokens() -> tuple[tuple[str, OperatorSpec], ...]:
    return tuple(
        (token, spec)
        for spec in OPERATORS
        if spec.arity is Arity.UNARY
        for token in spec.tokens
    )


__all__ = [
    "Arity",
    "Associativity",
    "BinaryOperator",
    "CALL",
    "LEGACY_INEQUALITY",
    "LOWEST_PRECEDENCE",
    "OPERATORS",
    "OperatorSpec",
    "SPECS_BY_NAME",
    "SPECS_BY_OPERATOR",
    "UnaryOperator",
    "infix_tokens",
    "prefix_tokens",
]
