from .assertion import Assertion
from .attrpath import AttrPath, AttrStep
from .binary import BinaryExpression
from .binding import Binding
from .expression import NixExpression
from .function.call import FunctionCall
from .function.definition import (AliasPosition, Ellipses, Formal,
                                  FunctionDefinition, SetPattern,
                                  SimplePattern)
from .identifier import Identifier
from .if_expression import IfExpression
from .inherit import Inherit
from .let import LetExpression
from .list import NixList
from .operator import BinaryOperator, UnaryOperator
from .parenthesis import Parenthesis
from .path import NixPath, PathKind
from .primitive import (BooleanPrimitive, FloatPrimitive, IntegerPrimitive,
                        NullPrimitive)
from .set import AttributeSet
from .source_code import NixSourceCode
from .string import (IndentedEscape, IndentedString, Interpolation,
                     QuotedString, StringEscape, StringText)
from .trivia import (BlockComment, HorizontalSpace, LineComment, Trivia,
                     VerticalSpace)
from .unary import UnaryExpression
from .uri import Uri
from .with_statement import WithStatement

__all__ = [
    "AliasPosition",
    "Assertion",
    "AttrPath",
    "AttrStep",
    "AttributeSet",
    "BinaryExpression",
    "BinaryOperator",
    "Binding",
    "BlockComment",
    "BooleanPrimitive",
    "Ellipses",
    "FloatPrimitive",
    "Formal",
    "FunctionCall",
    "FunctionDefinition",
    "HorizontalSpace",
    "Identifier",
    "IfExpression",
    "IndentedEscape",
    "IndentedString",
    "Inherit",
    "IntegerPrimitive",
    "Interpolation",
    "LetExpression",
    "LineComment",
    "NixExpression",
    "NixList",
    "NixPath",
    "NixSourceCode",
    "NullPrimitive",
    "Parenthesis",
    "PathKind",
    "QuotedString",
    "SetPattern",
    "SimplePattern",
    "StringEscape",
    "StringText",
    "Trivia",
    "UnaryExpression",
    "UnaryOperator",
    "Uri",
    "VerticalSpace",
    "WithStatement",
]
