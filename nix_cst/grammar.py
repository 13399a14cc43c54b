"""Composite forms of the Nix grammar and the operator precedence engine.

Every rule is an ordinary method trying its alternatives in order. Operator
expressions are built by one precedence-climbing routine driven by the
`OPERATORS` table, with function application (juxtaposition) as an operator
that has no token.
"""

from __future__ import annotations

import functools

from nix_cst.diagnostics import FailureKind, rule
from nix_cst.expressions.assertion import Assertion
from nix_cst.expressions.attrpath import AttrPath, AttrStep
from nix_cst.expressions.binary import BinaryExpression
from nix_cst.expressions.binding import Binding
from nix_cst.expressions.expression import NixExpression
from nix_cst.expressions.function.call import FunctionCall
from nix_cst.expressions.function.definition import (AliasPosition, Ellipses,
                                                     Formal,
                                                     FunctionDefinition,
                                                     SetPattern,
                                                     SimplePattern)
from nix_cst.expressions.if_expression import IfExpression
from nix_cst.expressions.inherit import Inherit
from nix_cst.expressions.let import LetExpression
from nix_cst.expressions.list import NixList
from nix_cst.expressions.operator import (CALL, LOWEST_PRECEDENCE,
                                          Associativity, BinaryOperator,
                                          OperatorSpec, infix_tokens,
                                          prefix_tokens)
from nix_cst.expressions.parenthesis import Parenthesis
from nix_cst.expressions.primitive import BooleanPrimitive, NullPrimitive
from nix_cst.expressions.set import AttributeSet
from nix_cst.expressions.source_code import NixSourceCode
from nix_cst.expressions.unary import UnaryExpression
from nix_cst.expressions.with_statement import WithStatement
from nix_cst.lexer import Lexer


def nested(method):
    """Count the decorated rule against `ParserOptions.max_depth`."""

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        if not self.descend():
            return None
        try:
            return method(self, *args, **kwargs)
        finally:
            self.depth -= 1

    return wrapper


class Grammar(Lexer):
    """Recursive descent parser for a single buffer."""

    @functools.cached_property
    def _infix(self) -> tuple[tuple[str, OperatorSpec], ...]:
        return infix_tokens(legacy_inequality=self.options.legacy_inequality)

    # Root

    @rule("source")
    def source_code(self) -> NixSourceCode | None:
        leading = self.optional_trivia()
        expression = self.expression()
        trailing = self.optional_trivia() if expression is not None else None
        if self.diagnostics.fatal is not None:
            return None
        if not self.at_end():
            self.diagnostics.expect(self.pos, "end of input")
            return None
        return NixSourceCode(expression, leading, trailing)

    # Expressions

    @rule("expression")
    @nested
    def expression(self) -> NixExpression | None:
        for form in (
            self.let_expression,
            self.if_expression,
            self.assertion,
            self.with_statement,
        ):
            node = form()
            if node is not None:
                return node
        return self.operation(LOWEST_PRECEDENCE)

    @rule("operation")
    def operation(self, minimum: int) -> NixExpression | None:
        """Precedence climbing over the operator table.

        Only operators binding at least as tightly as `minimum` are consumed;
        the rest is left to the caller.
        """
        left = self.operand()
        if left is None:
            return None
        previous = None
        while True:
            start = self.pos
            before = self.optional_trivia()
            found = self._infix_operator()
            if found is not None:
                token, spec = found
                if spec.precedence < minimum:
                    self.pos = start
                    break
                if (
                    spec.associativity is Associativity.NONE
                    and previous == spec.precedence
                ):
                    self.diagnostics.abort(
                        self.pos,
                        f"parentheses around chained {token!r}",
                        FailureKind.AMBIGUITY,
                    )
                    return None
                self.pos += len(token)
                after = self.optional_trivia()
                if spec.attribute_operand:
                    right = self.attr_path()
                elif spec.associativity is Associativity.RIGHT:
                    right = self.operation(spec.precedence)
                else:
                    right = self.operation(spec.precedence + 1)
                if right is None:
                    return None
                left = BinaryExpression(
                    spec.operator,
                    left,
                    right,
                    before,
                    after,
                    token if token != spec.operator.token else None,
                )
                previous = spec.precedence
                continue
            if CALL.precedence >= minimum:
                argument = self.select_term()
                if argument is not None:
                    left = FunctionCall(left, argument, before)
                    previous = CALL.precedence
                    continue
            self.pos = start
            break
        return left

    def _infix_operator(self) -> tuple[str, OperatorSpec] | None:
        # `a /b` and `f <nixpkgs>` are calls on path literals.
        if self.at_path():
            return None
        for token, spec in self._infix:
            if self.peek(token):
                return token, spec
        return None

    @rule("operand")
    def operand(self) -> NixExpression | None:
        term = self.select_term()
        if term is not None:
            return term
        for token, spec in prefix_tokens():
            if self.literal(token, record=False):
                after = self.optional_trivia()
                operand = self.operation(spec.precedence + 1)
                if operand is None:
                    return None
                return UnaryExpression(spec.operator, operand, after)
        return None

    @rule("select")
    def select_term(self) -> NixExpression | None:
        node = self.term()
        if node is None:
            return None
        while True:
            start = self.pos
            before_dot = self.optional_trivia()
            if not self.literal(".", record=False):
                self.pos = start
                break
            after_dot = self.optional_trivia()
            name = self.attr_name()
            if name is None:
                self.pos = start
                break
            node = BinaryExpression(
                BinaryOperator.SELECT, node, name, before_dot, after_dot
            )
            start = self.pos
            before_or = self.optional_trivia()
            if self.keyword("or", record=False):
                after_or = self.optional_trivia()
                default = self.select_term()
                if default is not None:
                    return BinaryExpression(
                        BinaryOperator.SELECT_DEFAULT,
                        node,
                        default,
                        before_or,
                        after_or,
                    )
            self.pos = start
        return node

    @rule("term")
    def term(self) -> NixExpression | None:
        checkpoint = self.diagnostics.checkpoint()
        start = self.pos
        for alternative in (
            self.parenthesis,
            self.quoted_string,
            self.indented_string,
            self.uri,
            self.path,
            self.number,
            self.function,
            self.nix_list,
            self.attribute_set,
            self.atom,
        ):
            node = alternative()
            if node is not None:
                return node
        self.diagnostics.collapse(checkpoint, start, "expression")
        return None

    def atom(self) -> NixExpression | None:
        identifier = self.identifier()
        if identifier is None:
            return None
        match identifier.name:
            case "true":
                return BooleanPrimitive(True)
            case "false":
                return BooleanPrimitive(False)
            case "null":
                return NullPrimitive()
        return identifier

    @rule("parenthesis")
    def parenthesis(self) -> Parenthesis | None:
        if not self.literal("("):
            return None
        after_open = self.optional_trivia()
        value = self.expression()
        if value is None:
            return None
        before_close = self.optional_trivia()
        if not self.literal(")"):
            return None
        return Parenthesis(value, after_open, before_close)

    # Attribute names

    @rule("attribute name")
    def attr_name(self) -> NixExpression | None:
        for alternative in (self.identifier, self.quoted_string, self.interpolation):
            name = alternative()
            if name is not None:
                return name
        return None

    @rule("attribute path")
    def attr_path(self) -> NixExpression | None:
        first = self.attr_name()
        if first is None:
            return None
        steps = []
        while True:
            start = self.pos
            before_dot = self.optional_trivia()
            if not self.literal(".", record=False):
                self.pos = start
                break
            after_dot = self.optional_trivia()
            name = self.attr_name()
            if name is None:
                self.pos = start
                break
            steps.append(AttrStep(name, before_dot, after_dot))
        if not steps:
            return first
        return AttrPath(first, tuple(steps))

    # Lists and sets

    @rule("list")
    @nested
    def nix_list(self) -> NixList | None:
        if not self.literal("["):
            return None
        items: list[NixExpression] = []
        while not self.literal("]"):
            item = self.optional_trivia() or self.select_term()
            if item is None:
                return None
            items.append(item)
        return NixList(tuple(items))

    @rule("set")
    def attribute_set(self) -> AttributeSet | None:
        recursive = self.keyword("rec")
        after_rec = self.optional_trivia() if recursive else None
        if not self.literal("{"):
            return None
        after_open = self.optional_trivia()
        bindings = self.bindings()
        if not self.literal("}"):
            return None
        return AttributeSet(tuple(bindings), recursive, after_rec, after_open)

    def bindings(self) -> list[Binding | Inherit]:
        bindings: list[Binding | Inherit] = []
        while True:
            binding = self.inherit()
            if binding is None:
                binding = self.binding()
            if binding is None:
                return bindings
            bindings.append(binding)

    @rule("binding")
    def binding(self) -> Binding | None:
        name = self.attr_path()
        if name is None:
            return None
        before_equals = self.optional_trivia()
        if not self.literal("="):
            return None
        after_equals = self.optional_trivia()
        value = self.expression()
        if value is None:
            return None
        before_semicolon = self.optional_trivia()
        if not self.literal(";"):
            return None
        return Binding(
            name,
            value,
            before_equals,
            after_equals,
            before_semicolon,
            self.optional_trivia(),
        )

    @rule("inherit")
    def inherit(self) -> Inherit | None:
        if not self.keyword("inherit"):
            return None
        after_keyword = self.optional_trivia()
        source = self.parenthesis()
        items: list[NixExpression] = []
        while True:
            item = self.optional_trivia() or self.identifier() or self.quoted_string()
            if item is None:
                break
            items.append(item)
        if not self.literal(";"):
            return None
        return Inherit(source, tuple(items), after_keyword, self.optional_trivia())

    # Functions

    @rule("function")
    def function(self) -> FunctionDefinition | None:
        pattern = self.set_pattern() or self.simple_pattern()
        if pattern is None:
            return None
        before_colon = self.optional_trivia()
        # A bare identifier not followed by `:` is just an identifier.
        if not self.literal(":", record=isinstance(pattern, SetPattern)):
            return None
        after_colon = self.optional_trivia()
        body = self.expression()
        if body is None:
            return None
        return FunctionDefinition(pattern, body, before_colon, after_colon)

    @rule("pattern")
    def simple_pattern(self) -> SimplePattern | None:
        identifier = self.identifier()
        if identifier is None:
            return None
        end = self.pos
        self.optional_trivia()
        if self.peek("@"):
            return None
        self.pos = end
        return SimplePattern(identifier)

    @rule("set pattern")
    def set_pattern(self) -> SetPattern | None:
        alias = alias_position = None
        start = self.pos
        identifier = self.identifier()
        if identifier is not None and self.literal("@", record=False):
            alias, alias_position = identifier, AliasPosition.BEFORE
        else:
            self.pos = start
        if not self.literal("{"):
            return None
        after_open = self.optional_trivia()
        formals: list[Formal] = []
        ellipsis = None
        while True:
            if self.literal("...", record=False):
                ellipsis = Ellipses(self.optional_trivia())
                break
            formal = self.formal()
            if formal is None:
                break
            formals.append(formal)
            if not formal.comma:
                break
        if not self.literal("}"):
            return None
        before_at = after_at = None
        if alias is None:
            end = self.pos
            before_at = self.optional_trivia()
            if self.literal("@", record=False):
                after_at = self.optional_trivia()
                alias = self.identifier()
                if alias is None:
                    return None
                alias_position = AliasPosition.AFTER
            else:
                self.pos = end
                before_at = None
        return SetPattern(
            tuple(formals),
            ellipsis,
            alias,
            alias_position,
            after_open,
            before_at,
            after_at,
        )

    @rule("formal")
    def formal(self) -> Formal | None:
        name = self.identifier()
        if name is None:
            return None
        after_name = self.optional_trivia()
        default = after_question = after_default = None
        if self.literal("?"):
            after_question = self.optional_trivia()
            default = self.expression()
            if default is None:
                return None
            after_default = self.optional_trivia()
        comma = self.literal(",")
        after_comma = self.optional_trivia() if comma else None
        return Formal(
            name, default, after_name, after_question, after_default, comma, after_comma
        )

    # Control flow

    @rule("let")
    def let_expression(self) -> LetExpression | None:
        if not self.keyword("let", record=False):
            return None
        after_let = self.optional_trivia()
        bindings = self.bindings()
        if not self.keyword("in"):
            return None
        after_in = self.optional_trivia()
        body = self.expression()
        if body is None:
            return None
        return LetExpression(tuple(bindings), body, after_let, after_in)

    @rule("if")
    def if_expression(self) -> IfExpression | None:
        if not self.keyword("if", record=False):
            return None
        after_if = self.optional_trivia()
        condition = self.expression()
        if condition is None:
            return None
        before_then = self.optional_trivia()
        if not self.keyword("then"):
            return None
        after_then = self.optional_trivia()
        consequence = self.expression()
        if consequence is None:
            return None
        before_else = self.optional_trivia()
        if not self.keyword("else"):
            return None
        after_else = self.optional_trivia()
        alternative = self.expression()
        if alternative is None:
            return None
        return IfExpression(
            condition,
            consequence,
            alternative,
            after_if,
            before_then,
            after_then,
            before_else,
            after_else,
        )

    def _guarded(self, word: str):
        """Shared shape of `assert` and `with`: keyword, expression, `;`, body."""
        if not self.keyword(word, record=False):
            return None
        after_keyword = self.optional_trivia()
        head = self.expression()
        if head is None:
            return None
        before_semicolon = self.optional_trivia()
        if not self.literal(";"):
            return None
        after_semicolon = self.optional_trivia()
        body = self.expression()
        if body is None:
            return None
        return head, body, after_keyword, before_semicolon, after_semicolon

    @rule("assert")
    def assertion(self) -> Assertion | None:
        parts = self._guarded("assert")
        return None if parts is None else Assertion(*parts)

    @rule("with")
    def with_statement(self) -> WithStatement | None:
        parts = self._guarded("with")
        return None if parts is None else WithStatement(*parts)


__all__ = ["Grammar"]
