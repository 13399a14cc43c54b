import pytest

from nix_cst import ParseFailure, parse
from nix_cst.expressions import (AliasPosition, AttributeSet, AttrPath,
                                 Ellipses, Formal, FunctionCall,
                                 FunctionDefinition, Identifier, Inherit,
                                 IntegerPrimitive, Interpolation,
                                 LetExpression, NixList, NullPrimitive,
                                 Parenthesis, QuotedString, SetPattern,
                                 SimplePattern, StringText, Trivia)

from .fixtures import accepts, parse_expression, parse_rule


@pytest.mark.parametrize(
    "text",
    [
        "[]",
        "[ ]",
        "[null]",
        "[null null]",
        "[ null null ]",
        '[ "1" 2 true ]',
        "[ [][ ]]",
        "[[[]]]",
    ],
)
def test_lists(text):
    nix_list = parse_rule("nix_list", text)
    assert isinstance(nix_list, NixList)
    assert nix_list.rebuild() == text


def test_list_keeps_interior_trivia():
    nix_list = parse_expression("[ null null ]")
    assert nix_list.elements == (NullPrimitive(), NullPrimitive())
    assert [type(item) for item in nix_list.items] == [
        Trivia,
        NullPrimitive,
        Trivia,
        NullPrimitive,
        Trivia,
    ]


def test_list_elements_are_not_calls():
    """Ensure juxtaposition inside a list separates elements."""
    nix_list = parse_expression("[ f x (g y) a.b ]")
    assert len(nix_list.elements) == 4
    assert isinstance(nix_list.elements[2], Parenthesis)
    assert isinstance(nix_list.elements[2].value, FunctionCall)


@pytest.mark.parametrize(
    "text",
    [
        "rec{}",
        "rec {}",
        "{}",
        "{ }",
        "{null=null;}",
        "{null = null;}",
        "{a = b;null = null;}",
        "{ a = b ; null = null ; }",
        "{ a = ''b'' ; }",
        "{inherit;}",
        "{inherit pkgs;}",
        "{inherit pkgs a b;}",
        "{inherit pkgs; a = b;}",
        "{inherit (self);}",
        "{inherit (self) pkgs; a = b;}",
        "{inherit(a)a;}",
        "{inherit (a) a;}",
        "{\"a\" = ''a'';}",
        '{"a" = null;}',
        "{${null} = null;}",
        "{ a.b.c = 1; }",
        '{ a."b".${c} = 1; }',
        '{ inherit "a" b; }',
    ],
)
def test_sets(text):
    attribute_set = parse_rule("attribute_set", text)
    assert isinstance(attribute_set, AttributeSet)
    assert attribute_set.rebuild() == text


@pytest.mark.parametrize(
    "text",
    [
        "{inherit pkgs}",
        "{inherita}",
        "{inherit-}",
        "{inherit(a)(a)}",
        "{null}",
        "{null=null}",
        "{null = null}",
        "{''a'' = \"a\";}",
    ],
)
def test_not_sets(text):
    assert parse_rule("attribute_set", text) is None
    assert not accepts(text)


def test_recursive_set():
    attribute_set = parse_expression("rec { a = 1; b = a; }")
    assert attribute_set.recursive
    assert attribute_set.after_rec.rebuild() == " "
    assert [binding.name for binding in attribute_set.bindings] == [
        Identifier("a"),
        Identifier("b"),
    ]


def test_inherit_with_source():
    attribute_set = parse_expression("{inherit (a) a;}")
    assert not attribute_set.recursive
    (inherit,) = attribute_set.bindings
    assert isinstance(inherit, Inherit)
    assert inherit.source == Parenthesis(Identifier("a"))
    assert inherit.names == (Identifier("a"),)


def test_empty_inherit():
    (inherit,) = parse_expression("{ inherit; }").bindings
    assert inherit.source is None
    assert inherit.names == ()


def test_dotted_binding_name():
    (binding,) = parse_expression("{ a . b = 1; }").bindings
    assert isinstance(binding.name, AttrPath)
    assert binding.name.names == (Identifier("a"), Identifier("b"))
    assert binding.name.steps[0].before_dot.rebuild() == " "


def test_dynamic_binding_names():
    (quoted, dynamic) = parse_expression('{ "a b" = 1; ${x} = 2; }').bindings
    assert quoted.name == QuotedString((StringText("a b"),))
    assert isinstance(dynamic.name, Interpolation)


@pytest.mark.parametrize(
    "text",
    [
        "let in",
        "let ina = 1; in",
        "let/**/in",
        "let \"a\" = ''a''; in",
        "let \"${null}\" = ''a''; in",
        "let inherit a; b = 1; in",
    ],
)
def test_let(text):
    assert isinstance(parse_rule("let_expression", text + " 1"), LetExpression)
    assert accepts(text + " 1")


@pytest.mark.parametrize(
    "text",
    [
        "let 1 in",
        "let \"a\" = ''a'' in",
        "let ${null} = ''a'' in",
    ],
)
def test_not_let(text):
    assert parse_rule("let_expression", text + " 1") is None
    assert not accepts(text + " 1")


@pytest.mark.parametrize("text", ["let in1", "let ina"])
def test_let_requires_bounded_in(text):
    assert not accepts(text)


def test_let_structure():
    let = parse_expression("let a = 1; in a")
    (binding,) = let.bindings
    assert binding.name == Identifier("a")
    assert binding.value == IntegerPrimitive("1")
    assert binding.after_semicolon.rebuild() == " "
    assert let.body == Identifier("a")


@pytest.mark.parametrize(
    "text",
    [
        "a: 1",
        "args: 1",
        "{a}: 1",
        "{a, b}: 1",
        "{ a , b }: 1",
        "{ a , b, ... }: 1",
        "{a,b,...}: 1",
        '{ a , b ? "ok" }: 1',
        "{ a , b ? 1+1 }: 1",
        "args@{a}: 1",
        "{a} @ args: 1",
        "{a}@args: 1",
        "{ }: 1",
        "{ ... }: 1",
        "{ a, }: 1",
    ],
)
def test_functions(text):
    function = parse_rule("function", text)
    assert isinstance(function, FunctionDefinition)
    assert function.rebuild() == text
    assert accepts(text)


@pytest.mark.parametrize(
    "text",
    [
        "args @: 1",
        "args@: 1",
        "args @ : 1",
        "args @ {a}: 1",
        "{ a , b, ..., c }: 1",
        "args@{a}@b: 1",
    ],
)
def test_not_functions(text):
    assert parse_rule("function", text) is None
    assert not accepts(text)


def test_set_pattern_function():
    function = parse_expression("{a}: 1")
    assert isinstance(function.pattern, SetPattern)
    assert function.pattern.formals == (Formal(Identifier("a")),)
    assert function.body == IntegerPrimitive("1")


def test_set_pattern_details():
    pattern = parse_expression("{ a, b ? 2, ... } @ args: a").pattern
    assert pattern.names == ("a", "b")
    assert pattern.formals[1].default == IntegerPrimitive("2")
    assert isinstance(pattern.ellipsis, Ellipses)
    assert pattern.ellipsis.after.rebuild() == " "
    assert pattern.has_ellipsis
    assert pattern.alias == Identifier("args")
    assert pattern.alias_position is AliasPosition.AFTER
    assert [node for node in pattern.children()][-1] == Identifier("args")


def test_prefix_alias():
    pattern = parse_expression("args@{ a }: a").pattern
    assert pattern.alias == Identifier("args")
    assert pattern.alias_position is AliasPosition.BEFORE
    assert next(pattern.children()) == Identifier("args")


def test_simple_pattern():
    function = parse_expression("x: y: x")
    assert function.pattern == SimplePattern(Identifier("x"))
    assert isinstance(function.body, FunctionDefinition)


def test_alias_requires_position():
    with pytest.raises(ValueError):
        SetPattern(alias=Identifier("a"))


def test_immediately_applied_function():
    call = parse_expression("(x: 1) 4")
    assert isinstance(call, FunctionCall)
    assert isinstance(call.function.value, FunctionDefinition)
    assert call.argument == IntegerPrimitive("4")


def test_torture():
    text = 'let"a"={a="b";};in{inherit(a)a;}'
    assert parse(text).rebuild() == text
    assert not isinstance(parse(text), ParseFailure)
