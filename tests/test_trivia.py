import pytest

from nix_cst import parse
from nix_cst.expressions import (BlockComment, HorizontalSpace,
                                 IntegerPrimitive, LineComment, Trivia,
                                 VerticalSpace)

from .fixtures import parse_expression, parse_rule


@pytest.mark.parametrize("text", [" ", "  ", " \n ", "\t\t", "\n\n\n"])
def test_spaces(text):
    trivia = parse_rule("trivia", text)
    assert isinstance(trivia, Trivia)
    assert trivia.rebuild() == text


def test_adjacent_runs_merge_into_one_unit():
    """Ensure spaces, newlines and comments found together form one unit."""
    trivia = parse_rule("trivia", " \n # note\n/* block */\t")
    assert trivia.parts == (
        HorizontalSpace(" "),
        VerticalSpace("\n"),
        HorizontalSpace(" "),
        LineComment("# note"),
        VerticalSpace("\n"),
        BlockComment("/* block */"),
        HorizontalSpace("\t"),
    )


@pytest.mark.parametrize(
    "text",
    [
        "",
        " ",
        "#",
        " #",
        " # test",
        " # test\n # test",
        "/**/",
        "/*a*/",
        "/* */",
        "/* a */",
        "/* /* */",
        "/* /* /*/",
        "/* /* /**/",
    ],
)
def test_root_noise(text):
    """Ensure buffers without any expression parse and keep their content."""
    source = parse(text)
    assert source.expression is None
    assert source.rebuild() == text


@pytest.mark.parametrize("text", [" 1 ", "1 ", " 1", "  1  ", "\t\n1\n\t", "/* */1/* */"])
def test_root_with_spaces(text):
    source = parse(text)
    assert source.expression == IntegerPrimitive("1")
    assert source.rebuild() == text


def test_empty_buffer_has_no_trivia():
    source = parse("")
    assert source.leading is None
    assert source.trailing is None


def test_line_comment_leaves_newline_to_vertical_space():
    source = parse("# header\n1")
    assert source.leading.parts == (LineComment("# header"), VerticalSpace("\n"))
    assert source.leading.comments[0].body == " header"


def test_unterminated_block_comment_runs_to_end_of_input():
    source = parse("1 /* never closed")
    comment = source.trailing.comments[0]
    assert isinstance(comment, BlockComment)
    assert not comment.terminated
    assert comment.body == " never closed"
    assert source.rebuild() == "1 /* never closed"


def test_block_comment_ends_at_first_terminator():
    source = parse("/* a */ 1 /* b */")
    assert source.leading.comments == (BlockComment("/* a */"),)
    assert source.trailing.comments == (BlockComment("/* b */"),)


def test_doc_comment_flag():
    assert BlockComment("/** doc */").doc
    assert not BlockComment("/* plain */").doc
    assert not BlockComment("/**/").doc


def test_carriage_returns_are_vertical_space():
    source = parse("{\r\n  a = 1;\r\n}\r\n")
    assert source.trailing.parts == (VerticalSpace("\r\n"),)
    assert source.trailing.newline_count == 1
    assert source.rebuild() == "{\r\n  a = 1;\r\n}\r\n"


def test_empty_lines_are_detectable():
    """Ensure blank lines between bindings survive for a later formatter."""
    attribute_set = parse_expression("{\n  a = 1;\n\n  b = 2;\n}")
    first, second = attribute_set.bindings
    assert first.after_semicolon.has_empty_line
    assert first.after_semicolon.newline_count == 2
    assert not second.after_semicolon.has_empty_line


def test_comments_between_operator_and_operand():
    expression = parse_expression("a /* left */ + # right\n b")
    assert expression.before_operator.comments == (BlockComment("/* left */"),)
    assert expression.after_operator.comments == (LineComment("# right"),)
