import pytest

from nix_cst import (FailureKind, NixSyntaxError, ParseFailure, ParserOptions,
                     parse, parse_file, parse_or_raise)
from nix_cst.diagnostics import join_expected, location


def test_missing_semicolon():
    failure = parse("{ a = 1 }")
    assert isinstance(failure, ParseFailure)
    assert failure.position == 8
    assert (failure.line, failure.column) == (1, 9)
    assert "';'" in failure.expected
    assert failure.found == "'}'"
    assert failure.kind is FailureKind.STRUCTURAL
    assert failure.message.startswith("expected ")
    assert failure.message.endswith("found '}' at line 1, column 9")
    assert str(failure) == failure.message


def test_failure_on_later_line():
    failure = parse("{\n  a = 1;\n  b = ;\n}")
    assert (failure.line, failure.column) == (3, 7)
    assert "expression" in failure.expected
    assert failure.source_line == "  b = ;"


def test_unterminated_string_is_lexical():
    failure = parse('"abc')
    assert failure.kind is FailureKind.LEXICAL
    assert failure.expected == ("'\"'",)
    assert failure.found == "end of input"
    assert (failure.line, failure.column) == (1, 5)


def test_unterminated_escape_is_lexical():
    failure = parse('"abc\\')
    assert failure.kind is FailureKind.LEXICAL
    assert failure.expected == ("escaped character",)


def test_excerpt_points_at_column():
    failure = parse("{ a = 1 }")
    source_line, marker = failure.excerpt().splitlines()
    assert source_line == "1 | { a = 1 }"
    assert marker.index("^") == len("1 | ") + 8


def test_render_includes_cause_tree():
    failure = parse("{ a = 1 }")
    rendered = failure.render()
    assert rendered.startswith("structural error: expected")
    assert "cause:" in rendered
    assert "  source at 1:1" in rendered
    assert "cause:" not in failure.render(with_cause=False)

    assert failure.cause.rule == "input"
    (source,) = failure.cause.children
    assert source.rule == "source"


def test_cause_tree_leads_to_expectation():
    failure = parse("{ a = 1 }")

    def binding_causes(cause):
        if cause.rule == "binding":
            yield cause
        for child in cause.children:
            yield from binding_causes(child)

    (binding,) = binding_causes(failure.cause)
    assert "';'" in binding.expected
    assert [child.rule for child in binding.children] == ["expression"]


def test_depth_limit():
    depth = 200
    failure = parse("(" * depth + "1" + ")" * depth)
    assert isinstance(failure, ParseFailure)
    assert failure.kind is FailureKind.DEPTH
    assert failure.expected == ("at most 32 nested expressions",)


def test_depth_limit_is_configurable():
    text = "[" * 10 + "]" * 10
    assert not isinstance(parse(text), ParseFailure)
    failure = parse(text, ParserOptions(max_depth=5))
    assert failure.kind is FailureKind.DEPTH


def test_interpreter_recursion_is_reported():
    depth = 5000
    text = "(" * depth + "1" + ")" * depth
    failure = parse(text, ParserOptions(max_depth=10 * depth))
    assert isinstance(failure, ParseFailure)
    assert failure.kind is FailureKind.DEPTH


def test_invalid_options():
    with pytest.raises(ValueError):
        ParserOptions(max_depth=0)


def test_parse_or_raise(tmp_path):
    with pytest.raises(NixSyntaxError) as excinfo:
        parse_or_raise("{ a = 1 }")
    error = excinfo.value
    assert isinstance(error, SyntaxError)
    assert error.failure.position == 8
    assert (error.lineno, error.offset) == (1, 9)
    assert error.filename is None

    nix_file = tmp_path / "broken.nix"
    nix_file.write_text("[ 1 2", encoding="utf-8")
    with pytest.raises(NixSyntaxError) as excinfo:
        parse_or_raise(nix_file)
    assert excinfo.value.filename == str(nix_file)


def test_location():
    text = "a\nbc\n"
    assert location(text, 0) == (1, 1)
    assert location(text, 2) == (2, 1)
    assert location(text, 3) == (2, 2)
    assert location(text, 5) == (3, 1)


def test_join_expected():
    assert join_expected(()) == "nothing"
    assert join_expected(("';'",)) == "';'"
    assert join_expected(("';'", "'}'", "expression")) == "';', '}' or expression"


def test_nested_sets_hit_the_depth_limit():
    """Ensure the configured limit is reached before the interpreter's own."""
    depth = 63
    failure = parse("{ a = " * depth + "1" + "; }" * depth)
    assert failure.kind is FailureKind.DEPTH
    assert failure.expected == ("at most 32 nested expressions",)


def test_invalid_utf8_bytes():
    failure = parse(b'"\xff"')
    assert isinstance(failure, ParseFailure)
    assert failure.kind is FailureKind.LEXICAL
    assert failure.position == 1
    assert (failure.line, failure.column) == (1, 2)
    assert failure.expected == ("UTF-8 text",)


def test_invalid_utf8_position_counts_characters():
    failure = parse('"é'.encode("utf-8") + b'\xff"')
    assert failure.position == 2
    assert failure.source_line == '"é\ufffd"'


def test_invalid_utf8_file(tmp_path):
    nix_file = tmp_path / "latin1.nix"
    nix_file.write_bytes(b"{ a = \"caf\xe9\"; }")
    failure = parse_file(nix_file)
    assert failure.kind is FailureKind.LEXICAL
    assert failure.column == 11


def test_crlf_file_is_kept(tmp_path):
    nix_file = tmp_path / "crlf.nix"
    nix_file.write_bytes(b"{\r\n  a = 1;\r\n}\r\n")
    assert parse_file(nix_file).rebuild() == "{\r\n  a = 1;\r\n}\r\n"


def test_reserved_word_in_term_position_is_structural():
    """Ensure a missing `;` before `in` is not reported as an ambiguity."""
    failure = parse("let a = 1 in a")
    assert failure.kind is FailureKind.STRUCTURAL
    assert "';'" in failure.expected
    assert failure.render().startswith("structural error:")
