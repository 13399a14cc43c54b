"""Terminal rules: trivia, literals and the identifier/keyword classifier.

`Lexer` owns the cursor and the failure bookkeeping. It recognizes every
token of the language directly on the source string; `Grammar` builds the
composite forms on top of it.
"""

from __future__ import annotations

import re

from nix_cst.config import ParserOptions
from nix_cst.diagnostics import Diagnostics, FailureKind, rule
from nix_cst.expressions.identifier import Identifier
from nix_cst.expressions.path import NixPath, PathKind
from nix_cst.expressions.primitive import FloatPrimitive, IntegerPrimitive
from nix_cst.expressions.string import (IndentedEscape, IndentedString,
                                        Interpolation, QuotedString,
                                        StringEscape, StringText)
from nix_cst.expressions.trivia import (BlockComment, HorizontalSpace,
                                        LineComment, Trivia, TriviaPart,
                                        VerticalSpace)
from nix_cst.expressions.uri import Uri

KEYWORDS = frozenset(
    {"if", "then", "else", "assert", "with", "let", "in", "rec", "inherit", "or"}
)

IDENTIFIER_RE = re.compile(r"[a-zA-Z_][a-zA-Z0-9_'\-]*")
_IDENTIFIER_CHAR_RE = re.compile(r"[a-zA-Z0-9_'\-]")

_TRIVIA_PATTERNS: tuple[tuple[re.Pattern[str], type[TriviaPart]], ...] = (
    (re.compile(r"[ \t]+"), HorizontalSpace),
    (re.compile(r"[\r\n]+"), VerticalSpace),
    (re.compile(r"#[^\r\n]*"), LineComment),
    (re.compile(r"/\*.*?(?:\*/|\Z)", re.DOTALL), BlockComment),
)

FLOAT_RE = re.compile(r"([0-9]*)\.([0-9]+(?:[Ee][+-]?[0-9]+)?|[0-9]*[Ee][+-]?[0-9]+)")
INTEGER_RE = re.compile(r"[0-9]+")

URI_RE = re.compile(r"([a-zA-Z][a-zA-Z0-9+\-.]*):([a-zA-Z0-9%/?:@&=+$,\-_.!~*']+)")

_PATH_LETTER = r"[a-zA-Z0-9._\-+]"
PLAIN_PATH_RE = re.compile(rf"({_PATH_LETTER}*)((?:/{_PATH_LETTER}+)+)(/?)")
HOME_PATH_RE = re.compile(rf"~((?:/{_PATH_LETTER}+)+)(/?)")
SEARCH_PATH_RE = re.compile(rf"<({_PATH_LETTER}+(?:/{_PATH_LETTER}+)*)>")

# `$$` never opens an interpolation, so `$${` stays literal text.
_STRING_TEXT_RE = re.compile(r'(?:[^"\\$]|\$\$|\$(?!\{))+')
_INDENTED_TEXT_RE = re.compile(r"(?:[^'$]|'(?!')|\$\$|\$(?!\{))+")
_INDENTED_ESCAPE_RE = re.compile(r"'''|''\$|''\\.", re.DOTALL)


class Lexer:
    """Cursor over one source buffer.

    Rules return a node on success or None on failure; a failed rule leaves
    the cursor where it found it and records what it expected.
    """

    def __init__(self, text: str, options: ParserOptions | None = None):
        self.text = text
        self.pos = 0
        self.options = options or ParserOptions()
        self.diagnostics = Diagnostics()
        self.depth = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self, token: str) -> bool:
        return self.text.startswith(token, self.pos)

    def _match(
        self,
        pattern: re.Pattern[str],
        description: str,
        kind: FailureKind = FailureKind.LEXICAL,
    ) -> re.Match[str] | None:
        match = pattern.match(self.text, self.pos)
        if match is None:
            self.diagnostics.expect(self.pos, description, kind)
            return None
        self.pos = match.end()
        return match

    def literal(
        self,
        token: str,
        *,
        kind: FailureKind = FailureKind.STRUCTURAL,
        record: bool = True,
    ) -> bool:
        """Consume `token` if the buffer continues with it."""
        if self.text.startswith(token, self.pos):
            self.pos += len(token)
            return True
        if record:
            self.diagnostics.expect(self.pos, repr(token), kind)
        return False

    def keyword(self, word: str, *, record: bool = True) -> bool:
        """Consume a reserved word not glued to further identifier characters."""
        end = self.pos + len(word)
        if self.text.startswith(word, self.pos) and not _IDENTIFIER_CHAR_RE.match(
            self.text, end
        ):
            self.pos = end
            return True
        if record:
            self.diagnostics.expect(self.pos, repr(word))
        return False

    def descend(self) -> bool:
        """Enter one nesting level, unless the limit is reached or the parse is over."""
        if self.diagnostics.fatal is not None:
            return False
        if self.depth >= self.options.max_depth:
            self.diagnostics.abort(
                self.pos,
                f"at most {self.options.max_depth} nested expressions",
                FailureKind.DEPTH,
            )
            return False
        self.depth += 1
        return True

    def expression(self):
        raise NotImplementedError

    # Trivia

    def trivia(self) -> Trivia | None:
        parts: list[TriviaPart] = []
        while True:
            for pattern, part_type in _TRIVIA_PATTERNS:
                match = pattern.match(self.text, self.pos)
                if match is not None:
                    parts.append(part_type(match.group()))
                    self.pos = match.end()
                    break
            else:
                break
        if not parts:
            return None
        return Trivia(tuple(parts))

    def optional_trivia(self) -> Trivia | None:
        """Capture the trivia at an anchor point, if there is any."""
        if self.pos >= len(self.text) or self.text[self.pos] not in " \t\r\n#/":
            return None
        return self.trivia()

    # Identifiers

    @rule("identifier")
    def identifier(self) -> Identifier | None:
        start = self.pos
        match = self._match(IDENTIFIER_RE, "identifier")
        if match is None:
            return None
        if match.group() in KEYWORDS:
            self.diagnostics.expect(start, "identifier", FailureKind.AMBIGUITY)
            return None
        return Identifier(match.group())

    # Numbers

    @rule("number")
    def number(self) -> FloatPrimitive | IntegerPrimitive | None:
        match = FLOAT_RE.match(self.text, self.pos)
        if match is not None:
            self.pos = match.end()
            return FloatPrimitive(match.group(1), match.group(2))
        match = self._match(INTEGER_RE, "number")
        if match is None:
            return None
        return IntegerPrimitive(match.group())

    # URIs and paths

    @rule("uri")
    def uri(self) -> Uri | None:
        match = self._match(URI_RE, "uri")
        if match is None:
            return None
        return Uri(match.group(1), match.group(2))

    @rule("path")
    def path(self) -> NixPath | None:
        match = SEARCH_PATH_RE.match(self.text, self.pos)
        if match is not None:
            self.pos = match.end()
            return NixPath(PathKind.SEARCH, tuple(match.group(1).split("/")))
        match = HOME_PATH_RE.match(self.text, self.pos)
        if match is not None:
            self.pos = match.end()
            return NixPath(
                PathKind.HOME,
                tuple(match.group(1).split("/")[1:]),
                trailing_slash=bool(match.group(2)),
            )
        match = self._match(PLAIN_PATH_RE, "path")
        if match is None:
            return None
        return NixPath(
            PathKind.PLAIN,
            tuple(match.group(2).split("/")[1:]),
            trailing_slash=bool(match.group(3)),
            prefix=match.group(1),
        )

    def at_path(self) -> bool:
        """Tell whether a path literal starts here, without consuming it."""
        if self.peek("<"):
            return SEARCH_PATH_RE.match(self.text, self.pos) is not None
        if self.peek("/"):
            return PLAIN_PATH_RE.match(self.text, self.pos) is not None
        return False

    # Strings

    @rule("interpolation")
    def interpolation(self) -> Interpolation | None:
        if not self.literal("${"):
            return None
        after_open = self.optional_trivia()
        expression = self.expression()
        if expression is None:
            return None
        before_close = self.optional_trivia()
        if not self.literal("}"):
            return None
        return Interpolation(expression, after_open, before_close)

    @rule("string")
    def quoted_string(self) -> QuotedString | None:
        if not self.literal('"'):
            return None
        parts = []
        while not self.literal('"', kind=FailureKind.LEXICAL):
            if self.at_end():
                return None
            if self.peek("\\"):
                if self.pos + 1 >= len(self.text):
                    self.diagnostics.expect(
                        self.pos + 1, "escaped character", FailureKind.LEXICAL
                    )
                    return None
                parts.append(StringEscape(self.text[self.pos + 1]))
                self.pos += 2
            elif self.peek("${"):
                interpolation = self.interpolation()
                if interpolation is None:
                    return None
                parts.append(interpolation)
            else:
                match = _STRING_TEXT_RE.match(self.text, self.pos)
                parts.append(StringText(match.group()))
                self.pos = match.end()
        return QuotedString(tuple(parts))

    @rule("indented string")
    def indented_string(self) -> IndentedString | None:
        if not self.literal("''"):
            return None
        parts = []
        while True:
            match = _INDENTED_ESCAPE_RE.match(self.text, self.pos)
            if match is not None:
                parts.append(IndentedEscape(match.group()))
                self.pos = match.end()
            elif self.literal("''", kind=FailureKind.LEXICAL):
                break
            elif self.at_end():
                return None
            elif self.peek("${"):
                interpolation = self.interpolation()
                if interpolation is None:
                    return None
                parts.append(interpolation)
            else:
                match = _INDENTED_TEXT_RE.match(self.text, self.pos)
                parts.append(StringText(match.group()))
                self.pos = match.end()
        return IndentedString(tuple(parts))


__all__ = ["KEYWORDS", "Lexer"]
