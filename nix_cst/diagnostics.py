"""Furthest-failure tracking and the cause tree reported on parse errors.

Every failed attempt records what it expected at the current position. Only
the furthest position survives, and each record remembers the stack of
grammar rules active at that moment, so the failure can be rendered as the
depth-first trace that led there.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass, field
from enum import Enum

_FOUND_RE = re.compile(r"\w+|\S")


class FailureKind(Enum):
    LEXICAL = "lexical"
    STRUCTURAL = "structural"
    AMBIGUITY = "ambiguity"
    DEPTH = "depth"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]


_SEVERITY = {
    FailureKind.LEXICAL: 0,
    FailureKind.STRUCTURAL: 1,
    FailureKind.AMBIGUITY: 2,
    FailureKind.DEPTH: 3,
}


@dataclass(frozen=True, slots=True)
class Frame:
    rule: str
    position: int


@dataclass(frozen=True, slots=True)
class Expectation:
    description: str
    kind: FailureKind
    frames: tuple[Frame, ...]


@dataclass(frozen=True, slots=True)
class Cause:
    """One node of the failure trace: a rule attempted at a position."""

    rule: str
    position: int
    line: int
    column: int
    expected: tuple[str, ...] = ()
    children: tuple[Cause, ...] = ()

    def render(self, indent: int = 0) -> list[str]:
        padding = "  " * indent
        lines = [f"{padding}{self.rule} at {self.line}:{self.column}"]
        lines.extend(f"{padding}  expected {item}" for item in self.expected)
        for child in self.children:
            lines.extend(child.render(indent + 1))
        return lines


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """Structured description of why a buffer could not be parsed."""

    position: int
    line: int
    column: int
    expected: tuple[str, ...]
    found: str
    kind: FailureKind
    cause: Cause
    source_line: str = ""

    @property
    def message(self) -> str:
        return (
            f"expected {join_expected(self.expected)}, found {self.found} "
            f"at line {self.line}, column {self.column}"
        )

    def excerpt(self) -> str:
        """Offending source line with a caret under the failure column."""
        gutter = f"{self.line} | "
        marker = " " * (len(gutter) - 2) + "| " + " " * (self.column - 1) + "^"
        return f"{gutter}{self.source_line}\n{marker}"

    def render(self, *, with_cause: bool = True) -> str:
        lines = [f"{self.kind.value} error: {self.message}", self.excerpt()]
        if with_cause:
            lines.append("cause:")
            lines.extend(self.cause.render(indent=1))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.message


def location(text: str, position: int) -> tuple[int, int]:
    """1-based line and column of a character offset."""
    line = text.count("\n", 0, position) + 1
    column = position - (text.rfind("\n", 0, position) + 1) + 1
    return line, column


def describe_found(text: str, position: int) -> str:
    if position >= len(text):
        return "end of input"
    match = _FOUND_RE.match(text, position)
    if match is None:
        return repr(text[position])
    return repr(match.group())


def join_expected(expected: tuple[str, ...]) -> str:
    if not expected:
        return "nothing"
    if len(expected) == 1:
        return expected[0]
    return ", ".join(expected[:-1]) + f" or {expected[-1]}"


@dataclass
class _CauseBuilder:
    rule: str
    position: int
    expected: dict[str, None] = field(default_factory=dict)
    children: dict[Frame, _CauseBuilder] = field(default_factory=dict)

    def child(self, frame: Frame) -> _CauseBuilder:
        if frame not in self.children:
            self.children[frame] = _CauseBuilder(frame.rule, frame.position)
        return self.children[frame]

    def freeze(self, text: str) -> Cause:
        line, column = location(text, self.position)
        return Cause(
            rule=self.rule,
            position=self.position,
            line=line,
            column=column,
            expected=tuple(self.expected),
            children=tuple(child.freeze(text) for child in self.children.values()),
        )


class Diagnostics:
    """Per-parse failure bookkeeping, shared by every grammar rule."""

    def __init__(self) -> None:
        self.frames: list[Frame] = []
        self.furthest = -1
        self.expectations: list[Expectation] = []
        self.fatal: tuple[int, Expectation] | None = None

    def expect(
        self,
        position: int,
        description: str,
        kind: FailureKind = FailureKind.STRUCTURAL,
    ) -> None:
        """Record that `description` was expected at `position`."""
        if position < self.furthest:
            return
        if position > self.furthest:
            self.furthest = position
            self.expectations = []
        self.expectations.append(Expectation(description, kind, tuple(self.frames)))

    def abort(self, position: int, description: str, kind: FailureKind) -> None:
        """Record a failure that ends the parse, whatever else was expected.

        Only the first abort is kept; grammar rules check `fatal` and stop
        trying alternatives once it is set.
        """
        if self.fatal is None:
            self.fatal = (
                position,
                Expectation(description, kind, tuple(self.frames)),
            )

    def checkpoint(self) -> tuple[int, int]:
        return self.furthest, len(self.expectations)

    def collapse(
        self,
        checkpoint: tuple[int, int],
        position: int,
        description: str,
    ) -> None:
        """Replace what was expected at `position` since `checkpoint` by one summary.

        A failed term tries a dozen alternatives at the same offset; reporting
        all of them buries the useful part of the message. The summary is
        always structural: a reserved word met where a term was expected (`in`
        after a missing `;`) is not an ambiguity.
        """
        furthest, count = checkpoint
        if self.furthest != position:
            self.expect(position, description)
            return
        start = count if furthest == position else 0
        del self.expectations[start:]
        self.expect(position, description)

    def failure(self, text: str) -> ParseFailure:
        if self.fatal is not None:
            position, expectation = self.fatal
            self.furthest = position
            self.expectations = [expectation]
        position = max(self.furthest, 0)
        line, column = location(text, position)
        expected = tuple(
            sorted({expectation.description for expectation in self.expectations})
        )
        kind = max(
            (expectation.kind for expectation in self.expectations),
            key=lambda item: item.severity,
            default=FailureKind.STRUCTURAL,
        )
        line_start = text.rfind("\n", 0, position) + 1
        line_end = text.find("\n", position)
        source_line = text[line_start : line_end if line_end != -1 else len(text)]
        return ParseFailure(
            position=position,
            line=line,
            column=column,
            expected=expected,
            found=describe_found(text, position),
            kind=kind,
            cause=self._cause(text),
            source_line=source_line,
        )

    def _cause(self, text: str) -> Cause:
        root = _CauseBuilder("input", 0)
        for expectation in self.expectations:
            node = root
            previous: Frame | None = None
            for frame in expectation.frames:
                # Precedence climbing re-enters rules at the same position.
                if frame == previous:
                    continue
                node = node.child(frame)
                previous = frame
            node.expected[expectation.description] = None
        return root.freeze(text)


def rule(name: str):
    """Register a grammar method under `name` in the failure trace.

    The decorated method returns a node or None. On None the cursor is put
    back where the rule started, so alternatives can be tried in order.
    """

    def decorator(method):
        @functools.wraps(method)
        def wrapper(self, *args, **kwargs):
            start = self.pos
            frames = self.diagnostics.frames
            frames.append(Frame(name, start))
            try:
                result = method(self, *args, **kwargs)
            finally:
                frames.pop()
            if result is None:
                self.pos = start
            return result

        return wrapper

    return decorator


__all__ = [
    "Cause",
    "Diagnostics",
    "Expectation",
    "FailureKind",
    "Frame",
    "ParseFailure",
    "describe_found",
    "join_expected",
    "location",
    "rule",
]
