from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from nix_cst.expressions.expression import NixExpression


class PathKind(Enum):
    PLAIN = "plain"
    HOME = "home"
    SEARCH = "search"


@dataclass(frozen=True, slots=True)
class NixPath(NixExpression):
    """Path literal in one of its three lexical forms.

    For plain paths `prefix` is the run before the first separator (`.` in
    `./foo`, empty in `/foo`). Search paths store the name inside the angle
    brackets as their first segment.
    """

    kind: PathKind
    segments: tuple[str, ...]
    trailing_slash: bool = False
    prefix: str = ""

    @property
    def path(self) -> str:
        return self.rebuild()

    def rebuild(self) -> str:
        if self.kind is PathKind.SEARCH:
            return "<" + "/".join(self.segments) + ">"
        head = "~" if self.kind is PathKind.HOME else self.prefix
        tail = "/" if self.trailing_slash else ""
        return head + "".join(f"/{segment}" for segment in self.segments) + tail


__all__ = ["NixPath", "PathKind"]
