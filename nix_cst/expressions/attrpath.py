from __future__ import annotations

from dataclasses import dataclass

from nix_cst.expressions.expression import NixExpression, rebuild_optional
from nix_cst.expressions.trivia import Trivia


@dataclass(frozen=True, slots=True)
class AttrStep(NixExpression):
    """`.name` continuation of a dotted attribute path."""

    name: NixExpression
    before_dot: Trivia | None = None
    after_dot: Trivia | None = None

    def rebuild(self) -> str:
        return (
            rebuild_optional(self.before_dot)
            + "."
            + rebuild_optional(self.after_dot)
            + self.name.rebuild()
        )


@dataclass(frozen=True, slots=True)
class AttrPath(NixExpression):
    """Dotted attribute path such as `a.b."c".${d}`.

    Only built for two or more segments; a single segment is used bare.
    Segments are identifiers, quoted strings or interpolations.
    """

    first: NixExpression
    steps: tuple[AttrStep, ...]

    @property
    def names(self) -> tuple[NixExpression, ...]:
        return (self.first, *(step.name for step in self.steps))

    def rebuild(self) -> str:
        return self.first.rebuild() + "".join(step.rebuild() for step in self.steps)


__all__ = ["AttrPath", "AttrStep"]
