from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, fields


@dataclass(frozen=True, slots=True)
class NixExpression:
    """Base class for all CST nodes."""

    def rebuild(self) -> str:
        """Reconstruct the exact source text covered by this node."""
        raise NotImplementedError

    def children(self) -> Iterator[NixExpression]:
        """Yield significant child nodes (trivia excluded) in document order."""
        from nix_cst.expressions.trivia import Trivia

        for item in fields(self):
            value = getattr(self, item.name)
            if isinstance(value, tuple):
                for element in value:
                    if isinstance(element, NixExpression) and not isinstance(
                        element, Trivia
                    ):
                        yield element
            elif isinstance(value, NixExpression) and not isinstance(value, Trivia):
                yield value

    def walk(self) -> Iterator[NixExpression]:
        """Pre-order traversal of this node and its significant descendants."""
        stack: list[NixExpression] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(list(node.children())))


def rebuild_optional(node: NixExpression | None) -> str:
    """Rebuild optional slots (mostly trivia anchors) as empty when unset."""
    return "" if node is None else node.rebuild()


__all__ = ["NixExpression", "rebuild_optional"]
