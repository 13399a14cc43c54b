from dataclasses import fields
from enum import Enum

from nix_cst.expressions.expression import NixExpression
from nix_cst.expressions.trivia import Trivia


def _format_value(value, indent_level: int, include_trivia: bool) -> str:
    if isinstance(value, NixExpression):
        return dump(value, indent_level, include_trivia=include_trivia).lstrip()
    if isinstance(value, Enum):
        return f"{type(value).__name__}.{value.name}"
    if isinstance(value, tuple):
        items = [
            item
            for item in value
            if include_trivia or not isinstance(item, Trivia)
        ]
        if not items:
            return "[]"
        inner = "  " * (indent_level + 1)
        lines = ["["]
        lines.extend(
            f"{inner}{_format_value(item, indent_level + 1, include_trivia)},"
            for item in items
        )
        lines.append("  " * indent_level + "]")
        return "\n".join(lines)
    return repr(value)


def dump(node: NixExpression, indent_level: int = 0, *, include_trivia: bool = False) -> str:
    """Render a node and its fields as an indented, Python-like tree.

    Trivia slots are hidden unless `include_trivia` is set; a trivia unit is
    shown as the source text it covers.
    """
    indent = "  " * indent_level
    name = node.__class__.__name__
    if isinstance(node, Trivia):
        return f"{indent}{name}({node.rebuild()!r})"

    entries = []
    for item in fields(node):
        value = getattr(node, item.name)
        if value is None or (isinstance(value, Trivia) and not include_trivia):
            continue
        entries.append((item.name, value))

    if all(not isinstance(value, (NixExpression, tuple)) for _, value in entries):
        arguments = ", ".join(
            f"{key}={_format_value(value, indent_level, include_trivia)}"
            for key, value in entries
        )
        return f"{indent}{name}({arguments})"

    parts = [f"{indent}{name}("]
    for key, value in entries:
        formatted = _format_value(value, indent_level + 1, include_trivia)
        parts.append(f"{indent}  {key}={formatted},")
    parts.append(f"{indent})")
    return "\n".join(parts)


__all__ = ["dump"]
