from __future__ import annotations

from nix_cst.diagnostics import ParseFailure


class NixSyntaxError(SyntaxError):
    """Raised by `parse_or_raise` when the buffer is not valid Nix."""

    def __init__(self, failure: ParseFailure, filename: str | None = None):
        super().__init__(
            failure.message,
            (filename, failure.line, failure.column, failure.source_line),
        )
        self.failure = failure


__all__ = ["NixSyntaxError"]
