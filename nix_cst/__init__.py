"""
nix-cst

Lossless concrete syntax tree parser for the Nix expression language. Every
space, newline and comment is kept, so a parsed tree rebuilds its source
byte for byte.
"""

from nix_cst.config import ParserOptions
from nix_cst.diagnostics import FailureKind, ParseFailure
from nix_cst.exceptions import NixSyntaxError
from nix_cst.parser import parse, parse_file, parse_or_raise

__all__ = [
    "FailureKind",
    "NixSyntaxError",
    "ParseFailure",
    "ParserOptions",
    "parse",
    "parse_file",
    "parse_or_raise",
]
