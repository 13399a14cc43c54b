"""CLI package for the nix-cst entrypoints."""

from nix_cst.cli.main import main
from nix_cst.cli.parser import build_parser, with_file_argument

__all__ = ["build_parser", "main", "with_file_argument"]
