"""Source discovery and parsing."""

from __future__ import annotations

from type_reach.scanner.base import find_source_files
from type_reach.scanner.treesitter_scanner import ParseError, ParseSession

__all__ = [
    "ParseError",
    "ParseSession",
    "find_source_files",
]
