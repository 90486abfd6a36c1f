"""Type reference extraction."""

from __future__ import annotations

from type_reach.extractor.type_refs import (
    alias_references,
    classify,
    definition_references,
    struct_references,
    type_names,
)

__all__ = [
    "alias_references",
    "classify",
    "definition_references",
    "struct_references",
    "type_names",
]
