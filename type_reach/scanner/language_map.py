"""Shared extension-to-grammar mapping for the scanner and collector."""

from __future__ import annotations

# Maps file extension -> tree-sitter grammar name
EXT_TO_GRAMMAR: dict[str, str] = {
    ".rs": "rust",
}

# Grammar node types that produce graph entries
STRUCT_NODE_TYPES: set[str] = {"struct_item"}
ALIAS_NODE_TYPES: set[str] = {"type_item", "associated_type"}

# Bodies whose declarations are associated or foreign items, not module items
NON_ITEM_OWNERS: set[str] = {"impl_item", "trait_item", "foreign_mod_item"}
