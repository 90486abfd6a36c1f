"""Declaration collector — walks syntax trees and fills a TypeGraph."""

from __future__ import annotations

from pathlib import Path

from type_reach.analysis.graph_models import TypeGraph
from type_reach.extractor import definition_references
from type_reach.models import DefinitionKind, TypeDefinition
from type_reach.scanner.language_map import (
    ALIAS_NODE_TYPES,
    NON_ITEM_OWNERS,
    STRUCT_NODE_TYPES,
)


class DeclarationCollector:
    """Collect struct and alias definitions into an explicitly passed graph."""

    def __init__(self, graph: TypeGraph | None = None):
        self.graph = graph if graph is not None else TypeGraph()

    def collect(self, tree, file_path: Path) -> TypeGraph:
        self.graph.files.append(file_path)
        self._walk(tree.root_node, file_path)
        return self.graph

    def _walk(self, node, file_path: Path) -> None:
        kind = _definition_kind(node)
        if kind is not None:
            name_node = node.child_by_field_name("name")
            if name_node is not None and name_node.text:
                self.graph.add(TypeDefinition(
                    name=name_node.text.decode("utf-8"),
                    kind=kind,
                    file_path=file_path,
                    line_number=node.start_point[0] + 1,
                    references=definition_references(node),
                ))

        # Nested items (in modules, function bodies, ...) count too
        for child in node.children:
            self._walk(child, file_path)


def collect_trees(trees, graph: TypeGraph | None = None) -> TypeGraph:
    """Collect from an iterable of ``(file_path, tree)`` pairs."""
    collector = DeclarationCollector(graph)
    for file_path, tree in trees:
        collector.collect(tree, file_path)
    return collector.graph


def _definition_kind(node) -> DefinitionKind | None:
    if node.type in STRUCT_NODE_TYPES:
        return DefinitionKind.STRUCT
    if node.type in ALIAS_NODE_TYPES and not _is_non_item(node):
        return DefinitionKind.ALIAS
    return None


def _is_non_item(node) -> bool:
    """True for `type` declarations inside an impl, trait or extern block."""
    parent = node.parent
    if parent is None or parent.type != "declaration_list":
        return False
    owner = parent.parent
    return owner is not None and owner.type in NON_ITEM_OWNERS
