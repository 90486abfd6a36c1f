"""Data models for the type reference graph."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from type_reach.models import DuplicateDefinition, TypeDefinition

logger = logging.getLogger(__name__)


@dataclass
class TypeGraph:
    """Accumulator filled by the collector.

    ``references`` is the graph proper: type name -> names it contains.
    """
    references: dict[str, set[str]] = field(default_factory=dict)  # name -> {names}
    definitions: dict[str, TypeDefinition] = field(default_factory=dict)
    duplicates: list[DuplicateDefinition] = field(default_factory=list)
    files: list[Path] = field(default_factory=list)

    def add(self, definition: TypeDefinition) -> DuplicateDefinition | None:
        """Record a definition; a later definition replaces an earlier one."""
        previous = self.references.get(definition.name)
        self.references[definition.name] = set(definition.references)
        self.definitions[definition.name] = definition

        if previous is None:
            return None

        duplicate = DuplicateDefinition(
            name=definition.name, previous=previous, definition=definition,
        )
        self.duplicates.append(duplicate)
        logger.warning(duplicate.message)
        return duplicate


@dataclass
class ReachabilityResult:
    reachable: frozenset[str]
    passes: list[set[str]] = field(default_factory=list)  # promotions per pass
