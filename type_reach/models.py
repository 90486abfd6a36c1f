"""Data models for the type-reach pipeline."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path


class TypeShape(enum.Enum):
    """Structural kinds a type expression can take."""
    SEQUENCE = "sequence"  # array, slice
    TUPLE = "tuple"  # also parenthesised grouping
    INDIRECTION = "indirection"  # raw pointer, reference
    FUNCTION_POINTER = "function_pointer"
    PATH = "path"
    OPAQUE = "opaque"


class DefinitionKind(enum.Enum):
    STRUCT = "struct"
    ALIAS = "alias"


@dataclass
class TypeDefinition:
    """A named struct or alias found by the collector."""
    name: str
    kind: DefinitionKind
    file_path: Path
    line_number: int
    references: set[str] = field(default_factory=set)


@dataclass
class DuplicateDefinition:
    """A name defined more than once; the later definition won."""
    name: str
    previous: set[str]
    definition: TypeDefinition

    @property
    def message(self) -> str:
        return f"[DUP] {self.name}: {sorted(self.previous)}"


@dataclass
class AnalysisConfig:
    """Configuration for the analysis pipeline."""
    source_dir: Path = field(default_factory=lambda: Path("."))
    output_path: Path = field(default_factory=lambda: Path("graph.dot"))
    seeds: list[str] = field(default_factory=lambda: ["UnsafeCell"])
    umbrella: str | None = "Cell"
    suppressed: list[str] = field(default_factory=lambda: ["Id"])
    extension: str = ".rs"
    skip_dirs: list[str] = field(default_factory=lambda: [
        ".git", "target",
    ])


@dataclass
class AnalysisResult:
    """Result of a full pipeline run."""
    output_path: Path
    graph: dict[str, set[str]]
    reachable: frozenset[str]
    duplicates: list[DuplicateDefinition] = field(default_factory=list)
    files_scanned: int = 0
    passes: int = 0
    edge_count: int = 0
