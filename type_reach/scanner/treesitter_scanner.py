"""Tree-sitter parse session for Rust sources."""

from __future__ import annotations

import logging
from pathlib import Path

from type_reach.scanner.language_map import EXT_TO_GRAMMAR

try:
    from tree_sitter_language_pack import get_parser
except ImportError as _err:
    raise ImportError(
        "tree-sitter-language-pack is required. Install with: "
        "pip install tree-sitter-language-pack"
    ) from _err

logger = logging.getLogger(__name__)


class ParseError(ValueError):
    """A source file could not be parsed into a clean syntax tree."""

    def __init__(self, file_path: Path | str, line: int, column: int):
        self.file_path = Path(file_path)
        self.line = line
        self.column = column
        super().__init__(f"{file_path}:{line}:{column}: syntax error")


class ParseSession:
    """Owns one parser for the duration of a collection pass.

    Use as a context manager; the parser is released on exit::

        with ParseSession() as session:
            tree = session.parse_file(path)
    """

    def __init__(self, grammar_name: str = "rust"):
        self.grammar_name = grammar_name
        self._parser = None

    def __enter__(self) -> ParseSession:
        self._parser = get_parser(self.grammar_name)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._parser = None

    @classmethod
    def for_extension(cls, extension: str) -> ParseSession:
        if extension not in EXT_TO_GRAMMAR:
            raise ValueError(f"No grammar for extension: {extension}")
        return cls(EXT_TO_GRAMMAR[extension])

    def parse_file(self, file_path: Path):
        return self.parse_bytes(file_path.read_bytes(), file_path)

    def parse_bytes(self, source_bytes: bytes, file_path: Path | str = "<memory>"):
        if self._parser is None:
            raise RuntimeError("ParseSession is not open")

        tree = self._parser.parse(source_bytes)
        if tree.root_node.has_error:
            row, col = _first_error_point(tree.root_node)
            raise ParseError(file_path, row + 1, col + 1)

        logger.debug("parsed %s (%d bytes)", file_path, len(source_bytes))
        return tree


def _first_error_point(node) -> tuple[int, int]:
    """Locate the first ERROR or missing node below *node*."""
    if node.type == "ERROR" or node.is_missing:
        return node.start_point[0], node.start_point[1]
    for child in node.children:
        if child.has_error or child.is_missing:
            return _first_error_point(child)
    return node.start_point[0], node.start_point[1]
