"""Graphviz rendering of the reachable subgraph."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

from type_reach.analysis.reachability import induced_edges


def render_dot(graph: Mapping[str, set[str]], reachable) -> str:
    """Render the induced subgraph as a ``digraph G`` document."""
    lines = ["digraph G {\n"]
    for source, target in induced_edges(graph, reachable):
        lines.append(f'  "{source}" -> "{target}";\n')
    lines.append("}")
    return "".join(lines)


def write_dot(output_path: Path, text: str) -> Path:
    output_path.write_text(text, encoding="utf-8")
    return output_path
