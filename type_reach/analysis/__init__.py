"""Graph construction, reachability and rendering."""

from __future__ import annotations

from type_reach.analysis.collector import DeclarationCollector, collect_trees
from type_reach.analysis.graph_models import ReachabilityResult, TypeGraph
from type_reach.analysis.reachability import (
    compute_reachable,
    expand_once,
    induced_edges,
    redirect_umbrella,
)
from type_reach.analysis.render import render_dot, write_dot

__all__ = [
    "DeclarationCollector",
    "ReachabilityResult",
    "TypeGraph",
    "collect_trees",
    "compute_reachable",
    "expand_once",
    "induced_edges",
    "redirect_umbrella",
    "render_dot",
    "write_dot",
]
