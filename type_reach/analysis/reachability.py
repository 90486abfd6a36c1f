"""Reachability engine — which types transitively contain a seed type.

Propagation runs against the edge direction: a type becomes reachable once
any name it references is reachable. The closure is computed by repeated
passes over a shrinking ``remaining`` map until a pass promotes nothing.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from type_reach.analysis.graph_models import ReachabilityResult

logger = logging.getLogger(__name__)


def redirect_umbrella(
    graph: Mapping[str, set[str]],
    umbrella: str | None,
    seeds: Iterable[str],
    suppressed: Iterable[str] = (),
) -> dict[str, set[str]]:
    """Return a copy of *graph* with the umbrella pointed straight at the seeds.

    Suppressed names are dropped first, then ``umbrella -> seeds`` replaces
    whatever the umbrella's natural definition was.
    """
    redirected = {name: set(refs) for name, refs in graph.items()}
    for name in suppressed:
        redirected.pop(name, None)
    if umbrella is not None:
        redirected[umbrella] = set(seeds)
    return redirected


def expand_once(remaining: Mapping[str, set[str]], reachable: set[str] | frozenset[str]) -> set[str]:
    """Names in *remaining* that reference something already reachable."""
    return {
        name for name, refs in remaining.items()
        if not refs.isdisjoint(reachable)
    }


def compute_reachable(graph: Mapping[str, set[str]], seeds: Iterable[str]) -> ReachabilityResult:
    """Fixed-point closure of *seeds* under "references something reachable"."""
    reachable = set(seeds)
    remaining = dict(graph)
    passes: list[set[str]] = []

    while True:
        added = expand_once(remaining, reachable)
        if not added:
            break
        for name in added:
            del remaining[name]
        reachable |= added
        passes.append(added)
        logger.debug("pass %d: promoted %d type(s)", len(passes), len(added))

    return ReachabilityResult(reachable=frozenset(reachable), passes=passes)


def induced_edges(graph: Mapping[str, set[str]], reachable: set[str] | frozenset[str]) -> list[tuple[str, str]]:
    """Edges whose source and target are both reachable, sorted."""
    edges: list[tuple[str, str]] = []
    for source in reachable:
        refs = graph.get(source)
        if not refs:
            continue
        for target in refs & reachable:
            edges.append((source, target))
    edges.sort()
    return edges
