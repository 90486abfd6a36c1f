"""Pipeline orchestrator: discover -> parse -> collect -> redirect -> close -> render."""

from __future__ import annotations

import logging
from typing import Callable

from type_reach.analysis import (
    DeclarationCollector,
    TypeGraph,
    compute_reachable,
    induced_edges,
    redirect_umbrella,
    render_dot,
    write_dot,
)
from type_reach.models import AnalysisConfig, AnalysisResult
from type_reach.scanner import ParseSession, find_source_files

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int], None]


def run_collect(config: AnalysisConfig, progress: ProgressCallback | None = None) -> TypeGraph:
    """Stages 1-2: discover source files and collect their definitions."""
    files = find_source_files(config.source_dir, config.extension, config.skip_dirs)
    logger.info("found %d %s file(s) under %s", len(files), config.extension, config.source_dir)

    collector = DeclarationCollector()
    with ParseSession.for_extension(config.extension) as session:
        for i, file_path in enumerate(files):
            if progress:
                progress("Parsing", i, len(files))
            tree = session.parse_file(file_path)
            collector.collect(tree, file_path)

    if progress:
        progress("Parsing", len(files), len(files))
    return collector.graph


def run_pipeline(
    config: AnalysisConfig,
    progress: ProgressCallback | None = None,
) -> AnalysisResult:
    """Run the full analysis and write the graph to ``config.output_path``."""
    # Stage 1-2: Parse and collect
    collected = run_collect(config, progress=progress)

    # Stage 3: Redirect the umbrella type onto the seeds
    graph = redirect_umbrella(
        collected.references, config.umbrella, config.seeds, config.suppressed,
    )

    # Stage 4: Close over the graph
    if progress:
        progress("Reachability", 0, 1)
    result = compute_reachable(graph, config.seeds)
    if progress:
        progress("Reachability", 1, 1)

    # Stage 5: Render and write
    text = render_dot(graph, result.reachable)
    write_dot(config.output_path, text)
    logger.info("wrote %s", config.output_path)

    return AnalysisResult(
        output_path=config.output_path,
        graph=graph,
        reachable=result.reachable,
        duplicates=list(collected.duplicates),
        files_scanned=len(collected.files),
        passes=len(result.passes),
        edge_count=len(induced_edges(graph, result.reachable)),
    )
