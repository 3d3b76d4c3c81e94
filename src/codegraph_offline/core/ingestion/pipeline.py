"""Pipeline orchestrator for CodeGraph.

Phases executed by :func:`extract`:
    1. Structure (File nodes and the path index)
    2. Constructs (Class/Function nodes, Contains edges, Import edges)
    3. Summary

:func:`run_pipeline` adds file walking in front, for callers that start
from a directory rather than from in-memory files.  Every run rebuilds the
graph from scratch.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from codegraph_offline.config.ignore import load_gitignore
from codegraph_offline.core.graph.graph import AnalysisResult
from codegraph_offline.core.graph.model import NodeKind, SourceFile
from codegraph_offline.core.ingestion.structure import process_structure
from codegraph_offline.core.ingestion.symbols import process_symbols
from codegraph_offline.core.ingestion.walker import walk_repo

logger = logging.getLogger(__name__)

DEFAULT_DEPTH = 3

_DEPTH_LABELS = {1: "Files Only", 2: "Structure", 3: "Full Detail"}

@dataclass
class PipelineResult:
    """Summary of a pipeline run."""

    depth: int = DEFAULT_DEPTH
    files: int = 0
    classes: int = 0
    functions: int = 0
    imports: int = 0
    edges: int = 0
    duration_seconds: float = 0.0

def depth_label(depth: int) -> str:
    """Human-readable name of a depth level (``Files Only``, ``Structure``, ``Full Detail``)."""
    if depth <= 1:
        return _DEPTH_LABELS[1]
    return _DEPTH_LABELS.get(depth, _DEPTH_LABELS[3])

def build_summary(depth: int, result: AnalysisResult, file_count: int) -> str:
    """Return the fixed-shape text report for a run."""
    classes = result.count_nodes_by_kind(NodeKind.CLASS)
    functions = result.count_nodes_by_kind(NodeKind.FUNCTION)
    return (
        f"Offline analysis complete (Depth: {depth}).\n"
        f"Scanned {file_count} files.\n"
        f"Identified {classes} classes and {functions} functions."
    )

def extract(files: Sequence[SourceFile], depth: int = DEFAULT_DEPTH) -> AnalysisResult:
    """Build the structural graph for *files* at *depth*.

    ``1`` yields files and Import edges, ``2`` adds classes, ``3`` adds
    functions.  Depth is a threshold, so values outside 1-3 are accepted.
    Never raises for file content: lines that match no pattern are skipped.
    """
    result = AnalysisResult()
    file_index = process_structure(files, result)
    process_symbols(files, file_index, depth, result)
    result.summary = build_summary(depth, result, len(files))
    logger.debug("Extracted %s", result.stats())
    return result

async def analyze_codebase(files: Sequence[SourceFile], depth: int = DEFAULT_DEPTH) -> AnalysisResult:
    """Asynchronous entry point, for callers that already await file ingestion.

    The extraction itself is synchronous and runs to completion.
    """
    return extract(files, depth)

def run_pipeline(
    repo_path: Path,
    depth: int = DEFAULT_DEPTH,
    progress_callback: Callable[[str, float], None] | None = None,
) -> tuple[list[SourceFile], AnalysisResult, PipelineResult]:
    """Walk *repo_path* and extract its graph.

    Parameters
    ----------
    repo_path:
        Root directory to analyse.
    depth:
        Granularity passed to :func:`extract`.
    progress_callback:
        Optional ``(phase_name, progress)`` callback where *progress* is a
        float in ``[0.0, 1.0]``.

    Returns
    -------
    tuple[list[SourceFile], AnalysisResult, PipelineResult]
        The files read, the graph, and a summary dataclass with counts
        and timings.
    """
    start = time.monotonic()

    def report(phase: str, pct: float) -> None:
        if progress_callback is not None:
            progress_callback(phase, pct)

    report("Walking files", 0.0)
    gitignore = load_gitignore(repo_path)
    files = walk_repo(repo_path, gitignore)
    report("Walking files", 1.0)

    report("Extracting structure", 0.0)
    result = extract(files, depth)
    report("Extracting structure", 1.0)

    stats = result.stats()
    summary = PipelineResult(
        depth=depth,
        files=len(files),
        classes=stats["classes"],
        functions=stats["functions"],
        imports=stats["imports"],
        edges=stats["edges"],
        duration_seconds=time.monotonic() - start,
    )
    logger.info(
        "Analysed %d file(s) in %.2fs at depth %d", summary.files, summary.duration_seconds, depth
    )
    return files, result, summary
