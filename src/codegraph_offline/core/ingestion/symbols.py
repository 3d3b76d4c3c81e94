"""Construct pass: classes, functions and imports, line by line.

Each file is scanned once with the pattern table of its language family.
The only state carried between lines is the enclosing-class cursor, which
is threaded through :func:`_scan_line` as an accumulator and starts out
empty for every file.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from codegraph_offline.core.graph.graph import AnalysisResult
from codegraph_offline.core.graph.model import (
    EdgeKind,
    GraphEdge,
    GraphNode,
    NodeKind,
    SourceFile,
    generate_id,
)
from codegraph_offline.core.ingestion.imports import add_import_edges, resolve_import
from codegraph_offline.core.ingestion.scope import estimate_end, indentation_of
from codegraph_offline.core.parsers import FamilyRules, rules_for

logger = logging.getLogger(__name__)

# Depth thresholds; any integer depth is accepted.
CLASS_DEPTH = 2
FUNCTION_DEPTH = 3

@dataclass(frozen=True)
class _FileScan:
    """Per-file inputs that stay fixed for the whole line walk."""

    source: SourceFile
    lines: list[str]
    file_id: str
    rules: FamilyRules
    file_index: dict[str, str]
    depth: int
    result: AnalysisResult

def process_symbols(
    files: Sequence[SourceFile],
    file_index: dict[str, str],
    depth: int,
    result: AnalysisResult,
) -> None:
    """Add Class/Function nodes, Contains edges and Import edges for *files*.

    Files with no language family contribute nothing here; their File node
    was already emitted by the structure pass.
    """
    for source in files:
        rules = rules_for(source.path)
        if rules is None:
            continue

        scan = _FileScan(
            source=source,
            lines=source.lines,
            file_id=file_index[source.path],
            rules=rules,
            file_index=file_index,
            depth=depth,
            result=result,
        )
        before = len(result.nodes)
        _scan_file(scan)
        logger.debug(
            "Scanned %s (%s): %d construct(s)",
            source.path,
            rules.name,
            len(result.nodes) - before,
        )

def _scan_file(scan: _FileScan) -> None:
    current_class: GraphNode | None = None
    for index, line in enumerate(scan.lines):
        if not line.strip():
            continue
        current_class = _scan_line(scan, index, line, current_class)

def _scan_line(
    scan: _FileScan,
    index: int,
    line: str,
    current_class: GraphNode | None,
) -> GraphNode | None:
    """Process one non-blank line and return the enclosing-class cursor for the next."""
    rules = scan.rules

    if scan.depth >= CLASS_DEPTH:
        name = rules.match_class(line)
        if name is not None:
            node = _add_construct(
                scan, NodeKind.CLASS, name, index, f"{rules.class_detail} in {scan.source.name}"
            )
            _contains(scan.result, scan.file_id, node.id)
            if rules.tracks_enclosing_class:
                current_class = node
            if rules.class_consumes_line:
                return current_class

    if scan.depth >= FUNCTION_DEPTH:
        name = rules.match_function(line)
        if name is not None:
            node = _add_construct(
                scan, NodeKind.FUNCTION, name, index, f"Function definition in {scan.source.name}"
            )
            parent_id = scan.file_id
            if rules.tracks_enclosing_class:
                if indentation_of(line) > 0 and current_class is not None:
                    parent_id = current_class.id
                else:
                    # A top-level def closes the class scope.
                    current_class = None
            _contains(scan.result, parent_id, node.id)

    # Imports are resolved at every depth.
    token = rules.match_import(line)
    if token is not None:
        targets = resolve_import(token, scan.source.path, scan.file_index, rules.import_match)
        add_import_edges(scan.result, scan.file_id, targets)

    return current_class

def _add_construct(
    scan: _FileScan,
    kind: NodeKind,
    name: str,
    index: int,
    detail: str,
) -> GraphNode:
    node = GraphNode(
        id=generate_id(kind, scan.source.path, name),
        label=name,
        kind=kind,
        file_path=scan.source.path,
        start_line=index + 1,
        end_line=estimate_end(scan.lines, index, scan.rules.scope),
        detail=detail,
    )
    scan.result.add_node(node)
    return node

def _contains(result: AnalysisResult, parent_id: str, child_id: str) -> None:
    result.add_edge(GraphEdge(source=parent_id, target=child_id, kind=EdgeKind.CONTAINS))
