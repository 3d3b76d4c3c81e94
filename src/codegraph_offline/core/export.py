"""Graph export helpers for JSON and DOT outputs.

JSON is what the visualization front end loads; DOT is for Graphviz.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from codegraph_offline.core.graph.graph import AnalysisResult
from codegraph_offline.core.graph.model import GraphEdge, GraphNode

def node_to_dict(node: GraphNode) -> dict[str, Any]:
    return {
        "id": node.id,
        "label": node.label,
        "kind": node.kind.value,
        "file_path": node.file_path,
        "start_line": node.start_line,
        "end_line": node.end_line,
        "detail": node.detail,
    }

def edge_to_dict(edge: GraphEdge) -> dict[str, str]:
    return {"source": edge.source, "target": edge.target, "kind": edge.kind.value}

def to_dict(result: AnalysisResult) -> dict[str, Any]:
    """Serialise *result* to plain data, keeping node and edge order."""
    return {
        "nodes": [node_to_dict(n) for n in result.nodes],
        "edges": [edge_to_dict(e) for e in result.edges],
        "summary": result.summary,
    }

def export_json(result: AnalysisResult, output_file: Path) -> None:
    output_file.write_text(json.dumps(to_dict(result), indent=2) + "\n", encoding="utf-8")

def export_dot(result: AnalysisResult, output_file: Path) -> None:
    """Write *result* as a Graphviz digraph.  Colliding node ids are emitted once."""
    lines = ["digraph CodeGraph {"]
    lines.append("  rankdir=LR;")

    seen: set[str] = set()
    for node in result.nodes:
        if node.id in seen:
            continue
        seen.add(node.id)
        label = f"{_esc(node.kind.value)}\\n{_esc(node.label)}"
        lines.append(f'  "{_esc(node.id)}" [label="{label}"];')

    for edge in result.iter_edges():
        lines.append(
            f'  "{_esc(edge.source)}" -> "{_esc(edge.target)}" [label="{edge.kind.value}"];'
        )

    lines.append("}")
    output_file.write_text("\n".join(lines) + "\n", encoding="utf-8")

def _esc(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')
