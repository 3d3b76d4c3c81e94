"""Text-span lookup and content search over an extracted graph.

Both helpers need the ingested files alongside the graph, since nodes only
carry a path and a line span, never the text itself.
"""

from __future__ import annotations

from collections.abc import Iterable

from codegraph_offline.core.graph.graph import AnalysisResult
from codegraph_offline.core.graph.model import GraphNode, NodeKind, SourceFile

def build_file_lookup(files: Iterable[SourceFile]) -> dict[str, SourceFile]:
    """Map each path to its file.  The first file with a given path wins."""
    lookup: dict[str, SourceFile] = {}
    for source in files:
        lookup.setdefault(source.path, source)
    return lookup

def node_source(node: GraphNode, files: dict[str, SourceFile]) -> str | None:
    """Return the text backing *node*.

    File nodes and nodes without a span yield the whole file.  Otherwise the
    span is clamped to the file (start no lower than line 1, end no higher
    than the last line) and lines ``start..end`` are joined with newlines;
    an empty clamped span falls back to the whole file.

    Returns ``None`` when the owning file is not in *files*.
    """
    if node.file_path is None:
        return None
    source = files.get(node.file_path)
    if source is None:
        return None

    if node.kind is NodeKind.FILE or not node.start_line or not node.end_line:
        return source.text

    lines = source.lines
    start = max(0, node.start_line - 1)
    end = min(len(lines), node.end_line)
    if start >= end:
        return source.text
    return "\n".join(lines[start:end])

def _span_text(node: GraphNode, source: SourceFile) -> str:
    if node.has_span:
        lines = source.lines
        start = max(0, node.start_line - 1)
        return "\n".join(lines[start : node.end_line])
    return source.text

def search_nodes(
    result: AnalysisResult,
    files: dict[str, SourceFile],
    query: str,
) -> list[GraphNode]:
    """Return nodes matching *query*, case-insensitively, in graph order.

    A node matches on its label or file path first; failing that, on the
    text of its line span (or of the whole file when it has no span).  A
    blank query matches nothing.
    """
    if not query.strip():
        return []
    q = query.lower()

    matches: list[GraphNode] = []
    for node in result.iter_nodes():
        if q in node.label.lower() or (node.file_path and q in node.file_path.lower()):
            matches.append(node)
            continue

        if not node.file_path:
            continue
        source = files.get(node.file_path)
        if source is None:
            continue
        if q in _span_text(node, source).lower():
            matches.append(node)
    return matches
