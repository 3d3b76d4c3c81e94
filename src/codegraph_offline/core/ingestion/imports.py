"""Import resolution.

Turns the token captured from an import/include statement into Import
edges.  Matching is deliberately naive: the token is compared with every
other file path by substring containment (or suffix, for includes), not
by module-path semantics, and every match is linked.

Each import statement scans the whole file index, so resolving a project
costs O(files x import statements), i.e. quadratic in the worst case.
That is fine for a locally loaded tree; changing it to an indexed lookup
would change which edges are produced.
"""

from __future__ import annotations

from codegraph_offline.core.graph.graph import AnalysisResult
from codegraph_offline.core.graph.model import EdgeKind, GraphEdge
from codegraph_offline.core.parsers.base import ImportMatch

def resolve_import(
    token: str,
    importing_file: str,
    file_index: dict[str, str],
    match: ImportMatch,
) -> list[str]:
    """Return the node ids of every file *token* could refer to.

    Args:
        token: Module name or path segment captured from the statement.
        importing_file: Path of the file containing the statement; it is
            never linked to itself.
        file_index: Mapping of file paths to File node ids.
        match: Containment or suffix comparison.

    Returns:
        Target ids in file-index order.  Empty for unresolvable imports.
    """
    targets: list[str] = []
    for path, file_id in file_index.items():
        if path == importing_file:
            continue
        if match is ImportMatch.SUFFIX:
            hit = path.endswith(token)
        else:
            hit = token in path
        if hit:
            targets.append(file_id)
    return targets

def add_import_edges(
    result: AnalysisResult,
    source_id: str,
    target_ids: list[str],
) -> None:
    """Append one Import edge per target.  Repeated imports produce repeated edges."""
    for target_id in target_ids:
        result.add_edge(GraphEdge(source=source_id, target=target_id, kind=EdgeKind.IMPORT))
