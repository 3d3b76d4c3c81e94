"""File-node pass.

Emits one File node per input file, in input order, and returns the
path -> node id index that import resolution relies on.  The index must be
complete before any file's constructs are scanned because an import may
point at a file that comes later in the input.
"""

from __future__ import annotations

from collections.abc import Sequence

from codegraph_offline.core.graph.graph import AnalysisResult
from codegraph_offline.core.graph.model import GraphNode, NodeKind, SourceFile, generate_id

def process_structure(files: Sequence[SourceFile], result: AnalysisResult) -> dict[str, str]:
    """Add a File node for every entry in *files*.

    Args:
        files: Ingested files, in the order their nodes should appear.
        result: The graph being built.

    Returns:
        A dict like ``{"src/app.py": "File:src/app.py"}``.  If two inputs
        share a path the later one wins the mapping.
    """
    file_index: dict[str, str] = {}

    for source in files:
        file_id = generate_id(NodeKind.FILE, source.path)
        result.add_node(
            GraphNode(
                id=file_id,
                label=source.name,
                kind=NodeKind.FILE,
                file_path=source.path,
                start_line=1,
                end_line=len(source.lines),
                detail=f"File: {source.path}",
            )
        )
        file_index[source.path] = file_id

    return file_index
