"""The graph value produced by one extraction run.

:class:`AnalysisResult` keeps nodes and edges in insertion order (files
first, in input order, then each file's constructs in line order).  Callers
rely on that order, so nothing here sorts or de-duplicates.  A secondary
id index gives O(1) lookups; when ids collide the most recently added node
wins the lookup while both stay in :attr:`AnalysisResult.nodes`.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterator

from codegraph_offline.core.graph.model import EdgeKind, GraphEdge, GraphNode, NodeKind

class AnalysisResult:
    """Ordered nodes, ordered edges and a textual summary.

    Built once per (file set, depth) pair and never mutated after the
    extractor returns it.
    """

    def __init__(self) -> None:
        self.nodes: list[GraphNode] = []
        self.edges: list[GraphEdge] = []
        self.summary: str = ""

        self._by_id: dict[str, GraphNode] = {}
        self._edges_by_node: dict[str, list[GraphEdge]] = defaultdict(list)

    def add_node(self, node: GraphNode) -> None:
        """Append *node*; a node with a colliding id shadows the older one in lookups."""
        self.nodes.append(node)
        self._by_id[node.id] = node

    def add_edge(self, edge: GraphEdge) -> None:
        """Append *edge*.  Duplicate edges are kept."""
        self.edges.append(edge)
        self._edges_by_node[edge.source].append(edge)
        if edge.target != edge.source:
            self._edges_by_node[edge.target].append(edge)

    def iter_nodes(self) -> Iterator[GraphNode]:
        return iter(self.nodes)

    def iter_edges(self) -> Iterator[GraphEdge]:
        return iter(self.edges)

    def get_node(self, node_id: str) -> GraphNode | None:
        """Return the node with *node_id*, or ``None`` if it does not exist."""
        return self._by_id.get(node_id)

    def get_nodes_by_kind(self, kind: NodeKind) -> list[GraphNode]:
        """Return all nodes of *kind*, in graph order."""
        return [n for n in self.nodes if n.kind is kind]

    def get_edges_by_kind(self, kind: EdgeKind) -> list[GraphEdge]:
        """Return all edges of *kind*, in graph order."""
        return [e for e in self.edges if e.kind is kind]

    def count_nodes_by_kind(self, kind: NodeKind) -> int:
        return sum(1 for n in self.nodes if n.kind is kind)

    def edges_for(self, node_id: str) -> list[GraphEdge]:
        """Return every edge whose source or target is *node_id*, in graph order."""
        return list(self._edges_by_node.get(node_id, ()))

    def connection_count(self, node_id: str) -> int:
        """Number of edges touching *node_id* (shown in the detail panel)."""
        return len(self._edges_by_node.get(node_id, ()))

    def stats(self) -> dict[str, int]:
        """Return a summary of graph size."""
        return {
            "nodes": len(self.nodes),
            "edges": len(self.edges),
            "files": self.count_nodes_by_kind(NodeKind.FILE),
            "classes": self.count_nodes_by_kind(NodeKind.CLASS),
            "functions": self.count_nodes_by_kind(NodeKind.FUNCTION),
            "imports": sum(1 for e in self.edges if e.kind is EdgeKind.IMPORT),
        }
