"""Structural graph data model for CodeGraph.

Defines the node and edge kinds produced by the extractor: files, the
classes/structs and functions they contain, and the containment and import
edges between them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

class NodeKind(Enum):
    """Kinds of graph nodes."""

    FILE = "File"
    CLASS = "Class"
    FUNCTION = "Function"
    MODULE = "Module"  # reserved, never produced by the extractor

class EdgeKind(Enum):
    """Kinds of graph edges.  Only CONTAINS and IMPORT are produced."""

    IMPORT = "Import"
    CALL = "Call"
    INHERITANCE = "Inheritance"
    CONTAINS = "Contains"

def generate_id(kind: NodeKind, file_path: str, label: str = "") -> str:
    """Produce a deterministic node ID.

    File nodes are keyed by path alone (``File:src/app.py``); every other
    node uses ``{kind}:{file_path}:{label}``.  Two constructs of the same
    kind and label in one file therefore share an id.
    """
    if kind is NodeKind.FILE:
        return f"{kind.value}:{file_path}"
    return f"{kind.value}:{file_path}:{label}"

@dataclass(frozen=True)
class SourceFile:
    """An ingested source file.

    ``path`` is the unique key (relative, ``/``-separated); ``name`` is its
    final component and ``text`` the complete, unmodified content.
    """

    name: str
    path: str
    text: str

    @property
    def lines(self) -> list[str]:
        return self.text.split("\n")

@dataclass
class GraphNode:
    """A file or a construct recognised inside one.

    ``start_line``/``end_line`` are 1-indexed and inclusive.
    """

    id: str
    label: str
    kind: NodeKind

    file_path: str | None = None
    start_line: int | None = None
    end_line: int | None = None
    detail: str | None = None

    @property
    def has_span(self) -> bool:
        return self.start_line is not None and self.end_line is not None

@dataclass(frozen=True)
class GraphEdge:
    """A directed edge between two node ids."""

    source: str
    target: str
    kind: EdgeKind
