"""End-to-end tests for the full CodeGraph pipeline.

Runs walking, extraction, search and export against the mixed-language
sample repository from ``conftest.py`` and checks the graph layer by layer.
"""

from __future__ import annotations

import json
from pathlib import Path

from codegraph_offline.core.export import export_json
from codegraph_offline.core.graph.model import EdgeKind, NodeKind
from codegraph_offline.core.ingestion.pipeline import extract, run_pipeline
from codegraph_offline.core.search.text import build_file_lookup, node_source, search_nodes


class TestFullPipeline:
    def test_node_order(self, sample_repo: Path) -> None:
        _, result, _ = run_pipeline(sample_repo, depth=3)

        assert [n.id for n in result.nodes] == [
            "File:native/calc.cpp",
            "File:native/calc.h",
            "File:src/app.py",
            "File:src/utils.py",
            "File:web/api.ts",
            "File:web/main.ts",
            "Function:native/calc.cpp:add",
            "Class:src/app.py:App",
            "Function:src/app.py:start",
            "Function:src/app.py:stop",
            "Function:src/utils.py:helper",
            "Function:web/api.ts:fetchData",
            "Class:web/main.ts:Page",
            "Function:web/main.ts:boot",
        ]

    def test_import_edges(self, sample_repo: Path) -> None:
        _, result, _ = run_pipeline(sample_repo, depth=3)

        assert [(e.source, e.target) for e in result.get_edges_by_kind(EdgeKind.IMPORT)] == [
            ("File:native/calc.cpp", "File:native/calc.h"),
            ("File:src/app.py", "File:src/utils.py"),
            ("File:web/main.ts", "File:web/api.ts"),
        ]
        assert len(result.get_edges_by_kind(EdgeKind.CONTAINS)) == 8
        assert len(result.edges) == 11

    def test_methods_hang_off_class(self, sample_repo: Path) -> None:
        _, result, _ = run_pipeline(sample_repo, depth=3)

        owners = {e.target: e.source for e in result.get_edges_by_kind(EdgeKind.CONTAINS)}
        assert owners["Function:src/app.py:start"] == "Class:src/app.py:App"
        assert owners["Function:src/app.py:stop"] == "Class:src/app.py:App"
        assert owners["Function:web/main.ts:boot"] == "File:web/main.ts"
        assert owners["Function:native/calc.cpp:add"] == "File:native/calc.cpp"

    def test_add_span_points_at_definition(self, sample_repo: Path) -> None:
        files, result, _ = run_pipeline(sample_repo, depth=3)
        add = result.get_node("Function:native/calc.cpp:add")

        assert (add.start_line, add.end_line) == (5, 7)
        assert node_source(add, build_file_lookup(files)) == (
            "int add(int a, int b) {\n    return a + b;\n}"
        )

    def test_summary(self, sample_repo: Path) -> None:
        _, result, _ = run_pipeline(sample_repo, depth=2)
        assert result.summary == (
            "Offline analysis complete (Depth: 2).\n"
            "Scanned 6 files.\n"
            "Identified 2 classes and 0 functions."
        )
        assert result.count_nodes_by_kind(NodeKind.FUNCTION) == 0

    def test_search_and_export(self, sample_repo: Path, tmp_path: Path) -> None:
        files, result, _ = run_pipeline(sample_repo, depth=3)
        matches = search_nodes(result, build_file_lookup(files), "fetchData")

        assert [n.id for n in matches] == [
            "File:web/api.ts",
            "File:web/main.ts",
            "Function:web/api.ts:fetchData",
            "Class:web/main.ts:Page",
            "Function:web/main.ts:boot",
        ]

        out = tmp_path / "graph.json"
        export_json(result, out)
        assert len(json.loads(out.read_text(encoding="utf-8"))["nodes"]) == 14

    def test_extract_matches_run_pipeline(self, sample_repo: Path) -> None:
        files, result, _ = run_pipeline(sample_repo, depth=3)
        assert extract(files, depth=3).nodes == result.nodes
