"""Tests for the pipeline orchestrator (pipeline.py)."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from codegraph_offline.core.graph.model import EdgeKind, NodeKind, SourceFile
from codegraph_offline.core.ingestion.pipeline import (
    PipelineResult,
    analyze_codebase,
    depth_label,
    extract,
    run_pipeline,
)


def _make_file(path: str, text: str) -> SourceFile:
    return SourceFile(name=path.rsplit("/", 1)[-1], path=path, text=text)


@pytest.fixture()
def mixed_files() -> list[SourceFile]:
    return [
        _make_file(
            "pkg/app.py",
            "import helpers\n"
            "class Service:\n"
            "    def handle(self):\n"
            "        return helpers.clean()\n"
            "def main():\n"
            "    Service().handle()\n",
        ),
        _make_file("pkg/helpers.py", "def clean():\n    return None\n"),
        _make_file(
            "web/view.tsx",
            "import { api } from '../client/api';\n"
            "export class View {\n"
            "}\n"
            "export const render = (props) => {\n"
            "  return null;\n"
            "};\n",
        ),
        _make_file("client/api.ts", "export function api() {\n  return 1;\n}\n"),
        _make_file("native/m.cc", '#include "m.h"\nint f(int x) {\n  return x;\n}\n'),
        _make_file("native/m.h", "int f(int x);\n"),
        _make_file("static/site.css", "body { color: red; }\n"),
    ]


# ---------------------------------------------------------------------------
# Graph properties
# ---------------------------------------------------------------------------


class TestFileNodes:
    def test_one_file_node_per_input(self, mixed_files: list[SourceFile]) -> None:
        result = extract(mixed_files, depth=3)
        file_nodes = result.get_nodes_by_kind(NodeKind.FILE)

        assert [n.id for n in file_nodes] == [f"File:{f.path}" for f in mixed_files]
        assert len({n.id for n in file_nodes}) == len(mixed_files)

    def test_files_come_first(self, mixed_files: list[SourceFile]) -> None:
        result = extract(mixed_files, depth=3)
        kinds = [n.kind for n in result.nodes]
        assert kinds[: len(mixed_files)] == [NodeKind.FILE] * len(mixed_files)
        assert NodeKind.FILE not in kinds[len(mixed_files) :]


class TestSpans:
    def test_construct_spans_within_file(self, mixed_files: list[SourceFile]) -> None:
        result = extract(mixed_files, depth=3)
        line_counts = {f.path: len(f.text.split("\n")) for f in mixed_files}

        constructs = [n for n in result.nodes if n.kind is not NodeKind.FILE]
        assert constructs
        for node in constructs:
            assert 1 <= node.start_line <= node.end_line <= line_counts[node.file_path]

    def test_every_construct_references_a_file_node(self, mixed_files: list[SourceFile]) -> None:
        result = extract(mixed_files, depth=3)
        file_paths = {n.file_path for n in result.get_nodes_by_kind(NodeKind.FILE)}
        for node in result.nodes:
            assert node.file_path in file_paths


class TestDepth:
    def test_monotonic_node_sets(self, mixed_files: list[SourceFile]) -> None:
        ids = {d: {n.id for n in extract(mixed_files, depth=d).nodes} for d in (1, 2, 3)}
        assert ids[1] <= ids[2] <= ids[3]

    def test_depth_one_files_only(self, mixed_files: list[SourceFile]) -> None:
        result = extract(mixed_files, depth=1)
        assert all(n.kind is NodeKind.FILE for n in result.nodes)
        assert all(e.kind is EdgeKind.IMPORT for e in result.edges)

    def test_depth_two_adds_classes(self, mixed_files: list[SourceFile]) -> None:
        result = extract(mixed_files, depth=2)
        assert [n.label for n in result.get_nodes_by_kind(NodeKind.CLASS)] == ["Service", "View"]
        assert result.get_nodes_by_kind(NodeKind.FUNCTION) == []

    def test_import_edges_identical_across_depths(self, mixed_files: list[SourceFile]) -> None:
        imports = [
            [(e.source, e.target) for e in extract(mixed_files, depth=d).get_edges_by_kind(EdgeKind.IMPORT)]
            for d in (1, 2, 3)
        ]
        assert imports[0] == imports[1] == imports[2]
        assert imports[0] == [
            ("File:pkg/app.py", "File:pkg/helpers.py"),
            ("File:web/view.tsx", "File:client/api.ts"),
            ("File:native/m.cc", "File:native/m.h"),
        ]

    def test_depth_above_range_is_full_detail(self, mixed_files: list[SourceFile]) -> None:
        full = extract(mixed_files, depth=3)
        beyond = extract(mixed_files, depth=7)
        assert [n.id for n in beyond.nodes] == [n.id for n in full.nodes]
        assert "Depth: 7" in beyond.summary

    def test_depth_below_range_is_files_only(self, mixed_files: list[SourceFile]) -> None:
        result = extract(mixed_files, depth=0)
        assert all(n.kind is NodeKind.FILE for n in result.nodes)
        assert len(result.get_edges_by_kind(EdgeKind.IMPORT)) == 3


class TestIdempotence:
    def test_same_inputs_same_graph(self, mixed_files: list[SourceFile]) -> None:
        first = extract(mixed_files, depth=3)
        second = extract(mixed_files, depth=3)
        assert first.nodes == second.nodes
        assert first.edges == second.edges
        assert first.summary == second.summary


class TestSummary:
    def test_shape(self, mixed_files: list[SourceFile]) -> None:
        result = extract(mixed_files, depth=3)
        assert result.summary == (
            "Offline analysis complete (Depth: 3).\n"
            "Scanned 7 files.\n"
            "Identified 2 classes and 6 functions."
        )

    def test_empty_file_set(self) -> None:
        result = extract([], depth=3)
        assert result.nodes == []
        assert result.edges == []
        assert "Scanned 0 files." in result.summary
        assert "Identified 0 classes and 0 functions." in result.summary


class TestDepthLabel:
    @pytest.mark.parametrize(
        ("depth", "label"),
        [(0, "Files Only"), (1, "Files Only"), (2, "Structure"), (3, "Full Detail"), (9, "Full Detail")],
    )
    def test_labels(self, depth: int, label: str) -> None:
        assert depth_label(depth) == label


class TestAnalyzeCodebase:
    def test_async_entry_point_matches_extract(self, mixed_files: list[SourceFile]) -> None:
        result = asyncio.run(analyze_codebase(mixed_files, depth=2))
        assert [n.id for n in result.nodes] == [n.id for n in extract(mixed_files, depth=2).nodes]


# ---------------------------------------------------------------------------
# run_pipeline
# ---------------------------------------------------------------------------


class TestRunPipeline:
    def test_counts(self, sample_repo: Path) -> None:
        files, result, stats = run_pipeline(sample_repo, depth=3)

        assert isinstance(stats, PipelineResult)
        assert stats.files == 6
        assert len(files) == 6
        assert stats.classes == 2
        assert stats.functions == 6
        assert stats.imports == 3
        assert stats.edges == 11
        assert stats.duration_seconds >= 0.0

    def test_progress_callback(self, sample_repo: Path) -> None:
        phases: list[tuple[str, float]] = []
        run_pipeline(sample_repo, depth=1, progress_callback=lambda p, pct: phases.append((p, pct)))

        assert phases[0] == ("Walking files", 0.0)
        assert phases[-1] == ("Extracting structure", 1.0)

    def test_files_sorted_by_path(self, sample_repo: Path) -> None:
        files, _, _ = run_pipeline(sample_repo, depth=1)
        assert [f.path for f in files] == [
            "native/calc.cpp",
            "native/calc.h",
            "src/app.py",
            "src/utils.py",
            "web/api.ts",
            "web/main.ts",
        ]
