"""CodeGraph CLI: offline structural graphs for source trees."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from codegraph_offline import __version__
from codegraph_offline.core.graph.graph import AnalysisResult
from codegraph_offline.core.graph.model import SourceFile

console = Console()

app = typer.Typer(
    name="codegraph",
    help="CodeGraph Offline: structural graphs for multi-language source trees.",
    no_args_is_help=True,
)

_KIND_STYLES = {
    "File": "blue",
    "Class": "yellow",
    "Function": "magenta",
    "Module": "purple",
}

def _version_callback(value: bool) -> None:
    """Print the version and exit."""
    if value:
        console.print(f"CodeGraph Offline v{__version__}")
        raise typer.Exit()

@app.callback()
def main(
    version: Optional[bool] = typer.Option(  # noqa: N803
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
) -> None:
    """CodeGraph Offline: structural graphs for multi-language source trees."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

def _depth_option() -> int:
    return typer.Option(
        3, "--depth", "-d", min=1, max=3, clamp=True,
        help="1 = files only, 2 = + classes, 3 = + functions.",
    )

def _existing_dir(path: Path) -> Path:
    resolved = path.resolve()
    if not resolved.is_dir():
        console.print(f"[red]Error:[/red] {resolved} is not a directory.")
        raise typer.Exit(code=1)
    return resolved

def _run(path: Path, depth: int) -> tuple[list[SourceFile], AnalysisResult]:
    """Walk and extract *path*, exiting with an error if it is not a directory."""
    from codegraph_offline.core.ingestion.pipeline import run_pipeline

    files, result, _ = run_pipeline(_existing_dir(path), depth)
    return files, result

@app.command()
def analyze(
    path: Path = typer.Argument(Path("."), help="Directory to analyse."),
    depth: int = _depth_option(),
    as_json: bool = typer.Option(False, "--json", help="Print the graph as JSON."),
) -> None:
    """Extract the structural graph of a directory and summarise it."""
    from codegraph_offline.core.export import to_dict
    from codegraph_offline.core.ingestion.pipeline import PipelineResult, depth_label, run_pipeline

    repo_path = _existing_dir(path)
    if as_json:
        _, result, _ = run_pipeline(repo_path, depth)
        typer.echo(json.dumps(to_dict(result), indent=2))
        return

    console.print(f"[bold]Analysing[/bold] {repo_path} ({depth_label(depth)})")

    stats: PipelineResult | None = None
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("Starting...", total=None)

        def on_progress(phase: str, pct: float) -> None:
            progress.update(task, description=f"{phase} ({pct:.0%})")

        _, result, stats = run_pipeline(repo_path, depth, progress_callback=on_progress)

    console.print()
    console.print(result.summary)
    console.print()

    table = Table(title="Graph")
    table.add_column("Item")
    table.add_column("Count", justify="right")
    table.add_row("Files", str(stats.files))
    table.add_row("Classes", str(stats.classes))
    table.add_row("Functions", str(stats.functions))
    table.add_row("Import edges", str(stats.imports))
    table.add_row("All edges", str(stats.edges))
    console.print(table)
    console.print(f"  Duration: {stats.duration_seconds:.2f}s")

@app.command()
def search(
    query: str = typer.Argument(..., help="Text to look for in names, paths and source."),
    path: Path = typer.Argument(Path("."), help="Directory to analyse."),
    depth: int = _depth_option(),
    limit: int = typer.Option(20, "--limit", "-n", help="Maximum number of results."),
) -> None:
    """Search node names, file paths and source text."""
    from codegraph_offline.core.search.text import build_file_lookup, search_nodes

    files, result = _run(path, depth)
    matches = search_nodes(result, build_file_lookup(files), query)

    if not matches:
        console.print(f'No nodes found matching "{escape(query)}" in name or content.')
        return

    table = Table(title=f"Search Results ({len(matches)})")
    table.add_column("Kind")
    table.add_column("Label")
    table.add_column("Location")
    table.add_column("Id", overflow="fold")
    for node in matches[:limit]:
        style = _KIND_STYLES.get(node.kind.value, "white")
        location = node.file_path or ""
        if node.start_line and node.kind.value != "File":
            location = f"{location}:{node.start_line}"
        table.add_row(f"[{style}]{node.kind.value}[/{style}]", escape(node.label), escape(location), escape(node.id))
    console.print(table)

@app.command()
def show(
    node_id: str = typer.Argument(..., help="Node id, e.g. 'Class:src/app.py:App'."),
    path: Path = typer.Argument(Path("."), help="Directory to analyse."),
    depth: int = _depth_option(),
) -> None:
    """Show one node: kind, location, connections and source."""
    from codegraph_offline.core.search.text import build_file_lookup, node_source

    files, result = _run(path, depth)
    node = result.get_node(node_id)
    if node is None:
        console.print(f"[red]Error:[/red] No node with id {escape(node_id)}.")
        raise typer.Exit(code=1)

    style = _KIND_STYLES.get(node.kind.value, "white")
    location = node.file_path or ""
    if node.start_line:
        location = f"{location} :{node.start_line}"

    console.print(f"[bold {style}]{node.kind.value}[/bold {style}]  {escape(node.label)}")
    console.print(f"[dim]{escape(location)}[/dim]")
    console.print(f"{result.connection_count(node.id)} Connection(s)")
    console.print(Panel(escape(node.detail or "No description available."), title="Responsibility"))

    text = node_source(node, build_file_lookup(files))
    if text is None:
        text = "// File content not found locally."
    console.print(Panel(escape(text), title="Source Code"))

@app.command()
def export(
    path: Path = typer.Argument(Path("."), help="Directory to analyse."),
    output: Path = typer.Option(..., "--output", "-o", help="File to write."),
    fmt: str = typer.Option("json", "--format", "-f", help="Output format: json or dot."),
    depth: int = _depth_option(),
) -> None:
    """Write the graph to a file for a visualization front end."""
    from codegraph_offline.core.export import export_dot, export_json

    writers = {"json": export_json, "dot": export_dot}
    writer = writers.get(fmt.lower())
    if writer is None:
        console.print(f"[red]Error:[/red] Unknown format {escape(fmt)!r}. Expected json or dot.")
        raise typer.Exit(code=1)

    _, result = _run(path, depth)
    writer(result, output)
    console.print(f"[green]Wrote[/green] {output} ({len(result.nodes)} nodes, {len(result.edges)} edges)")

@app.command()
def watch(
    path: Path = typer.Argument(Path("."), help="Directory to watch."),
    depth: int = _depth_option(),
) -> None:
    """Watch mode: re-extract the graph whenever a source file changes."""
    import asyncio

    from codegraph_offline.core.ingestion.watcher import watch_repo

    _, result = _run(path, depth)
    console.print(result.summary)
    console.print(f"[bold]Watching[/bold] {path.resolve()} for changes (Ctrl+C to stop)")

    def on_result(_files: list[SourceFile], new_result: AnalysisResult) -> None:
        console.print()
        console.print(new_result.summary)

    try:
        asyncio.run(watch_repo(path, on_result, depth=depth))
    except KeyboardInterrupt:
        console.print("\n[bold]Watch stopped.[/bold]")
