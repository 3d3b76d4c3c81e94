"""Watch mode: re-extract the whole tree when a source file changes.

Uses ``watchfiles`` for file system monitoring with native debouncing.
There is no incremental update; every relevant change triggers a full walk
and extraction, and the new graph replaces the previous one.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from pathlib import Path

from codegraph_offline.config.ignore import load_gitignore, should_ignore
from codegraph_offline.config.languages import is_supported
from codegraph_offline.core.graph.graph import AnalysisResult
from codegraph_offline.core.graph.model import SourceFile
from codegraph_offline.core.ingestion.pipeline import DEFAULT_DEPTH, run_pipeline

logger = logging.getLogger(__name__)

ResultCallback = Callable[[list[SourceFile], AnalysisResult], None]

def relevant_changes(
    changed_paths: list[Path],
    repo_path: Path,
    gitignore_patterns: list[str] | None = None,
) -> list[str]:
    """Return the relative paths among *changed_paths* that affect the graph.

    A path counts when it lies under *repo_path*, is not ignored and has an
    allow-listed extension.  Deleted files count too.
    """
    relevant: list[str] = []
    for abs_path in changed_paths:
        try:
            relative = abs_path.relative_to(repo_path).as_posix()
        except ValueError:
            continue

        if should_ignore(relative, gitignore_patterns):
            continue

        if not is_supported(relative):
            continue

        relevant.append(relative)
    return relevant

async def watch_repo(
    repo_path: Path,
    on_result: ResultCallback,
    *,
    depth: int = DEFAULT_DEPTH,
    stop_event: asyncio.Event | None = None,
) -> int:
    """Monitor *repo_path* and call *on_result* with a fresh graph after each change.

    Parameters
    ----------
    repo_path:
        Root directory to watch.
    on_result:
        Receives the files read and the rebuilt graph.
    depth:
        Granularity passed to the extractor.
    stop_event:
        Optional event to signal shutdown.  When set, the loop exits.

    Returns
    -------
    int
        The number of re-extractions performed.
    """
    import watchfiles

    repo_path = repo_path.resolve()
    gitignore = load_gitignore(repo_path)
    runs = 0

    logger.info("Watching %s for changes...", repo_path)

    async for changes in watchfiles.awatch(
        repo_path,
        rust_timeout=500,
        stop_event=stop_event,
    ):
        changed_paths = sorted({Path(path_str) for _change_type, path_str in changes})
        relevant = relevant_changes(changed_paths, repo_path, gitignore)
        if not relevant:
            continue

        logger.info("Re-extracting after %d change(s): %s", len(relevant), ", ".join(relevant))
        files, result, _ = await asyncio.to_thread(run_pipeline, repo_path, depth)
        runs += 1
        on_result(files, result)

    logger.info("Watch stopped after %d run(s)", runs)
    return runs
