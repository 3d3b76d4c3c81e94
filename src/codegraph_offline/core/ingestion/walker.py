"""File system walker: the ingestion side that feeds the extractor.

Reads a directory tree into :class:`SourceFile` records, keeping only
allow-listed extensions and silently dropping files that cannot be read
as text.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from codegraph_offline.config.ignore import should_ignore
from codegraph_offline.config.languages import is_supported
from codegraph_offline.core.graph.model import SourceFile

logger = logging.getLogger(__name__)

def discover_files(root: Path, gitignore_patterns: list[str] | None = None) -> list[Path]:
    """Return absolute paths of the allow-listed, non-ignored files under *root*.

    Ignored directories are pruned during the walk rather than filtered
    afterwards, so large ``node_modules`` trees are never listed.
    """
    root = root.resolve()
    found: list[Path] = []

    for dirpath, dirnames, filenames in os.walk(root):
        here = Path(dirpath)
        rel_dir = here.relative_to(root)
        dirnames[:] = [
            d for d in dirnames if not should_ignore(f"{(rel_dir / d).as_posix()}/", gitignore_patterns)
        ]
        for filename in filenames:
            if not is_supported(filename):
                continue
            if should_ignore((rel_dir / filename).as_posix(), gitignore_patterns):
                continue
            found.append(here / filename)

    return found

def read_file(root: Path, file_path: Path) -> SourceFile | None:
    """Read one file as UTF-8.

    The text is kept byte for byte apart from a leading BOM, so CRLF line
    endings survive.  Returns ``None`` for unsupported extensions and
    for files that cannot be read or decoded; the latter are logged.  Empty
    files are kept.
    """
    path = file_path.relative_to(root).as_posix()
    if not is_supported(path):
        return None

    try:
        text = file_path.read_bytes().decode("utf-8-sig")
    except (UnicodeDecodeError, ValueError, OSError) as exc:
        logger.warning("Skipping unreadable file %s: %s", path, exc)
        return None

    return SourceFile(name=file_path.name, path=path, text=text)

def walk_repo(
    root: Path,
    gitignore_patterns: list[str] | None = None,
    max_workers: int = 8,
) -> list[SourceFile]:
    """Read every allow-listed file under *root*, sorted by relative path.

    Parameters
    ----------
    root:
        Directory to walk.
    gitignore_patterns:
        Extra ignore patterns, usually from
        :func:`codegraph_offline.config.ignore.load_gitignore`.
    max_workers:
        Size of the thread pool used for reading.
    """
    root = root.resolve()
    paths = discover_files(root, gitignore_patterns)
    logger.debug("Discovered %d candidate file(s) under %s", len(paths), root)

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        read = list(pool.map(lambda p: read_file(root, p), paths))

    return sorted((f for f in read if f is not None), key=lambda f: f.path)
