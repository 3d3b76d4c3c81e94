"""Ignore rules for source file discovery.

Default rules and ``.gitignore`` lines share one matcher: every pattern is
compiled with gitignore semantics, so a bare name such as ``node_modules``
skips that directory at any depth.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import pathspec

DEFAULT_IGNORE_PATTERNS: tuple[str, ...] = (
    # Tooling and dependency directories
    "node_modules",
    "__pycache__",
    ".git",
    ".venv",
    "venv",
    "dist",
    "build",
    ".idea",
    ".vscode",
    ".mypy_cache",
    ".pytest_cache",
    ".ruff_cache",
    ".tox",
    # Generated or vendored files
    ".DS_Store",
    "package-lock.json",
    "*.min.js",
    "*.bundle.js",
)

@lru_cache(maxsize=32)
def _compile(extra_patterns: tuple[str, ...]) -> pathspec.GitIgnoreSpec:
    return pathspec.GitIgnoreSpec.from_lines(DEFAULT_IGNORE_PATTERNS + extra_patterns)

def should_ignore(
    path: str | Path,
    gitignore_patterns: list[str] | None = None,
) -> bool:
    """Return ``True`` if *path* should be skipped during file discovery.

    Parameters
    ----------
    path:
        A path relative to the walked root (e.g. ``src/main.py``).
    gitignore_patterns:
        Optional extra patterns, usually from :func:`load_gitignore`.
    """
    matcher = _compile(tuple(gitignore_patterns or ()))
    return matcher.match_file(Path(path).as_posix())

def load_gitignore(repo_path: Path) -> list[str]:
    """Return the patterns in ``repo_path/.gitignore``, or ``[]`` if there is none."""
    gitignore = repo_path / ".gitignore"
    if not gitignore.is_file():
        return []

    return [
        line
        for line in (raw.strip() for raw in gitignore.read_text(encoding="utf-8").splitlines())
        if line and not line.startswith("#")
    ]
