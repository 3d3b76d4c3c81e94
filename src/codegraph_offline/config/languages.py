"""Extension allow-list and language-family detection."""

from __future__ import annotations

from pathlib import PurePosixPath

# Files outside this list never reach the extractor.
SUPPORTED_EXTENSIONS: tuple[str, ...] = (
    ".py",
    ".js",
    ".ts",
    ".tsx",
    ".jsx",
    ".html",
    ".css",
    ".json",
    ".java",
    ".cpp",
    ".c",
    ".h",
    ".hpp",
    ".cc",
)

# Extension -> pattern family.  Allow-listed extensions missing here only
# contribute a File node.
FAMILY_EXTENSIONS: dict[str, str] = {
    ".py": "indented",
    ".js": "ecma",
    ".ts": "ecma",
    ".jsx": "ecma",
    ".tsx": "ecma",
    ".c": "c_family",
    ".cpp": "c_family",
    ".h": "c_family",
    ".hpp": "c_family",
    ".cc": "c_family",
}

def get_family(file_path: str) -> str | None:
    """Return the pattern family name for *file_path*, or ``None``.

    The lookup is on the final suffix only, so ``"a.test.ts"`` is ECMA-style
    and ``"Makefile"`` has no family.
    """
    suffix = PurePosixPath(file_path).suffix
    return FAMILY_EXTENSIONS.get(suffix)

def is_supported(file_path: str) -> bool:
    """Return ``True`` if *file_path* ends with an allow-listed extension."""
    return file_path.endswith(SUPPORTED_EXTENSIONS)
