"""CodeGraph configuration: extension allow-list, language families and ignore patterns."""

from codegraph_offline.config.ignore import DEFAULT_IGNORE_PATTERNS, load_gitignore, should_ignore
from codegraph_offline.config.languages import (
    FAMILY_EXTENSIONS,
    SUPPORTED_EXTENSIONS,
    get_family,
    is_supported,
)

__all__ = [
    "DEFAULT_IGNORE_PATTERNS",
    "FAMILY_EXTENSIONS",
    "SUPPORTED_EXTENSIONS",
    "get_family",
    "is_supported",
    "load_gitignore",
    "should_ignore",
]
