"""Indentation-scoped family (Python)."""

from __future__ import annotations

import re

from codegraph_offline.core.ingestion.scope import ScopeStrategy
from codegraph_offline.core.parsers.base import FamilyRules, ImportMatch

# Only top-level classes (column 0) open a class scope; ``def`` may be indented.
PYTHON_RULES = FamilyRules(
    name="indented",
    scope=ScopeStrategy.INDENTATION,
    class_pattern=re.compile(r"^class\s+(\w+)"),
    function_pattern=re.compile(r"^\s*def\s+(\w+)"),
    import_pattern=re.compile(r"^(?:from|import)\s+(\w+)"),
    class_consumes_line=True,
    tracks_enclosing_class=True,
    import_match=ImportMatch.CONTAINS,
)
