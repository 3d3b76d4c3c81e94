"""ECMA-style family (JavaScript, TypeScript, JSX, TSX)."""

from __future__ import annotations

import re

from codegraph_offline.core.ingestion.scope import ScopeStrategy
from codegraph_offline.core.parsers.base import FamilyRules, ImportMatch

_FUNCTION_ALTERNATIVES = (
    r"function\s+(\w+)",
    r"const\s+(\w+)\s*=\s*(?:async\s*)?\(",
    r"const\s+(\w+)\s*=\s*(?:async\s*)?\w+\s*=>",
)

ECMA_RULES = FamilyRules(
    name="ecma",
    scope=ScopeStrategy.BRACES,
    class_pattern=re.compile(r"^(?:export\s+)?class\s+(\w+)"),
    function_pattern=re.compile("|".join(_FUNCTION_ALTERNATIVES)),
    import_pattern=re.compile(r"""from\s+['"](.+)['"]"""),
    function_search=True,
    import_basename=True,
    import_match=ImportMatch.CONTAINS,
)
