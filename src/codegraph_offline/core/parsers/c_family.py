"""Brace-scoped family with declaration filtering (C, C++ and headers)."""

from __future__ import annotations

import re

from codegraph_offline.core.ingestion.scope import ScopeStrategy
from codegraph_offline.core.parsers.base import FamilyRules, ImportMatch

# Names that the "type tokens, name, paren" heuristic picks up from statements.
CONTROL_KEYWORDS: frozenset[str] = frozenset(
    {"if", "while", "for", "switch", "return", "catch", "else", "new", "delete"}
)

C_FAMILY_RULES = FamilyRules(
    name="c_family",
    scope=ScopeStrategy.BRACES,
    class_pattern=re.compile(r"^\s*(?:class|struct)\s+(\w+)"),
    # [return type / modifiers]+ name (possibly Foo::bar) then "("
    function_pattern=re.compile(r"^\s*(?:[\w:*&<>]+\s+)+([\w:]+)\s*\("),
    import_pattern=re.compile(r"""^#include\s+[<"](.+)[>"]"""),
    class_detail="Class/Struct definition",
    excluded_function_names=CONTROL_KEYWORDS,
    skip_declarations=True,
    import_basename=True,
    import_match=ImportMatch.SUFFIX,
)
