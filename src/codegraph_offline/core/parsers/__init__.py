"""Language-family pattern tables and extension dispatch."""

from __future__ import annotations

from codegraph_offline.config.languages import get_family
from codegraph_offline.core.parsers.base import FamilyRules, ImportMatch
from codegraph_offline.core.parsers.c_family import C_FAMILY_RULES
from codegraph_offline.core.parsers.ecma import ECMA_RULES
from codegraph_offline.core.parsers.python_lang import PYTHON_RULES

FAMILIES: dict[str, FamilyRules] = {
    rules.name: rules for rules in (PYTHON_RULES, ECMA_RULES, C_FAMILY_RULES)
}

def rules_for(file_path: str) -> FamilyRules | None:
    """Return the pattern table for *file_path*, or ``None`` for unparsed files."""
    family = get_family(file_path)
    if family is None:
        return None
    return FAMILIES[family]

__all__ = ["FAMILIES", "FamilyRules", "ImportMatch", "rules_for"]
