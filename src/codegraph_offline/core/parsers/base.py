"""Pattern tables shared by every language family.

A family is plain data: which regexes recognise classes, functions and
imports, how a construct's end line is estimated, and how an import token
is matched against the other files.  The extractor owns the control flow,
so adding a family means adding one :class:`FamilyRules` table.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from codegraph_offline.core.ingestion.scope import ScopeStrategy

class ImportMatch(Enum):
    """How an import token is compared with candidate file paths."""

    CONTAINS = "contains"  # token appears anywhere in the path
    SUFFIX = "suffix"  # path ends with the token

@dataclass(frozen=True)
class FamilyRules:
    """Everything the extractor needs to scan one language family."""

    name: str
    scope: ScopeStrategy

    class_pattern: re.Pattern[str]
    function_pattern: re.Pattern[str]
    import_pattern: re.Pattern[str]

    # Anchored patterns use ``match``; the ECMA function pattern is a search.
    function_search: bool = False
    class_detail: str = "Class definition"

    # A class line yields nothing else on that line.
    class_consumes_line: bool = False
    # Methods attach to the enclosing class instead of the file.
    tracks_enclosing_class: bool = False

    excluded_function_names: frozenset[str] = frozenset()
    # Lines ending in ``;`` are prototypes, not definitions.
    skip_declarations: bool = False

    import_basename: bool = False
    import_match: ImportMatch = ImportMatch.CONTAINS

    def match_class(self, line: str) -> str | None:
        """Return the class name declared on *line*, if any."""
        m = self.class_pattern.match(line)
        return m.group(1) if m else None

    def match_function(self, line: str) -> str | None:
        """Return the function name defined on *line*, if any.

        With several alternatives the first captured group wins.
        """
        if self.function_search:
            m = self.function_pattern.search(line)
        else:
            m = self.function_pattern.match(line)
        if m is None:
            return None

        name = next((g for g in m.groups() if g), None)
        if name is None or name in self.excluded_function_names:
            return None
        if self.skip_declarations and line.strip().endswith(";"):
            return None
        return name

    def match_import(self, line: str) -> str | None:
        """Return the token to resolve against other file paths, if any."""
        m = self.import_pattern.search(line)
        if m is None:
            return None
        token = m.group(1)
        if self.import_basename:
            token = token.split("/")[-1]
        return token or None
