"""Scope-boundary estimation.

Maps the line where a class or function starts to the line where its body
ends, without a parser.  Both strategies scan forward only and cost
O(lines scanned).
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

# Ceiling for brace-scoped constructs whose braces never balance.
BRACE_FALLBACK_SPAN = 20

class ScopeStrategy(Enum):
    """How a language family delimits blocks."""

    INDENTATION = "indentation"
    BRACES = "braces"

def indentation_of(line: str) -> int:
    """Column of the first non-whitespace character, or ``-1`` for a blank line."""
    stripped = line.lstrip()
    if not stripped:
        return -1
    return len(line) - len(stripped)

def estimate_end(lines: Sequence[str], start_index: int, strategy: ScopeStrategy) -> int:
    """Return the exclusive end index of the construct starting at *start_index*.

    The construct occupies ``lines[start_index:result]``; read as 1-indexed
    line numbers, *result* is also the inclusive last line.
    """
    if strategy is ScopeStrategy.INDENTATION:
        return _indentation_end(lines, start_index)
    return _brace_end(lines, start_index)

def _indentation_end(lines: Sequence[str], start_index: int) -> int:
    start_indent = indentation_of(lines[start_index])
    if start_indent == -1:
        return start_index + 1

    for i in range(start_index + 1, len(lines)):
        indent = indentation_of(lines[i])
        if indent == -1:
            continue
        if indent <= start_indent:
            return i
    return len(lines)

def _brace_end(lines: Sequence[str], start_index: int) -> int:
    balance = 0
    opened = False
    for i in range(start_index, len(lines)):
        line = lines[i]
        opens = line.count("{")
        balance += opens - line.count("}")
        if opens:
            opened = True
        if opened and balance <= 0:
            return i + 1
    return min(start_index + BRACE_FALLBACK_SPAN, len(lines))
