# commons_text/replace/__init__.py
"""
replace
=======

Does: Expose single-pattern, character-level, regex and multi-pattern replacement.
Exports: replace, replace_once, remove, remove_start, remove_end, replace_chars,
         replace_pattern, remove_pattern, count_occurrences_of,
         replace_each, replace_each_repeatedly, CycleDetected
Used by: Path cleaning and library callers.
"""

from .replace_core import (
    count_occurrences_of,
    remove,
    remove_end,
    remove_pattern,
    remove_start,
    replace,
    replace_chars,
    replace_once,
    replace_pattern,
)
from .replace_multi import (
    CycleDetected,
    replace_each,
    replace_each_repeatedly,
)

__all__ = [
    "replace",
    "replace_once",
    "remove",
    "remove_start",
    "remove_end",
    "replace_chars",
    "replace_pattern",
    "remove_pattern",
    "count_occurrences_of",
    "CycleDetected",
    "replace_each",
    "replace_each_repeatedly",
]
