# commons_text/replace/replace_core.py
"""
replace_core.py.

Does: Single-pattern substring replacement with an optional cap, the
      remove/replace_chars variants, and regex replacement delegated to `re`
      in DOTALL mode.
Returns: The rebuilt string; the input itself whenever nothing applies.
Used by: Path cleaning (separator rewrite) and library callers.
"""
from __future__ import annotations

import re

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
]


def replace(
    text: str | None,
    search: str | None,
    replacement: str | None,
    max_replacements: int = -1,
) -> str | None:
    """
    Does: Replace non-overlapping occurrences of `search`, left to right, at most
          `max_replacements` times (negative → all).
          replace("abaa", "a", "z", 2) -> "zbza"
    Returns: `text` unchanged when it is empty/None, `search` is empty/None,
             `replacement` is None or `max_replacements` is 0.
    """
    if not text or not search or replacement is None or max_replacements == 0:
        return text

    end = text.find(search)
    if end == -1:
        return text

    search_len = len(search)
    parts: list[str] = []
    start = 0
    while end != -1:
        parts.append(text[start:end])
        parts.append(replacement)
        start = end + search_len
        max_replacements -= 1
        if max_replacements == 0:
            break
        end = text.find(search, start)
    parts.append(text[start:])
    return "".join(parts)


def replace_once(text: str | None, search: str | None, replacement: str | None) -> str | None:
    return replace(text, search, replacement, 1)


def remove(text: str | None, remove_str: str | None) -> str | None:
    """Does: Remove every occurrence of `remove_str`. remove("queued", "ue") -> "qd"."""
    if not text or not remove_str:
        return text
    return replace(text, remove_str, "", -1)


def remove_start(text: str | None, prefix: str | None) -> str | None:
    if not text or not prefix:
        return text
    return text[len(prefix):] if text.startswith(prefix) else text


def remove_end(text: str | None, suffix: str | None) -> str | None:
    if not text or not suffix:
        return text
    return text[: -len(suffix)] if text.endswith(suffix) else text


def replace_chars(text: str | None, search_chars: str | None, replace_chars: str | None) -> str | None:
    """
    Does: Translate each char of `search_chars` to the char at the same position
          in `replace_chars`; search chars beyond its length are deleted.
          replace_chars("hello", "ho", "jy") -> "jelly"
          replace_chars("abcba", "bc", "y")  -> "ayya"
    Returns: The translated string, `text` itself when nothing was touched.
    """
    if not text or not search_chars:
        return text
    replace_chars = replace_chars or ""

    table: dict[int, str | None] = {}
    for i, ch in enumerate(search_chars):
        # first occurrence of a search char wins
        table.setdefault(ord(ch), replace_chars[i] if i < len(replace_chars) else None)
    return text.translate(table)


def replace_pattern(source: str, regex: str, replacement: str) -> str:
    """
    Does: Replace every match of `regex` (compiled with re.DOTALL, so '.' also
          matches newlines) by `replacement`.
    """
    return re.compile(regex, re.DOTALL).sub(replacement, source)


def remove_pattern(source: str, regex: str) -> str:
    return replace_pattern(source, regex, "")


def count_occurrences_of(text: str | None, sub: str | None) -> int:
    """Returns: Number of non-overlapping occurrences; 0 for empty/None input."""
    if not text or not sub:
        return 0
    return text.count(sub)
