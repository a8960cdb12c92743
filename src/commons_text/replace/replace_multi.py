# commons_text/replace/replace_multi.py
"""
replace_multi.py.

Does: Simultaneous multi-pattern replacement. Each pass walks the text once,
      always substituting the earliest match among all live patterns (ties go
      to the lowest index). The repeated form re-runs passes until a pass finds
      nothing, bounded by a time-to-live equal to the number of patterns.
Returns: The rewritten string; raises CycleDetected when passes never settle.
Used by: Library callers needing "replace all of these at once" semantics.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence

from commons_text.utils.log import debug
from commons_text.utils.verify import verify

__all__ = [
    "CycleDetected",
    "replace_each",
    "replace_each_repeatedly",
]

log = logging.getLogger(__name__)


class CycleDetected(RuntimeError):
    """Raise when repeated replacement keeps feeding one pattern's output to another."""


def _replace_pass(
    text: str,
    search_list: Sequence[str | None],
    replacement_list: Sequence[str | None],
) -> str | None:
    """
    Does: One left-to-right pass over `text`.
    Returns: The rewritten text, or None when no live pattern matches at all.
    """
    # disabled pairs start out exhausted
    exhausted = [
        not search or replacement is None
        for search, replacement in zip(search_list, replacement_list)
    ]

    def next_match(start: int) -> tuple[int, int]:
        text_index = replace_index = -1
        for i, search in enumerate(search_list):
            if exhausted[i]:
                continue
            found = text.find(search, start)  # type: ignore[arg-type]
            if found == -1:
                exhausted[i] = True
            elif text_index == -1 or found < text_index:
                text_index, replace_index = found, i
        return text_index, replace_index

    text_index, replace_index = next_match(0)
    if text_index == -1:
        return None

    parts: list[str] = []
    start = 0
    while text_index != -1:
        parts.append(text[start:text_index])
        parts.append(replacement_list[replace_index])  # type: ignore[arg-type]
        start = text_index + len(search_list[replace_index])  # type: ignore[arg-type]
        text_index, replace_index = next_match(start)
    parts.append(text[start:])
    return "".join(parts)


def replace_each(
    text: str | None,
    search_list: Sequence[str | None] | None,
    replacement_list: Sequence[str | None] | None,
    *,
    repeat: bool = False,
    time_to_live: int = 0,
) -> str | None:
    """
    Does: Replace every search_list[i] with replacement_list[i] in one pass
          (repeat=False), or pass after pass until nothing matches (repeat=True).
          A None/empty search or a None replacement disables that pair.
          replace_each("abcde", ["ab", "d"], ["w", "t"]) -> "wcte"
          replace_each("abcde", ["ab", "d"], ["d", "t"]) -> "dcte"

    Args:
        text: Text to rewrite; returned as-is when empty or None.
        search_list: Patterns; no-op when None or empty.
        replacement_list: Replacements, same length as `search_list`.
        repeat: Re-run passes on the previous output until it settles.
        time_to_live: Passes left before a cycle is assumed (decremented per pass).

    Raises:
        CycleDetected: A pass would run with time_to_live < 0.
        PreconditionViolation: The two lists differ in length.
    """
    if not search_list or not replacement_list:
        return text

    while True:
        if not text:
            return text
        if time_to_live < 0:
            log.debug("replace_each aborted, last output=%r", text)
            raise CycleDetected(
                "Aborting to protect against an endless loop - output of one pass is the input of another"
            )
        verify(
            len(search_list) == len(replacement_list),
            "Search and Replace array lengths don't match: %s vs %s",
            len(search_list),
            len(replacement_list),
        )

        result = _replace_pass(text, search_list, replacement_list)
        if result is None:
            return text
        if not repeat:
            return result
        debug(f"pass ttl={time_to_live}: {text!r} -> {result!r}", topic="replace")
        text, time_to_live = result, time_to_live - 1


def replace_each_repeatedly(
    text: str | None,
    search_list: Sequence[str | None] | None,
    replacement_list: Sequence[str | None] | None,
) -> str | None:
    """
    Does: replace_each() with repeat=True and a time-to-live of len(search_list).
          replace_each_repeatedly("abcde", ["ab", "d"], ["d", "t"]) -> "tcte"
          replace_each_repeatedly("abcde", ["ab", "d"], ["d", "ab"]) -> CycleDetected
    """
    time_to_live = 0 if search_list is None else len(search_list)
    return replace_each(text, search_list, replacement_list, repeat=True, time_to_live=time_to_live)
