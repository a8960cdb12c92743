# commons_text/token/join.py
# ──────────────────────────────────────────────────────────────
# Rebuild a single string from a collection of elements
# ──────────────────────────────────────────────────────────────
"""
join.

Does: Join any sequence, iterator or iterable with a separator. Elements are
      rendered with str(); None elements render as nothing (not "None").
      An explicit [start_index, end_index) range is supported for sequences.
Returns: The joined string, "" for an empty input/range, None for None input.
Used by: Path cleaning and delimited-list helpers.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from commons_text.utils.verify import verify

__all__ = ["join"]

_MISSING = object()


def _text_of(element: Any) -> str:
    return "" if element is None else str(element)


def _join_range(elements: Sequence[Any], separator: str, start_index: int, end_index: int) -> str:
    size = len(elements)
    verify(0 <= start_index, "start_index (%s) must not be negative", start_index)
    verify(start_index <= end_index, "start_index (%s) must not exceed end_index (%s)", start_index, end_index)
    verify(end_index <= size, "end_index (%s) must not exceed size (%s)", end_index, size)
    if end_index - start_index <= 0:
        return ""
    return separator.join(_text_of(elements[i]) for i in range(start_index, end_index))


def _join_iterable(elements: Iterable[Any], separator: str) -> str:
    # One pass, one element of lookahead: zero / one / many
    it = iter(elements)
    first = next(it, _MISSING)
    if first is _MISSING:
        return ""
    second = next(it, _MISSING)
    if second is _MISSING:
        return _text_of(first)

    parts = [_text_of(first), _text_of(second)]
    parts.extend(_text_of(e) for e in it)
    return separator.join(parts)


def join(
    elements: Iterable[Any] | None,
    separator: str | None = None,
    start_index: int | None = None,
    end_index: int | None = None,
) -> str | None:
    """
    Does: Join `elements` with `separator` (None → "").
          join(["a", "b", "c"], ";") -> "a;b;c"
          join([None, "", "a"], ",") -> ",,a"
          join(["a", "b", "c"], "--", 1, 3) -> "b--c"
    Returns: Joined string; None when `elements` is None.
    Raises: PreconditionViolation when an index range is given and falls
            outside 0 <= start_index <= end_index <= len(elements).
    """
    if elements is None:
        return None
    if separator is None:
        separator = ""

    if start_index is None and end_index is None:
        return _join_iterable(elements, separator)

    verify(isinstance(elements, Sequence), "index range requires a sequence, got %s", type(elements).__name__)
    seq: Sequence[Any] = elements  # type: ignore[assignment]
    return _join_range(
        seq,
        separator,
        0 if start_index is None else start_index,
        len(seq) if end_index is None else end_index,
    )
