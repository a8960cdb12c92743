# commons_text/token/blank.py
"""
blank.

Does: None-safe emptiness/blankness checks plus trim/strip helpers built on
      the shared whitespace predicate.
Returns: bools, or the cleaned string (None propagates unless noted).
Used by: Delimited-list tokenization and library callers.
"""

from __future__ import annotations

from collections.abc import Sequence

from commons_text.utils.verify import verify

from .split.split_core import is_whitespace

__all__ = [
    "is_empty",
    "is_not_empty",
    "is_any_empty",
    "is_blank",
    "is_not_blank",
    "is_any_blank",
    "has_text",
    "contains_whitespace",
    "trim",
    "trim_to_none",
    "trim_to_empty",
    "strip",
    "strip_to_none",
    "strip_to_empty",
    "strip_start",
    "strip_end",
    "strip_all",
    "delete_whitespace",
    "trim_leading_character",
    "trim_trailing_character",
]

# trim() removes control characters and space (<= U+0020) from both ends
_CONTROL_AND_SPACE = "".join(chr(c) for c in range(0x21))


# ──────────────────────────────────────────────────────────────
# 1) Checks
# ──────────────────────────────────────────────────────────────


def is_empty(text: str | None) -> bool:
    return text is None or len(text) == 0


def is_not_empty(text: str | None) -> bool:
    return not is_empty(text)


def is_any_empty(*texts: str | None) -> bool:
    """Does: True when no argument is given or any argument is empty/None."""
    if not texts:
        return True
    return any(is_empty(t) for t in texts)


def is_blank(text: str | None) -> bool:
    """Does: True for None, "" or whitespace-only text."""
    if is_empty(text):
        return True
    return all(is_whitespace(ch) for ch in text)  # type: ignore[union-attr]


def is_not_blank(text: str | None) -> bool:
    return not is_blank(text)


def is_any_blank(*texts: str | None) -> bool:
    if not texts:
        return True
    return any(is_blank(t) for t in texts)


def has_text(text: str | None) -> bool:
    """Does: True when `text` holds at least one non-whitespace character."""
    return not is_blank(text)


def contains_whitespace(text: str | None) -> bool:
    if is_empty(text):
        return False
    return any(is_whitespace(ch) for ch in text)  # type: ignore[union-attr]


# ──────────────────────────────────────────────────────────────
# 2) Trim (control chars) and strip (whitespace or explicit chars)
# ──────────────────────────────────────────────────────────────


def trim(text: str | None) -> str | None:
    return None if text is None else text.strip(_CONTROL_AND_SPACE)


def trim_to_none(text: str | None) -> str | None:
    trimmed = trim(text)
    return None if is_empty(trimmed) else trimmed


def trim_to_empty(text: str | None) -> str:
    return "" if text is None else text.strip(_CONTROL_AND_SPACE)


def strip_start(text: str | None, strip_chars: str | None = None) -> str | None:
    """
    Does: Remove leading whitespace (strip_chars=None) or leading chars in `strip_chars`.
          An empty `strip_chars` removes nothing.
    """
    if not text:
        return text
    if strip_chars is None:
        start = 0
        while start < len(text) and is_whitespace(text[start]):
            start += 1
        return text[start:]
    if not strip_chars:
        return text
    return text.lstrip(strip_chars)


def strip_end(text: str | None, strip_chars: str | None = None) -> str | None:
    """Does: Trailing counterpart of strip_start()."""
    if not text:
        return text
    if strip_chars is None:
        end = len(text)
        while end > 0 and is_whitespace(text[end - 1]):
            end -= 1
        return text[:end]
    if not strip_chars:
        return text
    return text.rstrip(strip_chars)


def strip(text: str | None, strip_chars: str | None = None) -> str | None:
    if not text:
        return text
    return strip_end(strip_start(text, strip_chars), strip_chars)


def strip_to_none(text: str | None) -> str | None:
    if text is None:
        return None
    stripped = strip(text)
    return stripped or None


def strip_to_empty(text: str | None) -> str:
    return "" if text is None else strip(text) or ""


def strip_all(texts: Sequence[str | None] | None, strip_chars: str | None = None) -> list[str | None] | None:
    """Does: strip() every element. Returns: a new list; None for None input."""
    if texts is None:
        return None
    return [strip(t, strip_chars) for t in texts]


def delete_whitespace(text: str | None) -> str | None:
    """Does: Drop every whitespace character. "   ab  c  " -> "abc"."""
    if not text:
        return text
    return "".join(ch for ch in text if not is_whitespace(ch))


def trim_leading_character(text: str | None, leading: str) -> str | None:
    if not text:
        return text
    verify(len(leading) == 1, "expected a single character, got %s", repr(leading))
    return text.lstrip(leading)


def trim_trailing_character(text: str | None, trailing: str) -> str | None:
    if not text:
        return text
    verify(len(trailing) == 1, "expected a single character, got %s", repr(trailing))
    return text.rstrip(trailing)
