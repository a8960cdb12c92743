# commons_text/token/split/split_core.py

"""
split_core.py.

Does: Delimiter-driven splitting of text into tokens. The delimiter is either
      whitespace (None), a single character, or a set of characters; adjacent
      delimiters are collapsed unless all tokens are preserved, and an optional
      cap makes the last token absorb the rest of the input.
Returns: list[str] of tokens, [] for empty input, None for None input.
Used by: Whole-separator splitting (whitespace fallback), path cleaning,
         delimited-list helpers.
"""
from __future__ import annotations

from collections.abc import Callable

__all__ = [
    "is_whitespace",
    "split",
    "split_preserve_all_tokens",
]

# isspace() minus the non-breaking spaces and NEL
_NON_BREAKING = frozenset({"\u00a0", "\u2007", "\u202f", "\u0085"})


def is_whitespace(ch: str) -> bool:
    """
    Does: Whitespace predicate shared by every whitespace-delimited operation.
    Returns: True for space separators and control whitespace, False for
             non-breaking spaces.
    """
    return ch.isspace() and ch not in _NON_BREAKING


def _delimiter_test(separator_chars: str | None) -> Callable[[str], bool]:
    if separator_chars is None:
        return is_whitespace
    if len(separator_chars) == 1:
        return separator_chars.__eq__
    return frozenset(separator_chars).__contains__


def _split_worker(
    text: str | None,
    separator_chars: str | None,
    max_tokens: int,
    preserve_all_tokens: bool,
) -> list[str] | None:
    """
    Does: Scan left to right; on a delimiter emit the pending token when inside
          one (or always when preserving), then move the split point past it.
          The `max_tokens`-th emission swallows everything that is left.
    Returns: Tokens in order.
    """
    if text is None:
        return None
    n = len(text)
    if n == 0:
        return []

    is_delim = _delimiter_test(separator_chars)
    tokens: list[str] = []
    emitted = 0
    i = start = 0
    match = False
    last_match = False

    while i < n:
        if is_delim(text[i]):
            if match or preserve_all_tokens:
                last_match = True
                emitted += 1
                if emitted == max_tokens:
                    i = n
                    last_match = False
                tokens.append(text[start:i])
                match = False
            i += 1
            start = i
            continue
        last_match = False
        match = True
        i += 1

    if match or (preserve_all_tokens and last_match):
        tokens.append(text[start:i])
    return tokens


def split(text: str | None, separator_chars: str | None = None, max_tokens: int = -1) -> list[str] | None:
    """
    Does: Split `text` on `separator_chars`, treating runs of delimiters as one
          and dropping leading/trailing delimiters.
          split("ab:cd:ef", ":", 2) -> ["ab", "cd:ef"]
    Returns: Tokens, or None for None input.
    """
    return _split_worker(text, separator_chars, max_tokens, False)


def split_preserve_all_tokens(
    text: str | None, separator_chars: str | None = None, max_tokens: int = -1
) -> list[str] | None:
    """
    Does: Split like split(), but every delimiter is a split point, so adjacent,
          leading and trailing delimiters produce empty tokens.
          split_preserve_all_tokens("a b c ", " ") -> ["a", "b", "c", ""]
    Returns: Tokens, or None for None input.
    """
    return _split_worker(text, separator_chars, max_tokens, True)
