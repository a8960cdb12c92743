# commons_text/token/split/whole_separator.py
"""
whole_separator.py.

Does: Split text on a multi-character separator matched as a whole substring
      (not as a character set), with optional empty-token preservation and a
      max-token cap.
Returns: list[str] tokens / [] / None, mirroring split_core.
Used by: Callers that need literal separators such as "-!-" or ", ".
"""
from __future__ import annotations

from .split_core import _split_worker

__all__ = [
    "split_by_whole_separator",
    "split_by_whole_separator_preserve_all_tokens",
]


def _whole_separator_worker(
    text: str | None,
    separator: str | None,
    max_tokens: int,
    preserve_all_tokens: bool,
) -> list[str] | None:
    if text is None:
        return None
    n = len(text)
    if n == 0:
        return []

    if not separator:
        # None or "" means whitespace
        return _split_worker(text, None, max_tokens, preserve_all_tokens)

    sep_len = len(separator)
    tokens: list[str] = []
    emitted = 0
    beg = end = 0
    while end < n:
        end = text.find(separator, beg)

        if end == -1:
            tokens.append(text[beg:])
            end = n
        elif end > beg:
            emitted += 1
            if emitted == max_tokens:
                tokens.append(text[beg:])
                end = n
            else:
                tokens.append(text[beg:end])
                beg = end + sep_len
        else:
            # consecutive separator
            if preserve_all_tokens:
                emitted += 1
                if emitted == max_tokens:
                    tokens.append(text[beg:])
                    end = n
                else:
                    tokens.append("")
            beg = end + sep_len

    return tokens


def split_by_whole_separator(
    text: str | None, separator: str | None = None, max_tokens: int = -1
) -> list[str] | None:
    """
    Does: Split on the literal `separator`; consecutive separators are absorbed.
          split_by_whole_separator("ab-!-cd-!-ef", "-!-") -> ["ab", "cd", "ef"]
    Returns: Tokens, or None for None input.
    """
    return _whole_separator_worker(text, separator, max_tokens, False)


def split_by_whole_separator_preserve_all_tokens(
    text: str | None, separator: str | None = None, max_tokens: int = -1
) -> list[str] | None:
    """Does: Like split_by_whole_separator(), but consecutive separators yield empty tokens."""
    return _whole_separator_worker(text, separator, max_tokens, True)
