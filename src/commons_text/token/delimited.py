# commons_text/token/delimited.py
"""
delimited.py.

Does: Convert between delimited strings and lists: delimiter-set tokenization
      with trimming, whole-delimiter lists that keep empty entries, and the
      comma-separated conveniences.
Returns: list[str] / str.
Used by: Config-style value parsing and library callers.
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .blank import trim
from .join import join
from .split.split_core import split
from .split.whole_separator import split_by_whole_separator_preserve_all_tokens

__all__ = [
    "tokenize_to_string_array",
    "delimited_list_to_string_array",
    "comma_delimited_list_to_string_array",
    "comma_delimited_list_to_set",
    "collection_to_delimited_string",
    "collection_to_comma_delimited_string",
]


def _delete_any(text: str, chars_to_delete: str | None) -> str:
    if not chars_to_delete:
        return text
    return text.translate({ord(c): None for c in chars_to_delete})


def tokenize_to_string_array(
    text: str | None,
    delimiters: str | None,
    trim_tokens: bool = True,
    ignore_empty_tokens: bool = True,
) -> list[str] | None:
    """
    Does: Split on any character of `delimiters` (None → whitespace), optionally
          trimming each token and dropping the ones left empty.
          tokenize_to_string_array(" a ; b;;c ", ";") -> ["a", "b", "c"]
    Returns: Tokens, or None for None input.
    """
    if text is None:
        return None
    tokens: list[str] = []
    for token in split(text, delimiters) or []:
        if trim_tokens:
            token = trim(token) or ""
        if not ignore_empty_tokens or token:
            tokens.append(token)
    return tokens


def delimited_list_to_string_array(
    text: str | None, delimiter: str | None, chars_to_delete: str | None = None
) -> list[str]:
    """
    Does: Split on the whole `delimiter`, keeping empty entries. A None delimiter
          yields [text]; an empty one yields one entry per character. Characters
          in `chars_to_delete` are removed from every entry.
          delimited_list_to_string_array("a,,b", ",") -> ["a", "", "b"]
    Returns: Entries; [] for None or empty text.
    """
    if text is None:
        return []
    if delimiter is None:
        return [text]
    if delimiter == "":
        return [_delete_any(ch, chars_to_delete) for ch in text]
    parts = split_by_whole_separator_preserve_all_tokens(text, delimiter) or []
    return [_delete_any(p, chars_to_delete) for p in parts]


def comma_delimited_list_to_string_array(text: str | None) -> list[str]:
    return delimited_list_to_string_array(text, ",")


def comma_delimited_list_to_set(text: str | None) -> list[str]:
    """Does: Comma-split and de-duplicate. Returns: unique entries in first-seen order."""
    return list(dict.fromkeys(comma_delimited_list_to_string_array(text)))


def collection_to_delimited_string(
    items: Iterable[Any] | None, delim: str, prefix: str = "", suffix: str = ""
) -> str:
    """
    Does: Render each item as prefix + item + suffix and join them with `delim`.
    Returns: The joined text; "" for None or empty input.
    """
    if items is None:
        return ""
    wrapped = (f"{prefix}{'' if item is None else item}{suffix}" for item in items)
    return join(wrapped, delim) or ""


def collection_to_comma_delimited_string(items: Iterable[Any] | None) -> str:
    return collection_to_delimited_string(items, ",")
