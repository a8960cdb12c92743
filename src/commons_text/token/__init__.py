"""
token.
=====

Does: Provide tokenization primitives: splitting, joining, blank/trim checks and delimited lists.
Exports: split*, join, is_empty/is_blank/trim/strip family, delimited-list helpers
Used by: Replace and path modules, library callers.
"""

from __future__ import annotations

from .blank import (
    contains_whitespace,
    delete_whitespace,
    has_text,
    is_any_blank,
    is_any_empty,
    is_blank,
    is_empty,
    is_not_blank,
    is_not_empty,
    strip,
    strip_all,
    strip_end,
    strip_start,
    strip_to_empty,
    strip_to_none,
    trim,
    trim_leading_character,
    trim_to_empty,
    trim_to_none,
    trim_trailing_character,
)
from .delimited import (
    collection_to_comma_delimited_string,
    collection_to_delimited_string,
    comma_delimited_list_to_set,
    comma_delimited_list_to_string_array,
    delimited_list_to_string_array,
    tokenize_to_string_array,
)
from .join import join
from .split import (
    is_whitespace,
    split,
    split_by_character_type,
    split_by_character_type_camel_case,
    split_by_whole_separator,
    split_by_whole_separator_preserve_all_tokens,
    split_preserve_all_tokens,
)

__all__ = [
    # split
    "is_whitespace",
    "split",
    "split_preserve_all_tokens",
    "split_by_whole_separator",
    "split_by_whole_separator_preserve_all_tokens",
    "split_by_character_type",
    "split_by_character_type_camel_case",
    # join
    "join",
    # blank / trim
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
    # delimited lists
    "tokenize_to_string_array",
    "delimited_list_to_string_array",
    "comma_delimited_list_to_string_array",
    "comma_delimited_list_to_set",
    "collection_to_delimited_string",
    "collection_to_comma_delimited_string",
]
