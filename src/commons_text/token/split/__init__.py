# commons_text/token/split/__init__.py
"""
split
=====

Does: Expose the public splitting operations (delimiter, whole-separator, character-type).
Exports: split, split_preserve_all_tokens, split_by_whole_separator,
         split_by_whole_separator_preserve_all_tokens, split_by_character_type,
         split_by_character_type_camel_case, is_whitespace
Used by: Path cleaning, delimited-list helpers and library callers.
"""

from .char_type import (
    split_by_character_type,
    split_by_character_type_camel_case,
)
from .split_core import (
    is_whitespace,
    split,
    split_preserve_all_tokens,
)
from .whole_separator import (
    split_by_whole_separator,
    split_by_whole_separator_preserve_all_tokens,
)

__all__ = [
    "is_whitespace",
    "split",
    "split_preserve_all_tokens",
    "split_by_whole_separator",
    "split_by_whole_separator_preserve_all_tokens",
    "split_by_character_type",
    "split_by_character_type_camel_case",
]
