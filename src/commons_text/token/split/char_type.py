# commons_text/token/split/char_type.py
"""
char_type.py.

Does: Split text into runs of characters sharing a Unicode general category
      (letters vs digits vs punctuation...), optionally camel-case aware.
Returns: list[str] runs / [] / None.
Used by: Identifier tokenization (e.g. "foo200Bar" → words and numbers).
"""
from __future__ import annotations

import unicodedata

__all__ = [
    "split_by_character_type",
    "split_by_character_type_camel_case",
]

_UPPER = "Lu"
_LOWER = "Ll"


def _split_by_character_type(text: str | None, camel_case: bool) -> list[str] | None:
    if text is None:
        return None
    if not text:
        return []

    tokens: list[str] = []
    token_start = 0
    current_type = unicodedata.category(text[0])
    for pos in range(1, len(text)):
        char_type = unicodedata.category(text[pos])
        if char_type == current_type:
            continue
        if camel_case and char_type == _LOWER and current_type == _UPPER:
            # "ASFRules": the "R" belongs to the lowercase run that follows
            new_token_start = pos - 1
            if new_token_start != token_start:
                tokens.append(text[token_start:new_token_start])
                token_start = new_token_start
        else:
            tokens.append(text[token_start:pos])
            token_start = pos
        current_type = char_type
    tokens.append(text[token_start:])
    return tokens


def split_by_character_type(text: str | None) -> list[str] | None:
    """
    Does: Group contiguous characters of the same category.
          "foo200Bar" -> ["foo", "200", "B", "ar"]
    """
    return _split_by_character_type(text, False)


def split_by_character_type_camel_case(text: str | None) -> list[str] | None:
    """
    Does: Same grouping, but an uppercase letter followed by lowercase ones
          starts a new word.
          "foo200Bar" -> ["foo", "200", "Bar"], "ASFRules" -> ["ASF", "Rules"]
    """
    return _split_by_character_type(text, True)
