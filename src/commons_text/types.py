# commons_text/types.py
from __future__ import annotations

from typing import TypedDict

"""
types.py.

Does: Define lightweight structural types shared across modules.
"""


class PathRules(TypedDict):
    separator: str
    alt_separators: list[str]
    scheme_delimiter: str
    current_dir: str
    parent_dir: str


__all__ = ["PathRules"]

__docformat__ = "google"
