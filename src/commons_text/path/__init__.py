# commons_text/path/__init__.py
"""
path
====

Does: Expose path normalization and comparison.
Exports: clean_path, path_equals, apply_relative_path, unqualify, DEFAULT_PATH_RULES,
         get_path_rules, reload_path_rules
Used by: Library callers comparing or canonicalizing resource paths.
"""

from .clean import (
    DEFAULT_PATH_RULES,
    apply_relative_path,
    clean_path,
    get_path_rules,
    path_equals,
    reload_path_rules,
    unqualify,
)

__all__ = [
    "clean_path",
    "path_equals",
    "apply_relative_path",
    "unqualify",
    "DEFAULT_PATH_RULES",
    "get_path_rules",
    "reload_path_rules",
]
