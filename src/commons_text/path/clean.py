# commons_text/path/clean.py
"""
clean.py.

Does: Normalize filesystem/URL-style paths: unify separators, keep an opaque
      scheme prefix ("file:", "C:"), and collapse "." / ".." segments with a
      right-to-left walk. Unresolved ".." segments are kept at the front.
Returns: clean_path() -> str | None, path_equals() -> bool, plus small helpers.
Rules: DEFAULT_PATH_RULES unless a PathRules mapping is passed; get_path_rules()
       reads data/path_rules.json for callers that opt in to configured rules.
Used by: Resource-path comparison and library callers.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from commons_text.replace.replace_core import replace
from commons_text.token.join import join
from commons_text.token.split.split_core import split_preserve_all_tokens
from commons_text.types import PathRules
from commons_text.utils.load_config import (
    ConfigTypeError,
    load_config,
    register_clear_hook,
)
from commons_text.utils.log import debug
from commons_text.utils.verify import not_none

__all__ = [
    "clean_path",
    "path_equals",
    "apply_relative_path",
    "unqualify",
    "DEFAULT_PATH_RULES",
    "get_path_rules",
    "reload_path_rules",
]

log = logging.getLogger(__name__)

_RULE_KEYS = ("separator", "scheme_delimiter", "current_dir", "parent_dir")

DEFAULT_PATH_RULES: PathRules = {
    "separator": "/",
    "alt_separators": ["\\"],
    "scheme_delimiter": ":",
    "current_dir": ".",
    "parent_dir": "..",
}


# ─────────────────────────────────────────────────────────────────────────────
# Rules (data/path_rules.json)
# ─────────────────────────────────────────────────────────────────────────────


def _validate_rules(data: dict[str, Any]) -> dict[str, Any]:
    for key in _RULE_KEYS:
        value = data.get(key)
        if not isinstance(value, str) or not value:
            raise ConfigTypeError(f"path_rules: '{key}' must be a non-empty string, got {value!r}")
    if len(data["separator"]) != 1:
        raise ConfigTypeError(f"path_rules: 'separator' must be one character, got {data['separator']!r}")

    alt = data.get("alt_separators", [])
    if not isinstance(alt, list) or not all(isinstance(a, str) and a for a in alt):
        raise ConfigTypeError(f"path_rules: 'alt_separators' must be a list of non-empty strings, got {alt!r}")
    return {**data, "alt_separators": list(alt)}


@lru_cache(maxsize=1)
def get_path_rules() -> PathRules:
    """
    Does: Load and validate data/path_rules.json once (opt-in; pass the result
          as `rules`). Honours COMMONS_TEXT_DATA_DIR.
    Returns: The active PathRules.
    """
    rules = load_config("path_rules", validator=_validate_rules)
    log.debug("Path rules loaded: %s", rules)
    return rules  # type: ignore[return-value]


def reload_path_rules() -> None:
    """Forget the memoized rules so the next call re-reads the config."""
    get_path_rules.cache_clear()


register_clear_hook(reload_path_rules)


# ─────────────────────────────────────────────────────────────────────────────
# Normalization
# ─────────────────────────────────────────────────────────────────────────────


def _split_prefix(path: str, rules: PathRules) -> tuple[str, str]:
    """
    Does: Peel the scheme prefix (up to and including the first scheme delimiter,
          unless a separator precedes it) and a leading separator off `path`.
    Returns: (prefix, remaining path).
    """
    sep = rules["separator"]
    prefix = ""
    idx = path.find(rules["scheme_delimiter"])
    if idx != -1:
        candidate = path[: idx + len(rules["scheme_delimiter"])]
        if sep not in candidate:
            prefix = candidate
            path = path[len(candidate):]
    if path.startswith(sep):
        prefix += sep
        path = path[len(sep):]
    return prefix, path


def _collapse(segments: list[str], rules: PathRules) -> list[str]:
    kept: list[str] = []
    tops = 0
    for segment in reversed(segments):
        if segment == rules["current_dir"]:
            continue
        if segment == rules["parent_dir"]:
            tops += 1
        elif tops > 0:
            # consumed by a pending ".."
            tops -= 1
        else:
            kept.append(segment)
    kept.extend([rules["parent_dir"]] * tops)
    kept.reverse()
    return kept


def clean_path(path: str | None, rules: PathRules | None = None) -> str | None:
    """
    Does: Normalize `path`:
          - alternate separators ("\\") → canonical separator ("/")
          - keep a scheme prefix ("file:") and a leading separator untouched
          - drop "." segments, let ".." consume the segment before it
          clean_path("file:core/../core/io/Resource.class") -> "file:core/io/Resource.class"
          clean_path("../a/./b/../c") -> "../a/c"
    Returns: The normalized path; None for None input.
    """
    if path is None:
        return None
    rules = rules or DEFAULT_PATH_RULES
    sep = rules["separator"]

    work = path
    for alt in rules["alt_separators"]:
        work = replace(work, alt, sep) or ""

    prefix, work = _split_prefix(work, rules)
    if prefix:
        debug(f"prefix={prefix!r} rest={work!r}", topic="path")

    segments = split_preserve_all_tokens(work, sep) or []
    return prefix + (join(_collapse(segments, rules), sep) or "")


def path_equals(path1: str | None, path2: str | None, rules: PathRules | None = None) -> bool:
    """Does: Compare two paths after clean_path() normalization."""
    return clean_path(path1, rules) == clean_path(path2, rules)


def apply_relative_path(path: str, relative_path: str, rules: PathRules | None = None) -> str:
    """
    Does: Resolve `relative_path` against the directory part of `path`.
          apply_relative_path("mypath/myfile", "other.txt") -> "mypath/other.txt"
    Returns: `relative_path` as-is when `path` has no separator.
    """
    not_none(path, "path must not be None")
    not_none(relative_path, "relative_path must not be None")
    sep = (rules or DEFAULT_PATH_RULES)["separator"]
    idx = path.rfind(sep)
    if idx == -1:
        return relative_path
    new_path = path[:idx]
    if not relative_path.startswith(sep):
        new_path += sep
    return new_path + relative_path


def unqualify(qualified_name: str, separator: str = ".") -> str:
    """Does: Keep what follows the last `separator`. "this.name.is.qualified" -> "qualified"."""
    return qualified_name[qualified_name.rfind(separator) + 1:]
