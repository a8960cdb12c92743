# src/commons_text/utils/load_config.py

"""Load JSON object configs from the package <data/> directory with caching and validation.

Each config file holds one JSON object. Parsed documents are cached by path and
mtime; an optional validator checks/normalizes a fresh copy on every load.

Used by the opt-in path rules getter and by tests needing hot reload.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from types import TracebackType
from typing import Any

# ── Public surface ────────────────────────────────────────────────────────────
Validator = Callable[[dict[str, Any]], dict[str, Any]]
DATA_DIR_ENV = "COMMONS_TEXT_DATA_DIR"
__all__ = [
    "Validator",
    "DATA_DIR_ENV",
    "load_config",
    "clear_config_cache",
    "register_clear_hook",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory can be resolved."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested config file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing/validation fails for a config file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON doesn't match the expected structure."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# cache key: path, mtime, encoding
_CONFIG_CACHE: dict[tuple[Path, float, str], dict[str, Any]] = {}

# Listeners notified on clear_config_cache() (e.g. memoized rule getters).
_CLEAR_HOOKS: list[Callable[[], None]] = []


def register_clear_hook(hook: Callable[[], None]) -> None:
    """Run `hook` every time the config cache is cleared."""
    with _CACHE_LOCK:
        if hook not in _CLEAR_HOOKS:
            _CLEAR_HOOKS.append(hook)


def clear_config_cache() -> None:
    """Empty the in-memory config cache (useful for pytest/hot-reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
        hooks = list(_CLEAR_HOOKS)
    for hook in hooks:
        hook()
    log.debug("Config cache cleared.")


def _package_data_dir() -> Path:
    # <package>/utils/load_config.py -> <package>/data
    return Path(__file__).resolve().parents[1] / "data"


def _env_data_dir() -> Path | None:
    """Resolve data dir from env if set."""
    v = os.environ.get(DATA_DIR_ENV)
    if v:
        return Path(os.path.expanduser(v)).resolve()
    return None


def _default_data_dir() -> Path:
    """Return the env override or the bundled data directory, or raise."""
    cand = _env_data_dir() or _package_data_dir()
    if cand.is_dir():
        return cand
    raise DataDirNotFound(f"No 'data' directory found at {cand}")


def _validate(data: dict[str, Any], name: str, validator: Validator | None) -> dict[str, Any]:
    # validators get their own copy so the cached document stays untouched
    data = dict(data)
    if validator is None:
        return data
    try:
        return validator(data)
    except (ConfigTypeError, ConfigParseError):
        raise
    except Exception as e:
        raise ConfigParseError(f"{name}: validator failed: {e}") from e


def load_config(
    file: str | os.PathLike[str],
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Validator | None = None,
) -> dict[str, Any]:
    """Load <data>/<file>.json as a dict, cache the parsed document, then validate.

    Args:
        file: Config name, with or without the ``.json`` suffix.
        base_dir: Explicit data directory (defaults to env override, then the bundled one).
        encoding: Text encoding of the file.
        validator: Callable checking/normalizing a copy of the document.

    Raises:
        ConfigFileNotFound: Missing file, or a path escaping the data directory.
        ConfigParseError: Invalid JSON or a failing validator.
        ConfigTypeError: The document is not a JSON object, or the validator rejects its shape.
    """
    data_dir = (base_dir or _default_data_dir()).resolve()

    # Normalize file path and enforce staying under data_dir
    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith(".json") else f"{file_str}.json"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e

    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")

    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime, encoding)

    with _CACHE_LOCK:
        cached = _CONFIG_CACHE.get(cache_key)
    if cached is not None:
        log.debug("Config cache HIT: %s", path.name)
        return _validate(cached, path.name, validator)

    try:
        with path.open("r", encoding=encoding, errors="strict", newline="") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")

    with _CACHE_LOCK:
        _CONFIG_CACHE[cache_key] = data
    log.debug("Config cache MISS → STORED: %s", path.name)

    return _validate(data, path.name, validator)


# ── Context manager to temporarily override the data directory ───────────────
class temp_data_dir:
    """Temporarily point COMMONS_TEXT_DATA_DIR at `path` for the block."""

    def __init__(self, path: os.PathLike[str] | str):
        self._new = str(path)
        self._old: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._old = os.environ.get(DATA_DIR_ENV)
        os.environ[DATA_DIR_ENV] = self._new
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop(DATA_DIR_ENV, None)
        else:
            os.environ[DATA_DIR_ENV] = self._old
        clear_config_cache()
