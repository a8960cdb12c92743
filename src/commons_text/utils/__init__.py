# commons_text/utils/__init__.py
"""

Does: Provide config loading, precondition checks and lightweight debug logging for the text stack.
Returns: Public API via load_config/clear_config_cache, verify/not_none and debug/reload_topics.
Used by: Splitters, replacers, path normalization and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
    temp_data_dir,
)
from .log import (
    debug,
    reload_topics,
)
from .verify import (
    PreconditionViolation,
    format_message,
    not_none,
    verify,
)

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Preconditions
    "PreconditionViolation",
    "verify",
    "not_none",
    "format_message",
    # Logging helpers
    "debug",
    "reload_topics",
]
