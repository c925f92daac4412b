"""Environment-driven logging settings.

Reads only the environment and constants so the logger can be set up
before anything else in the package is imported.
"""

import os
from collections.abc import Mapping
from pathlib import Path

from neokikoeru_bucket.constants import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    LOG_FILE_ENV_KEY,
    LOG_LEVEL_ENV_KEY,
)

_VALID_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


def load_log_settings(
    environ: Mapping[str, str] | None = None,
) -> tuple[str, str, Path | None]:
    """Load console level, file level, and optional file path.

    Environment Variables:
        LOG_LEVEL: Console log level. Unknown names fall back to WARNING
            so a typo in CI never hides the real diagnostic.
        NEOKIKOERU_LOG_FILE: When set, records are also written to this
            file through a rotating handler.

    Args:
        environ: Environment mapping (defaults to ``os.environ``)

    Returns:
        Tuple of (console_level, file_level, log_path) where log_path is
        None when file logging is disabled

    """
    env = os.environ if environ is None else environ

    console_level = env.get(LOG_LEVEL_ENV_KEY, "").strip().upper()
    if console_level not in _VALID_LEVELS:
        console_level = DEFAULT_CONSOLE_LOG_LEVEL

    raw_path = env.get(LOG_FILE_ENV_KEY, "").strip()
    log_path = Path(raw_path).expanduser() if raw_path else None

    return console_level, DEFAULT_LOG_LEVEL, log_path
