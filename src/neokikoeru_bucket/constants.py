"""Centralized constants module for neokikoeru-bucket.

This module serves as the single source of truth for all fixed values used
by the manifest generator. Constants are organized by logical categories
and use typing.Final annotations to ensure immutability.

Usage:
    from neokikoeru_bucket.constants import VERSION_ENV_KEY
"""

import re
from typing import Final

# =============================================================================
# Version Constants
# =============================================================================

# Environment variable that supplies the release version
VERSION_ENV_KEY: Final[str] = "NEOKIKOERU_VERSION"

# MAJOR.MINOR.PATCH, digits only, no pre-release or build metadata
VERSION_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^[0-9]+\.[0-9]+\.[0-9]+$"
)

# =============================================================================
# GitHub API Constants
# =============================================================================

RELEASE_URL_TEMPLATE: Final[str] = (
    "https://api.github.com/repos/vscodev/neokikoeru/releases/tags/v{version}"
)

GITHUB_API_HEADERS: Final[tuple[tuple[str, str], ...]] = (
    ("Accept", "application/vnd.github+json"),
    ("X-GitHub-Api-Version", "2022-11-28"),
)

HTTP_OK: Final[int] = 200

# Total deadline for the release request, measured from call start
REQUEST_TIMEOUT_SECONDS: Final[float] = 10.0

# =============================================================================
# Asset Constants
# =============================================================================

ASSET_NAME_WINDOWS_AMD64: Final[str] = "neokikoeru-windows-amd64.zip"
ASSET_NAME_WINDOWS_ARM64: Final[str] = "neokikoeru-windows-arm64.zip"

DIGEST_PREFIX_SHA256: Final[str] = "sha256:"

# =============================================================================
# Manifest Constants
# =============================================================================

TEMPLATE_PATH: Final[str] = "./templates/neokikoeru.json.tmpl"
MANIFEST_PATH: Final[str] = "./bucket/neokikoeru.json"

# =============================================================================
# Logging Constants
# =============================================================================

LOG_LEVEL_ENV_KEY: Final[str] = "LOG_LEVEL"
LOG_FILE_ENV_KEY: Final[str] = "NEOKIKOERU_LOG_FILE"

DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"
DEFAULT_LOG_LEVEL: Final[str] = "INFO"

# Maximum size for rotated log files (bytes)
LOG_MAX_FILE_SIZE_BYTES: Final[int] = 1024 * 1024  # 1 MB

LOG_BACKUP_COUNT: Final[int] = 3

# Console and file format strings used by the logger
LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# Color mapping for console output levels
LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}
