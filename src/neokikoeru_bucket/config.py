"""Process-wide settings built once at startup.

Settings are read from the environment a single time and frozen. Stages
receive the values they need as arguments and never look at the
environment themselves.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from neokikoeru_bucket.constants import (
    MANIFEST_PATH,
    RELEASE_URL_TEMPLATE,
    REQUEST_TIMEOUT_SECONDS,
    TEMPLATE_PATH,
)
from neokikoeru_bucket.version import resolve_version


@dataclass(slots=True, frozen=True)
class Settings:
    """Immutable run configuration.

    Attributes:
        version: Validated release version (MAJOR.MINOR.PATCH)
        template_path: Manifest template location
        manifest_path: Rendered manifest destination
        release_url_template: GitHub endpoint with a ``{version}`` field
        request_timeout: Total deadline for the release request in seconds

    """

    version: str
    template_path: Path = Path(TEMPLATE_PATH)
    manifest_path: Path = Path(MANIFEST_PATH)
    release_url_template: str = RELEASE_URL_TEMPLATE
    request_timeout: float = REQUEST_TIMEOUT_SECONDS


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build the run settings from the environment.

    Args:
        environ: Environment mapping (defaults to ``os.environ``)

    Returns:
        Frozen settings for this run

    Raises:
        InvalidVersionError: If the version variable is missing or malformed

    """
    env = os.environ if environ is None else environ
    return Settings(version=resolve_version(env))
