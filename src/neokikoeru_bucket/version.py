"""Release version resolution.

The version comes from a single environment variable and is accepted only
in strict ``MAJOR.MINOR.PATCH`` form. Nothing is normalized: a leading
``v`` or surrounding whitespace makes the value invalid.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from neokikoeru_bucket.constants import VERSION_ENV_KEY, VERSION_PATTERN
from neokikoeru_bucket.exceptions import InvalidVersionError
from neokikoeru_bucket.logger import get_logger

logger = get_logger(__name__)


def is_valid_version(value: str) -> bool:
    """Check whether a string is a plain MAJOR.MINOR.PATCH version.

    Args:
        value: Candidate version string

    Returns:
        True if the whole string matches the version pattern

    """
    return bool(value) and VERSION_PATTERN.fullmatch(value) is not None


def resolve_version(environ: Mapping[str, str] | None = None) -> str:
    """Read and validate the release version from the environment.

    Args:
        environ: Environment mapping (defaults to ``os.environ``)

    Returns:
        The version string exactly as provided

    Raises:
        InvalidVersionError: If the variable is unset, empty, or malformed

    """
    env = os.environ if environ is None else environ
    value = env.get(VERSION_ENV_KEY, "")
    if not is_valid_version(value):
        msg = (
            f"${VERSION_ENV_KEY} is not a valid version. "
            "Please provide a valid semver"
        )
        raise InvalidVersionError(msg)

    logger.debug("Resolved version %s from $%s", value, VERSION_ENV_KEY)
    return value
