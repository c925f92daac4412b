"""Low-level GitHub API client for the release request.

One GET per run, no retries and no pagination. Every failure is mapped to
a domain exception so the caller can stop the pipeline.
"""

from __future__ import annotations

from typing import Any

import aiohttp
import orjson

from neokikoeru_bucket.constants import (
    GITHUB_API_HEADERS,
    HTTP_OK,
    RELEASE_URL_TEMPLATE,
    REQUEST_TIMEOUT_SECONDS,
)
from neokikoeru_bucket.exceptions import (
    DecodeError,
    GitHubAPIError,
    NetworkError,
)
from neokikoeru_bucket.github.models import APIErrorBody, Release
from neokikoeru_bucket.logger import get_logger

logger = get_logger(__name__)


def build_release_url(
    version: str, url_template: str = RELEASE_URL_TEMPLATE
) -> str:
    """Interpolate the version into the release endpoint.

    The version is inserted verbatim, without escaping.

    Args:
        version: Validated release version
        url_template: Endpoint template with a ``{version}`` field

    Returns:
        Request URL for the ``v<version>`` tag

    """
    return url_template.format(version=version)


def _decode_json(body: bytes, context: str) -> Any:
    try:
        return orjson.loads(body)
    except orjson.JSONDecodeError as e:
        msg = f"Failed to decode {context}: {e}"
        raise DecodeError(msg) from e


class ReleaseAPIClient:
    """Handles direct communication with GitHub API for release data."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        url_template: str = RELEASE_URL_TEMPLATE,
        timeout_seconds: float = REQUEST_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize the API client.

        Args:
            session: aiohttp session for making requests
            url_template: Endpoint template with a ``{version}`` field
            timeout_seconds: Total deadline for the request

        """
        self.session = session
        self.url_template = url_template
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self.headers = dict(GITHUB_API_HEADERS)

    async def _get(self, url: str) -> tuple[int, bytes]:
        """Perform the GET and read the whole body.

        Raises:
            NetworkError: On transport failure or timeout

        """
        try:
            async with self.session.get(
                url=url, headers=self.headers, timeout=self.timeout
            ) as response:
                body = await response.read()
                return response.status, body
        except (aiohttp.ClientError, TimeoutError) as e:
            logger.debug("Request to %s failed: %r", url, e)
            msg = f"Request to {url} failed: {str(e) or type(e).__name__}"
            raise NetworkError(msg) from e

    async def fetch_release_by_tag(self, version: str) -> Release:
        """Fetch the release tagged ``v<version>``.

        Args:
            version: Validated release version

        Returns:
            Decoded release

        Raises:
            NetworkError: On transport failure or timeout
            GitHubAPIError: On a non-200 status with a decodable body
            DecodeError: On a malformed success or error body

        """
        url = build_release_url(version, self.url_template)
        logger.debug("Fetching release from %s", url)

        status, body = await self._get(url)

        if status != HTTP_OK:
            error = APIErrorBody.from_api_response(
                _decode_json(body, "GitHub error response")
            )
            logger.debug("GitHub answered %d: %s", status, error.message)
            raise GitHubAPIError(error.message, status)

        release = Release.from_api_response(
            _decode_json(body, "GitHub release response")
        )
        logger.debug(
            "Fetched release '%s' with %d assets",
            release.name,
            len(release.assets),
        )
        return release
