"""HTTP session utilities for neokikoeru-bucket.

This module provides the configured aiohttp session used for the single
release request.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aiohttp

from neokikoeru_bucket.constants import REQUEST_TIMEOUT_SECONDS


@asynccontextmanager
async def create_http_session(
    timeout_seconds: float = REQUEST_TIMEOUT_SECONDS,
) -> AsyncIterator[aiohttp.ClientSession]:
    """Create configured HTTP session.

    The total timeout covers the whole request, from connection to the
    last byte of the body.

    Args:
        timeout_seconds: Total request deadline in seconds

    Yields:
        Configured aiohttp.ClientSession

    """
    timeout = aiohttp.ClientTimeout(total=timeout_seconds)
    connector = aiohttp.TCPConnector(limit=1)

    async with aiohttp.ClientSession(
        timeout=timeout,
        connector=connector,
    ) as session:
        yield session
