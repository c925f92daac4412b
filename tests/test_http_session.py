"""Tests for the HTTP session factory."""

import aiohttp
import pytest

from neokikoeru_bucket.http_session import create_http_session


@pytest.mark.asyncio
async def test_session_timeout() -> None:
    """Test the session carries the total request deadline."""
    async with create_http_session(10.0) as session:
        assert isinstance(session, aiohttp.ClientSession)
        assert session.timeout.total == 10.0
        assert not session.closed

    assert session.closed
