"""Pytest configuration and fixtures for neokikoeru-bucket tests."""

import logging
from unittest.mock import AsyncMock, MagicMock

import orjson
import pytest


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for all package loggers during tests.

    This allows pytest's caplog fixture to capture logs from all loggers,
    even those created with propagate=False in production code.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("neokikoeru_bucket"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logger = logging.getLogger(name)
        logger.propagate = propagate_value


@pytest.fixture
def release_payload():
    """Release body with both tracked assets and one untracked asset."""
    return {
        "name": "v1.2.3",
        "tag_name": "v1.2.3",
        "assets": [
            {
                "name": "neokikoeru-windows-amd64.zip",
                "digest": "sha256:" + "a" * 64,
                "browser_download_url": (
                    "https://github.com/vscodev/neokikoeru/releases/"
                    "download/v1.2.3/neokikoeru-windows-amd64.zip"
                ),
                "size": 1024,
            },
            {
                "name": "neokikoeru-windows-arm64.zip",
                "digest": "sha256:" + "b" * 64,
                "browser_download_url": (
                    "https://github.com/vscodev/neokikoeru/releases/"
                    "download/v1.2.3/neokikoeru-windows-arm64.zip"
                ),
                "size": 2048,
            },
            {
                "name": "neokikoeru-linux-amd64.tar.gz",
                "digest": "sha256:" + "c" * 64,
                "browser_download_url": "https://example.com/linux.tar.gz",
            },
        ],
    }


@pytest.fixture
def make_session():
    """Build a mock aiohttp.ClientSession answering one GET.

    Pass either a JSON-serializable payload or raw bytes as ``body``.
    """

    def _make(status=200, body=None):
        if body is None:
            body = {}
        raw = body if isinstance(body, bytes) else orjson.dumps(body)

        mock_response = MagicMock()
        mock_response.status = status
        mock_response.read = AsyncMock(return_value=raw)

        session = MagicMock()
        session.get.return_value.__aenter__.return_value = mock_response
        session.get.return_value.__aexit__.return_value = False
        return session

    return _make
