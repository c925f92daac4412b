"""Tests for the GitHub release API client."""

from unittest.mock import MagicMock

import aiohttp
import pytest

from neokikoeru_bucket.exceptions import (
    DecodeError,
    GitHubAPIError,
    NetworkError,
)
from neokikoeru_bucket.github.client import (
    ReleaseAPIClient,
    build_release_url,
)


class TestBuildReleaseUrl:
    """Test build_release_url function."""

    @pytest.mark.parametrize("version", ["0.0.1", "1.2.3", "12.0.345"])
    def test_version_substituted_verbatim(self, version: str) -> None:
        """Test the version lands in the tag path untouched."""
        assert build_release_url(version) == (
            "https://api.github.com/repos/vscodev/neokikoeru/"
            f"releases/tags/v{version}"
        )

    def test_custom_template(self) -> None:
        """Test a custom endpoint template is honoured."""
        url = build_release_url("1.0.0", "https://ghe.local/tags/v{version}")
        assert url == "https://ghe.local/tags/v1.0.0"


class TestReleaseAPIClient:
    """Test ReleaseAPIClient.fetch_release_by_tag."""

    @pytest.mark.asyncio
    async def test_success(self, make_session, release_payload) -> None:
        """Test a 200 response is decoded into a Release."""
        session = make_session(200, release_payload)
        client = ReleaseAPIClient(session)

        release = await client.fetch_release_by_tag("1.2.3")

        assert release.name == "v1.2.3"
        assert len(release.assets) == 3

    @pytest.mark.asyncio
    async def test_request_shape(self, make_session) -> None:
        """Test URL, fixed headers and the 10 second total timeout."""
        session = make_session(200, {"name": "x", "assets": []})
        client = ReleaseAPIClient(session)

        await client.fetch_release_by_tag("1.2.3")

        session.get.assert_called_once()
        kwargs = session.get.call_args.kwargs
        assert kwargs["url"] == (
            "https://api.github.com/repos/vscodev/neokikoeru/"
            "releases/tags/v1.2.3"
        )
        assert kwargs["headers"] == {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        assert kwargs["timeout"].total == 10.0

    @pytest.mark.asyncio
    async def test_non_success_surfaces_api_message(
        self, make_session
    ) -> None:
        """Test a non-200 body's message becomes the error text."""
        session = make_session(404, {"message": "Not Found"})
        client = ReleaseAPIClient(session)

        with pytest.raises(GitHubAPIError) as exc_info:
            await client.fetch_release_by_tag("9.9.9")

        assert str(exc_info.value) == "Not Found"
        assert exc_info.value.status == 404

    @pytest.mark.asyncio
    async def test_non_success_with_bad_body(self, make_session) -> None:
        """Test an undecodable error body is a decode error."""
        session = make_session(500, b"<html>oops</html>")
        client = ReleaseAPIClient(session)

        with pytest.raises(DecodeError, match="error response"):
            await client.fetch_release_by_tag("1.2.3")

    @pytest.mark.asyncio
    async def test_success_with_bad_body(self, make_session) -> None:
        """Test malformed JSON on a 200 is a decode error."""
        session = make_session(200, b"{not json")
        client = ReleaseAPIClient(session)

        with pytest.raises(DecodeError, match="release response"):
            await client.fetch_release_by_tag("1.2.3")

    @pytest.mark.asyncio
    async def test_transport_failure(self) -> None:
        """Test connection errors become NetworkError."""
        session = MagicMock()
        session.get.side_effect = aiohttp.ClientConnectionError("refused")
        client = ReleaseAPIClient(session)

        with pytest.raises(NetworkError, match="refused"):
            await client.fetch_release_by_tag("1.2.3")

    @pytest.mark.asyncio
    async def test_timeout(self) -> None:
        """Test deadline expiry becomes NetworkError."""
        session = MagicMock()
        session.get.return_value.__aenter__.side_effect = TimeoutError()
        client = ReleaseAPIClient(session)

        with pytest.raises(NetworkError, match="TimeoutError"):
            await client.fetch_release_by_tag("1.2.3")
