"""Tests for GitHub release models."""

import pytest

from neokikoeru_bucket.exceptions import DecodeError
from neokikoeru_bucket.github.models import APIErrorBody, Asset, Release


class TestAsset:
    """Test Asset.from_api_response."""

    def test_known_fields(self) -> None:
        """Test name, digest and download URL are decoded."""
        asset = Asset.from_api_response(
            {
                "name": "app.zip",
                "digest": "sha256:abc",
                "browser_download_url": "https://example.com/app.zip",
                "size": 10,
                "uploader": {"login": "someone"},
            }
        )

        assert asset == Asset(
            name="app.zip",
            digest="sha256:abc",
            browser_download_url="https://example.com/app.zip",
        )

    def test_missing_fields_are_empty(self) -> None:
        """Test missing and null fields decode to empty strings."""
        asset = Asset.from_api_response({"name": "app.zip", "digest": None})

        assert asset.digest == ""
        assert asset.browser_download_url == ""

    def test_wrong_field_type(self) -> None:
        """Test a non-string field is a decode error."""
        with pytest.raises(DecodeError, match="'name' must be a string"):
            Asset.from_api_response({"name": 42})

    def test_not_an_object(self) -> None:
        """Test a non-object asset is a decode error."""
        with pytest.raises(DecodeError, match="expected a JSON object"):
            Asset.from_api_response(["app.zip"])


class TestRelease:
    """Test Release.from_api_response."""

    def test_assets_keep_api_order(self, release_payload) -> None:
        """Test assets are decoded in the order GitHub returns them."""
        release = Release.from_api_response(release_payload)

        assert release.name == "v1.2.3"
        assert [a.name for a in release.assets] == [
            "neokikoeru-windows-amd64.zip",
            "neokikoeru-windows-arm64.zip",
            "neokikoeru-linux-amd64.tar.gz",
        ]

    def test_empty_object(self) -> None:
        """Test an empty object decodes to an empty release."""
        release = Release.from_api_response({})

        assert release.name == ""
        assert release.assets == ()

    def test_assets_must_be_array(self) -> None:
        """Test a non-array assets field is a decode error."""
        with pytest.raises(DecodeError, match="'assets' must be an array"):
            Release.from_api_response({"assets": {"name": "x"}})

    def test_body_must_be_object(self) -> None:
        """Test a top-level array is a decode error."""
        with pytest.raises(DecodeError):
            Release.from_api_response([])


class TestAPIErrorBody:
    """Test APIErrorBody.from_api_response."""

    def test_message(self) -> None:
        """Test the message field is decoded."""
        body = APIErrorBody.from_api_response(
            {
                "message": "Not Found",
                "documentation_url": "https://docs.github.com/rest",
            }
        )
        assert body.message == "Not Found"

    def test_missing_message(self) -> None:
        """Test a missing message decodes to an empty string."""
        assert APIErrorBody.from_api_response({}).message == ""
