"""GitHub release models.

The decoders mirror GitHub's JSON loosely: unknown fields are ignored and
missing fields fall back to empty values. Only a field present with the
wrong JSON type is rejected.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from neokikoeru_bucket.exceptions import DecodeError


def _string_field(data: dict[str, Any], key: str, context: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        msg = (
            f"{context}: field '{key}' must be a string, "
            f"got {type(value).__name__}"
        )
        raise DecodeError(msg)
    return value


def _require_object(data: Any, context: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        msg = f"{context}: expected a JSON object, got {type(data).__name__}"
        raise DecodeError(msg)
    return data


@dataclass(slots=True, frozen=True)
class Asset:
    """Represents a GitHub release asset.

    Attributes:
        name: Asset filename
        digest: Asset digest, normally ``sha256:<hex>`` (may be empty)
        browser_download_url: Direct download URL for the asset

    """

    name: str
    digest: str
    browser_download_url: str

    @classmethod
    def from_api_response(cls, asset_data: Any) -> Asset:
        """Create Asset from GitHub API response data.

        Args:
            asset_data: Raw asset data from GitHub API

        Returns:
            Asset instance

        Raises:
            DecodeError: If the data is not an object or a field has the
                wrong type

        """
        data = _require_object(asset_data, "asset")
        return cls(
            name=_string_field(data, "name", "asset"),
            digest=_string_field(data, "digest", "asset"),
            browser_download_url=_string_field(
                data, "browser_download_url", "asset"
            ),
        )


@dataclass(slots=True, frozen=True)
class Release:
    """Represents a GitHub release with its assets.

    Attributes:
        name: Release title
        assets: Release assets in API order

    """

    name: str
    assets: tuple[Asset, ...]

    @classmethod
    def from_api_response(cls, api_data: Any) -> Release:
        """Create Release from GitHub API response data.

        Args:
            api_data: Decoded JSON body of a release response

        Returns:
            Release instance

        Raises:
            DecodeError: If the body does not have the release shape

        """
        data = _require_object(api_data, "release")

        raw_assets = data.get("assets")
        if raw_assets is None:
            raw_assets = []
        if not isinstance(raw_assets, list):
            msg = (
                "release: field 'assets' must be an array, "
                f"got {type(raw_assets).__name__}"
            )
            raise DecodeError(msg)

        return cls(
            name=_string_field(data, "name", "release"),
            assets=tuple(Asset.from_api_response(a) for a in raw_assets),
        )


@dataclass(slots=True, frozen=True)
class APIErrorBody:
    """Body GitHub returns alongside a non-success status."""

    message: str

    @classmethod
    def from_api_response(cls, api_data: Any) -> APIErrorBody:
        """Create APIErrorBody from a decoded error response.

        Raises:
            DecodeError: If the body is not an object or message is not a
                string

        """
        data = _require_object(api_data, "error response")
        return cls(message=_string_field(data, "message", "error response"))
