"""Map release assets onto the bucket record.

Each tracked asset name maps to the pair of record fields it fills. Adding
a platform means adding a row to ``ASSET_FIELDS`` and two fields to
``Bucket``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType
from typing import NamedTuple

from neokikoeru_bucket.constants import (
    ASSET_NAME_WINDOWS_AMD64,
    ASSET_NAME_WINDOWS_ARM64,
    DIGEST_PREFIX_SHA256,
)
from neokikoeru_bucket.github.models import Asset
from neokikoeru_bucket.logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class Bucket:
    """Values substituted into the manifest template.

    Attributes:
        version: Release version, always the validated input version
        download_url_windows_amd64: Download URL of the amd64 archive
        sha256_windows_amd64: SHA-256 of the amd64 archive
        download_url_windows_arm64: Download URL of the arm64 archive
        sha256_windows_arm64: SHA-256 of the arm64 archive

    """

    version: str
    download_url_windows_amd64: str = ""
    sha256_windows_amd64: str = ""
    download_url_windows_arm64: str = ""
    sha256_windows_arm64: str = ""

    def as_mapping(self) -> dict[str, str]:
        """Return the record as template substitution values."""
        return {
            "version": self.version,
            "download_url_windows_amd64": self.download_url_windows_amd64,
            "sha256_windows_amd64": self.sha256_windows_amd64,
            "download_url_windows_arm64": self.download_url_windows_arm64,
            "sha256_windows_arm64": self.sha256_windows_arm64,
        }


class AssetFields(NamedTuple):
    """Bucket attributes populated by one tracked asset."""

    download_url: str
    sha256: str


ASSET_FIELDS: MappingProxyType[str, AssetFields] = MappingProxyType(
    {
        ASSET_NAME_WINDOWS_AMD64: AssetFields(
            "download_url_windows_amd64", "sha256_windows_amd64"
        ),
        ASSET_NAME_WINDOWS_ARM64: AssetFields(
            "download_url_windows_arm64", "sha256_windows_arm64"
        ),
    }
)


def strip_digest_prefix(digest: str) -> str:
    """Remove a leading ``sha256:`` from a digest.

    Digests without the prefix are returned unchanged.
    """
    return digest.removeprefix(DIGEST_PREFIX_SHA256)


def build_bucket(version: str, assets: Iterable[Asset]) -> Bucket:
    """Build the bucket record from release assets.

    Assets are applied in order, so when a tracked name appears more than
    once the last occurrence wins. Untracked assets are skipped and
    tracked names that never appear leave their fields empty.

    Args:
        version: Validated release version
        assets: Release assets in API order

    Returns:
        Populated bucket record

    """
    bucket = Bucket(version=version)
    seen: set[str] = set()

    for asset in assets:
        fields = ASSET_FIELDS.get(asset.name)
        if fields is None:
            logger.debug("Ignoring untracked asset %s", asset.name)
            continue

        if asset.name in seen:
            logger.debug("Asset %s listed again, overwriting", asset.name)
        seen.add(asset.name)

        setattr(bucket, fields.download_url, asset.browser_download_url)
        setattr(bucket, fields.sha256, strip_digest_prefix(asset.digest))

    for name in ASSET_FIELDS:
        if name not in seen:
            logger.warning(
                "Release %s has no asset named %s; its fields stay empty",
                version,
                name,
            )

    return bucket
