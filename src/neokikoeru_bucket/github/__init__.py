"""GitHub API client and release models."""

from neokikoeru_bucket.github.client import ReleaseAPIClient, build_release_url
from neokikoeru_bucket.github.models import APIErrorBody, Asset, Release

__all__ = [
    "APIErrorBody",
    "Asset",
    "Release",
    "ReleaseAPIClient",
    "build_release_url",
]
