"""Top-level package for neokikoeru-bucket.

Generates the Scoop bucket manifest for NeoKikoeru from a tagged GitHub
release.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("neokikoeru-bucket")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"
