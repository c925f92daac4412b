"""Exception classes for neokikoeru-bucket.

Every failure in the pipeline is terminal. Each stage raises one of the
classes below and ``main()`` turns any of them into exit status 1.
"""


class BucketError(Exception):
    """Base exception for manifest generation failures."""

    def __init__(self, message: str) -> None:
        """Initialize error with message.

        Args:
            message: Error message describing the failure.

        """
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        """Return the error message."""
        return self.message


class InvalidVersionError(BucketError):
    """Raised when the version variable is missing or not a semver."""


class NetworkError(BucketError):
    """Raised on transport failure or request timeout."""


class GitHubAPIError(BucketError):
    """Raised when GitHub answers with a non-success status."""

    def __init__(self, message: str, status: int) -> None:
        """Initialize error with the API message and HTTP status.

        Args:
            message: The ``message`` field of the GitHub error body.
            status: HTTP status code of the response.

        """
        super().__init__(message)
        self.status = status


class DecodeError(BucketError):
    """Raised when a response body is not the expected JSON shape."""


class TemplateError(BucketError):
    """Raised when the manifest template cannot be loaded or rendered."""


class ManifestIOError(BucketError):
    """Raised when the manifest file cannot be opened or written."""
