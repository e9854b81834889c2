"""
Error types raised by the rosvoid pipeline.

Catalog-level FetchError/DecodeError abort a run. Everything raised while
processing a single repository is caught by the driver and reported
against that repository only.
"""

from typing import Optional


class RosVoidError(Exception):
    """Base class for all pipeline errors."""


class FetchError(RosVoidError):
    """Raised when a URL cannot be retrieved."""

    def __init__(self, url: str, cause: Optional[BaseException] = None):
        self.url = url
        self.cause = cause
        message = f"Failed to fetch {url}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


class DecodeError(RosVoidError):
    """Raised when fetched bytes are not a valid structured document."""

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        if source:
            message = f"{message} ({source})"
        super().__init__(message)


class InvalidSourceURLError(RosVoidError):
    """Raised when a source URL does not look like scheme://host/owner/repo[.git]."""

    def __init__(self, url: str, reason: str = "not a scheme://host/owner/repo URL"):
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid source URL {url!r}: {reason}")


class RenderError(RosVoidError):
    """Raised when the recipe template cannot be executed for a repository."""

    def __init__(self, name: str, cause: BaseException):
        self.name = name
        self.cause = cause
        super().__init__(f"Failed to render recipe for {name}: {cause}")


class EnrichmentError(RosVoidError):
    """Raised when a repository cannot be fully enriched.

    ``partial`` holds whatever was resolved before the failure, including
    sub-packages that were already fetched.
    """

    def __init__(self, name: str, cause: BaseException, partial=None):
        self.name = name
        self.cause = cause
        self.partial = partial
        super().__init__(f"{name}: {cause}")
