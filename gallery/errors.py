"""Error kinds raised by the photo service layer."""
from __future__ import annotations


class GalleryError(Exception):
    """Base class for all gallery service errors."""


class UpstreamUnavailable(GalleryError):
    """The photo provider failed, timed out or returned a bad payload."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotFound(GalleryError):
    """A detail lookup found no matching photo."""


class PersistenceFailure(GalleryError):
    """The action recorder could not read or write a like/download."""


class AnalyticsNotificationFailure(GalleryError):
    """The provider's download-tracking ping failed. Never surfaced."""
