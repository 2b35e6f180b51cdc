"""Exception types raised by the news quiz core."""

from enum import StrEnum


class NewsQuizError(Exception):
    """Base class for all news quiz errors."""


class ContentErrorKind(StrEnum):
    """Failure kinds reported by a content repository."""

    FETCH_ERROR = "FETCH_ERROR"
    NO_CONTENT = "NO_CONTENT"
    NETWORK_ERROR = "NETWORK_ERROR"


class ContentError(NewsQuizError):
    """A content repository failed to deliver a page.

    Args:
        message: Human readable description.
        kind: Which failure this is.
        status: HTTP status code, when the server answered.
    """

    kind: ContentErrorKind

    def __init__(
        self,
        message: str,
        *,
        kind: ContentErrorKind,
        status: int | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.status = status

    @property
    def recoverable(self) -> bool:
        """Whether fallback content may be substituted for this failure."""
        return self.kind in (ContentErrorKind.NO_CONTENT, ContentErrorKind.NETWORK_ERROR)


class FetchError(ContentError):
    """The server answered with a non-success status."""

    def __init__(self, message: str, *, status: int) -> None:
        super().__init__(message, kind=ContentErrorKind.FETCH_ERROR, status=status)


class NoContentError(ContentError):
    """The server answered successfully but returned no items."""

    def __init__(self, message: str = "No articles available") -> None:
        super().__init__(message, kind=ContentErrorKind.NO_CONTENT)


class NetworkError(ContentError):
    """The request never produced a usable response."""

    def __init__(self, message: str = "Failed to fetch articles due to network error") -> None:
        super().__init__(message, kind=ContentErrorKind.NETWORK_ERROR)


class StorageError(NewsQuizError):
    """Reading or writing durable storage failed."""


class MalformedStateError(NewsQuizError):
    """A persisted document could not be decoded."""
