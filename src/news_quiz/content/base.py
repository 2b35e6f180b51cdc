from typing import Protocol

from news_quiz.data import FeedPage, FetchParams


class ContentRepository(Protocol):
    """Interface for fetching pages of articles from a content source."""

    async def fetch_page(self, params: FetchParams) -> FeedPage:
        """Fetch one page of articles.

        Makes a single attempt; retries are the caller's concern.

        Args:
            params: Language, cursor, page size and category filter.

        Returns:
            The requested page.

        Raises:
            FetchError: The source answered with a non-success status.
            NoContentError: The source returned no items.
            NetworkError: The request failed before a usable response arrived.
        """
        ...
