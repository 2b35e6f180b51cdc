"""Content service: the single entry point for obtaining articles."""

import logging

from news_quiz.content.base import ContentRepository
from news_quiz.content.fallback import FallbackContentProvider
from news_quiz.data import Article, FeedPage, FetchParams
from news_quiz.errors import NetworkError, NoContentError

logger = logging.getLogger(__name__)


class ContentService:
    """Fetch articles, substituting bundled content when the source is unavailable.

    ``NoContentError`` and ``NetworkError`` are recovered from; ``FetchError``
    signals a real server failure and is propagated.

    Args:
        repository: Source of article pages.
        fallback: Provider of the offline dataset.
    """

    def __init__(
        self,
        repository: ContentRepository,
        fallback: FallbackContentProvider | None = None,
    ) -> None:
        self._repository = repository
        self._fallback = fallback or FallbackContentProvider()

    async def get_articles(self, params: FetchParams) -> list[Article]:
        """Return the articles of one page, or the fallback dataset."""
        try:
            page = await self._repository.fetch_page(params)
        except (NoContentError, NetworkError) as e:
            logger.warning(f"Using fallback articles. Error: {e}")
            return self._fallback.get_fallback_articles()
        return page.articles

    async def get_page(self, params: FetchParams) -> FeedPage:
        """Return one page, keeping the continuation cursor.

        A recoverable failure on the first page yields the fallback dataset as
        a single terminal page. On a continuation page it ends the feed with an
        empty page, so fallback articles are never mixed with live ones.
        """
        try:
            return await self._repository.fetch_page(params)
        except (NoContentError, NetworkError) as e:
            if params.cursor is not None:
                logger.warning(f"Ending feed after failed page {params.cursor}. Error: {e}")
                return FeedPage()
            logger.warning(f"Using fallback articles. Error: {e}")
            articles = self._fallback.get_fallback_articles()
            return FeedPage(articles=articles, next_cursor=None, total=len(articles))
