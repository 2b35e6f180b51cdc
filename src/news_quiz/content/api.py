"""Content repository backed by the fake-news articles HTTP API."""

import logging
from datetime import datetime

import httpx
from pydantic import BaseModel, Field, ValidationError, field_validator

from news_quiz.data import Article, Category, FeedPage, FetchParams, Language
from news_quiz.errors import FetchError, NetworkError, NoContentError

API_BASE_URL = "https://fake-news-api.jterrazz.com"

DEFAULT_PAGE_SIZE = 10

LANGUAGE_SETTINGS: dict[Language, dict[str, str]] = {
    Language.EN: {"country": "us", "language": "en"},
    Language.FR: {"country": "fr", "language": "fr"},
}

logger = logging.getLogger(__name__)


# ============================================================
# Response Models
# ============================================================


class ApiItem(BaseModel):
    """One article as served by the API."""

    id: str
    headline: str
    article: str
    is_fake: bool = Field(alias="isFake")
    category: str | None = None
    created_at: datetime = Field(alias="createdAt")
    fake_reason: str | None = Field(default=None, alias="fakeReason")

    @field_validator("created_at", mode="before")
    @classmethod
    def created_at_must_be_iso_string(cls, v: object) -> object:
        if not isinstance(v, str):
            raise ValueError(f"createdAt must be an ISO-8601 string, got {type(v).__name__}")
        return v

    def to_article(self) -> Article:
        return Article(
            id=self.id,
            headline=self.headline,
            body=self.article,
            category=Category.parse(self.category),
            is_fabricated=self.is_fake,
            created_at=self.created_at,
            fabrication_reason=self.fake_reason,
        )


class ApiPage(BaseModel):
    """Body of ``GET /articles``."""

    items: list[ApiItem]
    next_cursor: str | None = Field(default=None, alias="nextCursor")
    total: int | None = None


class ApiContentRepository:
    """Fetch article pages from the articles API.

    Each call opens a short-lived ``httpx.AsyncClient`` and makes exactly one
    request.

    Args:
        base_url: API root (defaults to the public articles API).
        page_size: Page size used when the request does not set one.
        timeout: Transport timeout in seconds.
    """

    def __init__(
        self,
        *,
        base_url: str = API_BASE_URL,
        page_size: int = DEFAULT_PAGE_SIZE,
        timeout: float = 30.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._page_size = page_size
        self._timeout = timeout

    async def fetch_page(self, params: FetchParams) -> FeedPage:
        """Fetch one page of articles.

        Args:
            params: Language, cursor, page size and category filter.

        Returns:
            The page, in server order.
        """
        query = self._build_query(params)
        url = f"{self._base_url}/articles"

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(
                    url, params=query, headers={"Accept": "application/json"}
                )
        except httpx.HTTPError as e:
            raise NetworkError(f"Failed to fetch articles due to network error: {e}") from e

        if not response.is_success:
            raise FetchError(
                f"Failed to fetch articles: {response.status_code} {response.reason_phrase}",
                status=response.status_code,
            )

        try:
            body = ApiPage.model_validate(response.json())
        except ValidationError as e:
            raise NetworkError(f"Unreadable articles response: {e}") from e
        except ValueError as e:
            raise NetworkError(f"Articles response is not JSON: {e}") from e

        if not body.items:
            raise NoContentError()

        articles = [item.to_article() for item in body.items]
        logger.debug(f"Fetched {len(articles)} articles (cursor={params.cursor})")
        return FeedPage(
            articles=articles,
            next_cursor=body.next_cursor,
            total=body.total if body.total is not None else len(articles),
        )

    def _build_query(self, params: FetchParams) -> dict[str, str | int]:
        settings = LANGUAGE_SETTINGS[Language(params.language)]
        query: dict[str, str | int] = {
            "country": settings["country"],
            "language": settings["language"],
            "limit": params.limit or self._page_size,
        }
        if params.cursor:
            query["cursor"] = params.cursor
        if params.category:
            query["category"] = str(params.category)
        return query
