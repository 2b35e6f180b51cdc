"""Builders for test data."""

from datetime import UTC, datetime, timedelta

from news_quiz.data import Article, Category, FeedPage


def make_article(
    article_id: str,
    *,
    is_fabricated: bool = False,
    hours_ago: int = 0,
    category: Category = Category.WORLD,
) -> Article:
    return Article(
        id=article_id,
        headline=f"Headline {article_id}",
        body=f"Body of article {article_id}",
        category=category,
        is_fabricated=is_fabricated,
        created_at=datetime(2026, 2, 1, 12, 0, tzinfo=UTC) - timedelta(hours=hours_ago),
        fabrication_reason="Made up" if is_fabricated else None,
    )


def make_page(ids: list[str], next_cursor: str | None = None) -> FeedPage:
    """Page whose odd-positioned articles are fabricated."""
    articles = [make_article(i, is_fabricated=n % 2 == 1, hours_ago=n) for n, i in enumerate(ids)]
    return FeedPage(articles=articles, next_cursor=next_cursor, total=len(articles))


class FixedClock:
    """Clock returning increasing timestamps, one minute apart."""

    def __init__(self) -> None:
        self._now = datetime(2026, 2, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        self._now += timedelta(minutes=1)
        return self._now
