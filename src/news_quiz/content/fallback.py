"""Bundled articles shown when the content source is unreachable."""

from datetime import UTC, datetime, timedelta

from news_quiz.data import Article, Category, FeedPage, FetchParams
from news_quiz.errors import NetworkError

# Newest article first; each following one is an hour older.
_NEWEST = datetime(2025, 1, 15, 9, 0, tzinfo=UTC)

_SAMPLE_ARTICLES: tuple[tuple[str, str, Category, bool, str | None], ...] = (
    (
        "Scientists Discover Trees Can Communicate Through Underground Network",
        "Researchers have found that trees communicate and share resources through an "
        "underground fungal network, dubbed the 'Wood Wide Web'. This network allows trees "
        "to share nutrients and send warning signals about environmental changes and threats.",
        Category.SCIENCE,
        False,
        None,
    ),
    (
        "New Technology Allows Humans to Breathe Underwater Without Equipment",
        "A startup claims to have developed a pill that temporarily enables humans to extract "
        "oxygen from water, allowing them to breathe underwater for up to 4 hours. The pill "
        "supposedly modifies lung tissue to process water like fish gills.",
        Category.TECH,
        True,
        "Human lungs cannot be chemically converted into gills; no such pill exists.",
    ),
    (
        "AI System Predicts Earthquake 2 Hours Before It Happens",
        "Scientists claim an AI system successfully predicted a magnitude 5.2 earthquake in "
        "California two hours before it occurred by analyzing subtle changes in seismic "
        "activity and ground deformation.",
        Category.TECH,
        True,
        "No method, AI or otherwise, has reliably predicted the time and place of an earthquake.",
    ),
    (
        "Scientists Create First Self-Replicating Living Robots",
        "Researchers have created living robots that can reproduce on their own. These "
        "microscopic 'xenobots', made from frog cells, gather single cells and assemble "
        "new robots that look and move like themselves.",
        Category.SCIENCE,
        False,
        None,
    ),
    (
        "Brain Implant Allows Paralyzed Person to Post Messages Using Thoughts",
        "A paralyzed individual has posted messages online using only their thoughts, thanks "
        "to a brain-computer interface that translates neural signals into text.",
        Category.HEALTH,
        False,
        None,
    ),
    (
        "New AI-Powered Drug Can Cure Cancer in 24 Hours",
        "A drug designed by an AI system is said to cure cancer in just 24 hours by targeting "
        "the genetic mutation responsible for the disease without harming healthy cells.",
        Category.HEALTH,
        True,
        "Cancer is many diseases with different mutations; no single drug cures it in a day.",
    ),
    (
        "City Replaces Traffic Lights With Trained Pigeons",
        "A mid-sized city council voted to replace its traffic lights with trained pigeons "
        "holding coloured flags, citing lower electricity bills and improved driver attention.",
        Category.POLITICS,
        True,
        "No city has replaced traffic signals with animals; the story is satire.",
    ),
    (
        "Football Club Signs Player Through Fan Crowdfunding Campaign",
        "A lower-league football club completed the transfer of a striker after supporters "
        "raised the fee through an online crowdfunding campaign.",
        Category.SPORTS,
        False,
        None,
    ),
)


class FallbackContentProvider:
    """Deterministic offline dataset with mixed genuine and fabricated articles.

    Articles are ordered newest first, like a live feed.
    """

    def get_fallback_articles(self) -> list[Article]:
        return [
            Article(
                id=f"fallback-{index + 1}",
                headline=headline,
                body=body,
                category=category,
                is_fabricated=is_fabricated,
                created_at=_NEWEST - timedelta(hours=index),
                fabrication_reason=reason,
            )
            for index, (headline, body, category, is_fabricated, reason) in enumerate(
                _SAMPLE_ARTICLES
            )
        ]


class OfflineContentRepository:
    """Repository used when the content source is disabled.

    Every request fails as a network error, so the content service serves the
    bundled dataset.
    """

    async def fetch_page(self, params: FetchParams) -> FeedPage:
        raise NetworkError("Content source disabled (offline mode)")
