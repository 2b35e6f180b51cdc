"""Core data models for the news quiz."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum


class Category(StrEnum):
    """Editorial category of an article."""

    WORLD = "WORLD"
    POLITICS = "POLITICS"
    BUSINESS = "BUSINESS"
    TECH = "TECH"
    SCIENCE = "SCIENCE"
    HEALTH = "HEALTH"
    SPORTS = "SPORTS"
    ENTERTAINMENT = "ENTERTAINMENT"
    OTHER = "OTHER"

    @classmethod
    def parse(cls, value: str | None) -> "Category":
        """Parse a category name, mapping unknown values to ``OTHER``."""
        if not value:
            return cls.OTHER
        try:
            return cls(value.strip().upper())
        except ValueError:
            return cls.OTHER


class Language(StrEnum):
    """Supported feed and interface languages."""

    EN = "en"
    FR = "fr"


DEFAULT_LANGUAGE = Language.EN


class FeedTab(StrEnum):
    """Feed tabs offered to the reader."""

    LATEST = "latest"
    TO_READ = "to-read"


@dataclass(frozen=True)
class Article:
    """A content item presented for classification."""

    id: str
    headline: str
    body: str
    category: Category
    is_fabricated: bool
    created_at: datetime
    fabrication_reason: str | None = None


@dataclass(frozen=True)
class Answer:
    """The permanent verdict recorded for one article."""

    article_id: str
    was_correct: bool
    answered_at: datetime


@dataclass(frozen=True)
class ScoreState:
    """Cumulative score and current run of correct answers."""

    score: int = 0
    streak: int = 0


@dataclass(frozen=True)
class AnsweredArticle:
    """An article joined with its answer, if one exists.

    Built on every read from the feed and the answer store; never persisted.
    """

    article: Article
    answered: Answer | None = None

    @property
    def id(self) -> str:
        return self.article.id

    @property
    def is_answered(self) -> bool:
        return self.answered is not None


@dataclass(frozen=True)
class FeedPage:
    """One page of articles from the content source."""

    articles: list[Article] = field(default_factory=list)
    next_cursor: str | None = None
    total: int = 0


@dataclass(frozen=True)
class FetchParams:
    """Parameters for requesting a page of articles."""

    language: Language = DEFAULT_LANGUAGE
    cursor: str | None = None
    limit: int | None = None
    category: Category | None = None
