"""Data models for the news quiz."""

from news_quiz.data.models import (
    DEFAULT_LANGUAGE,
    Answer,
    AnsweredArticle,
    Article,
    Category,
    FeedPage,
    FeedTab,
    FetchParams,
    Language,
    ScoreState,
)

__all__ = [
    "DEFAULT_LANGUAGE",
    "Answer",
    "AnsweredArticle",
    "Article",
    "Category",
    "FeedPage",
    "FeedTab",
    "FetchParams",
    "Language",
    "ScoreState",
]
