"""Tests for data models."""

import dataclasses

import pytest

from news_quiz.data import (
    DEFAULT_LANGUAGE,
    Answer,
    AnsweredArticle,
    Category,
    FeedPage,
    FetchParams,
    Language,
    ScoreState,
)
from tests.factories import make_article


def test_category_parse_known_value() -> None:
    assert Category.parse("SCIENCE") == Category.SCIENCE


def test_category_parse_is_case_insensitive() -> None:
    assert Category.parse(" tech ") == Category.TECH


def test_category_parse_unknown_value_is_other() -> None:
    assert Category.parse("ASTROLOGY") == Category.OTHER


def test_category_parse_missing_value_is_other() -> None:
    assert Category.parse(None) == Category.OTHER
    assert Category.parse("") == Category.OTHER


def test_default_language_is_english() -> None:
    assert DEFAULT_LANGUAGE == Language.EN


def test_score_state_defaults() -> None:
    score = ScoreState()
    assert score.score == 0
    assert score.streak == 0


def test_article_is_immutable() -> None:
    article = make_article("a1")
    with pytest.raises(dataclasses.FrozenInstanceError):
        article.headline = "changed"  # type: ignore[misc]


def test_answered_article_without_answer() -> None:
    item = AnsweredArticle(article=make_article("a1"))
    assert item.id == "a1"
    assert not item.is_answered


def test_answered_article_with_answer() -> None:
    article = make_article("a1")
    answer = Answer(article_id="a1", was_correct=True, answered_at=article.created_at)
    item = AnsweredArticle(article=article, answered=answer)
    assert item.is_answered
    assert item.answered == answer


def test_feed_page_defaults() -> None:
    page = FeedPage()
    assert page.articles == []
    assert page.next_cursor is None
    assert page.total == 0


def test_fetch_params_defaults() -> None:
    params = FetchParams()
    assert params.language == Language.EN
    assert params.cursor is None
    assert params.limit is None
    assert params.category is None
