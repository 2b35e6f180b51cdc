"""Answer and score store."""

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from pydantic import BaseModel, Field, field_validator

from news_quiz.data import Answer, ScoreState
from news_quiz.state.store import Listener, PersistedStore
from news_quiz.storage.base import KeyValueStorage

NEWS_STORAGE_KEY = "news-storage"

POINTS_PER_CORRECT_ANSWER = 100

logger = logging.getLogger(__name__)


class NewsState(BaseModel):
    """Persisted answers and cumulative score."""

    answers: dict[str, Answer] = Field(default_factory=dict)
    score: ScoreState = Field(default_factory=ScoreState)

    model_config = {"frozen": True}

    @field_validator("score")
    @classmethod
    def score_must_not_be_negative(cls, v: ScoreState) -> ScoreState:
        if v.score < 0 or v.streak < 0:
            raise ValueError(f"Score and streak must be non-negative, got {v}")
        return v


def apply_answer(score: ScoreState, was_correct: bool) -> ScoreState:
    """Score after one more answer: correct answers add points and extend the streak."""
    if was_correct:
        return ScoreState(
            score=score.score + POINTS_PER_CORRECT_ANSWER,
            streak=score.streak + 1,
        )
    return ScoreState(score=score.score, streak=0)


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


class NewsStore:
    """Records at most one answer per article and keeps the score.

    Args:
        storage: Durable key-value storage.
        key: Storage key for the answers document.
        clock: Source of ``answered_at`` timestamps.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        key: str = NEWS_STORAGE_KEY,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._store: PersistedStore[NewsState] = PersistedStore(storage, key, NewsState, NewsState)
        self._clock = clock

    @property
    def state(self) -> NewsState:
        return self._store.state

    @property
    def answers(self) -> dict[str, Answer]:
        return self._store.state.answers

    @property
    def score(self) -> ScoreState:
        return self._store.state.score

    def get_answer(self, article_id: str) -> Answer | None:
        return self._store.state.answers.get(article_id)

    def has_answer(self, article_id: str) -> bool:
        return article_id in self._store.state.answers

    async def load(self) -> NewsState:
        return await self._store.load()

    def subscribe(self, listener: Listener[NewsState]) -> Callable[[], None]:
        return self._store.subscribe(listener)

    async def record_answer(self, article_id: str, was_correct: bool) -> bool:
        """Record the verdict for an article.

        Only the first answer for an article counts; later calls leave the
        state untouched.

        Returns:
            True if the answer was recorded, False if one already existed.
        """
        current = self._store.state
        if article_id in current.answers:
            logger.debug(f"Ignoring repeated answer for article {article_id}")
            return False

        answer = Answer(article_id=article_id, was_correct=was_correct, answered_at=self._clock())
        next_state = NewsState(
            answers={**current.answers, article_id: answer},
            score=apply_answer(current.score, was_correct),
        )
        await self._store.save(next_state)
        verdict = "correct" if was_correct else "incorrect"
        logger.debug(f"Recorded {verdict} answer for article {article_id}")
        return True

    async def reset_score(self) -> None:
        """Zero the score and streak, keeping recorded answers."""
        await self._store.save(NewsState(answers=self._store.state.answers, score=ScoreState()))

    async def reset_all(self) -> None:
        """Delete every answer and zero the score."""
        await self._store.save(NewsState())
