"""Feed session: joins fetched pages with recorded answers and drives answering."""

import asyncio
import logging
from collections.abc import Callable
from enum import StrEnum

from news_quiz.content.service import ContentService
from news_quiz.data import (
    DEFAULT_LANGUAGE,
    Answer,
    AnsweredArticle,
    Article,
    FeedTab,
    FetchParams,
    Language,
    ScoreState,
)
from news_quiz.errors import FetchError
from news_quiz.state.news import NewsStore

logger = logging.getLogger(__name__)


class FeedEvent(StrEnum):
    """Notifications sent to the rendering layer."""

    FEED_RESET = "feed_reset"
    PAGE_APPENDED = "page_appended"
    LOAD_FAILED = "load_failed"
    ANSWER_RECORDED = "answer_recorded"
    SELECTION_CHANGED = "selection_changed"
    TAB_CHANGED = "tab_changed"


FeedListener = Callable[[FeedEvent], None]


def join_answers(articles: list[Article], answers: dict[str, Answer]) -> list[AnsweredArticle]:
    """Pair each article with its recorded answer, if any."""
    return [AnsweredArticle(article=a, answered=answers.get(a.id)) for a in articles]


def filter_for_tab(
    items: list[AnsweredArticle],
    tab: FeedTab,
    answered_in_tab: set[str] | frozenset[str] = frozenset(),
) -> list[AnsweredArticle]:
    """Articles shown on ``tab``.

    ``TO_READ`` keeps unanswered articles plus those answered since the tab
    was opened, so an article does not disappear while its result is shown.
    """
    if tab == FeedTab.TO_READ:
        return [item for item in items if not item.is_answered or item.id in answered_in_tab]
    return list(items)


def _log_reload_failure(task: asyncio.Task[bool]) -> None:
    if task.cancelled():
        return
    error = task.exception()
    if isinstance(error, FetchError):
        logger.warning(f"Reload after language change failed. Error: {error}")
    elif error is not None:
        logger.error(f"Reload after language change crashed. Error: {error!r}")


class FeedSession:
    """Transient reading state layered over the content service and answer store.

    Owns no persisted data. Articles are joined with answers and filtered on
    every read; nothing merged is cached.

    Args:
        content_service: Source of article pages.
        news_store: Answer and score store.
        language: Feed language.
        page_size: Articles requested per page (None for the source default).
    """

    def __init__(
        self,
        content_service: ContentService,
        news_store: NewsStore,
        *,
        language: Language = DEFAULT_LANGUAGE,
        page_size: int | None = None,
    ) -> None:
        self._content_service = content_service
        self._news_store = news_store
        self._language = Language(language)
        self._page_size = page_size

        self._feed: list[Article] = []
        self._next_cursor: str | None = None
        self._loading = False
        self._submitting = False
        self._request_token = 0
        self._answered_in_tab: set[str] = set()
        self._listeners: list[FeedListener] = []
        self._reload_task: asyncio.Task[bool] | None = None

        self.expanded_index = 0
        self.active_tab = FeedTab.LATEST
        self.pending_answer: bool | None = None
        self.last_error: FetchError | None = None

    # -- Views --

    @property
    def language(self) -> Language:
        return self._language

    @property
    def articles(self) -> list[AnsweredArticle]:
        """Every fetched article, in feed order, joined with its answer."""
        return join_answers(self._feed, self._news_store.answers)

    @property
    def visible_articles(self) -> list[AnsweredArticle]:
        """Articles shown on the active tab."""
        return filter_for_tab(self.articles, self.active_tab, self._answered_in_tab)

    @property
    def current_article(self) -> AnsweredArticle | None:
        visible = self.visible_articles
        if 0 <= self.expanded_index < len(visible):
            return visible[self.expanded_index]
        return None

    @property
    def answered_in_tab(self) -> frozenset[str]:
        return frozenset(self._answered_in_tab)

    @property
    def score(self) -> ScoreState:
        return self._news_store.score

    @property
    def has_next_page(self) -> bool:
        return self._next_cursor is not None

    @property
    def is_loading(self) -> bool:
        return self._loading

    @property
    def is_submitting(self) -> bool:
        return self._submitting

    def subscribe(self, listener: FeedListener) -> Callable[[], None]:
        """Register a listener; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # -- Loading --

    async def load(self) -> bool:
        """Discard the feed and fetch the first page.

        Any page request still in flight becomes stale and its result is
        dropped when it arrives.

        Returns:
            True if the first page was applied.
        """
        self._request_token += 1
        self._feed = []
        self._next_cursor = None
        self._answered_in_tab.clear()
        self.expanded_index = 0
        self.pending_answer = None
        self.last_error = None
        self._emit(FeedEvent.FEED_RESET)
        return await self._fetch(cursor=None, token=self._request_token)

    async def load_more(self) -> bool:
        """Fetch and append the next page.

        Ignored while a page is loading or when the feed is exhausted.

        Returns:
            True if a page was appended.
        """
        if self._loading or self._next_cursor is None:
            return False
        return await self._fetch(cursor=self._next_cursor, token=self._request_token)

    async def set_language(self, language: Language) -> bool:
        """Switch the feed language and reload from the first page."""
        self._language = Language(language)
        return await self.load()

    def change_language(self, language: Language) -> None:
        """Follow a settings change.

        Before the first load only the language is switched. Once a feed has
        been requested, in-flight pages become stale and a reload in the new
        language is scheduled on the running loop (see ``wait_for_reload``).
        """
        language = Language(language)
        if language == self._language:
            return
        self._language = language
        if self._request_token == 0:
            return
        self._request_token += 1
        logger.info(f"Feed language changed to {language}, reloading")
        self._reload_task = asyncio.get_running_loop().create_task(self.load())
        self._reload_task.add_done_callback(_log_reload_failure)

    async def wait_for_reload(self) -> None:
        """Wait for a reload scheduled by ``change_language``, if any."""
        task, self._reload_task = self._reload_task, None
        if task is not None:
            await asyncio.gather(task, return_exceptions=True)

    async def _fetch(self, *, cursor: str | None, token: int) -> bool:
        params = FetchParams(language=self._language, cursor=cursor, limit=self._page_size)
        self._loading = True
        try:
            page = await self._content_service.get_page(params)
        except FetchError as e:
            if token != self._request_token:
                logger.info(f"Discarding failure of stale page request (cursor={cursor})")
                return False
            self.last_error = e
            self._emit(FeedEvent.LOAD_FAILED)
            raise
        finally:
            if token == self._request_token:
                self._loading = False

        if token != self._request_token:
            logger.info(f"Discarding stale page (cursor={cursor})")
            return False

        self._feed.extend(page.articles)
        self._next_cursor = page.next_cursor
        self.last_error = None
        logger.debug(
            f"Appended {len(page.articles)} articles, feed now {len(self._feed)} "
            f"(next cursor={page.next_cursor})"
        )
        self._emit(FeedEvent.PAGE_APPENDED)
        return True

    # -- Reading and answering --

    def select_article(self, index: int) -> bool:
        """Open the article at ``index`` of the visible list.

        Rejected while an answer is being submitted or if ``index`` is out of
        range.
        """
        if self._submitting:
            return False
        if not 0 <= index < len(self.visible_articles):
            return False
        self.expanded_index = index
        self.pending_answer = None
        self._emit(FeedEvent.SELECTION_CHANGED)
        return True

    def next_article(self) -> bool:
        return self.select_article(self.expanded_index + 1)

    async def submit_answer(self, selected_as_fabricated: bool) -> Answer | None:
        """Record the reader's verdict on the current article.

        Args:
            selected_as_fabricated: True if the reader flagged the article as fake.

        Returns:
            The recorded answer, or None if there was nothing to answer or the
            article already had an answer.
        """
        if self._submitting:
            return None
        current = self.current_article
        if current is None or current.is_answered:
            return None

        is_correct = selected_as_fabricated == current.article.is_fabricated
        self._submitting = True
        self._answered_in_tab.add(current.id)
        self.pending_answer = selected_as_fabricated
        try:
            recorded = await self._news_store.record_answer(current.id, is_correct)
        finally:
            self._submitting = False

        if not recorded:
            return None
        self._emit(FeedEvent.ANSWER_RECORDED)
        return self._news_store.get_answer(current.id)

    def set_tab(self, tab: FeedTab) -> None:
        """Switch tabs.

        Articles answered on the previous tab stop being held in ``TO_READ``.
        The open article stays open if it is still visible; otherwise the
        selection is clamped to the new list.

        Selecting the tab that is already active changes nothing.
        """
        tab = FeedTab(tab)
        if tab == self.active_tab:
            return
        current = self.current_article
        self.active_tab = tab
        self._answered_in_tab.clear()
        self.pending_answer = None

        visible = self.visible_articles
        ids = [item.id for item in visible]
        if current is not None and current.id in ids:
            self.expanded_index = ids.index(current.id)
        else:
            self.expanded_index = min(self.expanded_index, max(len(visible) - 1, 0))
        self._emit(FeedEvent.TAB_CHANGED)

    def _emit(self, event: FeedEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception(f"Feed listener failed on {event}")
