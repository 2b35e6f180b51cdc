"""Factory functions to create components from configuration."""

from collections.abc import Callable
from dataclasses import dataclass, field

from news_quiz.config.models import (
    ApiContentConfig,
    ContentConfig,
    FallbackContentConfig,
    FileStorageConfig,
    MemoryStorageConfig,
    NewsQuizConfig,
    StorageConfig,
)
from news_quiz.content.api import ApiContentRepository
from news_quiz.content.base import ContentRepository
from news_quiz.content.fallback import OfflineContentRepository
from news_quiz.content.service import ContentService
from news_quiz.data import Language
from news_quiz.feed.session import FeedSession
from news_quiz.state.news import NewsStore
from news_quiz.state.settings import SettingsStore, bind_localizer, detect_device_language
from news_quiz.storage.base import KeyValueStorage
from news_quiz.storage.file import FileStorage
from news_quiz.storage.memory import MemoryStorage


@dataclass
class App:
    """Every component of a running news quiz, wired together."""

    storage: KeyValueStorage
    content_service: ContentService
    news_store: NewsStore
    settings_store: SettingsStore
    session: FeedSession
    _unbind_language: Callable[[], None] | None = field(default=None, init=False, repr=False)

    async def start(self) -> None:
        """Restore persisted state and keep the feed session in the saved language.

        The session follows later language changes, reloading its feed if one
        was already requested. Does not fetch; call ``session.load()`` for the
        first page.
        """
        await self.news_store.load()
        if self._unbind_language is None:
            self._unbind_language = bind_localizer(self.settings_store, self.session)
        await self.settings_store.load()


def create_storage(config: StorageConfig) -> KeyValueStorage:
    """Create a key-value storage from config."""
    if isinstance(config, FileStorageConfig):
        return FileStorage(config.directory)
    if isinstance(config, MemoryStorageConfig):
        return MemoryStorage()
    msg = f"Unknown storage config type: {type(config)}"
    raise ValueError(msg)


def create_repository(config: ContentConfig) -> ContentRepository:
    """Create a content repository from config."""
    if isinstance(config, ApiContentConfig):
        return ApiContentRepository(
            base_url=config.base_url,
            page_size=config.page_size,
            timeout=config.timeout,
        )
    if isinstance(config, FallbackContentConfig):
        return OfflineContentRepository()
    msg = f"Unknown content config type: {type(config)}"
    raise ValueError(msg)


def create_from_config(
    config: NewsQuizConfig,
    *,
    storage_override: KeyValueStorage | None = None,
) -> App:
    """Create a complete application from root config.

    Args:
        config: Root configuration.
        storage_override: Use this storage instead of the configured one.

    Returns:
        The wired application. Call ``App.start()`` before use.
    """
    storage = storage_override if storage_override is not None else create_storage(config.storage)
    content_service = ContentService(create_repository(config.content))
    news_store = NewsStore(storage)

    default_language = config.default_language

    def initial_language() -> Language:
        return default_language if default_language is not None else detect_device_language()

    settings_store = SettingsStore(storage, initial_language=initial_language)
    page_size = config.content.page_size if isinstance(config.content, ApiContentConfig) else None
    session = FeedSession(content_service, news_store, page_size=page_size)
    return App(
        storage=storage,
        content_service=content_service,
        news_store=news_store,
        settings_store=settings_store,
        session=session,
    )
