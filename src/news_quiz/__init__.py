"""News Quiz: tell genuine news from fabricated news, one article at a time."""

from news_quiz.config import App, NewsQuizConfig, create_from_config, load_config
from news_quiz.content import (
    ApiContentRepository,
    ContentRepository,
    ContentService,
    FallbackContentProvider,
    OfflineContentRepository,
)
from news_quiz.data import (
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
from news_quiz.errors import (
    ContentError,
    ContentErrorKind,
    FetchError,
    MalformedStateError,
    NetworkError,
    NewsQuizError,
    NoContentError,
    StorageError,
)
from news_quiz.feed import FeedEvent, FeedSession
from news_quiz.state import (
    Localizer,
    NewsState,
    NewsStore,
    PersistedStore,
    SettingsState,
    SettingsStore,
    bind_localizer,
)
from news_quiz.storage import FileStorage, KeyValueStorage, MemoryStorage

__all__ = [
    # Models
    "Answer",
    "AnsweredArticle",
    "Article",
    "Category",
    "DEFAULT_LANGUAGE",
    "FeedPage",
    "FeedTab",
    "FetchParams",
    "Language",
    "ScoreState",
    # Errors
    "ContentError",
    "ContentErrorKind",
    "FetchError",
    "MalformedStateError",
    "NetworkError",
    "NewsQuizError",
    "NoContentError",
    "StorageError",
    # Protocols
    "ContentRepository",
    "KeyValueStorage",
    "Localizer",
    # Storage
    "FileStorage",
    "MemoryStorage",
    # Content
    "ApiContentRepository",
    "ContentService",
    "FallbackContentProvider",
    "OfflineContentRepository",
    # State
    "NewsState",
    "NewsStore",
    "PersistedStore",
    "SettingsState",
    "SettingsStore",
    "bind_localizer",
    # Feed
    "FeedEvent",
    "FeedSession",
    # Config
    "App",
    "NewsQuizConfig",
    "create_from_config",
    "load_config",
]
