"""Configuration module for the news quiz."""

from news_quiz.config.factory import App, create_from_config, create_repository, create_storage
from news_quiz.config.loader import get_default_config_path, load_config
from news_quiz.config.models import (
    ApiContentConfig,
    ContentConfig,
    FallbackContentConfig,
    FileStorageConfig,
    LoggingConfig,
    MemoryStorageConfig,
    NewsQuizConfig,
    StorageConfig,
)

__all__ = [
    "ApiContentConfig",
    "App",
    "ContentConfig",
    "FallbackContentConfig",
    "FileStorageConfig",
    "LoggingConfig",
    "MemoryStorageConfig",
    "NewsQuizConfig",
    "StorageConfig",
    "create_from_config",
    "create_repository",
    "create_storage",
    "get_default_config_path",
    "load_config",
]
