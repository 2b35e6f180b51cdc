"""Pydantic configuration models for news quiz components."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from news_quiz.content.api import API_BASE_URL, DEFAULT_PAGE_SIZE
from news_quiz.data import Language

# ============================================================
# Content Configs
# ============================================================


class ApiContentConfig(BaseModel):
    """Configuration for ApiContentRepository."""

    type: Literal["api"] = "api"
    base_url: str = API_BASE_URL
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, gt=0, le=100)
    timeout: float = Field(default=30.0, gt=0)

    model_config = {"frozen": True}


class FallbackContentConfig(BaseModel):
    """Offline mode: serve only the bundled articles."""

    type: Literal["fallback"] = "fallback"

    model_config = {"frozen": True}


ContentConfig = Annotated[
    ApiContentConfig | FallbackContentConfig,
    Field(discriminator="type"),
]


# ============================================================
# Storage Configs
# ============================================================


class FileStorageConfig(BaseModel):
    """Configuration for FileStorage."""

    type: Literal["file"] = "file"
    directory: str = "~/.news-quiz"

    model_config = {"frozen": True}


class MemoryStorageConfig(BaseModel):
    """Non-persistent storage, lost when the process exits."""

    type: Literal["memory"] = "memory"

    model_config = {"frozen": True}


StorageConfig = Annotated[
    FileStorageConfig | MemoryStorageConfig,
    Field(discriminator="type"),
]


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for log output."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class NewsQuizConfig(BaseModel):
    """Root configuration for the news quiz."""

    content: ContentConfig = Field(default_factory=ApiContentConfig)
    storage: StorageConfig = Field(default_factory=FileStorageConfig)
    default_language: Language | None = None
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
