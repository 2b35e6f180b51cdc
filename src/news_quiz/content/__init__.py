from news_quiz.content.api import ApiContentRepository
from news_quiz.content.base import ContentRepository
from news_quiz.content.fallback import FallbackContentProvider, OfflineContentRepository
from news_quiz.content.service import ContentService

__all__ = [
    "ApiContentRepository",
    "ContentRepository",
    "ContentService",
    "FallbackContentProvider",
    "OfflineContentRepository",
]
