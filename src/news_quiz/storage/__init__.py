from news_quiz.storage.base import KeyValueStorage
from news_quiz.storage.file import FileStorage
from news_quiz.storage.memory import MemoryStorage

__all__ = [
    "FileStorage",
    "KeyValueStorage",
    "MemoryStorage",
]
