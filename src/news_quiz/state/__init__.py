from news_quiz.state.news import NEWS_STORAGE_KEY, NewsState, NewsStore, apply_answer
from news_quiz.state.settings import (
    SETTINGS_STORAGE_KEY,
    Localizer,
    SettingsState,
    SettingsStore,
    bind_localizer,
    detect_device_language,
)
from news_quiz.state.store import PersistedStore

__all__ = [
    "NEWS_STORAGE_KEY",
    "SETTINGS_STORAGE_KEY",
    "Localizer",
    "NewsState",
    "NewsStore",
    "PersistedStore",
    "SettingsState",
    "SettingsStore",
    "apply_answer",
    "bind_localizer",
    "detect_device_language",
]
