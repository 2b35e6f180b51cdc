"""Settings store and localization binding."""

import logging
import os
from collections.abc import Callable, Mapping
from typing import Protocol

from pydantic import BaseModel

from news_quiz.data import DEFAULT_LANGUAGE, Language
from news_quiz.errors import StorageError
from news_quiz.state.store import Listener, PersistedStore
from news_quiz.storage.base import KeyValueStorage

SETTINGS_STORAGE_KEY = "settings-storage"

LOCALE_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")

logger = logging.getLogger(__name__)


class SettingsState(BaseModel):
    """Persisted user settings."""

    language: Language = DEFAULT_LANGUAGE

    model_config = {"frozen": True}


class Localizer(Protocol):
    """Interface of the collaborator that owns translated resources."""

    def change_language(self, language: Language) -> None:
        """Switch the active resource bundle."""
        ...


def detect_device_language(environ: Mapping[str, str] | None = None) -> Language:
    """Read the device locale, e.g. ``fr_FR.UTF-8`` -> ``Language.FR``.

    Falls back to the default language when the locale is unset or unsupported.
    """
    env = os.environ if environ is None else environ
    for var in LOCALE_ENV_VARS:
        value = env.get(var)
        if not value or value in ("C", "POSIX"):
            continue
        code = value.split(".")[0].replace("-", "_").split("_")[0].lower()
        try:
            return Language(code)
        except ValueError:
            return DEFAULT_LANGUAGE
    return DEFAULT_LANGUAGE


class SettingsStore:
    """Holds the active language and persists it across restarts.

    On first run the initial language comes from ``initial_language`` and is
    persisted so the device locale is only consulted once.

    Args:
        storage: Durable key-value storage.
        key: Storage key for the settings document.
        initial_language: Callable producing the first-run language.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        key: str = SETTINGS_STORAGE_KEY,
        initial_language: Callable[[], Language] = detect_device_language,
    ) -> None:
        self._storage = storage
        self._store: PersistedStore[SettingsState] = PersistedStore(
            storage, key, SettingsState, SettingsState
        )
        self._initial_language = initial_language

    @property
    def state(self) -> SettingsState:
        return self._store.state

    @property
    def language(self) -> Language:
        return self._store.state.language

    async def load(self) -> SettingsState:
        """Restore persisted settings, seeding them from the device on first run."""
        try:
            stored = await self._storage.get(self._store.key)
        except StorageError as e:
            logger.warning(f"Could not read settings, using defaults. Error: {e}")
            return self._store.state
        if stored is None:
            language = self._initial_language()
            logger.info(f"No saved settings, starting with language {language}")
            await self._store.save(SettingsState(language=language))
            return self._store.state
        return await self._store.load()

    async def set_language(self, language: Language) -> None:
        await self._store.save(SettingsState(language=Language(language)))

    def subscribe(self, listener: Listener[SettingsState]) -> Callable[[], None]:
        return self._store.subscribe(listener)


def bind_localizer(store: SettingsStore, localizer: Localizer) -> Callable[[], None]:
    """Keep ``localizer`` in step with the store's language.

    The localizer is switched to the current language immediately and then
    only when the language actually changes.

    Returns:
        A function that detaches the localizer.
    """

    def on_change(previous: SettingsState, current: SettingsState) -> None:
        if current.language != previous.language:
            localizer.change_language(current.language)

    localizer.change_language(store.language)
    return store.subscribe(on_change)
