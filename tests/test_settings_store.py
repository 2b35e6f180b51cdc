"""Tests for the settings store and localization binding."""

import json
from unittest.mock import MagicMock

import pytest

from news_quiz.data import Language
from news_quiz.state import (
    SETTINGS_STORAGE_KEY,
    SettingsState,
    SettingsStore,
    bind_localizer,
    detect_device_language,
)
from news_quiz.storage import MemoryStorage


class TestDetectDeviceLanguage:
    """Tests for detect_device_language."""

    def test_french_locale(self) -> None:
        assert detect_device_language({"LANG": "fr_FR.UTF-8"}) == Language.FR

    def test_bcp47_style_locale(self) -> None:
        assert detect_device_language({"LANG": "fr-CA"}) == Language.FR

    def test_lc_all_takes_precedence(self) -> None:
        env = {"LC_ALL": "en_US.UTF-8", "LANG": "fr_FR.UTF-8"}
        assert detect_device_language(env) == Language.EN

    def test_unsupported_locale_falls_back_to_english(self) -> None:
        assert detect_device_language({"LANG": "de_DE.UTF-8"}) == Language.EN

    def test_posix_locale_is_skipped(self) -> None:
        assert detect_device_language({"LC_ALL": "C", "LANG": "fr_FR"}) == Language.FR

    def test_no_locale(self) -> None:
        assert detect_device_language({}) == Language.EN

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("LC_ALL", raising=False)
        monkeypatch.delenv("LC_MESSAGES", raising=False)
        monkeypatch.setenv("LANG", "fr_FR.UTF-8")
        assert detect_device_language() == Language.FR


class TestSettingsStore:
    """Tests for SettingsStore."""

    async def test_first_run_uses_device_language_and_persists_it(
        self, storage: MemoryStorage
    ) -> None:
        initial = MagicMock(return_value=Language.FR)
        store = SettingsStore(storage, initial_language=initial)

        state = await store.load()

        assert state.language == Language.FR
        assert json.loads(storage.data[SETTINGS_STORAGE_KEY]) == {"language": "fr"}
        initial.assert_called_once()

    async def test_device_language_is_read_only_once(self, storage: MemoryStorage) -> None:
        await SettingsStore(storage, initial_language=lambda: Language.FR).load()

        initial = MagicMock(return_value=Language.EN)
        store = SettingsStore(storage, initial_language=initial)
        state = await store.load()

        assert state.language == Language.FR
        initial.assert_not_called()

    async def test_set_language_persists(self, storage: MemoryStorage) -> None:
        store = SettingsStore(storage, initial_language=lambda: Language.EN)
        await store.load()

        await store.set_language(Language.FR)

        reloaded = SettingsStore(storage, initial_language=lambda: Language.EN)
        assert (await reloaded.load()).language == Language.FR

    async def test_malformed_settings_load_default(self, storage: MemoryStorage) -> None:
        await storage.set(SETTINGS_STORAGE_KEY, '{"language": "klingon"}')
        store = SettingsStore(storage, initial_language=lambda: Language.FR)

        state = await store.load()

        assert state == SettingsState()

    async def test_read_failure_keeps_default(self, storage: MemoryStorage) -> None:
        storage.fail_reads = True
        store = SettingsStore(storage, initial_language=lambda: Language.FR)

        state = await store.load()

        assert state.language == Language.EN


class TestBindLocalizer:
    """Tests for bind_localizer."""

    async def test_applies_current_language_immediately(self, storage: MemoryStorage) -> None:
        store = SettingsStore(storage, initial_language=lambda: Language.FR)
        await store.load()
        localizer = MagicMock()

        bind_localizer(store, localizer)

        localizer.change_language.assert_called_once_with(Language.FR)

    async def test_language_change_notifies_localizer(self, storage: MemoryStorage) -> None:
        store = SettingsStore(storage, initial_language=lambda: Language.EN)
        await store.load()
        localizer = MagicMock()
        bind_localizer(store, localizer)
        localizer.reset_mock()

        await store.set_language(Language.FR)

        localizer.change_language.assert_called_once_with(Language.FR)

    async def test_same_language_does_not_notify(self, storage: MemoryStorage) -> None:
        store = SettingsStore(storage, initial_language=lambda: Language.EN)
        await store.load()
        localizer = MagicMock()
        bind_localizer(store, localizer)
        localizer.reset_mock()

        await store.set_language(Language.EN)

        localizer.change_language.assert_not_called()

    async def test_unbind(self, storage: MemoryStorage) -> None:
        store = SettingsStore(storage, initial_language=lambda: Language.EN)
        await store.load()
        localizer = MagicMock()
        unbind = bind_localizer(store, localizer)
        localizer.reset_mock()
        unbind()

        await store.set_language(Language.FR)

        localizer.change_language.assert_not_called()

    async def test_first_run_language_reaches_bound_localizer(
        self, storage: MemoryStorage
    ) -> None:
        store = SettingsStore(storage, initial_language=lambda: Language.FR)
        localizer = MagicMock()
        bind_localizer(store, localizer)
        localizer.reset_mock()

        await store.load()

        localizer.change_language.assert_called_once_with(Language.FR)
