"""Tests for PersistedStore."""

import json

import pytest
from pydantic import BaseModel

from news_quiz.errors import MalformedStateError
from news_quiz.state import PersistedStore
from news_quiz.storage import MemoryStorage


class CounterState(BaseModel):
    count: int = 0
    label: str = "default"

    model_config = {"frozen": True}


@pytest.fixture
def store(storage: MemoryStorage) -> PersistedStore[CounterState]:
    return PersistedStore(storage, "counter", CounterState, CounterState)


class TestLoad:
    """Tests for restoring state."""

    async def test_load_absent_returns_default(
        self, store: PersistedStore[CounterState]
    ) -> None:
        assert await store.load() == CounterState()

    async def test_save_then_load_round_trip(self, storage: MemoryStorage) -> None:
        first = PersistedStore(storage, "counter", CounterState, CounterState)
        await first.save(CounterState(count=3, label="three"))

        second = PersistedStore(storage, "counter", CounterState, CounterState)
        assert await second.load() == CounterState(count=3, label="three")

    async def test_load_invalid_json_returns_default(
        self, storage: MemoryStorage, store: PersistedStore[CounterState]
    ) -> None:
        await storage.set("counter", "{not json")
        assert await store.load() == CounterState()

    async def test_load_wrong_shape_returns_default(
        self, storage: MemoryStorage, store: PersistedStore[CounterState]
    ) -> None:
        await storage.set("counter", json.dumps({"count": "many"}))
        assert await store.load() == CounterState()

    async def test_load_read_failure_returns_default(
        self, storage: MemoryStorage, store: PersistedStore[CounterState]
    ) -> None:
        await storage.set("counter", CounterState(count=5).model_dump_json())
        storage.fail_reads = True
        assert await store.load() == CounterState()

    async def test_load_notifies_when_state_changes(
        self, storage: MemoryStorage, store: PersistedStore[CounterState]
    ) -> None:
        await storage.set("counter", CounterState(count=2).model_dump_json())
        calls: list[tuple[CounterState, CounterState]] = []
        store.subscribe(lambda prev, cur: calls.append((prev, cur)))

        await store.load()
        await store.load()

        assert calls == [(CounterState(), CounterState(count=2))]

    def test_decode_raises_malformed_state_error(
        self, store: PersistedStore[CounterState]
    ) -> None:
        with pytest.raises(MalformedStateError):
            store.decode("[]")


class TestSave:
    """Tests for mutations."""

    async def test_save_writes_whole_document(
        self, storage: MemoryStorage, store: PersistedStore[CounterState]
    ) -> None:
        await store.save(CounterState(count=1, label="one"))
        assert json.loads(storage.data["counter"]) == {"count": 1, "label": "one"}

    async def test_save_notifies_with_previous_and_next(
        self, store: PersistedStore[CounterState]
    ) -> None:
        calls: list[tuple[CounterState, CounterState]] = []
        store.subscribe(lambda prev, cur: calls.append((prev, cur)))

        await store.save(CounterState(count=1))

        assert calls == [(CounterState(), CounterState(count=1))]

    async def test_notification_happens_after_persisting(
        self, storage: MemoryStorage, store: PersistedStore[CounterState]
    ) -> None:
        seen: list[str | None] = []
        store.subscribe(lambda prev, cur: seen.append(storage.data.get("counter")))

        await store.save(CounterState(count=7))

        assert seen == [CounterState(count=7).model_dump_json()]

    async def test_write_failure_keeps_in_memory_state(
        self, storage: MemoryStorage, store: PersistedStore[CounterState]
    ) -> None:
        storage.fail_writes = True
        calls: list[CounterState] = []
        store.subscribe(lambda prev, cur: calls.append(cur))

        await store.save(CounterState(count=9))

        assert store.state == CounterState(count=9)
        assert calls == [CounterState(count=9)]
        assert "counter" not in storage.data

    async def test_unsubscribe(self, store: PersistedStore[CounterState]) -> None:
        calls: list[CounterState] = []
        unsubscribe = store.subscribe(lambda prev, cur: calls.append(cur))
        unsubscribe()
        unsubscribe()

        await store.save(CounterState(count=1))

        assert calls == []

    async def test_failing_listener_does_not_block_others(
        self, store: PersistedStore[CounterState]
    ) -> None:
        def broken(prev: CounterState, cur: CounterState) -> None:
            raise RuntimeError("listener bug")

        calls: list[CounterState] = []
        store.subscribe(broken)
        store.subscribe(lambda prev, cur: calls.append(cur))

        await store.save(CounterState(count=1))

        assert calls == [CounterState(count=1)]


class TestClear:
    """Tests for clearing the document."""

    async def test_clear_removes_document_and_resets(
        self, storage: MemoryStorage, store: PersistedStore[CounterState]
    ) -> None:
        await store.save(CounterState(count=4))
        calls: list[CounterState] = []
        store.subscribe(lambda prev, cur: calls.append(cur))

        await store.clear()

        assert store.state == CounterState()
        assert "counter" not in storage.data
        assert calls == [CounterState()]

    async def test_clear_with_failing_storage_still_resets(
        self, storage: MemoryStorage, store: PersistedStore[CounterState]
    ) -> None:
        await store.save(CounterState(count=4))
        storage.fail_writes = True

        await store.clear()

        assert store.state == CounterState()
