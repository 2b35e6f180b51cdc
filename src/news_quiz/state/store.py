"""Generic JSON document store with write-through persistence and listeners."""

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

from pydantic import BaseModel, ValidationError

from news_quiz.errors import MalformedStateError, StorageError
from news_quiz.storage.base import KeyValueStorage

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=BaseModel)

Listener = Callable[[S, S], None]


class PersistedStore(Generic[S]):
    """Holds one typed state document and mirrors it to key-value storage.

    Every mutation follows the same order: the in-memory state is replaced,
    the whole document is written, then listeners are called with
    ``(previous, next)``. The in-memory state is authoritative; a failed
    write is logged and not rolled back.

    Args:
        storage: Durable key-value storage.
        key: Namespaced key the document is stored under.
        model: Pydantic model class of the state document.
        default: Factory for the state used when nothing valid is stored.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        key: str,
        model: type[S],
        default: Callable[[], S],
    ) -> None:
        self._storage = storage
        self._key = key
        self._model = model
        self._default = default
        self._state: S = default()
        self._listeners: list[Listener[S]] = []

    @property
    def key(self) -> str:
        return self._key

    @property
    def state(self) -> S:
        """Current in-memory state."""
        return self._state

    async def load(self) -> S:
        """Restore state from storage.

        Missing, unreadable or malformed documents yield the default state.
        Listeners are notified if the restored state differs from the
        in-memory one.
        """
        try:
            raw = await self._storage.get(self._key)
        except StorageError as e:
            logger.warning(f"Could not read {self._key}, using defaults. Error: {e}")
            raw = None

        loaded: S | None = None
        if raw is not None:
            try:
                loaded = self.decode(raw)
            except MalformedStateError as e:
                logger.warning(f"Ignoring malformed {self._key} document. Error: {e}")

        previous = self._state
        self._state = loaded if loaded is not None else self._default()
        if self._state != previous:
            self._notify(previous, self._state)
        return self._state

    async def save(self, next_state: S) -> None:
        """Replace the state and persist the whole document."""
        previous = self._state
        self._state = next_state
        await self._persist(next_state)
        self._notify(previous, next_state)

    async def clear(self) -> None:
        """Remove the stored document and reset to the default state."""
        previous = self._state
        self._state = self._default()
        try:
            await self._storage.remove(self._key)
        except StorageError as e:
            logger.warning(f"Failed to remove {self._key}. Error: {e}")
        self._notify(previous, self._state)

    def subscribe(self, listener: Listener[S]) -> Callable[[], None]:
        """Register a listener; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def encode(self, state: S) -> str:
        return state.model_dump_json()

    def decode(self, raw: str) -> S:
        """Decode a stored document.

        Raises:
            MalformedStateError: If the document is not valid JSON for the model.
        """
        try:
            return self._model.model_validate_json(raw)
        except ValidationError as e:
            raise MalformedStateError(f"Invalid {self._key} document: {e}") from e

    async def _persist(self, state: S) -> None:
        try:
            await self._storage.set(self._key, self.encode(state))
        except StorageError as e:
            logger.warning(f"Failed to persist {self._key}; keeping in-memory state. Error: {e}")

    def _notify(self, previous: S, current: S) -> None:
        for listener in list(self._listeners):
            try:
                listener(previous, current)
            except Exception:
                logger.exception(f"State listener for {self._key} failed")
