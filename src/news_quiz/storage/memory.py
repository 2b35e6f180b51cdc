"""In-process storage, used for ephemeral sessions and tests."""

from news_quiz.errors import StorageError


class MemoryStorage:
    """Key-value storage backed by a dict.

    Args:
        initial: Optional documents to start with.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})
        self.fail_writes = False
        self.fail_reads = False

    @property
    def data(self) -> dict[str, str]:
        """A copy of the stored documents."""
        return dict(self._data)

    async def get(self, key: str) -> str | None:
        if self.fail_reads:
            raise StorageError(f"Read failed for {key!r}")
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise StorageError(f"Write failed for {key!r}")
        self._data[key] = value

    async def remove(self, key: str) -> None:
        if self.fail_writes:
            raise StorageError(f"Remove failed for {key!r}")
        self._data.pop(key, None)

    async def clear(self) -> None:
        if self.fail_writes:
            raise StorageError("Clear failed")
        self._data.clear()
