from typing import Protocol


class KeyValueStorage(Protocol):
    """Interface for durable string-keyed storage of text documents.

    Implementations raise ``StorageError`` on I/O failure. Operations on the
    same key are applied in call order.
    """

    async def get(self, key: str) -> str | None:
        """Return the stored value for ``key``, or None if absent."""
        ...

    async def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...

    async def remove(self, key: str) -> None:
        """Delete ``key``. Removing an absent key is not an error."""
        ...

    async def clear(self) -> None:
        """Delete every key owned by this storage."""
        ...
