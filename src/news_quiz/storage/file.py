"""File-backed storage: one document per key inside a directory."""

import asyncio
import logging
import os
import re
from pathlib import Path

from news_quiz.errors import StorageError

logger = logging.getLogger(__name__)

DOCUMENT_SUFFIX = ".json"

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


class FileStorage:
    """Key-value storage that keeps each key in its own file.

    Writes go through a temporary file and ``os.replace`` so a document is
    either the old or the new version, never a partial write. Blocking file
    I/O runs in a worker thread.

    Args:
        directory: Directory holding the documents (created on first write).
    """

    def __init__(self, directory: Path | str) -> None:
        self._directory = Path(directory).expanduser()

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, key: str) -> Path:
        """Path of the file holding ``key``."""
        if not key:
            raise ValueError("Storage key must not be empty")
        return self._directory / f"{_UNSAFE_CHARS.sub('_', key)}{DOCUMENT_SUFFIX}"

    async def get(self, key: str) -> str | None:
        return await asyncio.to_thread(self._read, self.path_for(key))

    async def set(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._write, self.path_for(key), value)

    async def remove(self, key: str) -> None:
        await asyncio.to_thread(self._unlink, self.path_for(key))

    async def clear(self) -> None:
        await asyncio.to_thread(self._clear)

    def _read(self, path: Path) -> str | None:
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Failed to read {path}: {e}") from e

    def _write(self, path: Path, value: str) -> None:
        tmp_path = path.with_name(path.name + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(value, encoding="utf-8")
            os.replace(tmp_path, path)
        except OSError as e:
            raise StorageError(f"Failed to write {path}: {e}") from e

    def _unlink(self, path: Path) -> None:
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Failed to remove {path}: {e}") from e

    def _clear(self) -> None:
        if not self._directory.exists():
            return
        try:
            for path in self._directory.glob(f"*{DOCUMENT_SUFFIX}"):
                path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Failed to clear {self._directory}: {e}") from e
        logger.debug(f"Cleared storage directory {self._directory}")
