"""Whole-file JSON storage for the posts collection."""

import asyncio
import json
import os
import tempfile
from pathlib import Path
from typing import Any

from careerhub.errors import StorageError


class JsonFileStorage:
    """Reads and rewrites one JSON array document at a fixed path.

    Every save replaces the whole file: the new content is written to a temp file in
    the same directory and moved over the old one with ``os.replace``, so readers see
    either the old or the new snapshot, never a partial write.
    Nothing coordinates concurrent writers: the last completed save wins.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    async def load_collection(self) -> list[dict[str, Any]]:
        """Load the full collection.

        Raises:
            StorageError: If the file cannot be read, is not valid JSON, or is not an array
        """
        return await asyncio.to_thread(self._read)

    async def save_collection(self, records: list[dict[str, Any]]) -> None:
        """Replace the stored collection with ``records``.

        Raises:
            StorageError: If the file cannot be written. The previous file is left intact.
        """
        await asyncio.to_thread(self._write, records)

    async def ensure_exists(self) -> None:
        """Create the parent directory and an empty collection if the file is missing."""
        await asyncio.to_thread(self._ensure_exists)

    def _read(self) -> list[dict[str, Any]]:
        try:
            raw = self.path.read_text(encoding="utf-8")
            data = json.loads(raw)
        except (OSError, ValueError) as e:
            raise StorageError(f"Failed to read {self.path}: {e}") from e
        if not isinstance(data, list):
            raise StorageError(f"Expected a JSON array in {self.path}, got {type(data).__name__}")
        return data

    def _write(self, records: list[dict[str, Any]]) -> None:
        tmp_name: str | None = None
        try:
            content = json.dumps(records, indent=2, ensure_ascii=False)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(content)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self.path)
            tmp_name = None
        except (OSError, TypeError, ValueError) as e:
            raise StorageError(f"Failed to write {self.path}: {e}") from e
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)

    def _ensure_exists(self) -> None:
        if self.path.exists():
            return
        self._write([])
