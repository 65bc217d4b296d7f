"""Persisted-blob accessors for the timezone registry.

The registry persists itself as a single JSON string. Where that string lives
is the host's business; these stores cover the two common cases.

Key classes: BlobStore (protocol), MemoryBlobStore, FileBlobStore.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from .utils import atomic_write_text

logger = logging.getLogger(__name__)


class PersistenceError(Exception):
    """The blob could not be written or deleted."""


class BlobStore(Protocol):
    def get(self) -> str | None: ...

    def set(self, value: str) -> None: ...

    def delete(self) -> None: ...


class MemoryBlobStore:
    """Holds the blob in memory. Used by tests and hosts with their own saving."""

    def __init__(self, value: str | None = None) -> None:
        self.value = value

    def get(self) -> str | None:
        return self.value

    def set(self, value: str) -> None:
        self.value = value

    def delete(self) -> None:
        self.value = None


class FileBlobStore:
    """Stores the blob as a UTF-8 file, written atomically."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def get(self) -> str | None:
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to read %s: %s", self.path, e)
            return None

    def set(self, value: str) -> None:
        try:
            atomic_write_text(self.path, value)
        except OSError as e:
            raise PersistenceError(f"cannot write {self.path}: {e}") from e

    def delete(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            raise PersistenceError(f"cannot delete {self.path}: {e}") from e
