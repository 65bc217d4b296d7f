"""Timezone registry: identity id -> canonical zone id.

Held in memory and mirrored to a persisted JSON blob after every mutation.
A missing or corrupt blob loads as an empty registry. A failed write is
logged and reported through the return value; the in-memory change stays.

Not thread-safe. Hosts with several threads must serialize all calls.

Key class: TimezoneRegistry.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from .storage import BlobStore, FileBlobStore, MemoryBlobStore, PersistenceError

if TYPE_CHECKING:
    from .settings import DisplaySettings

logger = logging.getLogger(__name__)


class TimezoneRegistry:
    """In-memory identity -> zone mapping synchronized with a BlobStore."""

    def __init__(self, store: BlobStore | None = None) -> None:
        self.store: BlobStore = store if store is not None else MemoryBlobStore()
        self._zones: dict[str, str] = {}

    # --- Loading / serialization ---

    def load(self, blob: str | None) -> None:
        """Replace the mapping with the one encoded in ``blob``.

        Never raises: absent or malformed input yields an empty mapping.
        """
        self._zones = {}
        if not blob:
            logger.debug("No stored timezones, starting empty")
            return
        try:
            data = json.loads(blob)
        except (ValueError, RecursionError, TypeError) as e:
            logger.warning("Failed to load stored timezones: %s", e)
            return
        if not isinstance(data, dict):
            logger.warning(
                "Stored timezones are not a JSON object (got %s), ignoring",
                type(data).__name__,
            )
            return

        skipped = 0
        for identity_id, tz in data.items():
            if isinstance(tz, str) and tz:
                self._zones[identity_id] = tz
            else:
                skipped += 1
        if skipped:
            logger.warning("Skipped %d malformed timezone entries", skipped)

    def reload(self) -> None:
        """Load from the attached store."""
        self.load(self.store.get())

    def serialize(self) -> str:
        return json.dumps(self._zones, ensure_ascii=False, sort_keys=True)

    # --- Lookup ---

    def get(self, identity_id: str) -> str | None:
        return self._zones.get(identity_id)

    def items(self) -> list[tuple[str, str]]:
        return list(self._zones.items())

    def __contains__(self, identity_id: object) -> bool:
        return identity_id in self._zones

    def __len__(self) -> int:
        return len(self._zones)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._zones))

    # --- Mutation ---

    def set(self, identity_id: str, tz: str) -> bool:
        """Store ``tz`` for ``identity_id`` (last write wins).

        ``tz`` is not checked against the catalog. Returns False when the
        change could not be persisted.
        """
        self._zones[identity_id] = tz
        return self._persist()

    def remove(self, identity_id: str) -> bool:
        """Forget ``identity_id``. Removing an unknown id is a no-op."""
        self._zones.pop(identity_id, None)
        return self._persist()

    def clear(self) -> bool:
        """Drop every entry and delete the persisted blob."""
        self._zones = {}
        try:
            self.store.delete()
        except PersistenceError as e:
            logger.warning("Failed to delete stored timezones: %s", e)
            return False
        return True

    def _persist(self) -> bool:
        try:
            self.store.set(self.serialize())
        except PersistenceError as e:
            logger.warning("Failed to save timezones: %s", e)
            return False
        return True


def open_registry(settings: DisplaySettings) -> TimezoneRegistry:
    """Create a registry backed by the settings' store file and load it."""
    registry = TimezoneRegistry(FileBlobStore(settings.store_path))
    registry.reload()
    logger.debug("Loaded %d timezones from %s", len(registry), settings.store_path)
    return registry
