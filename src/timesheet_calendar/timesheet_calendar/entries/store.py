from __future__ import annotations

import json
import logging
from typing import Optional

from ..core.constants import DEFAULT_STORAGE_KEY
from .model import TimeEntry
from .repository import EntryStorage

logger = logging.getLogger(__name__)


class EntryStore:
    """In-memory EntryList mirrored to one durable storage slot.

    The list is loaded once on construction and rewritten in full on every
    append. One store is built per application and handed to whoever needs it.
    """

    def __init__(self, storage: EntryStorage, *, key: str = DEFAULT_STORAGE_KEY):
        self._storage = storage
        self._key = key
        self._entries: list[TimeEntry] = self.load()

    @property
    def key(self) -> str:
        return self._key

    @property
    def entries(self) -> tuple[TimeEntry, ...]:
        return tuple(self._entries)

    def load(self) -> list[TimeEntry]:
        """Read the slot; absent or unparsable data yields an empty list."""
        raw: Optional[str] = self._storage.get_item(self._key)
        if raw is None:
            return []

        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise TypeError(f"expected a JSON array, got {type(data).__name__}")
            return [TimeEntry.from_dict(item) for item in data]
        except (ValueError, TypeError, KeyError, AttributeError):
            logger.debug("Slot %r holds unparsable entries; starting empty", self._key, exc_info=True)
            return []

    def append(self, entry: TimeEntry) -> None:
        updated = [*self._entries, entry]
        payload = json.dumps([e.to_dict() for e in updated], ensure_ascii=False)
        self._storage.set_item(self._key, payload)
        self._entries = updated
