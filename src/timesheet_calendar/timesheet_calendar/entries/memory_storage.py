from __future__ import annotations

from typing import Optional

from .repository import EntryStorage


class InMemoryStorage(EntryStorage):
    """Volatile slot store, used for tests and throwaway sessions."""

    def __init__(self, items: Optional[dict[str, str]] = None):
        self._items: dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value
