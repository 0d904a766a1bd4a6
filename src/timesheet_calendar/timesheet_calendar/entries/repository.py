from __future__ import annotations

from typing import Optional, Protocol


class EntryStorage(Protocol):
    """A durable key-value store holding one serialized value per named slot."""

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError
