from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from ..core.exceptions import StorageError
from .repository import EntryStorage

logger = logging.getLogger(__name__)


class JsonFileStorage(EntryStorage):
    """Slot store backed by one JSON object file: {"<key>": "<serialized value>"}.

    Every write replaces the whole file through a temp file + os.replace, so a
    reader sees either the previous snapshot or the new one.
    """

    def __init__(self, path: str | os.PathLike[str]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError:
            logger.debug("Storage file %s unreadable", self._path, exc_info=True)
            return {}
        except UnicodeDecodeError:
            logger.debug("Storage file %s is not valid UTF-8", self._path, exc_info=True)
            return {}

        try:
            data = json.loads(raw)
        except ValueError:
            logger.debug("Storage file %s is not valid JSON", self._path, exc_info=True)
            return {}

        if not isinstance(data, dict):
            logger.debug("Storage file %s does not hold a JSON object", self._path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def get_item(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read_all()
        items[key] = value

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=".slot-", suffix=".json", dir=str(self._path.parent))
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(items, f, ensure_ascii=False, indent=2)
                os.replace(tmp_name, self._path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            raise StorageError(f"Cannot write storage file {self._path}: {e}") from e
