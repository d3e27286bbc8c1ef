"""
Local key-value storage for the transaction ledger.

- Same contract as browser localStorage: string keys, string values
- JsonFileStorage keeps every key in one JSON file and rewrites it in full
- MemoryStorage is a dict, handy for tests and embedding
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DATA_PATH = Path("data/expense_tracker.json")


class MemoryStorage:
    def __init__(self, items: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str):
        self._items[key] = value

    def remove_item(self, key: str):
        self._items.pop(key, None)


class JsonFileStorage:
    def __init__(self, path: Path | str = DATA_PATH):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, Any]:
        """
        Every key in the file, whatever its value type.

        OSError propagates. Content that is not a UTF-8 JSON object reads as
        empty, so the next write replaces it.
        """
        if not self.path.exists():
            return {}

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning("Could not parse storage file %s: %s", self.path, e)
            return {}

        if not isinstance(data, dict):
            logger.warning("Storage file %s does not hold a JSON object, ignoring it", self.path)
            return {}
        return data

    def _write_all(self, items: Dict[str, Any]):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(items, indent=2, ensure_ascii=False), encoding="utf-8")

    def get_item(self, key: str) -> Optional[str]:
        try:
            value = self._read_all().get(key)
        except OSError as e:
            logger.warning("Could not read storage file %s: %s", self.path, e)
            return None

        # Only string values are valid items
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str):
        # Other keys are written back untouched, including non-string values
        items = self._read_all()
        items[key] = value
        self._write_all(items)

    def remove_item(self, key: str):
        items = self._read_all()
        if key in items:
            del items[key]
            self._write_all(items)
