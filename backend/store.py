# backend/store.py

import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Optional

from backend.models import utcnow


def startup_key(startup_id):
    return f"startup:{startup_id}"


def analysis_key(startup_id):
    return f"analysis:{startup_id}"


def notes_key(startup_id):
    return f"notes:{startup_id}"


@dataclass
class KVRecord:
    key: str
    value: Any
    timestamp: datetime


class KVStore:
    """In-memory key-value map. Last writer wins per key."""

    def __init__(self):
        self._data = {}
        self._lock = threading.RLock()

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._data[key] = KVRecord(key=key, value=value, timestamp=utcnow())

    def get(self, key: str) -> Optional[KVRecord]:
        with self._lock:
            return self._data.get(key)

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._data.pop(key, None) is not None

    def get_by_prefix(self, prefix: str) -> List[KVRecord]:
        with self._lock:
            return [r for k, r in self._data.items() if k.startswith(prefix)]

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._data)

    def values(self) -> List[Any]:
        with self._lock:
            return [r.value for r in self._data.values()]

    def size(self) -> int:
        with self._lock:
            return len(self._data)

    def __len__(self):
        return self.size()
