"""Key-value store backends.

The planner only relies on get / set / scan / mget / delete over JSON-compatible
values. JsonFileStore keeps every key in one JSON file on disk; InMemoryStore is
what the tests inject.
"""
import copy
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from threading import Lock
from typing import Any, Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)


class KeyValueStore:
    def get(self, key: str) -> Optional[Any]:
        raise NotImplementedError

    def set(self, key: str, value: Any, *, only_if_absent: bool = False) -> bool:
        """Store value under key. With only_if_absent, return False instead of overwriting."""
        raise NotImplementedError

    def compare_and_set(self, key: str, expected: Optional[Any], value: Any) -> bool:
        """Store value only if the current value equals expected (None: key absent)."""
        raise NotImplementedError

    def scan(self, prefix: str) -> List[str]:
        raise NotImplementedError

    def mget(self, keys: Iterable[str]) -> List[Optional[Any]]:
        return [self.get(k) for k in keys]

    def delete(self, key: str) -> bool:
        """Remove key; returns whether it existed."""
        raise NotImplementedError


class InMemoryStore(KeyValueStore):
    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = copy.deepcopy(initial) if initial else {}

    def get(self, key):
        return copy.deepcopy(self._data.get(key))

    def set(self, key, value, *, only_if_absent=False):
        if only_if_absent and key in self._data:
            return False
        self._data[key] = copy.deepcopy(value)
        return True

    def compare_and_set(self, key, expected, value):
        if self._data.get(key) != expected:
            return False
        self._data[key] = copy.deepcopy(value)
        return True

    def scan(self, prefix):
        return [k for k in self._data if k.startswith(prefix)]

    def delete(self, key):
        return self._data.pop(key, None) is not None


class JsonFileStore(KeyValueStore):
    """All keys in a single JSON object file, rewritten atomically on every change."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = Lock()

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        with open(self.path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Store file {self.path} does not hold a JSON object")
        return data

    def _atomic_write(self, data: Dict[str, Any]) -> None:
        os.makedirs(self.path.parent, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".store_", suffix=".json")
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as tmp:
                json.dump(data, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, self.path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    def get(self, key):
        with self._lock:
            return self._load().get(key)

    def set(self, key, value, *, only_if_absent=False):
        with self._lock:
            data = self._load()
            if only_if_absent and key in data:
                return False
            data[key] = value
            self._atomic_write(data)
        logger.debug("store.set key=%s file=%s", key, self.path)
        return True

    def compare_and_set(self, key, expected, value):
        with self._lock:
            data = self._load()
            if data.get(key) != expected:
                return False
            data[key] = value
            self._atomic_write(data)
        logger.debug("store.compare_and_set key=%s file=%s", key, self.path)
        return True

    def scan(self, prefix):
        with self._lock:
            return [k for k in self._load() if k.startswith(prefix)]

    def mget(self, keys):
        with self._lock:
            data = self._load()
        return [data.get(k) for k in keys]

    def delete(self, key):
        with self._lock:
            data = self._load()
            if key not in data:
                return False
            del data[key]
            self._atomic_write(data)
        logger.debug("store.delete key=%s file=%s", key, self.path)
        return True


__all__ = ['KeyValueStore', 'InMemoryStore', 'JsonFileStore']
