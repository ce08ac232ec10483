from __future__ import annotations

from collections.abc import Iterable, Mapping
import threading
from typing import Any


class InMemoryBackend:
    """Process-local backend; every call runs under a single lock acquisition."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._values: dict[str, Any] = {}

    def get_setting(self, key: str) -> Any:
        with self._lock:
            return self._values.get(key)

    def set_setting(self, key: str, value: Any) -> None:
        with self._lock:
            self._values[key] = value

    def remove_setting(self, key: str) -> None:
        with self._lock:
            self._values.pop(key, None)

    def all_settings(self) -> dict[str, Any]:
        with self._lock:
            return dict(self._values)

    def set_settings(self, settings: Mapping[str, Any]) -> None:
        with self._lock:
            self._values.update(settings)

    def remove_settings(self, keys: Iterable[str]) -> None:
        with self._lock:
            for key in keys:
                self._values.pop(key, None)
