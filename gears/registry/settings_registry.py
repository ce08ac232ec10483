from __future__ import annotations

from collections.abc import Iterable, Iterator
import threading


class SettingsRegistry:
    """Set of setting keys the repository is allowed to operate on.

    Keys are matched exactly (case-sensitive, no normalization). The registry
    only grows: it is filled during bootstrap and queried afterwards, so reads
    do not take the lock.
    """

    def __init__(self, keys: Iterable[str] = ()) -> None:
        self._lock = threading.Lock()
        self._keys: dict[str, None] = {}
        self.add_many(keys)

    def add(self, key: str) -> None:
        with self._lock:
            self._keys.setdefault(key, None)

    def add_many(self, keys: Iterable[str]) -> None:
        with self._lock:
            for key in keys:
                self._keys.setdefault(key, None)

    def has(self, key: str) -> bool:
        return key in self._keys

    def keys(self) -> list[str]:
        return list(self._keys)

    def __contains__(self, key: object) -> bool:
        return key in self._keys

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._keys)
