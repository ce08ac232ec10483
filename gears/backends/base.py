from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Protocol


class Backend(Protocol):
    """Storage contract the setting repository delegates to.

    A missing value is reported as ``None`` and is never an error; removing a
    key with no stored value is a no-op. Whether the batch calls are applied
    atomically is up to the implementation.
    """

    def get_setting(self, key: str) -> Any:
        ...

    def set_setting(self, key: str, value: Any) -> None:
        ...

    def remove_setting(self, key: str) -> None:
        ...

    def all_settings(self) -> dict[str, Any]:
        ...

    def set_settings(self, settings: Mapping[str, Any]) -> None:
        ...

    def remove_settings(self, keys: Iterable[str]) -> None:
        ...
