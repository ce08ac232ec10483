from __future__ import annotations

from collections.abc import Iterable, Mapping
import logging
from typing import Any

from gears.backends.base import Backend
from gears.core.errors import UnregisteredSettingError
from gears.registry.settings_registry import SettingsRegistry

logger = logging.getLogger(__name__)


class SettingRepository:
    """Reads and writes setting values, restricted to registered keys.

    Every key a call receives is checked against the registry before the
    backend is touched. Batch calls check all of their keys first, so a single
    unknown key rejects the whole batch and nothing is written.
    """

    def __init__(self, backend: Backend, registry: SettingsRegistry) -> None:
        self._backend = backend
        self._registry = registry

    @property
    def registry(self) -> SettingsRegistry:
        return self._registry

    def get(self, key: str) -> Any:
        """Return the stored value of ``key``, or ``None`` if it has none."""
        self._verify_or_fail(key)
        return self._backend.get_setting(key)

    def set(self, key: str, value: Any) -> None:
        self._verify_or_fail(key)
        self._backend.set_setting(key, value)

    def forget(self, key: str) -> None:
        """Remove the stored value of ``key``; the key stays registered."""
        self._verify_or_fail(key)
        self._backend.remove_setting(key)

    def all(self) -> dict[str, Any]:
        """Return every setting that currently has a stored value."""
        return self._backend.all_settings()

    def update(self, settings: Mapping[str, Any]) -> None:
        """Store several values at once. Registered keys without a value are fine."""
        batch = dict(settings)
        for key in batch:
            self._verify_or_fail(key)

        self._backend.set_settings(batch)
        logger.debug(
            "Settings updated",
            extra={"event": "settings_updated", "keys": list(batch)},
        )

    def delete(self, keys: Iterable[str]) -> None:
        """Remove the stored values of several keys at once."""
        batch = list(keys)
        for key in batch:
            self._verify_or_fail(key)

        self._backend.remove_settings(batch)
        logger.debug(
            "Settings deleted",
            extra={"event": "settings_deleted", "keys": list(batch)},
        )

    def _verify_or_fail(self, key: str) -> None:
        if self._registry.has(key):
            return

        logger.warning(
            "Rejected access to unregistered setting",
            extra={"event": "setting_unregistered", "key": key},
        )
        raise UnregisteredSettingError(key)
