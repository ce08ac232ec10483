from gears.registry.settings_registry import SettingsRegistry

__all__ = ["SettingsRegistry"]
