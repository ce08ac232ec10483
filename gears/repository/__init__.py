from gears.repository.setting_repository import SettingRepository

__all__ = ["SettingRepository"]
