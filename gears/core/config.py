from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_BACKENDS = ("memory", "database")


class Settings(BaseSettings):
    app_name: str = "gears"
    environment: str = "development"
    log_level: str = "INFO"

    settings_backend: str = Field(default="memory", alias="SETTINGS_BACKEND")
    database_url: str = Field(default="", alias="DATABASE_URL")
    registered_settings_raw: str = Field(default="", alias="REGISTERED_SETTINGS")

    db_init_attempts: int = Field(default=10, alias="DB_INIT_ATTEMPTS")
    db_init_delay_seconds: float = Field(default=2.0, alias="DB_INIT_DELAY_SECONDS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def resolved_database_url(self) -> str:
        return self.database_url.strip()

    @property
    def resolved_backend(self) -> str:
        return self.settings_backend.strip().lower()

    @property
    def registered_settings(self) -> list[str]:
        return [
            key.strip()
            for key in self.registered_settings_raw.split(",")
            if key.strip()
        ]

    def validate_required(self) -> None:
        if self.resolved_backend not in SUPPORTED_BACKENDS:
            supported = ", ".join(SUPPORTED_BACKENDS)
            raise ValueError(
                f"Unsupported SETTINGS_BACKEND `{self.settings_backend}`; expected one of: {supported}"
            )

        if self.resolved_backend == "database" and not self.resolved_database_url:
            raise ValueError("Missing required environment variables: DATABASE_URL")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
