import logging

from gears.backends.base import Backend
from gears.backends.database import DatabaseBackend
from gears.backends.memory import InMemoryBackend
from gears.core.config import Settings, get_settings
from gears.db.session import build_session_factory, get_engine, init_db
from gears.logging.logging_config import configure_logging
from gears.registry.settings_registry import SettingsRegistry
from gears.repository.setting_repository import SettingRepository


def build_backend(settings: Settings) -> Backend:
    if settings.resolved_backend == "database":
        engine = get_engine(settings.resolved_database_url)
        init_db(
            engine,
            attempts=settings.db_init_attempts,
            delay_seconds=settings.db_init_delay_seconds,
        )
        return DatabaseBackend(build_session_factory(engine))
    return InMemoryBackend()


def create_repository(settings: Settings | None = None) -> SettingRepository:
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    try:
        settings.validate_required()
    except ValueError as exc:
        logger.error(
            "Startup configuration validation failed",
            extra={"event": "startup_config_invalid", "error": str(exc)},
        )
        raise RuntimeError(str(exc)) from exc

    registry = SettingsRegistry(settings.registered_settings)
    repository = SettingRepository(build_backend(settings), registry)

    logger.info(
        "Settings repository configured",
        extra={
            "event": "repository_configured",
            "service": settings.app_name,
            "environment": settings.environment,
            "backend": settings.resolved_backend,
            "registered_settings": registry.keys(),
        },
    )
    return repository
