"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring (logging, telemetry, cache,
settings option install, DB engine dispose). No business logic here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings

logger = logging.getLogger(__name__)


async def _install_settings_option(app: FastAPI) -> None:
    """Create the settings option with defaults unless it already exists."""
    from app.application.services.config_store import ConfigStore
    from app.infrastructure.persistence.database import get_session_factory
    from app.infrastructure.persistence.repositories import OptionRepository

    settings = get_settings()
    factory = get_session_factory()
    async with factory() as session:
        async with session.begin():
            store = ConfigStore(
                OptionRepository(session),
                app.state.cache,
                option_name=settings.settings_option_name,
                cache_ttl=settings.cache_ttl_settings,
            )
            await store.install()


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, telemetry (if enabled), Redis cache (if
    enabled), settings option install (if SQL is configured). Shutdown
    order: cache disconnect, telemetry shutdown, SQL engine dispose.
    """
    from app.shared.telemetry.logging import setup_logging

    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    if settings.telemetry_enabled:
        from app.shared.telemetry.telemetry import TelemetryConfig, set_telemetry

        telemetry = TelemetryConfig(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=True,
            environment=settings.telemetry_environment,
        )
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        set_telemetry(telemetry)
        telemetry.instrument_fastapi(app)
        if settings.redis_enabled:
            telemetry.instrument_redis()
        logger.info("Telemetry initialized")

    if settings.redis_enabled:
        from app.infrastructure.cache.redis_cache import CacheService

        cache = CacheService()
        await cache.connect()
        app.state.cache = cache
    else:
        app.state.cache = None

    if settings.sql_configured:
        from app.infrastructure.persistence import database

        await _install_settings_option(app)
        from app.shared.telemetry.telemetry import get_telemetry

        telemetry_instance = get_telemetry()
        if telemetry_instance is not None and database.engine is not None:
            telemetry_instance.instrument_sqlalchemy(database.engine)
    else:
        logger.warning("DATABASE_URL is empty: database-backed routes will answer 503")

    yield

    # ---- Shutdown ----
    if getattr(app.state, "cache", None) is not None:
        await app.state.cache.disconnect()
        app.state.cache = None

    from app.shared.telemetry.telemetry import get_telemetry, set_telemetry

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)

    from app.infrastructure.persistence.database import dispose_engine

    await dispose_engine()
