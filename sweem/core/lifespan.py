"""Application lifespan: what happens before the first request and after the last.

Startup configures logging and, unless CREATE_SCHEMA_ON_STARTUP is false,
creates missing tables. Shutdown disposes the SQL engine's pool.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from sweem.core.config import get_settings
from sweem.infrastructure.persistence.database import create_schema, dispose_engine
from sweem.shared.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    setup_logging()
    if settings.create_schema_on_startup:
        await create_schema()
    logger.info("%s %s ready", settings.app_name, settings.app_version)
    try:
        yield
    finally:
        await dispose_engine()
        logger.info("%s stopped", settings.app_name)
