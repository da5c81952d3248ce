"""Application FastAPI principale du tableau de bord d'administration."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Iterable

from fastapi import FastAPI

from admin_panel.api import dashboard
from admin_panel.core import config
from admin_panel.core.bootstrap import DEFAULT_BOOTSTRAPPERS, Bootstrapper

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    logger.info("Admin panel %s mounted on %s", config.version(), config.prefix())
    try:
        yield
    finally:
        logger.info("Admin panel stopped")


def create_app(bootstrappers: Iterable[Bootstrapper] = DEFAULT_BOOTSTRAPPERS) -> FastAPI:
    app = FastAPI(title="Admin Panel", version=config.version(), lifespan=_lifespan)
    app.state.bootstrappers = tuple(bootstrappers)

    prefix = config.prefix()
    app.include_router(dashboard.router, prefix="" if prefix == "/" else prefix, tags=["dashboard"])

    @app.get("/health", tags=["health"])
    async def healthcheck() -> dict[str, str]:
        """Renvoie l'état de santé générique du service."""
        return {"status": "ok", "version": config.version()}

    return app


app = create_app()
