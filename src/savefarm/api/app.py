"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from savefarm.api.accounts import router as accounts_router
from savefarm.api.analysis import router as analysis_router
from savefarm.api.community import router as community_router
from savefarm.api.errors import register_error_handlers
from savefarm.api.nutrition import router as nutrition_router
from savefarm.api.recipes import router as recipes_router
from savefarm.app_logging import configure_logging
from savefarm.config import parse_allowed_origins
from savefarm.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "SaveFarm API starting (environment=%s, data_dir=%s)",
            container.settings.environment,
            container.settings.data_dir,
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="SaveFarm", lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_allowed_origins(container.settings.cors_allowed_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["Content-Type", "x-session-id"],
    )
    register_error_handlers(app)

    app.include_router(accounts_router)
    app.include_router(community_router)
    app.include_router(nutrition_router)
    app.include_router(analysis_router)
    app.include_router(recipes_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
