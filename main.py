import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from api import admin, messages
from core.config import Settings
from core.cors import CORSHeadersMiddleware
from core.errors import register_exception_handlers
from core.responses import PrettyJSONResponse
from database import build_engine, create_db_and_tables

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.LOG_LEVEL)

    engine = build_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("🚀 App starting up...")
        if settings.AUTO_CREATE_TABLES:
            create_db_and_tables(engine)
        yield
        engine.dispose()
        logger.info("🛑 App shutting down...")

    app = FastAPI(
        lifespan=lifespan,
        title="Contact Form Backend",
        default_response_class=PrettyJSONResponse,
        redirect_slashes=False,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.engine = engine

    # CORS
    app.add_middleware(CORSHeadersMiddleware)

    register_exception_handlers(app)

    # Routers
    app.include_router(messages.router)
    app.include_router(admin.router)

    return app


app = create_app()
