from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import router as api_router
from api.errors import register_exception_handlers
from core.config import AppSettings, get_settings
from core.logging import setup_logging
from db import init_db
from db.session import check_connection
from services.auth import AuthService
from services.providers import create_provider
from services.scraper import ArticleScraper
from services.showcase import ShowcaseService
from services.summarizer import SummaryService
from services.user_summaries import UserSummaryService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings: AppSettings = app.state.settings
    connected = check_connection()
    if connected:
        logger.info("Database connection verified")
    else:
        logger.warning("Database connection failed - summaries will not be stored")
    if settings.create_tables and connected:
        init_db()
        logger.info("Database tables ensured")
    logger.info(
        "Summarizer API started | provider=%s model=%s",
        app.state.summarizer.provider.name,
        settings.openai.model,
    )
    yield
    logger.info("Shutting down summarizer API")


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """Build the application with services attached to ``app.state``."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Summarizer API",
        description="Summarize articles from text or URLs and keep a personal history",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.summarizer = SummaryService(create_provider(settings.openai))
    app.state.scraper = ArticleScraper(settings.scraper)
    app.state.auth = AuthService(settings.auth)
    app.state.user_summaries = UserSummaryService()
    app.state.showcase = ShowcaseService()

    app.include_router(api_router)
    register_exception_handlers(app)

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "server:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8080")),
    )
