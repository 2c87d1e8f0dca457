"""Autodidact - FastAPI app entry point."""
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from autodidact.core.config import get_settings
from autodidact.core.log import configure_logging
from autodidact.db.base import Base
from autodidact.db.session import engine, AsyncSessionLocal
from autodidact.routers import api, auth
from autodidact.services.seeding import seed_questions

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with AsyncSessionLocal() as db:
        await seed_questions(db)

    logger.info("Startup complete")
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Interview practice: question catalog, answer feedback, free-tier access",
        lifespan=lifespan,
    )
    app.include_router(auth.router)
    app.include_router(api.router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
