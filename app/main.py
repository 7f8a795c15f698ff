"""emerge FastAPI application."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.api import activities, dashboard, goals, health, recommendations, survey, users
from app.core.config import settings
from app.db.session import SessionLocal, engine, init_db
from app.services.user_service import ensure_default_user

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and the default user on startup; release the engine on shutdown."""
    init_db()
    db = SessionLocal()
    try:
        ensure_default_user(db)
        db.commit()
    finally:
        db.close()
    logger.info("startup_complete database=%s", engine.url.render_as_string(hide_password=True))

    yield

    engine.dispose()
    logger.info("shutdown_complete")


app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    lifespan=lifespan,
)


@app.exception_handler(SQLAlchemyError)
async def storage_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error("storage_failure method=%s path=%s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Storage failure"},
    )


app.include_router(health.router)
app.include_router(survey.router, prefix=settings.api_prefix)
app.include_router(users.router, prefix=settings.api_prefix)
app.include_router(goals.router, prefix=settings.api_prefix)
app.include_router(activities.router, prefix=settings.api_prefix)
app.include_router(dashboard.router, prefix=settings.api_prefix)
app.include_router(recommendations.router, prefix=settings.api_prefix)
