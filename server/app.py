"""FastAPI web server for the Business Ideas API."""
from __future__ import annotations

import logging
import sqlite3
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from business_ideas.config import Settings, get_settings
from business_ideas.db.database import Database
from business_ideas.errors import BusinessIdeasError
from business_ideas.logging_setup import configure_logging
from server.routes import ROUTERS

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _describe_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())[1:])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts) or "Invalid request"


def register_error_handlers(app: FastAPI) -> None:
    """Every error leaves the API as ``{"error": message}``."""

    @app.exception_handler(BusinessIdeasError)
    async def handle_domain_error(request: Request, exc: BusinessIdeasError):
        return _error(exc.status_code, str(exc))

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        return _error(400, _describe_validation_error(exc))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(sqlite3.Error)
    async def handle_store_error(request: Request, exc: sqlite3.Error):
        logger.exception("Store failure on %s %s", request.method, request.url.path)
        return _error(500, str(exc))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error(500, str(exc))


def create_app(db: Optional[Database] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the application. An injected ``db`` is used as-is and left open."""
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = app.state.db is None
        if owned:
            app.state.db = Database(path=settings.DATABASE_PATH)
        # Without its tables the server cannot serve anything; let it fail.
        app.state.db.init()
        logger.info("Server started - DB: %s", app.state.db.path)
        yield

        logger.info("Server shutting down")
        if owned:
            app.state.db.close()
            app.state.db = None

    app = FastAPI(
        title=settings.APP_NAME,
        description="Store business ideas with their validations, plans and implementation items",
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )
    app.state.db = db

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    @app.get("/api/health")
    async def health():
        return {"status": "ok", "message": "Business Ideas API is running"}

    for router in ROUTERS:
        app.include_router(router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    _settings = get_settings()
    uvicorn.run("server.app:app", host=_settings.HOST, port=_settings.PORT, reload=_settings.SERVER_RELOAD)
