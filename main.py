"""
User Service — application entry point.
"""

from __future__ import annotations

import logging
import pathlib
import sys

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.middleware import register_middleware
from auth.routes import router as users_router
from config.settings import config
from database.session import init_models

LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s — %(message)s"

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Stdout logging, plus combined.log / error.log when ``log_dir`` is set."""
    level = logging.DEBUG if config.debug else getattr(logging, config.log_level.upper(), logging.INFO)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if config.log_dir:
        log_dir = pathlib.Path(config.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_dir / "combined.log"))
        error_handler = logging.FileHandler(log_dir / "error.log")
        error_handler.setLevel(logging.ERROR)
        handlers.append(error_handler)

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)
    for _noisy in ("sqlalchemy.engine", "aiosqlite", "asyncio"):
        logging.getLogger(_noisy).setLevel(logging.WARNING)


def create_app() -> FastAPI:
    app = FastAPI(
        title="User Service",
        version="1.0.0",
        description="User registration, login and profile API.",
    )

    register_middleware(app)

    # CORS is added last so it wraps error responses too
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes
    app.include_router(users_router, prefix="/api/users")

    @app.on_event("startup")
    async def on_startup():
        if config.uses_default_secret:
            logger.warning("JWT_SECRET is not set; using the built-in default secret")
        await init_models()
        logger.info("Application ready to accept requests.")

    return app


configure_logging()
app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="debug" if config.debug else "info",
    )
