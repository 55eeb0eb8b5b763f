"""
Diff Backend - FastAPI Application Entry Point
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from diff_backend.routers import config, diff
from diff_backend.services.config_manager import ConfigManager

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(name)s] %(levelname)s: %(message)s"


_console_handler: logging.Handler | None = None


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure application logging.

    Args:
        level: Log level string

    Returns:
        Root logger instance
    """
    global _console_handler
    numeric_level = getattr(logging, str(level).upper(), logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Console handler, installed once even if the app is started repeatedly
    if _console_handler is None:
        _console_handler = logging.StreamHandler(sys.stdout)
        _console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    _console_handler.setLevel(numeric_level)
    if _console_handler not in root_logger.handlers:
        root_logger.addHandler(_console_handler)

    # Reduce noise from the ASGI server
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return root_logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    config_manager = ConfigManager.get_instance()
    setup_logging(config_manager.get("logging", {}).get("level", "INFO"))
    logger.info("Starting Diff Backend...")
    logger.info("ConfigManager initialized from %s", config_manager.config_file)

    yield
    logger.info("Shutting down Diff Backend...")


app = FastAPI(
    title="Diff Backend",
    description="Line diff previews for AI-proposed document edits",
    version="1.0.0",
    lifespan=lifespan,
)

# Editor clients run on arbitrary local origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(diff.router, prefix="/api/diff", tags=["diff"])
app.include_router(config.router, prefix="/api/config", tags=["config"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "diff-backend"}


def run():
    """Run the server with host/port from the stored configuration"""
    import uvicorn

    server = ConfigManager.get_instance().get("server", {})
    uvicorn.run(app, host=server.get("host", "0.0.0.0"), port=server.get("port", 8000))


if __name__ == "__main__":
    run()
