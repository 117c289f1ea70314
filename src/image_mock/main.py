"""Image Mock API – FastAPI application entry-point."""

from contextlib import asynccontextmanager
import logging
from collections.abc import AsyncIterator

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from src.image_mock.config import settings
from src.image_mock.errors import register_error_handlers
from src.image_mock.router import health, upload

# Configure logging from settings
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────
# Lifespan: announce the listening port
# ──────────────────────────────────────────────
@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    logger.info("🚀 Mock API server running on port %s", settings.port)
    yield
    logger.info("🛑 Mock API server shutting down")


# ──────────────────────────────────────────────
# Application factory
# ──────────────────────────────────────────────
# Docs routes are disabled so every unknown path reaches the catch-all 404.
app = FastAPI(
    title="Image Mock API",
    description="Mock image-upload endpoint for testing client integrations.",
    version="1.0.0",
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

# ── CORS middleware (configured from environment variables) ──
app.add_middleware(
    middleware_class=CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_methods_list,
    allow_headers=settings.cors_headers_list,
)

logger.info("CORS configured with origins: %s", settings.cors_origins_list)

# ── error handlers (structured JSON for every client error) ──
register_error_handlers(app)

# ── register routers ──
app.include_router(health.router)
app.include_router(upload.router)
