"""
QueueLink API - Main FastAPI application.

Digital queues: businesses create a queue and share its link, customers
join remotely, staff serve them from a dashboard.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from queuelink import __version__
from queuelink.config import get_settings
from queuelink.services.demo_data import ensure_demo_data
from queuelink.services.queue_store import QueueStore

settings = get_settings()

logging.basicConfig(
    level=settings.effective_log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    Runs on startup and shutdown.
    """
    # Startup
    logger.info("Starting %s in %s mode...", settings.app_name, settings.app_env)
    app.state.store = QueueStore()

    if settings.seed_demo_data:
        created = ensure_demo_data(app.state.store)
        logger.info("Demo data: %d queue(s) created", len(created))
    else:
        logger.info("Demo data: Disabled by config")

    yield

    # Shutdown
    logger.info("Shutting down, discarding %d queue(s)...", len(app.state.store))


app = FastAPI(
    title=settings.app_name,
    description="Remote queueing for businesses and their customers",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# CORS middleware - allow frontend apps to connect
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Error envelopes
# =============================================================================

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render every HTTP error as `{"success": false, "error": ...}`."""
    if exc.status_code == 405:
        content = {"success": False, "error": "Method not allowed"}
    elif isinstance(exc.detail, dict):
        content = {"success": False, **exc.detail}
    else:
        content = {"success": False, "error": str(exc.detail)}

    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed or wrongly typed bodies are plain 400s."""
    logger.info("Invalid request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": "Invalid request body"},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Unexpected failures are logged and degrade to a generic 500."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": "Internal server error"},
    )


@app.get("/")
async def root():
    """Root endpoint - basic health check."""
    return {
        "app": settings.app_name,
        "version": __version__,
        "status": "running",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy"}


# Routers
from queuelink.routers import queue

app.include_router(queue.router, prefix="/api/queue", tags=["Queue"])
