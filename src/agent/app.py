# =============================================================================
# agent/app.py - FastAPI Application Entry Point
# =============================================================================
# This is the application the launcher hands the process to.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   poetry run start-backend
#   # or, with src/ on PYTHONPATH
#   poetry run uvicorn agent.app:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agent import __version__
from agent.config import get_settings
from agent.exceptions import (
    AgentException,
    ConfigurationError,
    agent_exception_handler,
)
from agent.routers import health, llm

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup validates external dependency configuration. In production a
    missing DATABASE_URI or REDIS_URL stops the server from starting; the
    operator must supply it and redeploy.
    """
    current = get_settings()

    # Startup
    logger.info(f"Starting agent server in {current.ENVIRONMENT} mode")
    if not current.has_api_key:
        logger.warning("GEMINI_API_KEY is not set; LLM endpoints will return 503")

    missing = current.missing_required()
    if missing:
        if current.is_production:
            raise ConfigurationError(missing, current.ENVIRONMENT)
        logger.warning(f"Not configured: {', '.join(missing)}")

    yield

    # Shutdown
    logger.info("Shutting down agent server")


# Create FastAPI application
app = FastAPI(
    title="Agent Backend API",
    description="Backend server for the Gemini-powered agent.",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Health",
            "description": "Health, liveness and readiness probes",
        },
        {
            "name": "LLM",
            "description": "LLM provider configuration",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

app.add_exception_handler(AgentException, agent_exception_handler)


# =============================================================================
# Routers
# =============================================================================

app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)

app.include_router(
    llm.router,
    prefix="/api/v1",
    tags=["LLM"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Agent Backend API",
        "version": __version__,
        "docs": "/docs",
        "health": "/api/v1/health",
    }
