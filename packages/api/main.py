"""Nanban API - FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from packages.core import configure_logging

from .routes import conversation_router, phrases_router, recognize_router, translate_router
from .dependencies import get_config, get_phrasebook
from .schemas import HealthResponse

API_VERSION = "1.0.0"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    config = get_config()
    configure_logging(config.log_level)
    logger.info("Nanban API starting (%s)", config.env.value)
    logger.info("Phrasebook: %s (%d phrases)", config.phrases_file, len(get_phrasebook()))

    yield

    # Shutdown
    logger.info("Nanban API shutting down")


app = FastAPI(
    title="Nanban API",
    description="REST API for two-way sign language conversation: text to gloss, recognition and phrasebook",
    version=API_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Configure CORS
config = get_config()
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(config.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(translate_router)
app.include_router(recognize_router)
app.include_router(conversation_router)
app.include_router(phrases_router)


@app.get("/api/health", response_model=HealthResponse, tags=["health"])
async def health_check():
    """Check if the API is healthy and all services are running."""
    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        services={
            "api": "running",
            "translation": "available",
            "recognition": "placeholder",
            "phrasebook": "available",
        },
    )


@app.get("/", include_in_schema=False)
async def root():
    """Point to the API documentation."""
    return {
        "message": f"Nanban API v{API_VERSION}",
        "docs": "/docs",
        "health": "/api/health",
    }
