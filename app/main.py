"""FastAPI application entry point."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.middleware import RequestContextMiddleware
from app.api.routes import api_router
from app.logging_config import get_logger, setup_logging
from app.settings import settings

# Setup logging
setup_logging()
logger = get_logger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Assistant Hub API",
    description="Assistant prompt catalog and feedback relay",
    version=settings.service_version,
)

# Middleware added last runs first: CORS wraps the request id layer so
# error envelopes built there still get CORS headers.
app.add_middleware(RequestContextMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router)
logger.info("Application configured", extra={"api_prefix": settings.api_prefix})


@app.get("/health")
async def health_check():
    """Health check endpoint for Cloud Run."""
    return {"status": "healthy"}


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Assistant Hub API",
        "version": settings.service_version,
        "docs": "/docs",
        "api": settings.api_prefix,
    }
