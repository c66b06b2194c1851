"""API routes."""

from fastapi import APIRouter

from app.api.routes import query, submission
from app.settings import settings

api_router = APIRouter()

# Read and write paths share one URL, split by method
api_router.include_router(query.router, prefix=settings.api_prefix, tags=["assistants"])
api_router.include_router(submission.router, prefix=settings.api_prefix, tags=["feedback"])
