"""
Quiz Lead Capture API - Main Application.

FastAPI application serving the quiz submission endpoint.

CORS: every quiz response carries the Access-Control-* headers itself, and a
catch-all OPTIONS route answers browser preflights on any path.
"""

import logging

from fastapi import FastAPI

from api import __version__
from core.config import get_settings
from services.quiz_submission_service import preflight_response

logging.basicConfig(level=get_settings().log_level)

# Create FastAPI application
app = FastAPI(
    title="Quiz Lead Capture API",
    description="Captures IELTS quiz leads and sends personalized study-plan emails",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


@app.get("/health", tags=["Health"])
def health_check():
    """
    Health check endpoint.

    Returns the API status and version.
    """
    return {
        "status": "healthy",
        "version": __version__,
        "service": "quiz-lead-capture-api"
    }


@app.get("/", tags=["Root"])
def root():
    """
    Root endpoint with API information.
    """
    return {
        "message": "Quiz Lead Capture API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health"
    }


# Import and include routers
from api.routers import quiz
from api.routers.quiz import to_http_response

app.include_router(quiz.router, prefix="/api/v1", tags=["Quiz"])


@app.options("/{full_path:path}", include_in_schema=False)
def preflight(full_path: str):
    """Answer CORS preflight requests for any path."""
    return to_http_response(preflight_response())
