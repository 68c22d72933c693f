"""
Main application entry point - FastAPI app instance and configuration.
Run with: uvicorn landmark_lint.main:app --reload
"""

from fastapi import FastAPI

from landmark_lint.core.config import settings
from landmark_lint.routers import landmarks

# ---------------------------------------------------------------------------
# CREATE FASTAPI APPLICATION
# ---------------------------------------------------------------------------
# Visit http://localhost:8000/docs to try the audit endpoint
app = FastAPI(
    title=settings.APP_NAME,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ---------------------------------------------------------------------------
# REGISTER ROUTERS
# ---------------------------------------------------------------------------
# landmarks.router: /landmarks/audit
app.include_router(landmarks.router)


# ---------------------------------------------------------------------------
# HEALTH CHECK ENDPOINT
# ---------------------------------------------------------------------------
@app.get("/health", tags=["health"])
def health_check():
    """
    Simple health check endpoint.

    Returns:
        {"status": "ok"}
    """
    return {"status": "ok"}
