"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ccbstats import __version__


def create_app() -> FastAPI:
    """Create FastAPI application.

    Returns:
        Configured FastAPI application.
    """
    app = FastAPI(
        title="ccbstats API",
        description="Skill-check statistics from CCB dice-bot transcripts",
        version=__version__,
    )

    # Add CORS middleware for UI access
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routes
    from ccbstats.api.routes import analyze, export

    app.include_router(analyze.router, prefix="/api")
    app.include_router(export.router, prefix="/api")

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


# Default app instance
app = create_app()
