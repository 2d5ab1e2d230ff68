"""
API package.
"""
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .routes import analyses, locations, runs
from ...application.services.analysis_service import AnalysisService
from ...infrastructure.broadcast import ProgressBroadcaster


def create_app(service: Optional[AnalysisService] = None) -> FastAPI:
    """
    Builds the HTTP app. When a service is given it becomes the shared
    singleton used by all routes.
    """
    app = FastAPI(title="SafeSight Risk API")

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Allow all origins for development
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(analyses.app.router, tags=["analyses"])
    app.include_router(locations.app.router, tags=["locations"])
    app.include_router(runs.app.router, tags=["runs"])

    runs.init_broadcaster(ProgressBroadcaster())

    if service is not None:
        analyses.init_service(service)
    return app
