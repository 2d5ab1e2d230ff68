"""
API for running analyses and browsing the history.
"""
import asyncio
import uuid
from typing import List, Optional
from fastapi import FastAPI, HTTPException
from ....application.orchestrator import get_preset
from ....application.services.analysis_service import AnalysisService
from ....domain import FootageRef, LocationResult
from .....common.exceptions import (
    AnalysisCancelledError,
    ConfigurationError,
    InputError,
    InvalidFootageError,
    RunFailedError,
    SourceError,
)
from .....common.schemas import AnalysisRequest, RiskAnalysisSchema
from . import runs

app = FastAPI()

# Singleton
_service: Optional[AnalysisService] = None

def init_service(service: AnalysisService):
    global _service
    _service = service

def get_service() -> AnalysisService:
    if _service is None:
        raise HTTPException(500, "Analysis service not initialized")
    return _service

@app.get("/health")
async def health():
    return {"status": "ok"}

@app.post("/analyses", response_model=RiskAnalysisSchema)
async def create_analysis(request: AnalysisRequest):
    """
    Runs an analysis for a clip recorded at the given coordinates.

    Body example:
    {
        "video_name": "junction.mp4",
        "size_bytes": 1048576,
        "lat": 28.6139,
        "lon": 77.2090,
        "location_name": "Connaught Place",
        "preset": "quick",
        "run_id": "junction-1"
    }

    Progress of a run can be polled at /runs/{run_id} and the run can be
    cancelled with DELETE /runs/{run_id} while this request is pending.
    """
    service = get_service()
    run_id = request.run_id or uuid.uuid4().hex
    on_progress, cancel_token = runs.start_run(run_id)

    try:
        preset = get_preset(request.preset) if request.preset else None
        if request.location_name:
            location = LocationResult(request.lat, request.lon, request.location_name)
        else:
            location = await asyncio.to_thread(service.describe_coordinates, request.lat, request.lon)

        analysis = await service.analyze(
            FootageRef(name=request.video_name, size_bytes=request.size_bytes),
            location,
            location_name=request.location_name or "",
            on_progress=on_progress,
            cancel_token=cancel_token,
            preset=preset,
        )
    except InputError as e:
        raise HTTPException(400, str(e))
    except InvalidFootageError as e:
        raise HTTPException(422, str(e))
    except AnalysisCancelledError as e:
        raise HTTPException(409, f"Analysis cancelled: {e}")
    except (RunFailedError, SourceError, ConfigurationError) as e:
        raise HTTPException(502, f"Analysis failed: {e}")
    finally:
        runs.finish_run(run_id)

    return RiskAnalysisSchema.from_domain(analysis)

@app.get("/analyses", response_model=List[RiskAnalysisSchema])
async def list_analyses():
    """History of completed analyses, oldest first."""
    return [RiskAnalysisSchema.from_domain(a) for a in get_service().history()]

@app.get("/analyses/{analysis_id}", response_model=RiskAnalysisSchema)
async def get_analysis(analysis_id: str):
    analysis = get_service().get(analysis_id)
    if analysis is None:
        raise HTTPException(404, "Analysis not found")
    return RiskAnalysisSchema.from_domain(analysis)
