"""
Endpoints for following and cancelling analyses while they run.
"""
from typing import Callable, Dict, Optional, Tuple
from fastapi import FastAPI, HTTPException
from ....application.orchestrator import CancellationToken
from ....infrastructure.broadcast import ProgressBroadcaster

app = FastAPI()

# Singleton broadcaster
_broadcaster: Optional[ProgressBroadcaster] = None
_active_runs: Dict[str, CancellationToken] = {}

def init_broadcaster(broadcaster: Optional[ProgressBroadcaster]):
    global _broadcaster
    _broadcaster = broadcaster

def get_broadcaster() -> ProgressBroadcaster:
    global _broadcaster
    if _broadcaster is None:
        _broadcaster = ProgressBroadcaster()
    return _broadcaster

def start_run(run_id: str) -> Tuple[Callable[[int], None], CancellationToken]:
    """Registers a run and returns its progress callback and cancel token."""
    if run_id in _active_runs:
        raise HTTPException(409, f"Run {run_id} is already in progress")
    token = CancellationToken()
    _active_runs[run_id] = token
    return get_broadcaster().publisher(run_id), token

def finish_run(run_id: str):
    _active_runs.pop(run_id, None)
    get_broadcaster().forget(run_id)

@app.get("/runs")
async def list_runs():
    """Run ids currently in progress."""
    return {"runs": list(_active_runs)}

@app.get("/runs/{run_id}")
async def get_run_progress(run_id: str):
    """Latest progress event of a running analysis (polling endpoint)."""
    event = get_broadcaster().latest(run_id)
    if run_id not in _active_runs or event is None:
        raise HTTPException(404, "Run not found")
    return event

@app.delete("/runs/{run_id}", status_code=202)
async def cancel_run(run_id: str):
    token = _active_runs.get(run_id)
    if token is None:
        raise HTTPException(404, "Run not found")
    token.cancel()
    return {"run_id": run_id, "cancelled": True}
