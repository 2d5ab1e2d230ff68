"""
Application layer: scoring, aggregation, summaries and run orchestration.
"""
from .frame_evaluator import RiskWeights, compute_frame_risk
from .aggregator import aggregate_video_risk, risk_level_for
from .violations import generate_violations
from .orchestrator import (
    AnalysisOrchestrator,
    AnalysisPreset,
    CancellationToken,
    PRESETS,
    get_preset,
)
