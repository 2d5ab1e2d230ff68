from .risk import (
    AnalysisRequest,
    FrameStatsSchema,
    LocationSchema,
    RiskAnalysisSchema,
    ViolationSchema,
)

__all__ = [
    "AnalysisRequest",
    "FrameStatsSchema",
    "LocationSchema",
    "RiskAnalysisSchema",
    "ViolationSchema",
]
