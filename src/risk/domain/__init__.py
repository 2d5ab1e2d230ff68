"""
Domain module initialization.
"""
from .entities import (
    BoundingBox,
    Detection,
    FrameAnalysis,
    Violation,
    FrameStats,
    AnalysisResult,
    FootageRef,
    LocationResult,
    RiskAnalysis,
    RiskLevel,
    Severity,
    ScenarioIntensity,
    RunState,
    TARGET_CLASSES,
    CLASS_IDS,
    VEHICLE_CLASSES,
    PERSON_CLASSES,
)
from .protocols import (
    DetectionSource,
    LocationService,
    FootageValidator,
    ProgressCallback,
)
from .repositories import AnalysisRepository
from . import geometry
