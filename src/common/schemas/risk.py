from datetime import datetime
from typing import List, Literal, Optional
from pydantic import BaseModel, Field


class ViolationSchema(BaseModel):
    """
    A named, severity-tagged finding over a whole analysis run.
    """
    type: str = Field(..., description="Violation category name")
    count: int = Field(..., ge=0, description="Incidents or representative count")
    severity: Literal["low", "medium", "high"] = Field(..., description="Severity tag")


class FrameStatsSchema(BaseModel):
    total_frames: int = Field(0, ge=0, description="Frames considered by the sampler")
    processed_frames: int = Field(0, ge=0, description="Frames actually scored")
    avg_vehicles: float = Field(0.0, ge=0.0, description="Mean vehicles per processed frame")
    avg_persons: float = Field(0.0, ge=0.0, description="Mean persons per processed frame")
    max_score: int = Field(0, ge=0, le=100, description="Highest frame score")
    min_score: int = Field(0, ge=0, le=100, description="Lowest frame score")


class LocationSchema(BaseModel):
    lat: float = Field(..., ge=-90, le=90, description="Latitude")
    lon: float = Field(..., ge=-180, le=180, description="Longitude")
    display_name: str = Field(..., description="Human readable place name")


class RiskAnalysisSchema(BaseModel):
    """
    Serialized form of a completed risk analysis.
    """
    id: str = Field(..., description="Unique analysis identifier")
    location_name: str = Field(..., description="Short location label")
    lat: float = Field(..., ge=-90, le=90, description="Latitude")
    lon: float = Field(..., ge=-180, le=180, description="Longitude")
    risk_level: Literal["LOW", "MEDIUM", "HIGH", "CRITICAL"] = Field(..., description="Risk tier")
    risk_score: int = Field(..., ge=0, le=100, description="Mean frame score, rounded")
    timestamp: datetime = Field(..., description="Completion time")
    video_name: str = Field(..., description="Analyzed footage label")
    violations: List[ViolationSchema] = Field(default_factory=list)
    frame_stats: FrameStatsSchema = Field(default_factory=FrameStatsSchema)
    is_valid_street_footage: bool = Field(True, description="Outcome of the footage validity gate")

    @classmethod
    def from_domain(cls, analysis) -> 'RiskAnalysisSchema':
        stats = analysis.frame_stats
        return cls(
            id=analysis.id,
            location_name=analysis.location_name,
            lat=analysis.lat,
            lon=analysis.lon,
            risk_level=analysis.risk_level.value,
            risk_score=analysis.risk_score,
            timestamp=analysis.timestamp,
            video_name=analysis.video_name,
            violations=[
                ViolationSchema(type=v.type, count=v.count, severity=v.severity.value)
                for v in analysis.violations
            ],
            frame_stats=FrameStatsSchema(
                total_frames=stats.total_frames,
                processed_frames=stats.processed_frames,
                avg_vehicles=stats.avg_vehicles,
                avg_persons=stats.avg_persons,
                max_score=stats.max_score,
                min_score=stats.min_score,
            ),
            is_valid_street_footage=analysis.is_valid_street_footage,
        )


class AnalysisRequest(BaseModel):
    """
    Request body for starting an analysis.
    """
    video_name: str = Field(..., min_length=1, description="Footage label")
    size_bytes: int = Field(0, ge=0, description="Footage size in bytes")
    lat: float = Field(..., ge=-90, le=90, description="Latitude")
    lon: float = Field(..., ge=-180, le=180, description="Longitude")
    location_name: Optional[str] = Field(None, description="Optional short location label")
    preset: Optional[Literal["quick", "standard", "deep"]] = Field(None, description="Sampling preset")
    run_id: Optional[str] = Field(None, min_length=1, max_length=64, description="Client-chosen id for following progress")
