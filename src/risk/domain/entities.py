"""
Domain entities for the risk analysis module.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Tuple

Point = Tuple[float, float]

# COCO class ids of the labels relevant to traffic scenes.
TARGET_CLASSES = {
    0: 'person',
    1: 'bicycle',
    2: 'car',
    3: 'motorcycle',
    5: 'bus',
    7: 'truck',
    9: 'traffic light',
    11: 'stop sign',
}
CLASS_IDS = {name: class_id for class_id, name in TARGET_CLASSES.items()}

VEHICLE_CLASSES = ('car', 'motorcycle', 'bus', 'truck', 'bicycle')
PERSON_CLASSES = ('person',)


class RiskLevel(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ScenarioIntensity(str, Enum):
    """Coarse traffic density label driving synthetic detection counts."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RunState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned box in frame pixels: (x1, y1) top-left, (x2, y2) bottom-right.
    """
    x1: float
    y1: float
    x2: float
    y2: float

    def __post_init__(self):
        if self.x1 > self.x2 or self.y1 > self.y2:
            raise ValueError(f"Invalid bounding box: {self.as_tuple()}")

    @property
    def width(self) -> float:
        return self.x2 - self.x1

    @property
    def height(self) -> float:
        return self.y2 - self.y1

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def center(self) -> Point:
        return ((self.x1 + self.x2) / 2, (self.y1 + self.y2) / 2)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x1, self.y1, self.x2, self.y2)


@dataclass(frozen=True)
class Detection:
    """
    One object found in a frame by a detector.
    """
    class_name: str
    confidence: float
    bbox: BoundingBox
    class_id: int

    @property
    def center(self) -> Point:
        return self.bbox.center

    @property
    def is_vehicle(self) -> bool:
        return self.class_name in VEHICLE_CLASSES

    @property
    def is_person(self) -> bool:
        return self.class_name in PERSON_CLASSES


@dataclass(frozen=True)
class FrameAnalysis:
    """
    Result of scoring a single sampled frame.
    """
    frame_index: int
    score: int
    detections: Tuple[Detection, ...]
    vehicle_count: int
    person_count: int
    overlaps: int
    proximity_risks: int


@dataclass(frozen=True)
class Violation:
    type: str
    count: int
    severity: Severity


@dataclass(frozen=True)
class FrameStats:
    total_frames: int = 0
    processed_frames: int = 0
    avg_vehicles: float = 0.0
    avg_persons: float = 0.0
    max_score: int = 0
    min_score: int = 0


@dataclass(frozen=True)
class AnalysisResult:
    """
    Orchestrator output: everything in a RiskAnalysis except identity and location.
    """
    risk_level: RiskLevel
    risk_score: int
    violations: Tuple[Violation, ...] = ()
    frame_stats: FrameStats = field(default_factory=FrameStats)

    @classmethod
    def degenerate(cls) -> 'AnalysisResult':
        """Result of a run that processed zero frames."""
        return cls(risk_level=RiskLevel.LOW, risk_score=0)


@dataclass(frozen=True)
class FootageRef:
    """
    Opaque identity of an uploaded clip. The core never decodes it.
    """
    name: str
    size_bytes: int = 0


@dataclass(frozen=True)
class LocationResult:
    lat: float
    lon: float
    display_name: str


@dataclass(frozen=True)
class RiskAnalysis:
    """
    Terminal record of a completed analysis run, as stored in the history.
    """
    id: str
    location_name: str
    lat: float
    lon: float
    risk_level: RiskLevel
    risk_score: int
    timestamp: datetime
    video_name: str
    violations: Tuple[Violation, ...]
    frame_stats: FrameStats
    is_valid_street_footage: bool = True
