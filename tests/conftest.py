import pytest
from omegaconf import OmegaConf
from src.risk.domain.entities import (
    BoundingBox, Detection, FrameAnalysis, FootageRef, LocationResult, CLASS_IDS
)
from conf.config_models import RiskConfig

FRAME_WIDTH = 1920
FRAME_HEIGHT = 1080


def make_detection(class_name, bbox, confidence=0.9):
    return Detection(
        class_name=class_name,
        confidence=confidence,
        bbox=BoundingBox(*bbox),
        class_id=CLASS_IDS[class_name],
    )


def make_frame(frame_index=0, score=0, vehicles=0, persons=0, overlaps=0, proximity=0):
    return FrameAnalysis(
        frame_index=frame_index,
        score=score,
        detections=(),
        vehicle_count=vehicles,
        person_count=persons,
        overlaps=overlaps,
        proximity_risks=proximity,
    )


class StaticSource:
    """Detection source returning the same detections for every frame."""
    def __init__(self, detections=None, frame_width=FRAME_WIDTH, frame_height=FRAME_HEIGHT):
        self.detections = list(detections or [])
        self.frame_width = frame_width
        self.frame_height = frame_height
        self.calls = []

    def next(self, frame_index, total_frames):
        self.calls.append((frame_index, total_frames))
        return list(self.detections)


@pytest.fixture
def detection():
    return make_detection


@pytest.fixture
def frame():
    return make_frame


@pytest.fixture
def static_source():
    return StaticSource()


@pytest.fixture
def footage():
    return FootageRef(name="junction.mp4", size_bytes=1024)


@pytest.fixture
def location():
    return LocationResult(lat=28.6139, lon=77.2090, display_name="Connaught Place, New Delhi, India")


@pytest.fixture
def risk_config():
    cfg = OmegaConf.structured(RiskConfig)
    cfg.geocoding.enabled = False
    cfg.source.seed = 42
    return cfg
