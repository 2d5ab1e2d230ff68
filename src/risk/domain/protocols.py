"""
Domain protocols for the risk analysis module.
"""
from typing import List, Optional, Protocol
from .entities import AnalysisResult, Detection, FootageRef, LocationResult


class DetectionSource(Protocol):
    """
    Producer of per-frame detections. A real detector plugs in here.
    """
    frame_width: int
    frame_height: int

    def next(self, frame_index: int, total_frames: int) -> List[Detection]:
        ...


class LocationService(Protocol):
    """
    Protocol for location search and reverse geocoding.
    """
    def search(self, query: str) -> List[LocationResult]:
        ...

    def reverse_lookup(self, lat: float, lon: float) -> Optional[str]:
        ...


class FootageValidator(Protocol):
    """
    Decides whether footage depicts a street or road scene.
    """
    def is_street_footage(self, footage: FootageRef, result: AnalysisResult) -> bool:
        ...


class ProgressCallback(Protocol):
    def __call__(self, percent: int) -> None:
        ...
