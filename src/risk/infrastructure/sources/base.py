"""
Base classes and configuration for detection sources.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
from pydantic import BaseModel, Field
from ...domain.entities import Detection
from ...domain.protocols import DetectionSource


class SourceConfig(BaseModel):
    """Validated configuration for detection sources"""
    frame_width: int = Field(1920, gt=0, description="Frame width in pixels")
    frame_height: int = Field(1080, gt=0, description="Frame height in pixels")
    seed: Optional[int] = Field(None, description="Random seed for reproducible runs")
    path: Optional[str] = Field(None, description="Recorded detections file")


class BaseDetectionSource(ABC):
    """
    Common state for sources that produce detections for a fixed frame size.
    """

    def __init__(self, config: SourceConfig):
        self.config = config
        self.frame_width = config.frame_width
        self.frame_height = config.frame_height

    @abstractmethod
    def next(self, frame_index: int, total_frames: int) -> List[Detection]:
        pass


class SourceFactory(ABC):
    """
    Abstract factory for creating detection sources.
    """

    @abstractmethod
    def create(self, **kwargs) -> DetectionSource:
        pass

    @abstractmethod
    def can_handle(self, source_type: str) -> bool:
        pass

    def _create_config(self, **kwargs) -> SourceConfig:
        return SourceConfig(**kwargs)
