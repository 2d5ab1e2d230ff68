"""
Replays detections recorded by an external detector.
"""
from pathlib import Path
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, ValidationError, field_validator
from ...domain.entities import BoundingBox, CLASS_IDS, Detection
from ....common.exceptions import SourceError
from .base import BaseDetectionSource, SourceConfig


class RecordedDetection(BaseModel):
    class_name: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    bbox: List[float] = Field(..., min_length=4, max_length=4, description="[x1, y1, x2, y2]")
    class_id: Optional[int] = None

    @field_validator('class_name')
    @classmethod
    def validate_class_name(cls, v: str) -> str:
        if v not in CLASS_IDS:
            raise ValueError(f'Unsupported class: {v}')
        return v

    @field_validator('bbox')
    @classmethod
    def validate_bbox(cls, v: List[float]) -> List[float]:
        x1, y1, x2, y2 = v
        if x1 > x2 or y1 > y2:
            raise ValueError('bbox must satisfy x1 <= x2 and y1 <= y2')
        return v

    def to_detection(self) -> Detection:
        return Detection(
            class_name=self.class_name,
            confidence=self.confidence,
            bbox=BoundingBox(*self.bbox),
            class_id=self.class_id if self.class_id is not None else CLASS_IDS[self.class_name],
        )


class RecordedFootage(BaseModel):
    """
    File layout: {"frame_width": W, "frame_height": H, "frames": {"<index>": [...]}}
    """
    frame_width: int = Field(..., gt=0)
    frame_height: int = Field(..., gt=0)
    frames: Dict[int, List[RecordedDetection]] = Field(default_factory=dict)


class ReplayDetectionSource(BaseDetectionSource):
    """
    Serves recorded detections by frame index. Frames absent from the
    recording produce an empty detection list.
    """

    def __init__(self, recording: RecordedFootage, config: Optional[SourceConfig] = None):
        config = (config or SourceConfig()).model_copy(update={
            'frame_width': recording.frame_width,
            'frame_height': recording.frame_height,
        })
        super().__init__(config)
        self._frames: Dict[int, List[Detection]] = {
            index: [d.to_detection() for d in detections]
            for index, detections in recording.frames.items()
        }

    @classmethod
    def from_file(cls, path: str, config: Optional[SourceConfig] = None) -> 'ReplayDetectionSource':
        file_path = Path(path)
        try:
            raw = file_path.read_text(encoding='utf-8')
        except OSError as e:
            raise SourceError(f"Cannot read recorded detections {file_path}: {e}") from e
        try:
            recording = RecordedFootage.model_validate_json(raw)
        except ValidationError as e:
            raise SourceError(f"Malformed recorded detections {file_path}: {e}") from e
        return cls(recording, config)

    @property
    def recorded_frames(self) -> int:
        return len(self._frames)

    def next(self, frame_index: int, total_frames: int) -> List[Detection]:
        return list(self._frames.get(frame_index, []))
