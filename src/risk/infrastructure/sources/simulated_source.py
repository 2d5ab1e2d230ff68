"""
Stochastic stand-in for an object detector.

Produces plausible traffic detections whose density varies over the clip,
with a few peak moments, so the scoring pipeline can run without a model.
"""
import math
from collections import Counter
from typing import Dict, List, Optional, Sequence, Tuple
import numpy as np
from ...domain.entities import (
    BoundingBox,
    CLASS_IDS,
    Detection,
    ScenarioIntensity,
    VEHICLE_CLASSES,
)
from .base import BaseDetectionSource, SourceConfig

PEAK_MOMENTS = (0.25, 0.5, 0.75)
PEAK_WIDTH = 0.1

VEHICLE_COUNTS: Dict[ScenarioIntensity, Tuple[int, int]] = {
    ScenarioIntensity.LOW: (1, 4),
    ScenarioIntensity.MEDIUM: (3, 8),
    ScenarioIntensity.HIGH: (6, 15),
}
PERSON_COUNTS: Dict[ScenarioIntensity, Tuple[int, int]] = {
    ScenarioIntensity.LOW: (0, 2),
    ScenarioIntensity.MEDIUM: (1, 5),
    ScenarioIntensity.HIGH: (3, 10),
}


def get_scenario_for_frame(
    frame_index: int,
    total_frames: int,
    rng: Optional[np.random.Generator] = None,
) -> ScenarioIntensity:
    """
    Maps a frame position to a traffic intensity: a sine wave plus noise,
    boosted near the peak moments.
    """
    rng = rng if rng is not None else np.random.default_rng()
    position = frame_index / total_frames if total_frames > 0 else 0.0
    noise = math.sin(position * math.pi * 4) * 0.3 + rng.random() * 0.3

    intensity = 0.3 + noise
    for peak in PEAK_MOMENTS:
        dist_from_peak = abs(position - peak)
        if dist_from_peak < PEAK_WIDTH:
            intensity += (PEAK_WIDTH - dist_from_peak) * 5

    if intensity < 0.4:
        return ScenarioIntensity.LOW
    if intensity < 0.7:
        return ScenarioIntensity.MEDIUM
    return ScenarioIntensity.HIGH


def simulate_detections(
    frame_width: int,
    frame_height: int,
    intensity: ScenarioIntensity = ScenarioIntensity.MEDIUM,
    rng: Optional[np.random.Generator] = None,
) -> List[Detection]:
    rng = rng if rng is not None else np.random.default_rng()
    min_vehicles, max_vehicles = VEHICLE_COUNTS[intensity]
    min_persons, max_persons = PERSON_COUNTS[intensity]
    num_vehicles = int(rng.integers(min_vehicles, max_vehicles + 1))
    num_persons = int(rng.integers(min_persons, max_persons + 1))

    detections: List[Detection] = []

    # Vehicles sit in the middle-to-lower band of the frame
    for _ in range(num_vehicles):
        vehicle_type = VEHICLE_CLASSES[int(rng.integers(len(VEHICLE_CLASSES)))]
        width = rng.random() * (frame_width * 0.15) + frame_width * 0.08
        height = rng.random() * (frame_height * 0.2) + frame_height * 0.1
        x1 = rng.random() * (frame_width - width)
        y1 = rng.random() * (frame_height * 0.5) + frame_height * 0.2
        detections.append(Detection(
            class_name=vehicle_type,
            confidence=float(rng.random() * 0.3 + 0.7),
            bbox=BoundingBox(float(x1), float(y1), float(x1 + width), float(y1 + height)),
            class_id=CLASS_IDS[vehicle_type],
        ))

    # Pedestrians gather near crossings in the lower part of the frame
    for _ in range(num_persons):
        width = rng.random() * (frame_width * 0.05) + frame_width * 0.03
        height = rng.random() * (frame_height * 0.15) + frame_height * 0.08
        x1 = rng.random() * (frame_width - width)
        y1 = rng.random() * (frame_height * 0.4) + frame_height * 0.4
        detections.append(Detection(
            class_name='person',
            confidence=float(rng.random() * 0.25 + 0.75),
            bbox=BoundingBox(float(x1), float(y1), float(x1 + width), float(y1 + height)),
            class_id=CLASS_IDS['person'],
        ))

    return detections


def format_detection_summary(detections: Sequence[Detection]) -> str:
    """
    Human readable tally, e.g. "2 cars, 1 person".
    """
    counts = Counter(d.class_name for d in detections)
    return ", ".join(
        f"{count} {name}{'s' if count > 1 else ''}" for name, count in counts.items()
    )


class SimulatedDetectionSource(BaseDetectionSource):
    """
    Detection source backed by the scenario simulator.
    Pass a seed in the config to make runs reproducible.
    """

    def __init__(self, config: Optional[SourceConfig] = None):
        super().__init__(config or SourceConfig())
        self.rng = np.random.default_rng(self.config.seed)
        self.last_intensity: Optional[ScenarioIntensity] = None

    def next(self, frame_index: int, total_frames: int) -> List[Detection]:
        self.last_intensity = get_scenario_for_frame(frame_index, total_frames, self.rng)
        return simulate_detections(self.frame_width, self.frame_height, self.last_intensity, self.rng)
