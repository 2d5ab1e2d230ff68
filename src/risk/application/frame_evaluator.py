"""
Per-frame risk scoring from a detection list.
"""
from dataclasses import dataclass
from typing import Sequence
from ..domain.entities import Detection, FrameAnalysis
from ..domain.geometry import iou, distance
from ...common.exceptions import InputError

MAX_FRAME_SCORE = 100


@dataclass(frozen=True)
class RiskWeights:
    """
    Calibration constants for frame scoring.
    """
    vehicle: int = 3
    person: int = 5
    overlap: int = 20
    proximity: int = 30
    overlap_iou: float = 0.1
    danger_zone_height_ratio: float = 0.5  # pedestrians below this line are close to the camera
    proximity_width_ratio: float = 0.2

    @classmethod
    def from_config(cls, cfg) -> 'RiskWeights':
        return cls(
            vehicle=cfg.vehicle,
            person=cfg.person,
            overlap=cfg.overlap,
            proximity=cfg.proximity,
            overlap_iou=cfg.overlap_iou,
            danger_zone_height_ratio=cfg.danger_zone_height_ratio,
            proximity_width_ratio=cfg.proximity_width_ratio,
        )


DEFAULT_WEIGHTS = RiskWeights()


def compute_frame_risk(
    detections: Sequence[Detection],
    frame_width: int,
    frame_height: int,
    frame_index: int = 0,
    weights: RiskWeights = DEFAULT_WEIGHTS,
) -> FrameAnalysis:
    """
    Computes a 0-100 risk score for a single frame.

    The score grows with crowding (vehicles and persons), with each pair of
    overlapping vehicles (near-collision) and with each pedestrian standing
    close to a vehicle in the lower part of the frame.
    """
    if frame_width <= 0 or frame_height <= 0:
        raise InputError(f"Frame dimensions must be positive, got {frame_width}x{frame_height}")

    vehicles = [d for d in detections if d.is_vehicle]
    persons = [d for d in detections if d.is_person]

    score = weights.vehicle * len(vehicles) + weights.person * len(persons)

    overlaps = 0
    for i in range(len(vehicles)):
        for j in range(i + 1, len(vehicles)):
            if iou(vehicles[i].bbox, vehicles[j].bbox) > weights.overlap_iou:
                score += weights.overlap
                overlaps += 1

    proximity_risks = 0
    danger_line = frame_height * weights.danger_zone_height_ratio
    max_distance = frame_width * weights.proximity_width_ratio
    for vehicle in vehicles:
        for person in persons:
            person_center = person.center
            if person_center[1] > danger_line and distance(vehicle.center, person_center) < max_distance:
                score += weights.proximity
                proximity_risks += 1

    score = max(0, min(score, MAX_FRAME_SCORE))

    return FrameAnalysis(
        frame_index=frame_index,
        score=score,
        detections=tuple(detections),
        vehicle_count=len(vehicles),
        person_count=len(persons),
        overlaps=overlaps,
        proximity_risks=proximity_risks,
    )
