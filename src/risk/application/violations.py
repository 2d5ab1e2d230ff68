"""
Violation summary rules over a whole run.
"""
from typing import List, Sequence
from ..domain.entities import FrameAnalysis, Severity, Violation
from ...common.utils import round_half_up_int

NEAR_COLLISIONS = "Vehicle Near-Collisions"
PEDESTRIAN_PROXIMITY = "Pedestrian Proximity Risks"
TRAFFIC_CONGESTION = "High Traffic Congestion"
CROWDED_PEDESTRIANS = "Crowded Pedestrian Area"
HIGH_RISK_CLUSTERS = "High-Risk Frame Clusters"
GENERAL_ACTIVITY = "General Traffic Activity"

HIGH_RISK_FRAME_SCORE = 60


def _near_collision_severity(total: int) -> Severity:
    if total > 5:
        return Severity.HIGH
    if total > 2:
        return Severity.MEDIUM
    return Severity.LOW


def generate_violations(frame_analyses: Sequence[FrameAnalysis], avg_score: float) -> List[Violation]:
    """
    Derives named violations from accumulated frame statistics.

    Rules are independent and reported in a fixed order. The fallback entry
    is only added when no other rule fired and the run still carries risk.
    """
    if not frame_analyses:
        raise ValueError("generate_violations requires at least one frame analysis")

    frame_count = len(frame_analyses)
    total_overlaps = sum(f.overlaps for f in frame_analyses)
    total_proximity = sum(f.proximity_risks for f in frame_analyses)
    avg_vehicles = sum(f.vehicle_count for f in frame_analyses) / frame_count
    avg_persons = sum(f.person_count for f in frame_analyses) / frame_count

    violations: List[Violation] = []

    if total_overlaps > 0:
        violations.append(Violation(NEAR_COLLISIONS, total_overlaps, _near_collision_severity(total_overlaps)))

    if total_proximity > 0:
        violations.append(Violation(PEDESTRIAN_PROXIMITY, total_proximity, Severity.HIGH))

    if avg_vehicles > 8:
        violations.append(Violation(
            TRAFFIC_CONGESTION,
            round_half_up_int(avg_vehicles),
            Severity.HIGH if avg_vehicles > 15 else Severity.MEDIUM,
        ))

    if avg_persons > 5:
        violations.append(Violation(
            CROWDED_PEDESTRIANS,
            round_half_up_int(avg_persons),
            Severity.HIGH if avg_persons > 10 else Severity.MEDIUM,
        ))

    high_risk_frames = sum(1 for f in frame_analyses if f.score > HIGH_RISK_FRAME_SCORE)
    if high_risk_frames > 3:
        violations.append(Violation(HIGH_RISK_CLUSTERS, high_risk_frames, Severity.HIGH))

    if not violations and avg_score > 10:
        violations.append(Violation(GENERAL_ACTIVITY, round_half_up_int(avg_score), Severity.LOW))

    return violations
