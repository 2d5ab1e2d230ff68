"""
Video-level aggregation of frame scores into a risk tier.
"""
from typing import Sequence, Tuple
from ..domain.entities import RiskLevel
from ...common.utils import round_half_up_int

# Exclusive upper bounds of each tier; anything at or above the last is CRITICAL.
TIER_THRESHOLDS = (
    (20, RiskLevel.LOW),
    (50, RiskLevel.MEDIUM),
    (75, RiskLevel.HIGH),
)


def risk_level_for(score: float) -> RiskLevel:
    for upper_bound, level in TIER_THRESHOLDS:
        if score < upper_bound:
            return level
    return RiskLevel.CRITICAL


def aggregate_video_risk(frame_scores: Sequence[float]) -> Tuple[RiskLevel, int]:
    """
    Returns (risk_level, risk_score) for a sequence of frame scores.
    The tier is taken from the unrounded mean, so a mean of 19.5 reports
    score 20 with tier LOW; this matches the reference scoring and is
    intentional. An empty sequence yields (LOW, 0).
    """
    if not frame_scores:
        return RiskLevel.LOW, 0

    avg_score = sum(frame_scores) / len(frame_scores)
    return risk_level_for(avg_score), round_half_up_int(avg_score)
