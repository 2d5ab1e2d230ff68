import pytest
from src.risk.application.aggregator import aggregate_video_risk, risk_level_for
from src.risk.domain.entities import RiskLevel

@pytest.mark.parametrize("scores,expected", [
    ([], (RiskLevel.LOW, 0)),
    ([10, 10, 10], (RiskLevel.LOW, 10)),
    ([30, 40], (RiskLevel.MEDIUM, 35)),
    ([60, 80], (RiskLevel.HIGH, 70)),
    ([90, 95], (RiskLevel.CRITICAL, 93)),
])
def test_aggregate_video_risk(scores, expected):
    assert aggregate_video_risk(scores) == expected

@pytest.mark.parametrize("score,level", [
    (0, RiskLevel.LOW),
    (19.99, RiskLevel.LOW),
    (20, RiskLevel.MEDIUM),
    (49.5, RiskLevel.MEDIUM),
    (50, RiskLevel.HIGH),
    (74.9, RiskLevel.HIGH),
    (75, RiskLevel.CRITICAL),
    (100, RiskLevel.CRITICAL),
])
def test_tier_boundaries(score, level):
    assert risk_level_for(score) == level

def test_tier_uses_unrounded_mean():
    # mean 19.5 rounds to 20 but stays in the LOW tier
    assert aggregate_video_risk([19, 20]) == (RiskLevel.LOW, 20)

def test_aggregation_is_deterministic():
    scores = [12, 55, 73, 8, 100, 41]
    assert aggregate_video_risk(scores) == aggregate_video_risk(scores)
    assert aggregate_video_risk(scores) == aggregate_video_risk(list(reversed(scores)))
