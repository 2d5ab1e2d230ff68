import pytest
from src.risk.application.violations import generate_violations
from src.risk.domain.entities import Severity

def test_no_activity_yields_no_violations(frame):
    frames = [frame(i, score=0) for i in range(5)]
    assert generate_violations(frames, 0) == []

def test_low_score_without_incidents_yields_no_violations(frame):
    frames = [frame(i, score=10, vehicles=2) for i in range(3)]
    assert generate_violations(frames, 10) == []

def test_general_activity_fallback(frame):
    frames = [frame(0, score=12, vehicles=4)]
    violations = generate_violations(frames, 12)
    assert len(violations) == 1
    assert violations[0].type == "General Traffic Activity"
    assert violations[0].count == 12
    assert violations[0].severity == Severity.LOW

@pytest.mark.parametrize("overlaps,severity", [
    (1, Severity.LOW),
    (2, Severity.LOW),
    (3, Severity.MEDIUM),
    (5, Severity.MEDIUM),
    (6, Severity.HIGH),
])
def test_near_collision_severity(frame, overlaps, severity):
    violations = generate_violations([frame(0, score=30, overlaps=overlaps)], 30)
    assert violations[0].type == "Vehicle Near-Collisions"
    assert violations[0].count == overlaps
    assert violations[0].severity == severity

def test_pedestrian_proximity_always_high(frame):
    violations = generate_violations([frame(0, score=38, proximity=1)], 38)
    assert [(v.type, v.count, v.severity) for v in violations] == [
        ("Pedestrian Proximity Risks", 1, Severity.HIGH)
    ]

def test_congestion_and_crowding(frame):
    frames = [frame(0, vehicles=9, persons=6), frame(1, vehicles=10, persons=7)]
    violations = generate_violations(frames, 40)
    assert [(v.type, v.count, v.severity) for v in violations] == [
        ("High Traffic Congestion", 10, Severity.MEDIUM),
        ("Crowded Pedestrian Area", 7, Severity.MEDIUM),
    ]

def test_heavy_congestion_is_high(frame):
    frames = [frame(0, vehicles=16, persons=11)]
    violations = generate_violations(frames, 100)
    assert violations[0].severity == Severity.HIGH
    assert violations[1].severity == Severity.HIGH

def test_high_risk_frame_clusters(frame):
    frames = [frame(i, score=61) for i in range(4)] + [frame(4, score=60)]
    violations = generate_violations(frames, 61)
    assert [(v.type, v.count) for v in violations] == [("High-Risk Frame Clusters", 4)]

def test_three_high_risk_frames_do_not_form_a_cluster(frame):
    frames = [frame(i, score=90) for i in range(3)]
    violations = generate_violations(frames, 90)
    assert [v.type for v in violations] == ["General Traffic Activity"]

def test_rule_order_is_fixed(frame):
    frames = [
        frame(i, score=100, vehicles=20, persons=12, overlaps=2, proximity=1)
        for i in range(4)
    ]
    violations = generate_violations(frames, 100)
    assert [v.type for v in violations] == [
        "Vehicle Near-Collisions",
        "Pedestrian Proximity Risks",
        "High Traffic Congestion",
        "Crowded Pedestrian Area",
        "High-Risk Frame Clusters",
    ]
    assert generate_violations(frames, 100) == violations

def test_requires_frames():
    with pytest.raises(ValueError):
        generate_violations([], 0)
