import threading
from datetime import datetime, timezone
import pytest
from src.risk.infrastructure.repositories import InMemoryAnalysisRepository
from src.risk.domain.entities import RiskAnalysis, RiskLevel, FrameStats

def make_analysis(analysis_id):
    return RiskAnalysis(
        id=analysis_id,
        location_name="Main St",
        lat=0.0,
        lon=0.0,
        risk_level=RiskLevel.LOW,
        risk_score=0,
        timestamp=datetime.now(timezone.utc),
        video_name="clip.mp4",
        violations=(),
        frame_stats=FrameStats(),
    )

def test_append_and_list():
    repo = InMemoryAnalysisRepository()
    a, b = make_analysis("a"), make_analysis("b")
    repo.append(a)
    repo.append(b)
    assert repo.list() == [a, b]
    assert len(repo) == 2

def test_list_returns_a_copy():
    repo = InMemoryAnalysisRepository()
    repo.append(make_analysis("a"))
    items = repo.list()
    items.clear()
    assert len(repo.list()) == 1

def test_get():
    repo = InMemoryAnalysisRepository()
    a = make_analysis("a")
    repo.append(a)
    assert repo.get("a") is a
    assert repo.get("missing") is None

def test_duplicate_id_rejected():
    repo = InMemoryAnalysisRepository()
    repo.append(make_analysis("a"))
    with pytest.raises(ValueError):
        repo.append(make_analysis("a"))

def test_concurrent_appends():
    repo = InMemoryAnalysisRepository()

    def worker(prefix):
        for i in range(100):
            repo.append(make_analysis(f"{prefix}-{i}"))

    threads = [threading.Thread(target=worker, args=(p,)) for p in "abcd"]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(repo) == 400
    ids = [a.id for a in repo.list()]
    assert len(set(ids)) == 400
    # Each writer's records stay in its own order
    assert [i for i in ids if i.startswith("a-")] == [f"a-{i}" for i in range(100)]
