import pytest
import asyncio
from src.risk.infrastructure.broadcast import ProgressBroadcaster
from src.risk.application.orchestrator import AnalysisOrchestrator

@pytest.fixture
def broadcaster():
    return ProgressBroadcaster()

@pytest.mark.asyncio
async def test_subscribe_unsubscribe(broadcaster):
    queue = await broadcaster.subscribe("run1")
    assert isinstance(queue, asyncio.Queue)
    assert queue in broadcaster._subscribers["run1"]

    await broadcaster.unsubscribe("run1", queue)
    assert "run1" not in broadcaster._subscribers

@pytest.mark.asyncio
async def test_publish_reaches_only_run_subscribers(broadcaster):
    q1 = await broadcaster.subscribe("run1")
    q2 = await broadcaster.subscribe("run2")

    broadcaster.publish("run1", 40)

    event = await q1.get()
    assert event["run_id"] == "run1"
    assert event["progress"] == 40
    assert not event["done"]
    assert q2.empty()

@pytest.mark.asyncio
async def test_slow_subscriber_is_skipped(broadcaster):
    q1 = await broadcaster.subscribe("run1", queue_size=1)
    broadcaster.publish("run1", 10)
    broadcaster.publish("run1", 20)

    assert (await q1.get())["progress"] == 10
    assert q1.empty()

@pytest.mark.asyncio
async def test_late_subscriber_gets_latest_state(broadcaster):
    broadcaster.publish("run1", 55)
    queue = await broadcaster.subscribe("run1")
    assert (await queue.get())["progress"] == 55
    broadcaster.forget("run1")
    assert broadcaster.latest("run1") is None

@pytest.mark.asyncio
async def test_orchestrator_progress_channel(broadcaster, static_source, footage):
    queue = await broadcaster.subscribe("run1", queue_size=100)
    orchestrator = AnalysisOrchestrator(static_source, max_frames=5, frame_skip=2)

    await orchestrator.run(footage, on_progress=broadcaster.publisher("run1"))

    events = []
    while not queue.empty():
        events.append(queue.get_nowait())
    assert [e["progress"] for e in events] == [0, 20, 40, 60, 80, 100]
    assert events[-1]["done"]
