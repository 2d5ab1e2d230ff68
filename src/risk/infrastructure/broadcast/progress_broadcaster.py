import asyncio
from datetime import datetime
from typing import Callable, Dict, Set
from ....common.logging import setup_logger

logger = setup_logger(__name__)


class ProgressBroadcaster:
    """
    Pub/sub channel for analysis progress events, keyed by run id.
    Publishing never blocks: a subscriber whose queue is full misses the event.
    """

    def __init__(self):
        self._subscribers: Dict[str, Set[asyncio.Queue]] = {}
        self._lock = asyncio.Lock()
        # Latest event per run, replayed to late subscribers
        self._latest_state: Dict[str, dict] = {}

    async def subscribe(self, run_id: str, queue_size: int = 50) -> asyncio.Queue:
        queue = asyncio.Queue(maxsize=queue_size)

        async with self._lock:
            self._subscribers.setdefault(run_id, set()).add(queue)

        if run_id in self._latest_state:
            queue.put_nowait(self._latest_state[run_id])

        return queue

    async def unsubscribe(self, run_id: str, queue: asyncio.Queue):
        async with self._lock:
            if run_id in self._subscribers:
                self._subscribers[run_id].discard(queue)
                if not self._subscribers[run_id]:
                    del self._subscribers[run_id]

    def publish(self, run_id: str, percent: int):
        event = self.serialize_progress(run_id, percent)
        self._latest_state[run_id] = event

        for queue in list(self._subscribers.get(run_id, ())):
            try:
                queue.put_nowait(event)
            except asyncio.QueueFull:
                logger.warning(f"Skipping slow progress subscriber for {run_id}")

    def publisher(self, run_id: str) -> Callable[[int], None]:
        """Progress callback bound to one run, suitable for AnalysisOrchestrator.run()."""
        def on_progress(percent: int):
            self.publish(run_id, percent)
        return on_progress

    def latest(self, run_id: str):
        return self._latest_state.get(run_id)

    def forget(self, run_id: str):
        self._latest_state.pop(run_id, None)

    @staticmethod
    def serialize_progress(run_id: str, percent: int) -> dict:
        return {
            "run_id": run_id,
            "progress": percent,
            "done": percent >= 100,
            "timestamp": datetime.now().isoformat(),
        }
