import threading
from typing import Dict, List, Optional
from ..domain import AnalysisRepository, RiskAnalysis


class InMemoryAnalysisRepository(AnalysisRepository):
    """
    Keeps completed analyses in memory, in insertion order.
    Appends are serialized so concurrent runs never interleave partial writes.
    """
    def __init__(self):
        self._items: List[RiskAnalysis] = []
        self._by_id: Dict[str, RiskAnalysis] = {}
        self._lock = threading.Lock()

    def append(self, analysis: RiskAnalysis) -> None:
        with self._lock:
            if analysis.id in self._by_id:
                raise ValueError(f"Analysis {analysis.id} already recorded")
            self._items.append(analysis)
            self._by_id[analysis.id] = analysis

    def list(self) -> List[RiskAnalysis]:
        with self._lock:
            return list(self._items)

    def get(self, analysis_id: str) -> Optional[RiskAnalysis]:
        with self._lock:
            return self._by_id.get(analysis_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
