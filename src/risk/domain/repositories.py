"""
Domain repositories for the risk analysis module.
"""
from typing import List, Optional, Protocol
from .entities import RiskAnalysis


class AnalysisRepository(Protocol):
    """
    Append-only history of completed analyses, in insertion order.
    """
    def append(self, analysis: RiskAnalysis) -> None:
        ...

    def list(self) -> List[RiskAnalysis]:
        ...

    def get(self, analysis_id: str) -> Optional[RiskAnalysis]:
        ...
