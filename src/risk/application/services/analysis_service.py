"""
Caller-side workflow around the orchestrator: footage validity gate,
location resolution, record identity and history.
"""
import uuid
from datetime import datetime, timezone
from typing import Callable, List, Optional
from ...domain import (
    AnalysisRepository,
    AnalysisResult,
    FootageRef,
    FootageValidator,
    LocationResult,
    LocationService,
    ProgressCallback,
    RiskAnalysis,
)
from ..orchestrator import AnalysisOrchestrator, AnalysisPreset, CancellationToken
from ....common.exceptions import GeocodingError, InvalidFootageError
from ....common.logging import setup_logger
from ....common.utils import format_coordinates

logger = setup_logger(__name__)

INVALID_FOOTAGE_MESSAGE = "This is not a footage of street or road. Please upload traffic/street footage."

OrchestratorFactory = Callable[[Optional[AnalysisPreset]], AnalysisOrchestrator]


class AcceptAllFootage(FootageValidator):
    """Default gate: every clip is treated as street footage."""
    def is_street_footage(self, footage: FootageRef, result: AnalysisResult) -> bool:
        return True


class AnalysisService:
    """
    Runs analyses and records the completed ones in the history repository.
    """

    def __init__(
        self,
        orchestrator_factory: OrchestratorFactory,
        repository: AnalysisRepository,
        location_service: Optional[LocationService] = None,
        footage_validator: Optional[FootageValidator] = None,
    ):
        self.orchestrator_factory = orchestrator_factory
        self.repository = repository
        self.location_service = location_service
        self.footage_validator = footage_validator or AcceptAllFootage()

    async def analyze(
        self,
        footage: FootageRef,
        location: LocationResult,
        location_name: str = "",
        on_progress: Optional[ProgressCallback] = None,
        cancel_token: Optional[CancellationToken] = None,
        preset: Optional[AnalysisPreset] = None,
    ) -> RiskAnalysis:
        """
        Analyzes the footage and appends the resulting record to the history.
        Raises InvalidFootageError when the validity gate rejects the clip;
        nothing is recorded in that case.
        """
        orchestrator = self.orchestrator_factory(preset)
        result = await orchestrator.run(footage, on_progress=on_progress, cancel_token=cancel_token)

        if not self.footage_validator.is_street_footage(footage, result):
            logger.info(f"Rejected {footage.name}: not street footage")
            raise InvalidFootageError(INVALID_FOOTAGE_MESSAGE)

        analysis = RiskAnalysis(
            id=uuid.uuid4().hex,
            location_name=location_name or location.display_name.split(',')[0].strip(),
            lat=location.lat,
            lon=location.lon,
            risk_level=result.risk_level,
            risk_score=result.risk_score,
            timestamp=datetime.now(timezone.utc),
            video_name=footage.name,
            violations=result.violations,
            frame_stats=result.frame_stats,
            is_valid_street_footage=True,
        )
        self.repository.append(analysis)
        return analysis

    def history(self) -> List[RiskAnalysis]:
        return self.repository.list()

    def get(self, analysis_id: str) -> Optional[RiskAnalysis]:
        return self.repository.get(analysis_id)

    def search_locations(self, query: str) -> List[LocationResult]:
        """Location suggestions; an unavailable service yields no suggestions."""
        if self.location_service is None:
            return []
        try:
            return self.location_service.search(query)
        except GeocodingError as e:
            logger.warning(f"Location search failed for {query!r}: {e}")
            return []

    def resolve_location(self, query: str) -> Optional[LocationResult]:
        results = self.search_locations(query)
        return results[0] if results else None

    def describe_coordinates(self, lat: float, lon: float) -> LocationResult:
        """
        Resolves a display name for coordinates, falling back to "lat, lon".
        """
        display_name = None
        if self.location_service is not None:
            try:
                display_name = self.location_service.reverse_lookup(lat, lon)
            except GeocodingError as e:
                logger.warning(f"Reverse lookup failed for ({lat}, {lon}): {e}")
        return LocationResult(lat=lat, lon=lon, display_name=display_name or format_coordinates(lat, lon))
