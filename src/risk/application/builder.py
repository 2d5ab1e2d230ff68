from omegaconf import DictConfig
from typing import Optional

from ..domain import AnalysisRepository, DetectionSource, FootageValidator, LocationService
from ..infrastructure.sources import create_source
from ..infrastructure.repositories import InMemoryAnalysisRepository
from ..infrastructure.geocoding import NominatimLocationService
from .frame_evaluator import RiskWeights
from .orchestrator import AnalysisOrchestrator, AnalysisPreset
from .services.analysis_service import AnalysisService
from ...common.logging import setup_logger

logger = setup_logger(__name__)


class RiskApplicationBuilder:
    """
    Builder pattern for constructing the risk analysis application.
    Centralizes component instantiation and wiring.
    """

    def __init__(self, config: DictConfig):
        self.config = config
        self.weights = RiskWeights.from_config(config.weights)

        # Components
        self.repository: Optional[AnalysisRepository] = None
        self.location_service: Optional[LocationService] = None
        self.footage_validator: Optional[FootageValidator] = None
        self.service: Optional[AnalysisService] = None

    def create_source(self) -> DetectionSource:
        """A fresh source per run, so concurrent runs never share generator state."""
        source_cfg = self.config.source
        return create_source(
            source_type=source_cfg.type,
            frame_width=self.config.frame.width,
            frame_height=self.config.frame.height,
            seed=source_cfg.get('seed', None),
            path=source_cfg.get('path', None),
        )

    def create_orchestrator(self, preset: Optional[AnalysisPreset] = None) -> AnalysisOrchestrator:
        analysis_cfg = self.config.analysis
        max_frames = preset.max_frames if preset else analysis_cfg.max_frames
        frame_skip = preset.frame_skip if preset else analysis_cfg.frame_skip
        return AnalysisOrchestrator(
            self.create_source(),
            max_frames=max_frames,
            frame_skip=frame_skip,
            weights=self.weights,
            frame_delay=analysis_cfg.get('frame_delay_seconds', 0.0),
        )

    def build_repository(self, repository: Optional[AnalysisRepository] = None) -> 'RiskApplicationBuilder':
        self.repository = repository or InMemoryAnalysisRepository()
        return self

    def build_location_service(self) -> 'RiskApplicationBuilder':
        geo_cfg = self.config.get('geocoding', None)
        if geo_cfg is not None and geo_cfg.enabled:
            logger.info(f"Using location service at {geo_cfg.base_url}")
            self.location_service = NominatimLocationService(
                base_url=geo_cfg.base_url,
                user_agent=geo_cfg.user_agent,
                timeout=geo_cfg.timeout_seconds,
                limit=geo_cfg.limit,
            )
        return self

    def build_footage_validator(self, validator: Optional[FootageValidator] = None) -> 'RiskApplicationBuilder':
        self.footage_validator = validator
        return self

    def build_service(self) -> AnalysisService:
        if self.repository is None:
            self.build_repository()

        self.service = AnalysisService(
            orchestrator_factory=self.create_orchestrator,
            repository=self.repository,
            location_service=self.location_service,
            footage_validator=self.footage_validator,
        )
        return self.service
