from dataclasses import dataclass, field
from typing import Optional

@dataclass
class FrameConfig:
    width: int = 1920
    height: int = 1080

@dataclass
class WeightsConfig:
    vehicle: int = 3
    person: int = 5
    overlap: int = 20
    proximity: int = 30
    overlap_iou: float = 0.1
    danger_zone_height_ratio: float = 0.5
    proximity_width_ratio: float = 0.2

@dataclass
class AnalysisConfig:
    max_frames: int = 50
    frame_skip: int = 3
    frame_delay_seconds: float = 0.0

@dataclass
class DetectionSourceConfig:
    type: str = "simulated"
    seed: Optional[int] = None
    path: Optional[str] = None

@dataclass
class GeocodingConfig:
    enabled: bool = True
    base_url: str = "https://nominatim.openstreetmap.org"
    user_agent: str = "SafeSightAI/1.0 (Traffic Risk Analyzer)"
    timeout_seconds: float = 10.0
    limit: int = 5

@dataclass
class LoggingConfig:
    level: str = "INFO"

@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8000

@dataclass
class RiskConfig:
    frame: FrameConfig = field(default_factory=FrameConfig)
    weights: WeightsConfig = field(default_factory=WeightsConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    source: DetectionSourceConfig = field(default_factory=DetectionSourceConfig)
    geocoding: GeocodingConfig = field(default_factory=GeocodingConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
