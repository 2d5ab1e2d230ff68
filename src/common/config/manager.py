from omegaconf import DictConfig, OmegaConf
from pathlib import Path
from typing import List, Optional

from conf.config_models import RiskConfig
from ..exceptions import ConfigurationError

REQUIRED_KEYS = ['frame', 'weights', 'analysis', 'source']


class ConfigManager:
    """Centralizes loading and validation of configuration."""

    def __init__(self, config_dir: Path = Path("conf")):
        self.config_dir = Path(config_dir)

    def load_risk_config(self, profile: str = "default", overrides: Optional[List[str]] = None) -> DictConfig:
        """
        Loads conf/risk/<profile>.yaml, applies dotlist overrides
        (e.g. ["analysis.max_frames=20"]) and validates against RiskConfig.
        """
        config_path = self.config_dir / "risk" / f"{profile}.yaml"

        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        cfg = OmegaConf.load(config_path)
        for key in REQUIRED_KEYS:
            if key not in cfg:
                raise ValueError(f"Missing required config key: {key}")

        if overrides:
            cfg = OmegaConf.merge(cfg, OmegaConf.from_dotlist(list(overrides)))

        return self.validate(cfg)

    @staticmethod
    def validate(cfg: DictConfig) -> DictConfig:
        """Merges cfg onto the structured schema so unknown keys and bad types fail early."""
        schema = OmegaConf.structured(RiskConfig)
        try:
            merged = OmegaConf.merge(schema, cfg)
        except Exception as e:
            raise ConfigurationError(f"Invalid risk configuration: {e}") from e

        if merged.frame.width <= 0 or merged.frame.height <= 0:
            raise ConfigurationError("Frame dimensions must be positive")
        if merged.analysis.frame_skip <= 0:
            raise ConfigurationError("analysis.frame_skip must be positive")
        if merged.analysis.max_frames < 0:
            raise ConfigurationError("analysis.max_frames must not be negative")
        return merged

    @staticmethod
    def defaults() -> DictConfig:
        """Structured defaults, used when no config directory is available."""
        return OmegaConf.structured(RiskConfig)
