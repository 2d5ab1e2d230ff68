"""
Source module initialization and factory registry.
"""
from typing import Dict
from ...domain.protocols import DetectionSource
from ....common.exceptions import ConfigurationError
from .base import BaseDetectionSource, SourceFactory, SourceConfig
from .simulated_source import (
    SimulatedDetectionSource,
    format_detection_summary,
    get_scenario_for_frame,
    simulate_detections,
)
from .replay_source import ReplayDetectionSource, RecordedDetection, RecordedFootage


class SimulatedFactory(SourceFactory):
    def can_handle(self, source_type: str) -> bool:
        return source_type in ("simulated", "auto")

    def create(self, **kwargs) -> DetectionSource:
        return SimulatedDetectionSource(self._create_config(**kwargs))


class ReplayFactory(SourceFactory):
    def can_handle(self, source_type: str) -> bool:
        return source_type == "replay"

    def create(self, **kwargs) -> DetectionSource:
        source_config = self._create_config(**kwargs)
        if not source_config.path:
            raise ConfigurationError("Replay source requires a 'path' to recorded detections")
        return ReplayDetectionSource.from_file(source_config.path, source_config)


class SourceRegistry:
    """
    Centralized registry for detection source factories.
    """

    def __init__(self):
        self._factories: Dict[str, SourceFactory] = {}

    def register(self, name: str, factory: SourceFactory):
        self._factories[name] = factory

    def create_source(self, source_type: str = "auto", **kwargs) -> DetectionSource:
        for factory in self._factories.values():
            if factory.can_handle(source_type):
                return factory.create(**kwargs)

        raise ConfigurationError(f"No factory found for source type: {source_type}")


# Setup global registry
_registry = SourceRegistry()
_registry.register("simulated", SimulatedFactory())
_registry.register("replay", ReplayFactory())


def create_source(source_type: str = "auto", **kwargs) -> DetectionSource:
    """
    Factory function to create the appropriate DetectionSource using the registry.
    """
    return _registry.create_source(source_type, **kwargs)
