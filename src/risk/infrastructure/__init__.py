"""
Infrastructure adapters for the risk analysis module.
"""
from .repositories import InMemoryAnalysisRepository
from .geocoding import NominatimLocationService
from .broadcast import ProgressBroadcaster
from .sources import create_source, SimulatedDetectionSource, ReplayDetectionSource
