"""
Location search backed by the OpenStreetMap Nominatim API.
"""
from typing import List, Optional
import requests
from ..domain import LocationResult, LocationService
from ...common.exceptions import GeocodingError
from ...common.logging import log_execution_time, setup_logger

logger = setup_logger(__name__)

DEFAULT_BASE_URL = "https://nominatim.openstreetmap.org"
DEFAULT_USER_AGENT = "SafeSightAI/1.0 (Traffic Risk Analyzer)"


class NominatimLocationService(LocationService):
    """
    Implementation of LocationService using Nominatim search/reverse endpoints.
    Network and parsing failures raise GeocodingError; callers decide how to degrade.
    """
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 10.0,
        limit: int = 5,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.limit = limit
        self.session = session or requests.Session()
        self.session.headers.update({'User-Agent': user_agent})

    def _get(self, endpoint: str, params: dict):
        url = f"{self.base_url}/{endpoint}"
        try:
            response = self.session.get(url, params={'format': 'json', **params}, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.exceptions.RequestException as e:
            logger.warning(f"Nominatim request to {endpoint} failed: {e}")
            raise GeocodingError(f"Location service unavailable: {e}") from e
        except ValueError as e:
            raise GeocodingError(f"Invalid response from location service: {e}") from e

    @staticmethod
    def _parse(item: dict) -> LocationResult:
        try:
            return LocationResult(
                lat=float(item['lat']),
                lon=float(item['lon']),
                display_name=item['display_name'],
            )
        except (KeyError, TypeError, ValueError) as e:
            raise GeocodingError(f"Unexpected location payload: {item!r}") from e

    @log_execution_time(logger, threshold_s=1.0)
    def search(self, query: str) -> List[LocationResult]:
        """Up to `limit` suggestions; queries shorter than 3 characters return nothing."""
        if not query or len(query.strip()) < 3:
            return []
        data = self._get('search', {'q': query, 'limit': self.limit})
        return [self._parse(item) for item in data]

    def geocode(self, address: str) -> Optional[LocationResult]:
        if not address or len(address.strip()) < 2:
            return None
        data = self._get('search', {'q': address, 'limit': 1})
        return self._parse(data[0]) if data else None

    @log_execution_time(logger, threshold_s=1.0)
    def reverse_lookup(self, lat: float, lon: float) -> Optional[str]:
        data = self._get('reverse', {'lat': lat, 'lon': lon})
        if not isinstance(data, dict):
            raise GeocodingError(f"Unexpected reverse lookup payload: {data!r}")
        return data.get('display_name')
