import pytest
import requests
from unittest.mock import MagicMock
from src.risk.infrastructure.geocoding import NominatimLocationService
from src.common.exceptions import GeocodingError

@pytest.fixture
def session():
    session = MagicMock()
    session.headers = {}
    return session

@pytest.fixture
def service(session):
    return NominatimLocationService(base_url="https://geo.example/", session=session, limit=3)

def _respond(session, payload):
    response = MagicMock()
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    session.get.return_value = response

def test_user_agent_header(service, session):
    assert "SafeSightAI" in session.headers["User-Agent"]

def test_search(service, session):
    _respond(session, [
        {"lat": "28.6315", "lon": "77.2167", "display_name": "Connaught Place, New Delhi"},
        {"lat": "19.0760", "lon": "72.8777", "display_name": "Mumbai"},
    ])
    results = service.search("Connaught")

    assert len(results) == 2
    assert results[0].lat == pytest.approx(28.6315)
    assert results[0].display_name == "Connaught Place, New Delhi"
    args, kwargs = session.get.call_args
    assert args[0] == "https://geo.example/search"
    assert kwargs["params"] == {"format": "json", "q": "Connaught", "limit": 3}

def test_short_query_skips_request(service, session):
    assert service.search("ab") == []
    assert service.geocode("a") is None
    session.get.assert_not_called()

def test_geocode_first_result(service, session):
    _respond(session, [{"lat": "1", "lon": "2", "display_name": "Somewhere"}])
    result = service.geocode("Somewhere")
    assert (result.lat, result.lon) == (1.0, 2.0)

def test_geocode_no_result(service, session):
    _respond(session, [])
    assert service.geocode("Nowhere") is None

def test_reverse_lookup(service, session):
    _respond(session, {"display_name": "Janpath, New Delhi"})
    assert service.reverse_lookup(28.6, 77.2) == "Janpath, New Delhi"
    assert session.get.call_args[0][0] == "https://geo.example/reverse"

def test_network_error_raises_geocoding_error(service, session):
    session.get.side_effect = requests.exceptions.ConnectionError("down")
    with pytest.raises(GeocodingError):
        service.search("Connaught")

def test_unexpected_payload_raises_geocoding_error(service, session):
    _respond(session, [{"name": "missing coordinates"}])
    with pytest.raises(GeocodingError):
        service.search("Connaught")
