from __future__ import annotations

import pytest
import requests

from clima.errors import NotFoundError, UpstreamError
from clima.providers import OpenMeteoGeocoder, OpenMeteoProvider, RequestConfig

GEOCODING_URL = "https://geocoding.test/v1/search"
FORECAST_URL = "https://forecast.test/v1/forecast"

CURRENT_PAYLOAD = {
    "current": {
        "time": "2024-01-01T12:00",
        "temperature_2m": 21.4,
        "relative_humidity_2m": 68.6,
        "apparent_temperature": 20.9,
        "precipitation": 0.0,
        "weather_code": 2,
        "wind_speed_10m": 11.2,
    }
}


def test_geocoder_picks_first_candidate(requests_mock):
    geocoder = OpenMeteoGeocoder(base_url=GEOCODING_URL)
    requests_mock.get(
        GEOCODING_URL,
        json={
            "results": [
                {"name": "São Paulo", "latitude": -23.55, "longitude": -46.63, "country": "Brasil"},
                {"name": "São Paulo de Olivença", "latitude": -3.37, "longitude": -68.87},
            ]
        },
    )

    location = geocoder.resolve("sao paulo")

    assert location.name == "São Paulo"
    assert location.latitude == -23.55
    assert location.longitude == -46.63

    query = requests_mock.last_request.qs
    assert query["name"] == ["sao paulo"]
    assert query["count"] == ["1"]
    assert query["language"] == ["pt"]
    assert query["format"] == ["json"]


@pytest.mark.parametrize("payload", [{"results": []}, {"generationtime_ms": 0.3}])
def test_geocoder_raises_not_found_without_results(requests_mock, payload):
    geocoder = OpenMeteoGeocoder(base_url=GEOCODING_URL)
    requests_mock.get(GEOCODING_URL, json=payload)

    with pytest.raises(NotFoundError) as excinfo:
        geocoder.resolve("Atlantis")

    assert excinfo.value.city == "Atlantis"
    assert excinfo.value.user_message == "Cidade Atlantis não encontrada."


def test_geocoder_rejects_candidate_without_coordinates(requests_mock):
    geocoder = OpenMeteoGeocoder(base_url=GEOCODING_URL)
    requests_mock.get(GEOCODING_URL, json={"results": [{"name": "Lugar", "latitude": 1.0}]})

    with pytest.raises(UpstreamError, match="missing longitude"):
        geocoder.resolve("Lugar")


def test_geocoder_maps_http_errors(requests_mock):
    geocoder = OpenMeteoGeocoder(base_url=GEOCODING_URL)
    requests_mock.get(GEOCODING_URL, status_code=500, text="boom")

    with pytest.raises(UpstreamError) as excinfo:
        geocoder.resolve("Recife")

    assert str(excinfo.value) == "HTTP 500"
    assert excinfo.value.service == "open-meteo:geocoding"
    assert excinfo.value.user_message == "Erro ao buscar dados do climáticos. HTTP 500"


def test_geocoder_maps_invalid_json(requests_mock):
    geocoder = OpenMeteoGeocoder(base_url=GEOCODING_URL)
    requests_mock.get(GEOCODING_URL, text="<html>not json</html>")

    with pytest.raises(UpstreamError, match="invalid json") as excinfo:
        geocoder.resolve("Recife")

    assert isinstance(excinfo.value.cause, ValueError)


def test_openmeteo_current_returns_raw_values(requests_mock):
    provider = OpenMeteoProvider(base_url=FORECAST_URL)
    requests_mock.get(FORECAST_URL, json=CURRENT_PAYLOAD)

    raw = provider.current(-23.55, -46.63)

    assert raw.temperature_c == 21.4
    assert raw.humidity_pct == 68.6
    assert raw.apparent_temperature_c == 20.9
    assert raw.precipitation_mm == 0.0
    assert raw.wind_speed_kmh == 11.2
    assert raw.weather_code == 2

    query = requests_mock.last_request.qs
    assert query["latitude"] == ["-23.55"]
    assert query["longitude"] == ["-46.63"]
    assert query["current"] == [
        "temperature_2m,relative_humidity_2m,apparent_temperature,precipitation,weather_code,wind_speed_10m"
    ]
    assert query["timezone"] == ["auto"]


def test_openmeteo_sends_configured_timeout_and_user_agent(requests_mock):
    provider = OpenMeteoProvider(
        base_url=FORECAST_URL,
        request_config=RequestConfig(timeout=2.5, user_agent="clima-tests/0.1"),
    )
    requests_mock.get(FORECAST_URL, json=CURRENT_PAYLOAD)

    provider.current(0.0, 0.0)

    assert requests_mock.last_request.timeout == 2.5
    assert requests_mock.last_request.headers["User-Agent"] == "clima-tests/0.1"


def test_openmeteo_missing_current_block(requests_mock):
    provider = OpenMeteoProvider(base_url=FORECAST_URL)
    requests_mock.get(FORECAST_URL, json={"latitude": 0.0})

    with pytest.raises(UpstreamError, match="missing current weather"):
        provider.current(0.0, 0.0)


def test_openmeteo_non_numeric_field(requests_mock):
    provider = OpenMeteoProvider(base_url=FORECAST_URL)
    payload = {"current": dict(CURRENT_PAYLOAD["current"], temperature_2m="quente")}
    requests_mock.get(FORECAST_URL, json=payload)

    with pytest.raises(UpstreamError, match="invalid temperature_2m"):
        provider.current(0.0, 0.0)


def test_openmeteo_timeout_is_not_retried(requests_mock):
    provider = OpenMeteoProvider(base_url=FORECAST_URL)
    requests_mock.get(FORECAST_URL, exc=requests.exceptions.ConnectTimeout)

    with pytest.raises(UpstreamError, match="timeout") as excinfo:
        provider.current(0.0, 0.0)

    assert requests_mock.call_count == 1
    assert isinstance(excinfo.value.cause, requests.Timeout)


def test_openmeteo_connection_error(requests_mock):
    provider = OpenMeteoProvider(base_url=FORECAST_URL)
    requests_mock.get(FORECAST_URL, exc=requests.exceptions.ConnectionError("refused"))

    with pytest.raises(UpstreamError) as excinfo:
        provider.current(0.0, 0.0)

    assert excinfo.value.user_message == "Erro ao buscar dados do climáticos. request failed: refused"
