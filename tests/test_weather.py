from __future__ import annotations

import io
import urllib.error

import pytest

from core.config import WeatherSettings
from core.models import Coordinate
from core.weather import build_forecast_url, get_temperature_for_capital
from tests.conftest import FakeOpener, FakeResponse, http_error, meteo_body


class BrokenBody(FakeResponse):
    def read(self) -> bytes:
        raise OSError("connection reset by peer")


def test_build_forecast_url() -> None:
    url = build_forecast_url(Coordinate(48.85, 2.35), "https://api.open-meteo.com/v1/forecast")
    assert url == (
        "https://api.open-meteo.com/v1/forecast"
        "?latitude=48.850000&longitude=2.350000&current=temperature_2m"
    )


def test_temperature_success() -> None:
    opener = FakeOpener(FakeResponse(meteo_body(18.3)))

    result = get_temperature_for_capital("Paris", opener=opener)

    assert result == {"result": "The current temperature in Paris is 18.3°C."}
    assert len(opener.calls) == 1
    url, _ = opener.calls[0]
    assert "latitude=48.850000" in url
    assert "longitude=2.350000" in url
    assert url.endswith("&current=temperature_2m")


def test_temperature_rounds_to_one_decimal() -> None:
    opener = FakeOpener(FakeResponse(meteo_body(-3.26)))

    result = get_temperature_for_capital("ottawa", opener=opener)

    assert result["result"] == "The current temperature in ottawa is -3.3°C."
    assert "longitude=-75.690000" in opener.calls[0][0]


def test_temperature_accepts_integer_reading() -> None:
    opener = FakeOpener(FakeResponse(meteo_body(21)))
    assert "21.0°C" in get_temperature_for_capital("Tokyo", opener=opener)["result"]


def test_unknown_city_makes_no_request() -> None:
    opener = FakeOpener(FakeResponse(meteo_body(10)))

    result = get_temperature_for_capital("Springfield", opener=opener)

    assert result == {"result": "Sorry, I don't have coordinates for Springfield."}
    assert opener.calls == []


def test_settings_timeout_and_url_are_used() -> None:
    opener = FakeOpener(FakeResponse(meteo_body(12.0)))
    settings = WeatherSettings(api_url="http://localhost:8080/v1/forecast", timeout_seconds=2.5)

    get_temperature_for_capital("Lisbon", settings=settings, opener=opener)

    url, timeout = opener.calls[0]
    assert url.startswith("http://localhost:8080/v1/forecast?latitude=38.720000")
    assert timeout == 2.5


def test_http_error_status() -> None:
    opener = FakeOpener(http_error(503, "Service Unavailable"))

    result = get_temperature_for_capital("Paris", opener=opener)

    assert result == {"result": "Weather API returned status: 503 Service Unavailable"}


def test_http_error_body_is_closed() -> None:
    body = io.BytesIO(b'{"error": true}')
    error = urllib.error.HTTPError(
        "https://api.open-meteo.com/v1/forecast", 500, "Internal Server Error", None, body  # type: ignore[arg-type]
    )

    result = get_temperature_for_capital("Paris", opener=FakeOpener(error))

    assert result == {"result": "Weather API returned status: 500 Internal Server Error"}
    assert body.closed


def test_rejected_url_is_a_result_not_an_exception() -> None:
    opener = FakeOpener(ValueError("unknown url type: 'meteo/v1/forecast'"))
    settings = WeatherSettings(max_retries=1, backoff_seconds=0)

    result = get_temperature_for_capital("Paris", settings=settings, opener=opener)

    assert result == {"result": "Failed to call weather API: unknown url type: 'meteo/v1/forecast'"}
    assert len(opener.calls) == 1


def test_non_200_response_status() -> None:
    opener = FakeOpener(FakeResponse(b"", status=204, reason="No Content"))

    result = get_temperature_for_capital("Paris", opener=opener)

    assert result == {"result": "Weather API returned status: 204 No Content"}


def test_transport_error() -> None:
    opener = FakeOpener(urllib.error.URLError("Connection refused"))

    result = get_temperature_for_capital("Paris", opener=opener)

    assert result == {"result": "Failed to call weather API: Connection refused"}
    assert len(opener.calls) == 1


def test_timeout_is_a_transport_error() -> None:
    opener = FakeOpener(TimeoutError("timed out"))

    result = get_temperature_for_capital("Tokyo", opener=opener)

    assert result == {"result": "Failed to call weather API: timed out"}


def test_body_read_error() -> None:
    opener = FakeOpener(BrokenBody(b""))

    result = get_temperature_for_capital("Paris", opener=opener)

    assert result == {"result": "Failed to read API response: connection reset by peer"}


@pytest.mark.parametrize(
    "body",
    [
        b"not json at all",
        b'{"current": {}}',
        b'{"current": {"temperature_2m": "warm"}}',
        b'{"current": {"temperature_2m": true}}',
        b'{"hourly": {"temperature_2m": [1, 2]}}',
        b"[1, 2, 3]",
    ],
)
def test_malformed_payload(body: bytes) -> None:
    opener = FakeOpener(FakeResponse(body))

    result = get_temperature_for_capital("Paris", opener=opener)

    assert result["result"].startswith("Failed to parse weather JSON:")


def test_retry_once_after_transport_error() -> None:
    opener = FakeOpener(
        urllib.error.URLError("temporary failure"),
        FakeResponse(meteo_body(18.3)),
    )
    settings = WeatherSettings(max_retries=1, backoff_seconds=0)

    result = get_temperature_for_capital("Paris", settings=settings, opener=opener)

    assert result == {"result": "The current temperature in Paris is 18.3°C."}
    assert len(opener.calls) == 2


def test_retry_gives_up_after_configured_attempts() -> None:
    opener = FakeOpener(urllib.error.URLError("down"))
    settings = WeatherSettings(max_retries=1, backoff_seconds=0)

    result = get_temperature_for_capital("Paris", settings=settings, opener=opener)

    assert result == {"result": "Failed to call weather API: down"}
    assert len(opener.calls) == 2


def test_http_status_is_not_retried() -> None:
    opener = FakeOpener(http_error(500, "Internal Server Error"))
    settings = WeatherSettings(max_retries=1, backoff_seconds=0)

    get_temperature_for_capital("Paris", settings=settings, opener=opener)

    assert len(opener.calls) == 1


def test_retry_sleeps_backoff(monkeypatch: pytest.MonkeyPatch) -> None:
    sleeps: list[float] = []
    monkeypatch.setattr("core.weather.time.sleep", sleeps.append)
    opener = FakeOpener(urllib.error.URLError("down"), FakeResponse(meteo_body(1.0)))

    get_temperature_for_capital(
        "Paris", settings=WeatherSettings(max_retries=1, backoff_seconds=0.25), opener=opener
    )

    assert sleeps == [0.25]


def test_repeated_calls_are_not_cached() -> None:
    opener = FakeOpener(FakeResponse(meteo_body(18.3)), FakeResponse(meteo_body(19.0)))

    first = get_temperature_for_capital("Paris", opener=opener)
    second = get_temperature_for_capital("Paris", opener=opener)

    assert len(opener.calls) == 2
    assert "18.3" in first["result"]
    assert "19.0" in second["result"]


def test_default_opener_is_urlopen(monkeypatch: pytest.MonkeyPatch) -> None:
    opener = FakeOpener(FakeResponse(meteo_body(7.5)))
    monkeypatch.setattr("urllib.request.urlopen", opener)

    result = get_temperature_for_capital("Tokyo")

    assert result == {"result": "The current temperature in Tokyo is 7.5°C."}
    assert opener.calls[0][1] == 10.0
