# =============================================================================
# core/weather.py  -  Current Temperature from the Open-Meteo API
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Answers "what is the temperature in <capital> right now?" by:
#     1. Resolving the city to coordinates from the knowledge tables
#     2. Calling the LIVE Open-Meteo forecast API (free, no API key)
#     3. Reading current.temperature_2m from the JSON response
#     4. Formatting a one-decimal Celsius sentence for the agent
#
# FAILURE HANDLING:
#   Nothing in here raises to the caller.  Every failure is turned into a
#   tool result whose text names the problem:
#
#     unknown city        -> "Sorry, I don't have coordinates for ..."
#     connection problem  -> "Failed to call weather API: ..."
#     (or rejected URL)
#     HTTP status != 200  -> "Weather API returned status: ..."
#     body read failure   -> "Failed to read API response: ..."
#     bad / unexpected JSON -> "Failed to parse weather JSON: ..."
#
#   An unknown city never touches the network.
#
# TIMEOUT AND RETRY:
#   Each request uses WeatherSettings.timeout_seconds.  Only connection
#   problems are retried, and only WeatherSettings.max_retries times (0 or 1).
#   Responses are never cached: two calls for the same city make two requests.
# =============================================================================

import json
import logging
import time
import urllib.error
import urllib.request
from http.client import HTTPException
from typing import Any, Callable, Optional

from core.config import WeatherSettings
from core.knowledge import DEFAULT_KNOWLEDGE, KnowledgeBase, normalize_key
from core.models import Coordinate, ToolResult, tool_result

logger = logging.getLogger(__name__)

# Anything with urlopen's signature: opener(url, timeout=...) -> response.
Opener = Callable[..., Any]


class _WeatherAPIError(Exception):
    """Carries the user-facing message for one failed step of the call."""


def build_forecast_url(coordinate: Coordinate, api_url: str) -> str:
    """Build the Open-Meteo URL asking for the current 2 m air temperature."""
    return (
        f"{api_url}"
        f"?latitude={coordinate.latitude:f}&longitude={coordinate.longitude:f}"
        f"&current=temperature_2m"
    )


def get_temperature_for_capital(
    city: str,
    settings: Optional[WeatherSettings] = None,
    knowledge: Optional[KnowledgeBase] = None,
    opener: Optional[Opener] = None,
) -> ToolResult:
    """Return the current temperature for one of the known capital cities.

    Args:
        city: City name in any casing, e.g. "Paris".
        settings: Endpoint, timeout and retry settings (defaults apply if None).
        knowledge: Tables holding the city coordinates.
        opener: HTTP opener, urllib.request.urlopen unless overridden.

    Returns:
        {"result": "The current temperature in Paris is 18.3°C."} on success,
        otherwise {"result": "<what went wrong>"}.
    """
    settings = settings or WeatherSettings()
    kb = knowledge or DEFAULT_KNOWLEDGE
    opener = opener or urllib.request.urlopen

    coordinate = kb.coordinates.get(normalize_key(city))
    if coordinate is None:
        logger.info("No coordinates for %r, skipping weather call", city)
        return tool_result(f"Sorry, I don't have coordinates for {city}.")

    url = build_forecast_url(coordinate, settings.api_url)
    try:
        body = _fetch(url, settings, opener)
        temperature = _parse_temperature(body)
    except _WeatherAPIError as e:
        logger.warning("Weather lookup for %r failed: %s", city, e)
        return tool_result(str(e))

    logger.info("Weather for %r: %.1f°C", city, temperature)
    return tool_result(f"The current temperature in {city} is {temperature:.1f}°C.")


# =============================================================================
# HTTP
# =============================================================================
def _fetch(url: str, settings: WeatherSettings, opener: Opener) -> bytes:
    """GET the URL and return the raw body, retrying connection failures."""
    attempts = 1 + settings.max_retries
    attempt = 0

    while True:
        attempt += 1
        logger.debug("GET %s (attempt %d/%d)", url, attempt, attempts)
        try:
            with opener(url, timeout=settings.timeout_seconds) as response:
                status = getattr(response, "status", 200)
                if status != 200:
                    raise _WeatherAPIError(
                        f"Weather API returned status: {status} {getattr(response, 'reason', '')}".rstrip()
                    )
                try:
                    return response.read()
                except (OSError, HTTPException) as e:
                    raise _WeatherAPIError(f"Failed to read API response: {e}") from e

        # HTTPError is a URLError subclass: it has to be caught first.
        except urllib.error.HTTPError as e:
            e.close()
            raise _WeatherAPIError(f"Weather API returned status: {e.code} {e.reason}") from e

        # urlopen rejects a malformed URL with ValueError; retrying cannot help.
        except ValueError as e:
            raise _WeatherAPIError(f"Failed to call weather API: {e}") from e

        except (urllib.error.URLError, OSError, HTTPException) as e:
            if attempt >= attempts:
                raise _WeatherAPIError(f"Failed to call weather API: {_reason(e)}") from e
            logger.warning(
                "Weather API call failed (%s), retrying in %.2fs", _reason(e), settings.backoff_seconds
            )
            time.sleep(settings.backoff_seconds)


def _reason(error: Exception) -> str:
    if isinstance(error, urllib.error.URLError):
        return str(error.reason)
    return str(error)


# =============================================================================
# JSON
# =============================================================================
def _parse_temperature(body: bytes) -> float:
    """Pull current.temperature_2m out of an Open-Meteo response body."""
    try:
        payload = json.loads(body)
    except ValueError as e:
        # covers JSONDecodeError and UnicodeDecodeError
        raise _WeatherAPIError(f"Failed to parse weather JSON: {e}") from e

    current = payload.get("current") if isinstance(payload, dict) else None
    if not isinstance(current, dict):
        raise _WeatherAPIError("Failed to parse weather JSON: missing 'current' object")

    temperature = current.get("temperature_2m")
    if isinstance(temperature, bool) or not isinstance(temperature, (int, float)):
        raise _WeatherAPIError(
            f"Failed to parse weather JSON: 'current.temperature_2m' is not a number ({temperature!r})"
        )
    return float(temperature)
