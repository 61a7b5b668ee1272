# =============================================================================
# core/config.py  -  Runtime Settings (read from the environment)
# =============================================================================
#
# All configuration comes from environment variables.  main.py calls
# load_dotenv() first, so a local .env file works the same way as exported
# variables.
#
#   CAPITAL_AGENT_MODEL            model name (default: gemini-2.5-flash)
#   CAPITAL_AGENT_TOOL_TRANSPORT   "inprocess" (default) or "mcp"
#   WEATHER_API_URL                Open-Meteo forecast endpoint
#   WEATHER_TIMEOUT_SECONDS        HTTP timeout for the weather call (10)
#   WEATHER_MAX_RETRIES            retries after a transport error, 0 or 1 (0)
#   WEATHER_BACKOFF_SECONDS        pause before the retry (0.5)
#   LOG_LEVEL                      root log level (INFO)
#
# A malformed value raises ValueError.  Settings are read once at startup,
# so a typo stops the program before the agent ever talks to a model.
# =============================================================================

import math
import os
import urllib.parse
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, TypeVar


DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_WEATHER_API_URL = "https://api.open-meteo.com/v1/forecast"
TOOL_TRANSPORTS = ("inprocess", "mcp")

# The weather call gets at most one retry.
MAX_WEATHER_RETRIES = 1

T = TypeVar("T")


@dataclass(frozen=True)
class WeatherSettings:
    """How the weather tool talks to Open-Meteo.

    Attributes:
        api_url: Forecast endpoint, without a query string.
        timeout_seconds: Socket timeout for each attempt.
        max_retries: Extra attempts after a transport error (0 or 1).
        backoff_seconds: Sleep between the first attempt and the retry.
    """

    api_url: str = DEFAULT_WEATHER_API_URL
    timeout_seconds: float = 10.0
    max_retries: int = 0
    backoff_seconds: float = 0.5

    def __post_init__(self) -> None:
        parts = urllib.parse.urlsplit(self.api_url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError(f"api_url must be an absolute http(s) URL, got {self.api_url!r}")
        if parts.query or parts.fragment:
            raise ValueError(f"api_url must not carry a query string, got {self.api_url!r}")
        if not math.isfinite(self.timeout_seconds) or self.timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {self.timeout_seconds}")
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {self.max_retries}")
        if not math.isfinite(self.backoff_seconds) or self.backoff_seconds < 0:
            raise ValueError(f"backoff_seconds must be >= 0, got {self.backoff_seconds}")
        if self.max_retries > MAX_WEATHER_RETRIES:
            # frozen dataclass: go through object.__setattr__
            object.__setattr__(self, "max_retries", MAX_WEATHER_RETRIES)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "WeatherSettings":
        env = os.environ if environ is None else environ
        return cls(
            api_url=env.get("WEATHER_API_URL", DEFAULT_WEATHER_API_URL),
            timeout_seconds=_parse(env, "WEATHER_TIMEOUT_SECONDS", float, 10.0),
            max_retries=_parse(env, "WEATHER_MAX_RETRIES", int, 0),
            backoff_seconds=_parse(env, "WEATHER_BACKOFF_SECONDS", float, 0.5),
        )


@dataclass(frozen=True)
class AgentSettings:
    """Which model drives the agent and how it reaches the tools."""

    model: str = DEFAULT_MODEL
    tool_transport: str = "inprocess"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.tool_transport not in TOOL_TRANSPORTS:
            raise ValueError(
                f"Unknown tool transport {self.tool_transport!r}; "
                f"expected one of {', '.join(TOOL_TRANSPORTS)}"
            )

    @property
    def uses_litellm(self) -> bool:
        """Provider-prefixed names like "openrouter/openai/gpt-4o" go through LiteLlm."""
        return "/" in self.model

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AgentSettings":
        env = os.environ if environ is None else environ
        return cls(
            model=env.get("CAPITAL_AGENT_MODEL", DEFAULT_MODEL),
            tool_transport=env.get("CAPITAL_AGENT_TOOL_TRANSPORT", "inprocess").strip().lower(),
            log_level=env.get("LOG_LEVEL", "INFO").strip().upper(),
        )


def _parse(env: Mapping[str, str], name: str, convert: Callable[[str], T], default: T) -> T:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return convert(raw)
    except ValueError:
        raise ValueError(f"{name} must be a {getattr(convert, '__name__', 'value')}, got {raw!r}") from None
