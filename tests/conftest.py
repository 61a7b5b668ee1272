"""Shared fixtures for capital agent tests."""

from __future__ import annotations

import io
import json
import urllib.error
from typing import Any, Iterator

import pytest

from tools import functions


class FakeResponse:
    """Minimal stand-in for the object urlopen returns."""

    def __init__(self, body: bytes, status: int = 200, reason: str = "OK") -> None:
        self.status = status
        self.reason = reason
        self._body = io.BytesIO(body)

    def read(self) -> bytes:
        return self._body.read()

    def __enter__(self) -> FakeResponse:
        return self

    def __exit__(self, *exc: object) -> None:
        return None


class FakeOpener:
    """Records every call and replays a queue of responses or errors."""

    def __init__(self, *outcomes: Any) -> None:
        self.outcomes = list(outcomes)
        self.calls: list[tuple[str, float]] = []

    def __call__(self, url: str, timeout: float) -> Any:
        self.calls.append((url, timeout))
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


def meteo_body(temperature: Any) -> bytes:
    return json.dumps({"current": {"temperature_2m": temperature}}).encode()


def http_error(code: int, reason: str) -> urllib.error.HTTPError:
    return urllib.error.HTTPError(
        "https://api.open-meteo.com/v1/forecast", code, reason, None, None  # type: ignore[arg-type]
    )


@pytest.fixture(autouse=True)
def reset_tool_registry() -> Iterator[None]:
    """Make every test start without an installed registry."""

    functions.configure(None)
    yield
    functions.configure(None)
