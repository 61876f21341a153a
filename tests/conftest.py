"""Shared test fixtures."""

import json
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from wristtemp.config import Settings
from wristtemp.location import Position


@pytest.fixture
def paired_user_id():
    return 123456789


@pytest.fixture
def stranger_user_id():
    return 987654321


@pytest.fixture
def settings(paired_user_id):
    return Settings(
        _env_file=None,
        telegram_bot_token="123:abc",
        telegram_user_id=paired_user_id,
        openweather_api_key="owm-key",
    )


@pytest.fixture
def position():
    return Position(latitude=51.5, longitude=-0.12)


@pytest.fixture
def owm_body():
    """Factory for OpenWeatherMap current-weather bodies."""

    def _make(kelvin: float):
        return {"coord": {"lat": 51.5, "lon": -0.12}, "main": {"temp": kelvin, "humidity": 80}, "cod": 200}

    return _make


@pytest.fixture
def mock_client():
    """Factory for an httpx.AsyncClient backed by a canned response.

    Every request is recorded on the returned client's ``requests`` list.
    """
    def _make(body=None, status_code: int = 200, raw: str | None = None):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if raw is not None:
                return httpx.Response(status_code, text=raw)
            return httpx.Response(status_code, content=json.dumps(body).encode(),
                                  headers={"content-type": "application/json"})

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        client.requests = requests
        return client

    return _make


@pytest.fixture
def channel():
    ch = MagicMock()
    ch.send_app_message = AsyncMock()
    return ch
