import logging
from typing import Callable, List

import httpx
import pytest


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served"""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


def json_responder(status_code: int, payload) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)

    return handler


@pytest.fixture
def mock_http():
    """Build an AsyncClient backed by a RecordingTransport"""

    def build(handler: Callable[[httpx.Request], httpx.Response]):
        transport = RecordingTransport(handler)
        return httpx.AsyncClient(transport=transport), transport

    return build


@pytest.fixture
def openweather_payload():
    return {
        "main": {"temp": 22.0, "humidity": 60, "pressure": 1005},
        "wind": {"speed": 12.0},
        "visibility": 8000,
        "weather": [{"description": "light rain"}],
    }


def weatherapi_reading(temp_c: float = 18.5, text: str = "Partly cloudy") -> dict:
    return {
        "temp_c": temp_c,
        "condition": {"text": text},
        "wind_kph": 36.0,
        "pressure_mb": 1012.7,
        "humidity": 72,
        "vis_km": 10.0,
    }


@pytest.fixture
def weatherapi_current_payload():
    return {"current": weatherapi_reading()}


@pytest.fixture
def weatherapi_history_payload():
    return {
        "forecast": {
            "forecastday": [
                {"hour": [weatherapi_reading(1.0, "first day"), weatherapi_reading(2.0, "first day later")]},
                {"hour": [weatherapi_reading(9.5, "Sunny"), weatherapi_reading(11.0, "Cloudy")]},
            ]
        }
    }


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers installed by the CLI so later tests don't log to closed streams"""
    yield
    logger = logging.getLogger("weather_cli")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
