"""Contract shared by every weather provider client."""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional, Tuple, Type, TypeVar

import httpx
import pandas as pd
from pydantic import BaseModel, ValidationError

from weather_cli.errors import BodyTextError, CreationError, DateTimeParseError, JsonParseError, RequestError
from weather_cli.models import WeatherData

logger = logging.getLogger("weather_cli.base")

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_unix_timestamp(value: str) -> int:
    """Parse a user supplied date into a Unix timestamp.

    Accepts the formats pandas understands (``YYYY-MM-DD``, ``MM/DD/YYYY``,
    ``YYYY-MM-DD hh:mm``, ISO-8601 with an offset, ...). Naive values are read as UTC.
    """
    try:
        timestamp = pd.Timestamp(value)
    except (ValueError, TypeError, OverflowError) as e:
        raise DateTimeParseError(value) from e

    if pd.isna(timestamp):
        raise DateTimeParseError(value)

    if timestamp.tzinfo is None:
        timestamp = timestamp.tz_localize("UTC")
    return int(timestamp.timestamp())


def parse_payload(model: Type[ModelT], body: str) -> ModelT:
    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        logger.debug(f"Could not parse {model.__name__}: {e}")
        raise JsonParseError(f"unexpected {model.__name__} payload") from e


class WeatherProvider(ABC):
    """Fetches weather for an address, either current or at a past date"""

    @abstractmethod
    async def get_weather_data(self, address: str, date: Optional[str] = None) -> WeatherData:
        """Return current conditions when ``date`` is None, historical ones otherwise"""


class HttpWeatherClient(WeatherProvider):
    """Base for providers reached through a single HTTP GET"""

    PROVIDER_NAME = "weather provider"

    def __init__(self, url: str, api_key: str, client: Optional[httpx.AsyncClient] = None):
        if not url or not api_key:
            raise CreationError(self.PROVIDER_NAME)

        if url.endswith("/"):
            url = url[:-1]

        self._url = url
        self._api_key = api_key
        self._client = client

    @property
    def url(self) -> str:
        return self._url

    @property
    def api_key(self) -> str:
        return self._api_key

    def _masked(self, params: Dict[str, str]) -> Dict[str, str]:
        return {k: ("***" if v == self._api_key else v) for k, v in params.items()}

    async def _fetch(self, url: str, params: Dict[str, str]) -> Tuple[int, str]:
        """Issue one GET and return the status code with the decoded body"""
        logger.info(f"Requesting {self.PROVIDER_NAME} data from {url}")
        logger.debug(f"Query parameters: {self._masked(params)}")

        if self._client is not None:
            return await self._get(self._client, url, params)

        async with httpx.AsyncClient() as client:
            return await self._get(client, url, params)

    async def _get(self, client: httpx.AsyncClient, url: str, params: Dict[str, str]) -> Tuple[int, str]:
        try:
            async with client.stream("GET", url, params=params) as response:
                try:
                    await response.aread()
                    body = response.text
                except (httpx.HTTPError, UnicodeDecodeError, LookupError) as e:
                    logger.error(f"Could not read {self.PROVIDER_NAME} response body: {e}")
                    raise BodyTextError(self.PROVIDER_NAME) from e
        except httpx.RequestError as e:
            logger.error(f"Request to {self.PROVIDER_NAME} failed: {e}")
            raise RequestError(self.PROVIDER_NAME, str(e) or type(e).__name__) from e

        logger.info(f"{self.PROVIDER_NAME} responded with status {response.status_code}")
        return response.status_code, body
