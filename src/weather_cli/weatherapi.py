import logging
from typing import Optional

import httpx

from weather_cli.base import HttpWeatherClient, parse_payload, parse_unix_timestamp
from weather_cli.errors import ServerError
from weather_cli.models import WeatherData
from weather_cli.responses import WeatherApiData, WeatherApiErrorData, WeatherApiHistoryData

logger = logging.getLogger("weather_cli.weatherapi")


class WeatherApiClient(HttpWeatherClient):
    """Client for WeatherAPI.com.

    The configured url is the API root (``https://api.weatherapi.com/v1``);
    ``/current.json`` or ``/history.json`` is appended depending on whether a
    date was requested.
    """

    PROVIDER_NAME = "Weather API"

    async def get_weather_data(self, address: str, date: Optional[str] = None) -> WeatherData:
        params = {"q": address, "key": self.api_key}
        if date is not None:
            params["unixdt"] = str(parse_unix_timestamp(date))
            url = f"{self.url}/history.json"
        else:
            url = f"{self.url}/current.json"

        status_code, body = await self._fetch(url, params)

        if not httpx.codes.is_success(status_code):
            error_data = parse_payload(WeatherApiErrorData, body)
            logger.error(f"WeatherAPI error {error_data.error.code}: {error_data.error.message}")
            raise ServerError(error_data.error.message)

        if date is not None:
            weather_data = parse_payload(WeatherApiHistoryData, body).to_weather_data()
        else:
            weather_data = parse_payload(WeatherApiData, body).to_weather_data()

        logger.info(f"Got weather for {address}: {weather_data.temp}°C, {weather_data.description}")
        return weather_data
