import logging
from typing import Optional

import httpx

from weather_cli.base import HttpWeatherClient, parse_payload, parse_unix_timestamp
from weather_cli.errors import ServerError
from weather_cli.models import WeatherData
from weather_cli.responses import OpenWeatherData, OpenWeatherErrorData

logger = logging.getLogger("weather_cli.openweather")


class OpenWeatherClient(HttpWeatherClient):
    """Client for the OpenWeather current weather endpoint.

    The configured url is the endpoint itself, e.g.
    ``https://api.openweathermap.org/data/2.5/weather``. Historical requests go to
    the same endpoint with an extra ``dt`` parameter.
    """

    PROVIDER_NAME = "Open Weather API"

    async def get_weather_data(self, address: str, date: Optional[str] = None) -> WeatherData:
        params = {"q": address, "units": "metric", "appid": self.api_key}
        if date is not None:
            params["dt"] = str(parse_unix_timestamp(date))

        status_code, body = await self._fetch(self.url, params)

        if httpx.codes.is_success(status_code):
            weather_data = parse_payload(OpenWeatherData, body).to_weather_data()
            logger.info(f"Got weather for {address}: {weather_data.temp}°C, {weather_data.description}")
            return weather_data

        error_data = parse_payload(OpenWeatherErrorData, body)
        logger.error(f"OpenWeather error {error_data.cod}: {error_data.message}")
        raise ServerError(error_data.message)
