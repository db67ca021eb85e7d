"""Supported weather providers and construction of their clients."""

import logging
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Union

import httpx

from weather_cli.errors import ProviderConfigError, ProviderNotFoundError, ProviderNotImplementedError
from weather_cli.openweather import OpenWeatherClient
from weather_cli.weatherapi import WeatherApiClient

if TYPE_CHECKING:
    from weather_cli.config import MainConfig

logger = logging.getLogger("weather_cli.providers")


class Provider(str, Enum):
    OPEN_WEATHER = "open-weather"
    WEATHER_API = "weather-api"
    ACCU_WEATHER = "accu-weather"
    AERIS_WEATHER = "aeris-weather"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_str(cls, name: str) -> "Provider":
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ProviderNotFoundError(name) from None

    @classmethod
    def all(cls) -> List["Provider"]:
        return list(cls)

    @property
    def is_implemented(self) -> bool:
        return self not in NOT_IMPLEMENTED_PROVIDERS


NOT_IMPLEMENTED_PROVIDERS = (Provider.ACCU_WEATHER, Provider.AERIS_WEATHER)

WeatherClient = Union[OpenWeatherClient, WeatherApiClient]


def create_client(
    provider: Provider,
    config: "MainConfig",
    config_file: str = "config.json",
    client: Optional[httpx.AsyncClient] = None,
) -> WeatherClient:
    """Build the client for ``provider`` from its stored url and api key"""
    if not provider.is_implemented:
        raise ProviderNotImplementedError(str(provider))

    provider_config = config.for_provider(provider)
    if provider_config.api_key is None:
        raise ProviderConfigError(str(provider), config_file)

    logger.debug(f"Creating {provider} client for {provider_config.url}")
    if provider is Provider.OPEN_WEATHER:
        return OpenWeatherClient(provider_config.url, provider_config.api_key, client=client)
    return WeatherApiClient(provider_config.url, provider_config.api_key, client=client)
