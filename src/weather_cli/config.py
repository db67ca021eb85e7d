import logging
from pathlib import Path
from typing import Optional

import click
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from weather_cli.errors import ConfigFileError
from weather_cli.providers import Provider

logger = logging.getLogger("weather_cli.config")

APP_NAME = "weather-cli"
CONFIG_NAME = "config.json"


def default_config_file() -> Path:
    return Path(click.get_app_dir(APP_NAME)) / CONFIG_NAME


class Settings(BaseSettings):
    """Runtime settings read from the environment or a .env file"""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="WEATHER_CLI_", extra="ignore")

    config_file: Path = Field(default_factory=default_config_file)
    log_level: str = "WARNING"
    log_file: Optional[Path] = None


class ProviderConfig(BaseModel):
    url: str
    api_key: Optional[str] = None

    @field_validator("url")
    @classmethod
    def _strip_trailing_slash(cls, url: str) -> str:
        return url[:-1] if url.endswith("/") else url


class MainConfig(BaseModel):
    """Persisted provider selection and credentials"""

    selected_provider: Provider = Provider.OPEN_WEATHER
    open_weather: ProviderConfig = ProviderConfig(url="https://api.openweathermap.org/data/2.5/weather")
    weather_api: ProviderConfig = ProviderConfig(url="https://api.weatherapi.com/v1")
    accu_weather: ProviderConfig = ProviderConfig(url="http://dataservice.accuweather.com/currentconditions/v1")
    aeris_weather: ProviderConfig = ProviderConfig(url="https://api.aerisapi.com/conditions")

    def for_provider(self, provider: Provider) -> ProviderConfig:
        return getattr(self, _FIELDS[provider])

    def configure(self, provider: Provider, api_key: str, url: Optional[str] = None) -> None:
        current = self.for_provider(provider)
        setattr(self, _FIELDS[provider], ProviderConfig(url=url or current.url, api_key=api_key))

    def is_configured(self, provider: Provider) -> bool:
        return self.for_provider(provider).api_key is not None


_FIELDS = {
    Provider.OPEN_WEATHER: "open_weather",
    Provider.WEATHER_API: "weather_api",
    Provider.ACCU_WEATHER: "accu_weather",
    Provider.AERIS_WEATHER: "aeris_weather",
}


def load_config(path: Path) -> MainConfig:
    """Load the persisted configuration, falling back to defaults when missing"""
    if not path.exists():
        logger.info(f"No configuration at {path}, using defaults")
        return MainConfig()

    try:
        return MainConfig.model_validate_json(path.read_text(encoding="utf-8"))
    except (OSError, ValidationError) as e:
        logger.error(f"Failed to load configuration from {path}: {e}")
        raise ConfigFileError(str(path), str(e).splitlines()[0]) from e


def save_config(config: MainConfig, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(config.model_dump_json(indent=2), encoding="utf-8")
    logger.info(f"Configuration saved to {path}")
