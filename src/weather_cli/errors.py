"""Errors raised while configuring providers and fetching weather data."""

from typing import Optional

PROVIDER_LIST_HINT = "use the command 'weather-cli provider-list' to get a list of all available providers"


class WeatherError(Exception):
    """Base class for every error reported to the user"""


class CreationError(WeatherError):
    """A provider client was constructed with an empty url or api key"""

    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"Failed to create an API client for {provider}; can be invalid 'url' or 'api_key'")


class RequestError(WeatherError):
    """The request never reached the provider (connection, DNS, timeout)"""

    def __init__(self, provider: str, reason: str):
        self.provider = provider
        self.reason = reason
        super().__init__(f"Failed to send a request to {provider}; can be invalid 'url' or 'api_key' ({reason})")


class BodyTextError(WeatherError):
    """The response body could not be read as text"""

    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"Can't process the body text from the {provider} response")


class ServerError(WeatherError):
    """The provider answered with a non-success status"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Provider server response error '{message}'")


class JsonParseError(WeatherError):
    """A success or error payload was malformed or did not match its schema"""

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail
        message = "Failed to parse JSON response"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class DateTimeParseError(WeatherError):
    """The date given by the user matched no recognized format"""

    def __init__(self, value: str):
        self.input = value
        super().__init__(
            f"Invalid datetime format '{value}'. Please use a recognized datetime format "
            "(e.g., 'MM/DD/YYYY' or 'YYYY-MM-DD hh:mm' or 'YYYY-MM-DD')"
        )


class ProviderNotFoundError(WeatherError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Weather provider '{name}' not found; {PROVIDER_LIST_HINT}")


class ProviderNotImplementedError(WeatherError):
    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"Weather provider '{provider}' is not implemented; {PROVIDER_LIST_HINT}")


class ProviderConfigError(WeatherError):
    """The selected provider has no api key in the configuration file"""

    def __init__(self, provider: str, config_file: str):
        self.provider = provider
        self.config_file = config_file
        super().__init__(
            f"Failed to read configuration for '{provider}' service; check url and api key "
            f"for the API Service in '{config_file}' file or run 'weather-cli configure {provider} <API_KEY>'"
        )


class ConfigFileError(WeatherError):
    """The persisted configuration exists but cannot be loaded"""

    def __init__(self, config_file: str, reason: str):
        self.config_file = config_file
        self.reason = reason
        super().__init__(f"Failed to load configuration file '{config_file}': {reason}")
