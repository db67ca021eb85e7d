"""Command-line interface for fetching weather data from different providers."""

import asyncio
import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional

import click
from rich.console import Console
from rich.markup import escape

from weather_cli import __version__
from weather_cli.config import Settings, load_config, save_config
from weather_cli.errors import WeatherError
from weather_cli.logging_config import setup_logging
from weather_cli.models import WeatherData
from weather_cli.providers import Provider, create_client
from weather_cli.views import json_terminal_view, table_terminal_view

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger("weather_cli.cli")


class ProviderType(click.ParamType):
    name = "provider"

    def convert(self, value, param, ctx) -> Provider:
        if isinstance(value, Provider):
            return value
        try:
            return Provider.from_str(value)
        except WeatherError as e:
            self.fail(str(e), param, ctx)


PROVIDER = ProviderType()


def fail(error: WeatherError) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(str(error))}")
    sys.exit(1)


@click.group()
@click.version_option(__version__)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Set logging level (default from WEATHER_CLI_LOG_LEVEL or WARNING)",
)
@click.pass_context
def main(ctx: click.Context, log_level: Optional[str]) -> None:
    """A quick and easy CLI tool for fetching weather data from various providers."""
    settings = Settings()
    setup_logging(level=log_level or settings.log_level, log_file=settings.log_file)
    ctx.obj = settings


@main.command(name="provider-list")
@click.pass_obj
def provider_list(settings: Settings) -> None:
    """Get a full list of supported providers."""
    try:
        config = load_config(settings.config_file)
    except WeatherError as e:
        fail(e)

    console.print("Current status of providers: ")
    for provider in Provider.all():
        if not provider.is_implemented:
            status = f"[red]{provider} (not implemented)[/red]"
        elif config.is_configured(provider):
            status = f"[green]{provider} (configured)[/green]"
        else:
            status = f"[yellow]{provider} (not configured)[/yellow]"

        if provider is config.selected_provider:
            console.print(f"*{status} (selected)")
        else:
            console.print(f" {status}")

    console.print(
        "\nCurrently supported providers is"
        "\n\tOpen Weather ([blue]v2.5[/blue]; example url: "
        "'[green]https://api.openweathermap.org/data/2.5/weather[/green]'),"
        "\n\tWeather API ([blue]v1[/blue]; example url: '[green]https://api.weatherapi.com/v1[/green]')"
    )


@main.command()
@click.argument("provider", type=PROVIDER)
@click.argument("api_key")
@click.option("--url", "-u", help="API service URL (default: the provider's public endpoint)")
@click.pass_obj
def configure(settings: Settings, provider: Provider, api_key: str, url: Optional[str]) -> None:
    """Configure a provider with the given credentials."""
    try:
        config = load_config(settings.config_file)
    except WeatherError as e:
        fail(e)

    config.configure(provider, api_key, url)
    save_config(config, settings.config_file)
    console.print(f"Provider '[green]{provider}[/green]' was successfully configured")


@main.command(name="select-provider")
@click.argument("provider", type=PROVIDER)
@click.pass_obj
def select_provider(settings: Settings, provider: Provider) -> None:
    """Select an available provider."""
    try:
        config = load_config(settings.config_file)
    except WeatherError as e:
        fail(e)

    config.selected_provider = provider
    save_config(config, settings.config_file)
    console.print(f"Provider '[green]{provider}[/green]' was successfully selected")


async def fetch_weather(
    address: str, date: Optional[str], provider: Provider, config_file: Path
) -> WeatherData:
    config = load_config(config_file)
    client = create_client(provider, config, config_file=str(config_file))
    return await client.get_weather_data(address, date)


@main.command()
@click.argument("address")
@click.option("--date", "-d", help="Date for historical weather, e.g. 'YYYY-MM-DD' or 'MM/DD/YYYY'")
@click.option("--json", "-j", "as_json", is_flag=True, help="Print weather data as JSON")
@click.option("--provider", "-p", type=PROVIDER, help="Provider to use instead of the selected one")
@click.pass_obj
def get(
    settings: Settings, address: str, date: Optional[str], as_json: bool, provider: Optional[Provider]
) -> None:
    """Get weather information for ADDRESS."""
    if not address.strip():
        raise click.BadParameter("address must not be empty", param_hint="ADDRESS")

    try:
        if provider is None:
            provider = load_config(settings.config_file).selected_provider

        logger.info(f"Fetching weather for {address} from {provider}")
        with err_console.status("Fetching..."):
            weather_data = asyncio.run(fetch_weather(address, date, provider, settings.config_file))
    except WeatherError as e:
        fail(e)

    if as_json:
        json_terminal_view(weather_data)
    else:
        table_terminal_view(weather_data, console)


if __name__ == "__main__":
    main()
