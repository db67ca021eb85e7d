import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from weather_cli.models import WeatherData


def table_terminal_view(weather_data: WeatherData, console: Console) -> None:
    table = Table()
    table.add_column("Name")
    table.add_column("Value")
    table.add_row("Description", f"[green]{escape(weather_data.description.title())}[/green]")
    table.add_row("Temperature", f"[yellow]{weather_data.temp:.2f} °C[/yellow]")
    table.add_row("Humidity", f"[blue]{weather_data.humidity} %[/blue]")
    table.add_row("Pressure", f"[green]{weather_data.pressure} hPa[/green]")
    table.add_row("Wind speed", f"[cyan]{weather_data.wind_speed:.2f} m/sec[/cyan]")
    table.add_row("Visibility", f"[magenta]{weather_data.visibility} m[/magenta]")

    console.print(table)


def json_terminal_view(weather_data: WeatherData) -> None:
    click.echo(weather_data.model_dump_json())
