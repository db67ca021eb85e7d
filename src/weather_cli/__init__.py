"""Weather CLI: fetch weather data from several providers in one format."""

__version__ = "0.1.0"
