"""Wire formats returned by the supported weather providers.

Each success model knows how to turn itself into WeatherData; error models only
expose the message the provider wants to show.
"""

from typing import List, Union

from pydantic import BaseModel, Field, model_validator

from weather_cli.models import U8_MAX, U16_MAX, WeatherData
from weather_cli.units import km_per_hour_to_m_per_sec, km_to_m, millibar_to_hpa

# OpenWeather


class OpenWeatherMain(BaseModel):
    temp: float
    humidity: int = Field(..., ge=0, le=U8_MAX)
    pressure: int = Field(..., ge=0, le=U16_MAX)


class OpenWeatherCondition(BaseModel):
    description: str


class OpenWeatherWind(BaseModel):
    speed: float


class OpenWeatherData(BaseModel):
    """Current weather payload from the OpenWeather API (metric units)"""

    main: OpenWeatherMain
    weather: List[OpenWeatherCondition]
    visibility: int = Field(..., ge=0, le=U16_MAX)
    wind: OpenWeatherWind

    def to_weather_data(self) -> WeatherData:
        # OpenWeather already reports °C, hPa, m/s and meters
        description = self.weather[-1].description if self.weather else ""
        return WeatherData(
            temp=self.main.temp,
            humidity=self.main.humidity,
            pressure=self.main.pressure,
            wind_speed=self.wind.speed,
            visibility=self.visibility,
            description=description,
        )


class OpenWeatherErrorData(BaseModel):
    cod: Union[int, str]
    message: str


# WeatherAPI


class WeatherApiCondition(BaseModel):
    text: str


class WeatherApiCurrent(BaseModel):
    """A single reading, used both for current conditions and for history hours"""

    temp_c: float
    condition: WeatherApiCondition
    wind_kph: float
    pressure_mb: float
    humidity: int = Field(..., ge=0, le=U8_MAX)
    vis_km: float

    def to_weather_data(self) -> WeatherData:
        return WeatherData(
            temp=self.temp_c,
            humidity=self.humidity,
            pressure=millibar_to_hpa(self.pressure_mb),
            wind_speed=km_per_hour_to_m_per_sec(self.wind_kph),
            visibility=km_to_m(self.vis_km),
            description=self.condition.text,
        )


class WeatherApiData(BaseModel):
    """Payload of /current.json"""

    current: WeatherApiCurrent

    def to_weather_data(self) -> WeatherData:
        return self.current.to_weather_data()


class HistoryForecastDay(BaseModel):
    hour: List[WeatherApiCurrent]


class HistoryForecast(BaseModel):
    forecastday: List[HistoryForecastDay] = Field(..., min_length=1)


class WeatherApiHistoryData(BaseModel):
    """Payload of /history.json"""

    forecast: HistoryForecast

    @model_validator(mode="after")
    def _selected_day_has_hours(self) -> "WeatherApiHistoryData":
        if not self.forecast.forecastday[-1].hour:
            raise ValueError("last forecast day contains no hourly readings")
        return self

    def selected_reading(self) -> WeatherApiCurrent:
        """First hour of the last returned day"""
        return self.forecast.forecastday[-1].hour[0]

    def to_weather_data(self) -> WeatherData:
        return self.selected_reading().to_weather_data()


class WeatherApiErrorDetail(BaseModel):
    code: int
    message: str


class WeatherApiErrorData(BaseModel):
    error: WeatherApiErrorDetail
