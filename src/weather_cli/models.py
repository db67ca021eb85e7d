from pydantic import BaseModel, ConfigDict, Field

U8_MAX = 255
U16_MAX = 65535


class WeatherData(BaseModel):
    """Weather conditions normalized from any provider"""

    model_config = ConfigDict(frozen=True)

    temp: float  # °C
    humidity: int = Field(..., ge=0, le=U8_MAX)  # %
    pressure: int = Field(..., ge=0, le=U16_MAX)  # hPa
    wind_speed: float  # m/s
    visibility: int = Field(..., ge=0, le=U16_MAX)  # m
    description: str
