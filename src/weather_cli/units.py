"""Conversions from provider units to the units of WeatherData."""

import math

from weather_cli.models import U16_MAX


def saturate_u16(value: float) -> int:
    """Truncate towards zero and clamp to 0..65535; NaN becomes 0"""
    if math.isnan(value) or value <= 0:
        return 0
    if value >= U16_MAX:
        return U16_MAX
    return int(value)


def km_per_hour_to_m_per_sec(km_per_hour: float) -> float:
    return km_per_hour * 1000.0 / 3600.0


def km_to_m(km: float) -> int:
    return saturate_u16(km * 1000.0)


def millibar_to_hpa(millibar: float) -> int:
    # 1 mb == 1 hPa, only the integer cast is needed
    return saturate_u16(millibar)
