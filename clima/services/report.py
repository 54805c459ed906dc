"""Turn raw Open-Meteo values into the report handed back to tool hosts."""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ..conditions import classify
from ..entities import Location, RawConditions, WeatherReport

DESCRIPTION_TEMPLATE = (
    "O clima em {city} está com a condição de {condition}, "
    "com uma temperatura de {temperature}°C, umidade de {humidity}% "
    "e vento a {wind_speed}km/h."
)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (20.5 -> 21, -20.5 -> -21).

    Goes through ``str`` so the decimal shown by the API is what gets rounded,
    not its binary approximation.
    """
    return int(Decimal(str(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def synthesize(original_city: str, location: Location, raw: RawConditions) -> WeatherReport:
    condition = classify(raw.weather_code)
    temperature = round_half_away(raw.temperature_c)
    humidity = round_half_away(raw.humidity_pct)
    wind_speed = round_half_away(raw.wind_speed_kmh)
    description = DESCRIPTION_TEMPLATE.format(
        city=original_city,
        condition=condition,
        temperature=temperature,
        humidity=humidity,
        wind_speed=wind_speed,
    )
    return WeatherReport(
        city=location.name,
        temperature=temperature,
        condition=condition,
        humidity=humidity,
        wind_speed=wind_speed,
        feels_like=round_half_away(raw.apparent_temperature_c),
        precipitation=raw.precipitation_mm,
        description=description,
    )


__all__ = ["DESCRIPTION_TEMPLATE", "round_half_away", "synthesize"]
