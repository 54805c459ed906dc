from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Union


@dataclass(frozen=True)
class Location:
    """Best geocoding match for a city name."""

    name: str
    latitude: float
    longitude: float


@dataclass(frozen=True)
class RawConditions:
    """Current conditions exactly as reported by the forecast API.

    Units follow the Open-Meteo defaults:
    - temperatures in Celsius
    - relative humidity in percent
    - precipitation in millimetres (mm)
    - wind speed in kilometres per hour (km/h)
    """

    temperature_c: float
    humidity_pct: float
    apparent_temperature_c: float
    precipitation_mm: float
    wind_speed_kmh: float
    weather_code: int


@dataclass(frozen=True)
class WeatherReport:
    city: str
    temperature: int
    condition: str
    humidity: int
    wind_speed: int
    feels_like: int
    precipitation: float
    description: str

    def as_dict(self) -> Dict[str, Union[str, int, float]]:
        """Serialize with the field names exposed to tool hosts."""
        return {
            "city": self.city,
            "temperature": self.temperature,
            "condition": self.condition,
            "humidity": self.humidity,
            "windSpeed": self.wind_speed,
            "feelsLike": self.feels_like,
            "precipitation": self.precipitation,
            "description": self.description,
        }


__all__ = ["Location", "RawConditions", "WeatherReport"]
