from __future__ import annotations

from typing import Optional

from .base import HttpProvider
from ._fields import required_float, required_int
from ..entities import RawConditions
from ..errors import UpstreamError

CURRENT_FIELDS = (
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "precipitation",
    "weather_code",
    "wind_speed_10m",
)


class OpenMeteoProvider(HttpProvider):
    base_url = "https://api.open-meteo.com/v1/forecast"
    service = "open-meteo:forecast"

    def __init__(self, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = base_url or self.base_url

    def current(self, latitude: float, longitude: float) -> RawConditions:
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": ",".join(CURRENT_FIELDS),
            "timezone": "auto",
        }
        data = self._get_json(self.base_url, params)
        current = data.get("current")
        if not isinstance(current, dict) or not current:
            raise UpstreamError("missing current weather", service=self.service)
        return RawConditions(
            temperature_c=required_float(current, "temperature_2m", self.service),
            humidity_pct=required_float(current, "relative_humidity_2m", self.service),
            apparent_temperature_c=required_float(current, "apparent_temperature", self.service),
            precipitation_mm=required_float(current, "precipitation", self.service),
            wind_speed_kmh=required_float(current, "wind_speed_10m", self.service),
            weather_code=required_int(current, "weather_code", self.service),
        )


__all__ = ["CURRENT_FIELDS", "OpenMeteoProvider"]
