"""City weather lookup on top of the Open-Meteo geocoding and forecast APIs."""
from __future__ import annotations

from .conditions import UNKNOWN_CONDITION, classify
from .entities import Location, RawConditions, WeatherReport
from .errors import NotFoundError, UpstreamError, WeatherError

__all__ = [
    "Location",
    "NotFoundError",
    "RawConditions",
    "UNKNOWN_CONDITION",
    "UpstreamError",
    "WeatherError",
    "WeatherReport",
    "classify",
]
