from __future__ import annotations

from typing import Optional

from .base import HttpProvider
from ._fields import required_float
from ..entities import Location
from ..errors import NotFoundError, UpstreamError


class OpenMeteoGeocoder(HttpProvider):
    base_url = "https://geocoding-api.open-meteo.com/v1/search"
    service = "open-meteo:geocoding"
    language = "pt"

    def __init__(self, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = base_url or self.base_url

    def resolve(self, city: str) -> Location:
        params = {
            "name": city,
            "count": 1,
            "language": self.language,
            "format": "json",
        }
        data = self._get_json(self.base_url, params)
        results = data.get("results") or []
        if not results:
            self._log.warning("No geocoding results for %r", city)
            raise NotFoundError(city)
        candidate = results[0]
        if not isinstance(candidate, dict):
            raise UpstreamError("malformed geocoding result", service=self.service)
        name = candidate.get("name")
        if not name:
            raise UpstreamError("missing name in geocoding result", service=self.service)
        return Location(
            name=str(name),
            latitude=required_float(candidate, "latitude", self.service),
            longitude=required_float(candidate, "longitude", self.service),
        )


__all__ = ["OpenMeteoGeocoder"]
