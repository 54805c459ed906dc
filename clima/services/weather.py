from __future__ import annotations

import logging
from typing import Optional

from ..abstractions import ConditionsFetcher, LocationResolver
from ..entities import WeatherReport
from ..errors import NotFoundError, UpstreamError
from .report import synthesize


class WeatherReportService:
    """Geocode a city, fetch its current conditions and build the report."""

    def __init__(
        self,
        *,
        resolver: LocationResolver,
        fetcher: ConditionsFetcher,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.resolver = resolver
        self.fetcher = fetcher
        self._log = logger or logging.getLogger(self.__class__.__name__)

    # Public API ---------------------------------------------------------
    def get_report(self, city: str) -> WeatherReport:
        if not city or not city.strip():
            self._log.warning("Empty city name requested")
            raise NotFoundError(city)

        self._log.info("Fetching weather for %r", city)
        try:
            location = self.resolver.resolve(city)
            self._log.info(
                "Resolved %r to %s (%.4f, %.4f)", city, location.name, location.latitude, location.longitude
            )
            raw = self.fetcher.current(location.latitude, location.longitude)
        except NotFoundError:
            self._log.warning("City %r not found", city)
            raise
        except UpstreamError as exc:
            self._log.error("Error fetching weather data for %r from %s: %s", city, exc.service, exc)
            raise
        except Exception as exc:  # noqa: BLE001 - any other stage failure is reported as upstream
            self._log.error("Error fetching weather data for %r", city, exc_info=exc)
            raise UpstreamError(str(exc) or exc.__class__.__name__) from exc

        return synthesize(city, location, raw)


__all__ = ["WeatherReportService"]
