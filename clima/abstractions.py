"""Capability interfaces for the two network stages of a weather lookup."""
from __future__ import annotations

from typing import Protocol

from .entities import Location, RawConditions


class LocationResolver(Protocol):
    """Turns a city name into its best-ranked location."""

    def resolve(self, city: str) -> Location:
        """Return the top candidate or raise ``NotFoundError``."""
        ...


class ConditionsFetcher(Protocol):
    """Returns current conditions for a pair of coordinates."""

    def current(self, latitude: float, longitude: float) -> RawConditions:
        """Fetch current conditions or raise ``UpstreamError``."""
        ...


__all__ = ["ConditionsFetcher", "LocationResolver"]
