from __future__ import annotations

from .report import DESCRIPTION_TEMPLATE, round_half_away, synthesize
from .weather import WeatherReportService

__all__ = ["DESCRIPTION_TEMPLATE", "WeatherReportService", "round_half_away", "synthesize"]
