"""Tool descriptor exposed to tool-invocation hosts (MCP, REST, CLI)."""
from __future__ import annotations

from typing import Any, Dict, Optional

from .providers import OpenMeteoGeocoder, OpenMeteoProvider, RequestConfig
from .services.weather import WeatherReportService

TOOL_NAME = "clima_api"
TOOL_DESCRIPTION = "Informações sobre o clima de uma cidade (usando api Open-Meteo)"
CITY_FIELD_DESCRIPTION = (
    "Nome da cidade para a qual você deseja obter informações sobre o clima "
    "(Ex: São Paulo, Rio de Janeiro, etc.)"
)


class WeatherTool:
    name = TOOL_NAME
    description = TOOL_DESCRIPTION

    def __init__(self, service: WeatherReportService) -> None:
        self.service = service

    @classmethod
    def from_urls(
        cls,
        geocoding_url: Optional[str] = None,
        forecast_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> "WeatherTool":
        config = RequestConfig() if timeout is None else RequestConfig(timeout=timeout)
        service = WeatherReportService(
            resolver=OpenMeteoGeocoder(base_url=geocoding_url, request_config=config),
            fetcher=OpenMeteoProvider(base_url=forecast_url, request_config=config),
        )
        return cls(service)

    def execute(self, city: str) -> Dict[str, Any]:
        """Return the serialized report; failures raise ``WeatherError``."""
        return self.service.get_report(city).as_dict()


__all__ = ["CITY_FIELD_DESCRIPTION", "TOOL_DESCRIPTION", "TOOL_NAME", "WeatherTool"]
