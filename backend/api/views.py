"""REST API views for city weather reports."""
from __future__ import annotations

from functools import lru_cache

from django.conf import settings
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from clima.errors import NotFoundError, UpstreamError
from clima.tool import WeatherTool


@lru_cache(maxsize=1)
def get_weather_tool() -> WeatherTool:
    return WeatherTool.from_urls(
        geocoding_url=settings.OPEN_METEO_GEOCODING_URL,
        forecast_url=settings.OPEN_METEO_FORECAST_URL,
        timeout=settings.WEATHER_HTTP_TIMEOUT,
    )


class WeatherView(APIView):
    """Provide the current weather report for a city."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return the weather report for the ``city`` query parameter."""
        city = request.query_params.get("city")
        if city is None:
            return Response({"detail": "city query parameter is required"}, status=status.HTTP_400_BAD_REQUEST)

        try:
            payload = get_weather_tool().execute(city)
        except NotFoundError as exc:
            return Response({"detail": exc.user_message}, status=status.HTTP_404_NOT_FOUND)
        except UpstreamError as exc:
            return Response({"detail": exc.user_message}, status=status.HTTP_502_BAD_GATEWAY)
        return Response(payload, status=status.HTTP_200_OK)
