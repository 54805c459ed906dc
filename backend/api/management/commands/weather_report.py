"""Management command to fetch a city report using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from backend.api.views import get_weather_tool
from clima.errors import WeatherError


class Command(BaseCommand):
    help = "Print the current weather report for a city"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--city", type=str, required=True, help="City name, e.g. 'São Paulo'")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        try:
            payload = get_weather_tool().execute(options["city"])
        except WeatherError as exc:
            raise CommandError(exc.user_message) from exc
        self.stdout.write(json.dumps(payload, ensure_ascii=False))
