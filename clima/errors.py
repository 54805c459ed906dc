from __future__ import annotations

from typing import Optional


class WeatherError(RuntimeError):
    """Base error for the weather lookup pipeline."""

    @property
    def user_message(self) -> str:
        return str(self)


class NotFoundError(WeatherError):
    """Raised when geocoding returns no candidate for a city name."""

    def __init__(self, city: str) -> None:
        super().__init__(f"city not found: {city!r}")
        self.city = city

    @property
    def user_message(self) -> str:
        return f"Cidade {self.city} não encontrada."


class UpstreamError(WeatherError):
    """Raised on transport, status or payload failures of an upstream API.

    The lower level exception, when there is one, is chained as ``__cause__``.
    """

    MESSAGE_PREFIX = "Erro ao buscar dados do climáticos."

    def __init__(self, message: str, service: Optional[str] = None) -> None:
        super().__init__(message)
        self.service = service

    @property
    def cause(self) -> Optional[BaseException]:
        return self.__cause__

    @property
    def user_message(self) -> str:
        return f"{self.MESSAGE_PREFIX} {self}"


__all__ = ["NotFoundError", "UpstreamError", "WeatherError"]
