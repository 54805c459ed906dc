"""WMO weather interpretation codes as used by Open-Meteo, with Portuguese labels."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

UNKNOWN_CONDITION = "Desconhecido"

WEATHER_CONDITIONS: Mapping[int, str] = MappingProxyType(
    {
        0: "Céu limpo",
        1: "Principalmente claro",
        2: "Parcialmente nublado",
        3: "Nublado",
        45: "Nebuloso",
        48: "Neblina depositante",
        51: "Chuvisco leve",
        53: "Chuvisco moderado",
        55: "Chuvisco denso",
        61: "Chuvas leves",
        63: "Chuvas moderadas",
        65: "Chuvas fortes",
        71: "Neve leve",
        73: "Neve moderada",
        75: "Neve forte",
        77: "Grãos de neve",
        # showers reuse the rain/snow wording
        80: "Chuvas leves",
        81: "Chuvas moderadas",
        82: "Chuvas torrenciais",
        85: "Neve leve",
        86: "Neve forte",
        95: "Tempestade",
        96: "Tempestade com granizo leve",
        99: "Tempestade com granizo forte",
    }
)


def classify(code: int) -> str:
    return WEATHER_CONDITIONS.get(code, UNKNOWN_CONDITION)


__all__ = ["UNKNOWN_CONDITION", "WEATHER_CONDITIONS", "classify"]
