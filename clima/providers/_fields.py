from __future__ import annotations

from typing import Any, Mapping

from ..errors import UpstreamError


def required_float(block: Mapping[str, Any], key: str, service: str) -> float:
    value = block.get(key)
    if value is None:
        raise UpstreamError(f"missing {key}", service=service)
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise UpstreamError(f"invalid {key}: {value!r}", service=service) from exc


def required_int(block: Mapping[str, Any], key: str, service: str) -> int:
    return int(required_float(block, key, service))


__all__ = ["required_float", "required_int"]
