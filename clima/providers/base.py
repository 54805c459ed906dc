from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from requests import Response

from ..errors import UpstreamError


@dataclass
class RequestConfig:
    timeout: float = 10.0
    user_agent: str = "clima-api/1.0"


class HttpProvider:
    """Base class that applies timeouts and error mapping for HTTP providers.

    A failed request is never retried; every failure surfaces as ``UpstreamError``.
    """

    service = "http"

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or self._build_session(self.request_config)
        self._log = logging.getLogger(self.__class__.__name__)

    def _build_session(self, config: RequestConfig) -> requests.Session:
        session = requests.Session()
        session.headers["User-Agent"] = config.user_agent
        return session

    def _handle_response(self, response: Response) -> Response:
        if response.status_code >= 400:
            self._log.error("%s returned %s: %s", self.service, response.status_code, response.text)
            raise UpstreamError(f"HTTP {response.status_code}", service=self.service)
        return response

    def _get(self, url: str, params: Dict[str, Any]) -> Response:
        try:
            response = self.session.get(
                url,
                params=params,
                timeout=self.request_config.timeout,
            )
        except requests.Timeout as exc:
            self._log.error("Request to %s timed out", self.service, exc_info=exc)
            raise UpstreamError("timeout", service=self.service) from exc
        except requests.RequestException as exc:
            self._log.error("Request to %s failed", self.service, exc_info=exc)
            raise UpstreamError(f"request failed: {exc}", service=self.service) from exc
        return self._handle_response(response)

    def _get_json(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        response = self._get(url, params)
        try:
            data = response.json()
        except ValueError as exc:
            self._log.error("Failed to decode JSON", exc_info=exc)
            raise UpstreamError("invalid json", service=self.service) from exc
        if not isinstance(data, dict):
            raise UpstreamError("unexpected payload", service=self.service)
        return data


__all__ = ["HttpProvider", "RequestConfig"]
