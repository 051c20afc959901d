from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

import requests
from requests import Response

from ..settings import get_settings


class ProviderError(RuntimeError):
    """Transport-level failure while talking to a remote data source."""


class QuotaExceeded(ProviderError):
    """Raised when a provider reports a quota/usage limit issue."""


@dataclass
class RequestConfig:
    timeout: float = field(default_factory=lambda: get_settings().http_timeout)


class HttpSource(ABC):
    """Base class for measurement sources backed by an HTTP endpoint.

    Each request is bounded by ``RequestConfig.timeout``. Any transport
    problem is raised as :class:`ProviderError`; there is no retry.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._log = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def read(self) -> float:
        """Fetch and return the current temperature."""

    def _handle_response(self, response: Response) -> Response:
        if response.status_code == 429:
            self._log.warning("Weather lookup quota exhausted: %s", response.text)
            raise QuotaExceeded("quota exceeded")
        if response.status_code >= 400:
            self._log.error("Weather lookup returned %s: %s", response.status_code, response.text)
            raise ProviderError(f"HTTP {response.status_code}")
        return response

    def _request(self, method: str, url: str, **kwargs) -> Response:
        try:
            response = self.session.request(
                method,
                url,
                timeout=self.request_config.timeout,
                **kwargs,
            )
        except requests.Timeout as exc:
            self._log.error("Weather lookup timed out after %ss", self.request_config.timeout, exc_info=exc)
            raise ProviderError("timeout") from exc
        except requests.RequestException as exc:
            self._log.error("Weather lookup to %s failed", url, exc_info=exc)
            raise ProviderError("request failed") from exc
        return self._handle_response(response)


__all__ = ["HttpSource", "ProviderError", "QuotaExceeded", "RequestConfig"]
