from __future__ import annotations

import logging
from typing import Optional

from .base import HttpSource
from ..settings import get_settings


class BrightSkySource(HttpSource):
    """Current air temperature at a location, from the Bright Sky API.

    Every :meth:`read` issues one blocking GET. A response without a usable
    ``weather.temperature`` value reads as ``0.0``; transport failures are
    raised as :class:`~thermometer.sources.base.ProviderError`.
    """

    def __init__(
        self,
        latitude: float,
        longitude: float,
        base_url: Optional[str] = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.latitude = latitude
        self.longitude = longitude
        self.base_url = base_url or get_settings().weather_url
        self._log = logging.getLogger(self.__class__.__name__)

    def read(self) -> float:
        params = {"lat": self.latitude, "lon": self.longitude}
        response = self._request("GET", self.base_url, params=params)
        temperature = self._extract_temperature(response)
        if temperature is None:
            self._log.warning(
                "No temperature in response for %s,%s; reading 0.0", self.latitude, self.longitude
            )
            return 0.0
        return temperature

    # helpers ------------------------------------------------------------
    def _extract_temperature(self, response) -> Optional[float]:
        try:
            data = response.json()
        except ValueError:
            self._log.debug("Response body is not JSON: %.200s", response.text)
            return None
        if not isinstance(data, dict):
            return None
        weather = data.get("weather")
        if not isinstance(weather, dict):
            return None
        return _safe_float(weather.get("temperature"))


def _safe_float(value: Optional[object]) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


__all__ = ["BrightSkySource"]
