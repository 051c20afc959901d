from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..abstractions import MeasurementSource, OutputSink
from ..sinks import default_sink


class TransformingSource(ABC):
    """A measurement source that post-processes the reading of another one.

    The wrapped source is read exactly once per :meth:`read`; whatever it
    raises propagates unchanged.
    """

    def __init__(self, source: MeasurementSource) -> None:
        self._source = source

    @property
    def inner(self) -> MeasurementSource:
        return self._source

    def read(self) -> float:
        return self.transform(self._source.read())

    @abstractmethod
    def transform(self, value: float) -> float:
        """Turn the wrapped reading into this layer's reading."""


class LoggingSource(TransformingSource):
    """Announces every reading on an output sink and passes it through."""

    def __init__(self, source: MeasurementSource, sink: Optional[OutputSink] = None) -> None:
        super().__init__(source)
        self._sink = default_sink(sink)

    def transform(self, value: float) -> float:
        self._sink.emit(f"Current temperature: {value}")
        return value


class RoundingSource(TransformingSource):
    """Rounds to a whole number, ties to even (``2.5 -> 2.0``, ``3.5 -> 4.0``)."""

    def transform(self, value: float) -> float:
        return float(round(value))


class FahrenheitSource(TransformingSource):
    """Converts a Celsius reading to Fahrenheit."""

    def transform(self, value: float) -> float:
        return value * 9.0 / 5.0 + 32.0


__all__ = ["TransformingSource", "LoggingSource", "RoundingSource", "FahrenheitSource"]
