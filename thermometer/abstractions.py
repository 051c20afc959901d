"""Core abstractions for the thermometer domain."""
from __future__ import annotations

from typing import Protocol


class MeasurementSource(Protocol):
    """Anything that can produce a temperature reading on demand."""

    def read(self) -> float:
        """Return one temperature value."""
        ...


class Reactor(Protocol):
    """Receives every reading broadcast by a thermometer."""

    def on_reading(self, value: float) -> None:
        """React to a single reading."""
        ...


class OutputSink(Protocol):
    """Destination for the textual narration of a measurement run."""

    def emit(self, message: str) -> None:
        """Write one line of output."""
        ...
