"""Thermometer that measures from a source and broadcasts to reactors."""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ..abstractions import MeasurementSource, OutputSink, Reactor
from ..sinks import default_sink


logger = logging.getLogger(__name__)


class Thermometer:
    """Pulls readings from one source and pushes each one to its reactors.

    Reactors are notified synchronously, in registration order. Each
    broadcast iterates over a snapshot of the registrations, so a reactor
    that adds or removes reactors while handling a reading only changes
    who receives the *next* reading.
    """

    def __init__(self, source: MeasurementSource, sink: Optional[OutputSink] = None) -> None:
        self._source = source
        self._sink = default_sink(sink)
        self._reactors: List[Reactor] = []

    # Public API ---------------------------------------------------------
    @property
    def source(self) -> MeasurementSource:
        return self._source

    @source.setter
    def source(self, source: MeasurementSource) -> None:
        self.set_source(source)

    @property
    def reactors(self) -> Tuple[Reactor, ...]:
        return tuple(self._reactors)

    def set_source(self, source: MeasurementSource) -> None:
        logger.debug("Switching source to %s", source.__class__.__name__)
        self._source = source

    def add_reactor(self, reactor: Reactor) -> None:
        self._reactors.append(reactor)

    def remove_reactor(self, reactor: Reactor) -> None:
        try:
            self._reactors.remove(reactor)
        except ValueError:
            logger.debug("Reactor %r was not registered", reactor)

    def measure(self, times: int) -> None:
        for _ in range(times):
            value = self._source.read()
            self._sink.emit(str(value))
            self._notify(value)

    # Helpers ------------------------------------------------------------
    def _notify(self, value: float) -> None:
        reactors = tuple(self._reactors)
        logger.debug("Broadcasting %s to %d reactor(s)", value, len(reactors))
        for reactor in reactors:
            reactor.on_reading(value)


__all__ = ["Thermometer"]
