from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ..abstractions import OutputSink
from ..sinks import default_sink


WINDOW_SIZE = 10


class HeatingController:
    """Switches heating based on the mean of consecutive blocks of readings.

    Readings are collected until ``window`` of them have arrived. The block
    average is then emitted, followed by ``"Heating off"`` when it is above
    ``off_threshold`` or ``"Heating on"`` when it is below ``on_threshold``.
    The buffer is emptied afterwards, so windows never overlap.

    The thresholds are used as given. With ``on_threshold >= off_threshold``
    some averages trigger neither message.
    """

    def __init__(
        self,
        on_threshold: float,
        off_threshold: float,
        sink: Optional[OutputSink] = None,
        window: int = WINDOW_SIZE,
    ) -> None:
        self.on_threshold = on_threshold
        self.off_threshold = off_threshold
        self.window = window
        self._sink = default_sink(sink)
        self._readings: List[float] = []
        self._log = logging.getLogger(self.__class__.__name__)

    @property
    def buffered(self) -> Tuple[float, ...]:
        return tuple(self._readings)

    def on_reading(self, value: float) -> None:
        self._readings.append(value)
        if len(self._readings) < self.window:
            return
        average = sum(self._readings) / len(self._readings)
        self._sink.emit(f"Average temperature of the last {len(self._readings)} readings: {average}")
        if average > self.off_threshold:
            self._sink.emit("Heating off")
        elif average < self.on_threshold:
            self._sink.emit("Heating on")
        else:
            self._log.debug("Average %s within [%s, %s]", average, self.on_threshold, self.off_threshold)
        self._readings.clear()


__all__ = ["HeatingController", "WINDOW_SIZE"]
