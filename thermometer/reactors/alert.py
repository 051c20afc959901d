from __future__ import annotations

from typing import Optional

from ..abstractions import OutputSink
from ..sinks import default_sink


class ThresholdAlert:
    """Emits ``message`` for every reading at or above ``threshold``."""

    def __init__(self, threshold: float, message: str, sink: Optional[OutputSink] = None) -> None:
        self.threshold = threshold
        self.message = message
        self._sink = default_sink(sink)

    def on_reading(self, value: float) -> None:
        if value >= self.threshold:
            self._sink.emit(self.message)


__all__ = ["ThresholdAlert"]
