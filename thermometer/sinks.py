from __future__ import annotations

import logging
import sys
from typing import List, Optional, TextIO

from .abstractions import OutputSink


class StreamSink:
    """Writes each message as a line to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def emit(self, message: str) -> None:
        stream = self._stream or sys.stdout
        stream.write(f"{message}\n")


class LoggingSink:
    """Routes output through the logging system instead of a raw stream."""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.INFO) -> None:
        self._log = logger or logging.getLogger("thermometer.output")
        self._level = level

    def emit(self, message: str) -> None:
        self._log.log(self._level, "%s", message)


class RecordingSink:
    """Keeps emitted messages in memory, in emission order."""

    def __init__(self) -> None:
        self.messages: List[str] = []

    def emit(self, message: str) -> None:
        self.messages.append(message)

    def clear(self) -> None:
        self.messages.clear()


def default_sink(sink: Optional[OutputSink] = None) -> OutputSink:
    return sink if sink is not None else StreamSink()


__all__ = ["StreamSink", "LoggingSink", "RecordingSink", "default_sink"]
