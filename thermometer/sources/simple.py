"""Self-contained measurement sources that need no external data."""
from __future__ import annotations

import math
import random
import time
from typing import Callable, Optional


def _epoch_millis() -> float:
    return time.time() * 1000.0


class ConstantSource:
    """Always reads the same value."""

    def __init__(self, value: float) -> None:
        self.value = value

    def read(self) -> float:
        return self.value


class LinearRampSource:
    """Rises by ``step`` on every read, starting just above ``start``."""

    def __init__(self, start: float, step: float = 0.5) -> None:
        self.current = start
        self.step = step

    def read(self) -> float:
        self.current += self.step
        return self.current


class RandomSource:
    """Uniformly distributed readings in ``[minimum, maximum)``.

    Pass ``rng`` or ``seed`` for reproducible runs. The bounds are not
    checked; swapped bounds simply yield values in ``(maximum, minimum]``.
    """

    def __init__(
        self,
        minimum: float,
        maximum: float,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.minimum = minimum
        self.maximum = maximum
        self._rng = rng or random.Random(seed)

    def read(self) -> float:
        return self.minimum + (self.maximum - self.minimum) * self._rng.random()


class SinusoidalSource:
    """``amplitude * sin(frequency * now + phase)`` with ``now`` in epoch milliseconds."""

    def __init__(
        self,
        amplitude: float,
        frequency: float,
        phase: float,
        time_func: Callable[[], float] = _epoch_millis,
    ) -> None:
        self.amplitude = amplitude
        self.frequency = frequency
        self.phase = phase
        self._time_func = time_func

    def read(self) -> float:
        return self.amplitude * math.sin(self.frequency * self._time_func() + self.phase)


__all__ = ["ConstantSource", "LinearRampSource", "RandomSource", "SinusoidalSource"]
