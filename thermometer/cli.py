"""Command-line demonstration of a thermometer run."""
from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .abstractions import MeasurementSource, OutputSink
from .logging_config import configure_logging
from .reactors import HeatingController, ThresholdAlert
from .services.thermometer import Thermometer
from .sinks import StreamSink
from .sources import (
    BrightSkySource,
    ConstantSource,
    FahrenheitSource,
    LinearRampSource,
    LoggingSource,
    ProviderError,
    RandomSource,
    RoundingSource,
    SinusoidalSource,
)


SOURCE_CHOICES = ("random", "constant", "ramp", "sine", "brightsky")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="thermometer", description="Run a simulated thermometer")
    parser.add_argument("--times", type=int, default=20, help="Number of measurements")
    parser.add_argument("--source", choices=SOURCE_CHOICES, default="random", help="Base measurement source")
    parser.add_argument("--min", dest="minimum", type=float, default=10.0, help="Lower bound for random readings")
    parser.add_argument("--max", dest="maximum", type=float, default=50.0, help="Upper bound for random readings")
    parser.add_argument("--value", type=float, default=21.0, help="Constant reading, or ramp start")
    parser.add_argument("--seed", type=int, default=None, help="Seed for random readings")
    parser.add_argument("--lat", type=float, default=52.52, help="Latitude for brightsky")
    parser.add_argument("--lon", type=float, default=13.4, help="Longitude for brightsky")
    parser.add_argument("--fahrenheit", action="store_true", help="Convert readings to Fahrenheit")
    parser.add_argument("--no-round", dest="round", action="store_false", help="Keep fractional readings")
    parser.add_argument("--alert-at", type=float, default=30.0, help="Alert threshold")
    parser.add_argument("--alert-message", default="Pretty hot!", help="Alert message")
    parser.add_argument("--heating-on", type=float, default=19.0, help="Average below which heating turns on")
    parser.add_argument("--heating-off", type=float, default=23.0, help="Average above which heating turns off")
    parser.add_argument("--log-level", default=None, help="Diagnostic log level (default from environment)")
    return parser


def build_base_source(options: argparse.Namespace) -> MeasurementSource:
    if options.source == "constant":
        return ConstantSource(options.value)
    if options.source == "ramp":
        return LinearRampSource(options.value)
    if options.source == "sine":
        return SinusoidalSource(amplitude=10.0, frequency=0.001, phase=0.0)
    if options.source == "brightsky":
        return BrightSkySource(options.lat, options.lon)
    return RandomSource(options.minimum, options.maximum, seed=options.seed)


def build_source(options: argparse.Namespace, sink: OutputSink) -> MeasurementSource:
    source = build_base_source(options)
    if options.fahrenheit:
        source = FahrenheitSource(source)
    if options.round:
        source = RoundingSource(source)
    return LoggingSource(source, sink=sink)


def run(options: argparse.Namespace, sink: OutputSink) -> None:
    thermometer = Thermometer(build_source(options, sink), sink=sink)
    thermometer.add_reactor(ThresholdAlert(options.alert_at, options.alert_message, sink=sink))
    thermometer.add_reactor(HeatingController(options.heating_on, options.heating_off, sink=sink))
    thermometer.measure(options.times)


def main(argv: Optional[Sequence[str]] = None, sink: Optional[OutputSink] = None) -> int:
    options = build_parser().parse_args(argv)
    configure_logging(options.log_level)
    try:
        run(options, sink or StreamSink())
    except ProviderError as exc:
        print(f"error: weather lookup failed ({exc})", file=sys.stderr)
        return 1
    return 0


__all__ = ["build_parser", "build_source", "main", "run"]
