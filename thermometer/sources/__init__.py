from .base import HttpSource, ProviderError, QuotaExceeded, RequestConfig
from .brightsky import BrightSkySource
from .simple import ConstantSource, LinearRampSource, RandomSource, SinusoidalSource
from .wrappers import FahrenheitSource, LoggingSource, RoundingSource, TransformingSource

__all__ = [
    "BrightSkySource",
    "ConstantSource",
    "FahrenheitSource",
    "HttpSource",
    "LinearRampSource",
    "LoggingSource",
    "ProviderError",
    "QuotaExceeded",
    "RandomSource",
    "RequestConfig",
    "RoundingSource",
    "SinusoidalSource",
    "TransformingSource",
]
