from .alert import ThresholdAlert
from .heating import HeatingController

__all__ = ["HeatingController", "ThresholdAlert"]
