"""Metrics hook and counter names for configuration loads and failures."""

from . import names
from .base import MetricsHook, NoOpMetricsHook

__all__ = [
    "MetricsHook",
    "NoOpMetricsHook",
    "names",
]
