"""Instrumentation capability set, base class and adapters."""

from otel_autoloader.instrumentation.base import (
    Instrumentation,
    InstrumentationBase,
    InstrumentationConfig,
)
from otel_autoloader.instrumentation.instrumentor import InstrumentorAdapter

__all__ = [
    "Instrumentation",
    "InstrumentationBase",
    "InstrumentationConfig",
    "InstrumentorAdapter",
]
