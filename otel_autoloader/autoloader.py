"""Register instrumentations against tracer/meter providers."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from opentelemetry import metrics, trace
from opentelemetry.metrics import MeterProvider
from opentelemetry.trace import TracerProvider

from otel_autoloader.autoloader_utils import (
    disable_instrumentations,
    enable_instrumentations,
    parse_instrumentation_options,
)
from otel_autoloader.options import InstrumentationOption

logger = logging.getLogger(__name__)


def register_instrumentations(
    instrumentations: Optional[Sequence[InstrumentationOption]] = None,
    tracer_provider: Optional[TracerProvider] = None,
    meter_provider: Optional[MeterProvider] = None,
) -> Callable[[], None]:
    """
    Load and enable instrumentations.

    Providers default to the globally registered ones. Returns a callable that
    disables everything that was loaded here.

    Example:
        unload = register_instrumentations(
            [MyInstrumentation, [OtherInstrumentation, existing]],
            tracer_provider=provider,
        )
        ...
        unload()
    """
    if tracer_provider is None:
        tracer_provider = trace.get_tracer_provider()
    if meter_provider is None:
        meter_provider = metrics.get_meter_provider()

    loaded = parse_instrumentation_options(instrumentations).instrumentations
    enable_instrumentations(loaded, tracer_provider, meter_provider)
    logger.debug("Registered %d instrumentation(s)", len(loaded))

    def unload() -> None:
        disable_instrumentations(loaded)

    return unload
