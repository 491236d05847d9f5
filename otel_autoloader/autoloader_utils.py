"""Parse instrumentation options and wire instrumentations to providers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from opentelemetry.metrics import MeterProvider
from opentelemetry.trace import TracerProvider

from otel_autoloader import runtime_config
from otel_autoloader.errors import InvalidOptionError
from otel_autoloader.instrumentation.base import Instrumentation
from otel_autoloader.options import (
    InstrumentationOption,
    OptionKind,
    describe_path,
    flatten_options,
)

logger = logging.getLogger(__name__)


@dataclass
class AutoLoaderResult:
    instrumentations: List[Instrumentation] = field(default_factory=list)


def parse_instrumentation_options(
    options: Optional[Sequence[InstrumentationOption]] = None,
    *,
    strict: Optional[bool] = None,
) -> AutoLoaderResult:
    """
    Flatten options into a list of instrumentation instances.

    Nested lists are flattened in order, classes and factories are called with
    no arguments, and instances are passed through. Anything else is dropped
    with a warning, or rejected when ``strict`` is set (defaults to
    ``runtime_config.get_strict_options()``).

    Args:
        options: Possibly nested list of classes, factories and instances
        strict: Raise instead of dropping unrecognized options

    Returns:
        AutoLoaderResult with the flattened instrumentations

    Raises:
        InvalidOptionError: on an unrecognized option in strict mode
    """
    if strict is None:
        strict = runtime_config.get_strict_options()
    debug = runtime_config.get_debug()
    leaves = flatten_options(options or [])

    # Reject before constructing anything: constructors may self-enable.
    if strict:
        for path, classified in leaves:
            if classified.kind is OptionKind.UNRECOGNIZED:
                raise InvalidOptionError(
                    "Unrecognized instrumentation option",
                    details={"path": describe_path(path), "option": repr(classified.value)},
                )

    instrumentations: List[Instrumentation] = []
    for path, classified in leaves:
        option = classified.value
        if debug:
            logger.debug("%s: %s %r", describe_path(path), classified.kind.value, option)

        if classified.kind is OptionKind.CONSTRUCTIBLE:
            instrumentations.append(option())
        elif classified.kind is OptionKind.INSTANCE:
            instrumentations.append(option)
        elif runtime_config.get_warn_on_unrecognized():
            logger.warning(
                "Ignoring unrecognized instrumentation option at %s: %s",
                describe_path(path),
                type(option).__name__,
            )

    return AutoLoaderResult(instrumentations=instrumentations)


def enable_instrumentations(
    instrumentations: Iterable[Instrumentation],
    tracer_provider: Optional[TracerProvider] = None,
    meter_provider: Optional[MeterProvider] = None,
) -> None:
    """
    Attach providers to each instrumentation and enable it.

    Instrumentations usually enable themselves on creation, so ``enable()`` is
    only called on those whose config says ``enabled`` is false.
    """
    for instrumentation in instrumentations:
        if tracer_provider is not None:
            instrumentation.set_tracer_provider(tracer_provider)
        if meter_provider is not None:
            instrumentation.set_meter_provider(meter_provider)
        if not instrumentation.get_config().enabled:
            logger.debug("Enabling instrumentation %s", instrumentation.instrumentation_name)
            instrumentation.enable()


def disable_instrumentations(instrumentations: Iterable[Instrumentation]) -> None:
    """Disable every instrumentation, whatever its current state."""
    for instrumentation in instrumentations:
        logger.debug("Disabling instrumentation %s", instrumentation.instrumentation_name)
        instrumentation.disable()
