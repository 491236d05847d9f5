"""Adapter exposing an OpenTelemetry ``BaseInstrumentor`` as an Instrumentation."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Type

from opentelemetry.instrumentation.instrumentor import BaseInstrumentor
from opentelemetry.metrics import MeterProvider
from opentelemetry.trace import TracerProvider

from otel_autoloader.errors import InstrumentationError
from otel_autoloader.instrumentation.base import (
    ConfigLike,
    Instrumentation,
    InstrumentationConfig,
    coerce_config,
)

logger = logging.getLogger(__name__)


def _default_name(instrumentor: BaseInstrumentor) -> str:
    cls = type(instrumentor)
    return f"{cls.__module__}.{cls.__qualname__}"


class InstrumentorAdapter(Instrumentation):
    """
    Wrap a ``BaseInstrumentor`` so it can be auto-loaded.

    The adapter never enables itself. ``get_config().enabled`` reports whether
    the wrapped instrumentor is currently instrumented, so the autoloader
    enables a fresh adapter exactly once.

    Example:
        register_instrumentations([
            InstrumentorAdapter.factory(RequestsInstrumentor),
        ])
    """

    def __init__(
        self,
        instrumentor: BaseInstrumentor,
        instrumentation_name: Optional[str] = None,
        config: Optional[ConfigLike] = None,
        **instrument_kwargs: Any,
    ) -> None:
        self._instrumentor = instrumentor
        self.instrumentation_name = instrumentation_name or _default_name(instrumentor)
        self.instrumentation_version = ""
        self._config = coerce_config(config)
        self._instrument_kwargs: Dict[str, Any] = instrument_kwargs
        self._tracer_provider: Optional[TracerProvider] = None
        self._meter_provider: Optional[MeterProvider] = None

    @classmethod
    def factory(
        cls, instrumentor_cls: Type[BaseInstrumentor], **kwargs: Any
    ) -> Callable[[], "InstrumentorAdapter"]:
        """Return a zero-argument constructor usable as an autoloader option."""

        def build() -> "InstrumentorAdapter":
            return cls(instrumentor_cls(), **kwargs)

        build.__qualname__ = f"{cls.__name__}.factory({instrumentor_cls.__name__})"
        return build

    @property
    def instrumentor(self) -> BaseInstrumentor:
        return self._instrumentor

    def get_config(self) -> InstrumentationConfig:
        return self._config.model_copy(
            update={"enabled": self._instrumentor.is_instrumented_by_opentelemetry}
        )

    def set_tracer_provider(self, tracer_provider: TracerProvider) -> None:
        self._tracer_provider = tracer_provider

    def set_meter_provider(self, meter_provider: MeterProvider) -> None:
        self._meter_provider = meter_provider

    def enable(self) -> None:
        kwargs = dict(self._instrument_kwargs)
        if self._tracer_provider is not None:
            kwargs["tracer_provider"] = self._tracer_provider
        if self._meter_provider is not None:
            kwargs["meter_provider"] = self._meter_provider
        try:
            self._instrumentor.instrument(**kwargs)
        except Exception as e:
            raise InstrumentationError(
                "Failed to instrument",
                details={"instrumentation": self.instrumentation_name, "error": str(e)},
            ) from e
        logger.debug("Instrumented %s", self.instrumentation_name)

    def disable(self) -> None:
        try:
            self._instrumentor.uninstrument()
        except Exception as e:
            raise InstrumentationError(
                "Failed to uninstrument",
                details={"instrumentation": self.instrumentation_name, "error": str(e)},
            ) from e
        logger.debug("Uninstrumented %s", self.instrumentation_name)
