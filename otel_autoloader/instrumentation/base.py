"""Instrumentation capability set and a reusable base class."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Union

from opentelemetry import metrics, trace
from opentelemetry.metrics import Meter, MeterProvider
from opentelemetry.trace import Tracer, TracerProvider
from pydantic import BaseModel, ConfigDict, ValidationError

from otel_autoloader.errors import ConfigError

logger = logging.getLogger(__name__)


class InstrumentationConfig(BaseModel):
    """
    Configuration shared by every instrumentation.

    Only ``enabled`` is known here; concrete instrumentations may carry any
    extra keys they need.
    """

    model_config = ConfigDict(extra="allow")

    enabled: bool = True


ConfigLike = Union[InstrumentationConfig, Mapping[str, Any]]


def coerce_config(config: Optional[ConfigLike]) -> InstrumentationConfig:
    """
    Validate ``config`` into an InstrumentationConfig.

    Raises:
        ConfigError: if the mapping doesn't validate
    """
    if config is None:
        return InstrumentationConfig()
    if isinstance(config, InstrumentationConfig):
        return config
    try:
        return InstrumentationConfig.model_validate(dict(config))
    except (TypeError, ValueError, ValidationError) as e:
        raise ConfigError(
            "Invalid instrumentation config",
            details={"error": str(e)},
        ) from e


class Instrumentation(ABC):
    """
    Capability set consumed by the autoloader.

    The autoloader only ever calls these members. Objects that don't subclass
    this but expose a truthy ``instrumentation_name`` are still accepted.
    """

    instrumentation_name: str = ""
    instrumentation_version: str = ""

    @abstractmethod
    def get_config(self) -> InstrumentationConfig:
        """Return the current config; must expose an ``enabled`` flag."""

    @abstractmethod
    def enable(self) -> None:
        """Start producing telemetry."""

    @abstractmethod
    def disable(self) -> None:
        """Stop producing telemetry."""

    @abstractmethod
    def set_tracer_provider(self, tracer_provider: TracerProvider) -> None:
        """Route spans through ``tracer_provider``."""

    @abstractmethod
    def set_meter_provider(self, meter_provider: MeterProvider) -> None:
        """Route metrics through ``meter_provider``."""


class InstrumentationBase(Instrumentation):
    """
    Base class for concrete instrumentations.

    Tracer and meter start out bound to the global providers and are rebound
    when a provider is attached. If the config is enabled, the instance
    enables itself at the end of ``__init__``, so subclasses must set up any
    state ``enable()`` relies on before calling ``super().__init__``.

    ``enable()``/``disable()`` never rewrite ``config.enabled``: the flag is
    the user's preference, and the autoloader reads it to decide whether an
    instance still needs enabling.
    """

    def __init__(
        self,
        instrumentation_name: str,
        instrumentation_version: str = "",
        config: Optional[ConfigLike] = None,
    ) -> None:
        self.instrumentation_name = instrumentation_name
        self.instrumentation_version = instrumentation_version
        self._config = coerce_config(config)
        self._tracer: Tracer = trace.get_tracer(
            instrumentation_name, instrumentation_version or None
        )
        self._meter: Meter = metrics.get_meter(
            instrumentation_name, instrumentation_version or None
        )
        self._update_metric_instruments()

        if self._config.enabled:
            logger.debug("Self-enabling instrumentation %s", instrumentation_name)
            self.enable()

    @property
    def tracer(self) -> Tracer:
        return self._tracer

    @property
    def meter(self) -> Meter:
        return self._meter

    def get_config(self) -> InstrumentationConfig:
        return self._config

    def set_config(self, config: Optional[ConfigLike] = None) -> None:
        self._config = coerce_config(config)

    def set_tracer_provider(self, tracer_provider: TracerProvider) -> None:
        self._tracer = tracer_provider.get_tracer(
            self.instrumentation_name, self.instrumentation_version or None
        )

    def set_meter_provider(self, meter_provider: MeterProvider) -> None:
        self._meter = meter_provider.get_meter(
            self.instrumentation_name, self.instrumentation_version or None
        )
        self._update_metric_instruments()

    def _update_metric_instruments(self) -> None:
        """Hook for subclasses to (re)create metric instruments from ``self.meter``."""
        return None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.instrumentation_name!r}, "
            f"version={self.instrumentation_version!r}, enabled={self._config.enabled})"
        )
