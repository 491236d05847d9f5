"""Auto-loading of OpenTelemetry instrumentations."""

from otel_autoloader.autoloader import register_instrumentations
from otel_autoloader.autoloader_utils import (
    AutoLoaderResult,
    disable_instrumentations,
    enable_instrumentations,
    parse_instrumentation_options,
)
from otel_autoloader.errors import (
    AutoLoaderError,
    ConfigError,
    InstrumentationError,
    InvalidOptionError,
)
from otel_autoloader.instrumentation import (
    Instrumentation,
    InstrumentationBase,
    InstrumentationConfig,
    InstrumentorAdapter,
)
from otel_autoloader.options import ClassifiedOption, OptionKind, classify_option

__version__ = "0.1.0"

__all__ = [
    "register_instrumentations",
    "parse_instrumentation_options",
    "enable_instrumentations",
    "disable_instrumentations",
    "AutoLoaderResult",
    "Instrumentation",
    "InstrumentationBase",
    "InstrumentationConfig",
    "InstrumentorAdapter",
    "OptionKind",
    "ClassifiedOption",
    "classify_option",
    "AutoLoaderError",
    "ConfigError",
    "InvalidOptionError",
    "InstrumentationError",
]
