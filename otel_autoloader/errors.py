"""Autoloader error hierarchy and exceptions."""

from __future__ import annotations

from typing import Any, Dict, Optional


class AutoLoaderError(Exception):
    """Base exception for all autoloader errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class ConfigError(AutoLoaderError):
    """Raised when an instrumentation configuration is invalid."""
    pass


class InvalidOptionError(AutoLoaderError):
    """Raised when an instrumentation option can't be resolved (strict mode only)."""
    pass


class InstrumentationError(AutoLoaderError):
    """Raised when an underlying instrumentor fails to instrument/uninstrument."""
    pass
