"""Basic smoke tests for the autoloader package."""

import logging

import pytest

import otel_autoloader
from otel_autoloader import runtime_config


def test_version_exposed():
    """Smoke test: version is accessible."""
    assert isinstance(otel_autoloader.__version__, str)
    assert len(otel_autoloader.__version__) > 0


def test_public_api_exported():
    """Smoke test: every name in __all__ resolves."""
    for name in otel_autoloader.__all__:
        assert getattr(otel_autoloader, name) is not None


def test_error_details_rendered():
    err = otel_autoloader.InvalidOptionError("bad option", details={"path": "options[0]"})
    assert str(err) == "bad option (path=options[0])"
    assert str(otel_autoloader.AutoLoaderError("plain")) == "plain"
    assert isinstance(err, otel_autoloader.AutoLoaderError)


def test_debug_logs_each_option(caplog):
    """Debug mode traces the classification of every option."""
    runtime_config.set_debug(True)
    try:
        with caplog.at_level(logging.DEBUG, logger="otel_autoloader.autoloader_utils"):
            otel_autoloader.parse_instrumentation_options([[42]])
    finally:
        runtime_config.reset()

    messages = [r.getMessage() for r in caplog.records]
    assert any("options[0][0]: unrecognized 42" in m for m in messages)


def test_reset_restores_defaults():
    runtime_config.set_strict_options(True)
    runtime_config.set_warn_on_unrecognized(False)
    runtime_config.reset()
    assert runtime_config.get_strict_options() is False
    assert runtime_config.get_warn_on_unrecognized() is True
    assert runtime_config.get_debug() is False


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
