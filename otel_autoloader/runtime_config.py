"""Runtime configuration state management."""

_DEFAULTS = {
    "strict_options": False,
    "warn_on_unrecognized": True,
    "debug": False,
}

# Global runtime configuration state
_config = dict(_DEFAULTS)


def set_strict_options(value: bool) -> None:
    _config["strict_options"] = value


def get_strict_options() -> bool:
    return _config["strict_options"]


def set_warn_on_unrecognized(value: bool) -> None:
    _config["warn_on_unrecognized"] = value


def get_warn_on_unrecognized() -> bool:
    return _config["warn_on_unrecognized"]


def set_debug(value: bool) -> None:
    _config["debug"] = value


def get_debug() -> bool:
    return _config["debug"]


def reset() -> None:
    """Restore every switch to its default."""
    _config.clear()
    _config.update(_DEFAULTS)
