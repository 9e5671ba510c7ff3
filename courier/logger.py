"""Forwarding helpers between the dispatcher and the configured logger sink."""
from .configuration import configuration as _shared
from .utils import Unset


def _emit(level, message, config):
    if config is Unset:
        config = _shared()
    # sinks without the leveled method are ignored
    method = getattr(getattr(config, "logger", None), level, None)
    if callable(method):
        method(message)


def log_debug(message, /, configuration=Unset):
    _emit("debug", message, configuration)


def log_error(message, /, configuration=Unset):
    _emit("error", message, configuration)


__all__ = (
    "log_debug",
    "log_error",
)
