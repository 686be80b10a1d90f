"""Process-wide registry, options and alerter.

These are created once when deprecatable is imported. Code that needs them
should go through the accessors here rather than caching the objects, so
``set_alerter`` and ``reset_state`` take effect everywhere.
"""

import threading

from deprecatable.alerter import Alerter, StderrAlerter
from deprecatable.core.registry import Registry
from deprecatable.options import Options

_registry = Registry()
_options = Options()
_alerter = StderrAlerter()
_lock = threading.Lock()


def get_registry() -> Registry:
    return _registry


def get_options() -> Options:
    return _options


def get_alerter():
    return _alerter


def set_alerter(alerter) -> object:
    """Install a new process-wide alerter.

    Args:
        alerter: Any object with ``alert`` and ``final_report`` methods.

    Returns:
        The previously installed alerter, so callers can restore it.
    """
    global _alerter
    if not isinstance(alerter, Alerter):
        for name in ("alert", "final_report"):
            if not callable(getattr(alerter, name, None)):
                raise TypeError(f"Alerter {alerter!r} has no callable '{name}'")
    with _lock:
        previous, _alerter = _alerter, alerter
    return previous


def reset_state() -> None:
    """Clear the registry, reset options and restore the default alerter.

    Intended for test isolation.
    """
    global _alerter
    with _lock:
        _registry.clear()
        _options.reset()
        _alerter = StderrAlerter()
