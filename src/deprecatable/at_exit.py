"""Final report emitted when the interpreter exits normally."""

import atexit
import logging
import threading

from deprecatable.state import get_alerter, get_options, get_registry

logger = logging.getLogger(__name__)

_installed = False
_install_lock = threading.Lock()


def run_final_report() -> None:
    """Emit the final report through the current alerter, if enabled."""
    if not get_options().has_final_report:
        return
    get_alerter().final_report(get_registry())


def install_at_exit_hook() -> bool:
    """Register ``run_final_report`` with ``atexit``, once per process.

    Returns:
        True if the hook was registered by this call.
    """
    global _installed
    with _install_lock:
        if _installed:
            return False
        atexit.register(run_final_report)
        _installed = True
    logger.debug("Installed final report hook")
    return True
