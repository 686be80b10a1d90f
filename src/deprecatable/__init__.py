"""
deprecatable: track and report calls to deprecated methods.

Mark a method deprecated once and every call site that invokes it is
recorded. The first invocation from each call site raises an alert showing
the caller's source, and a final report of all deprecated methods and their
callers is printed when the program exits.

    from deprecatable import deprecated

    class Foo:
        @deprecated("Use Foo.baz() instead", removal_version="2.0")
        def bar(self):
            ...
"""

from deprecatable.alerter import (
    Alerter,
    LoggingAlerter,
    StderrAlerter,
    StringIOAlerter,
    TextAlerter,
)
from deprecatable.at_exit import install_at_exit_hook, run_final_report
from deprecatable.core import (
    CallSite,
    CallSiteContext,
    DeprecatedMethod,
    Registry,
    extract_context,
)
from deprecatable.errors import (
    AlertFrequencyParseError,
    ConfigFileError,
    DeprecatableError,
    MethodNotFoundError,
    OptionError,
    OptionParseError,
    OptionValidationError,
)
from deprecatable.interception import deprecate, deprecated
from deprecatable.options import (
    AlertFrequency,
    Options,
    load_options_file,
    resolve_alert_frequency,
)
from deprecatable.state import (
    get_alerter,
    get_options,
    get_registry,
    reset_state,
    set_alerter,
)
from deprecatable.util import location_of_caller

__version__ = "1.0.0"

__all__ = [
    # Declaring deprecations
    "deprecate",
    "deprecated",
    # Global state
    "get_registry",
    "get_options",
    "get_alerter",
    "set_alerter",
    "reset_state",
    # Tracking model
    "CallSite",
    "CallSiteContext",
    "DeprecatedMethod",
    "Registry",
    "extract_context",
    # Options
    "AlertFrequency",
    "Options",
    "load_options_file",
    "resolve_alert_frequency",
    # Alerters
    "Alerter",
    "TextAlerter",
    "StderrAlerter",
    "StringIOAlerter",
    "LoggingAlerter",
    # Final report
    "install_at_exit_hook",
    "run_final_report",
    # Errors
    "DeprecatableError",
    "OptionError",
    "OptionValidationError",
    "OptionParseError",
    "AlertFrequencyParseError",
    "ConfigFileError",
    "MethodNotFoundError",
    # Utilities
    "location_of_caller",
]
