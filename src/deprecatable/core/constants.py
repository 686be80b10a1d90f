"""Core constants for deprecatable.

Environment variable names, option defaults and the markers used when
formatting alerts, shared across the package.
"""

# Environment variables
ENV_CALLER_CONTEXT_PADDING = "DEPRECATABLE_CALLER_CONTEXT_PADDING"
"""Overrides ``Options.caller_context_padding`` when set."""

ENV_ALERT_FREQUENCY = "DEPRECATABLE_ALERT_FREQUENCY"
"""Overrides ``Options.alert_frequency`` when set."""

ENV_HAS_AT_EXIT_REPORT = "DEPRECATABLE_HAS_AT_EXIT_REPORT"
"""Forces the final report on when set to exactly ``"true"``."""

# Option defaults
DEFAULT_CALLER_CONTEXT_PADDING = 2
"""Lines shown before and after a call site (5 lines in total)."""

DEFAULT_ALERT_FREQUENCY = 1
"""Alert once per call site."""

DEFAULT_HAS_FINAL_REPORT = True

# Formatting
CONTEXT_POINTER = "--->"
"""Prefix of the formatted context line holding the call site."""

CONTEXT_NOT_POINTER = " " * len(CONTEXT_POINTER)

ALERT_PREFIX = "DEPRECATION WARNING: "
"""Prefix of every line written by the text alerters."""

ALERT_LABEL_WIDTH = 20

DEPRECATED_ALIAS_PREFIX = "_deprecated_"
"""The original callable is preserved on its owner under this prefix."""
