"""Process-wide options for deprecatable.

Every option can be set in code and overridden by an environment variable.
Environment variables are consulted each time an option is read, so a value
exported in the shell always wins over one set programmatically:

    DEPRECATABLE_CALLER_CONTEXT_PADDING=4   lines of context around call sites
    DEPRECATABLE_ALERT_FREQUENCY=always     never | once | always | <number>
    DEPRECATABLE_HAS_AT_EXIT_REPORT=true    force the final report on

Options can also be loaded from a YAML file with ``load_options_file``.
"""

import logging
import math
import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from deprecatable.core.constants import (
    DEFAULT_ALERT_FREQUENCY,
    DEFAULT_CALLER_CONTEXT_PADDING,
    DEFAULT_HAS_FINAL_REPORT,
    ENV_ALERT_FREQUENCY,
    ENV_CALLER_CONTEXT_PADDING,
    ENV_HAS_AT_EXIT_REPORT,
)
from deprecatable.errors import (
    AlertFrequencyParseError,
    ConfigFileError,
    OptionParseError,
    OptionValidationError,
)

logger = logging.getLogger(__name__)

Frequency = Union[int, float]


class AlertFrequency(str, Enum):
    """Named alert frequencies."""

    NEVER = "never"
    ONCE = "once"
    ALWAYS = "always"


ALERT_FREQUENCY_PRESETS: Dict[str, Frequency] = {
    AlertFrequency.NEVER.value: 0,
    AlertFrequency.ONCE.value: 1,
    AlertFrequency.ALWAYS.value: math.inf,
}


def resolve_alert_frequency(value: Any, source: Optional[str] = None) -> Frequency:
    """Normalize an alert frequency to a number.

    Args:
        value: An AlertFrequency, one of the strings "never", "once" or
            "always", a numeric string, or a number. Fractions are truncated.
        source: Environment variable the value came from, for error messages.

    Returns:
        A non-negative int, or ``math.inf`` for "always".

    Raises:
        AlertFrequencyParseError: If the value is neither a token nor a number.
        OptionValidationError: If the value is negative.
    """
    if isinstance(value, AlertFrequency):
        return ALERT_FREQUENCY_PRESETS[value.value]

    if isinstance(value, str):
        token = value.strip().lower()
        if token in ALERT_FREQUENCY_PRESETS:
            return ALERT_FREQUENCY_PRESETS[token]
        try:
            number = float(token)
        except ValueError:
            raise AlertFrequencyParseError(value, source=source) from None
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        number = value
    else:
        raise AlertFrequencyParseError(value, source=source)

    if math.isnan(number):
        raise AlertFrequencyParseError(value, source=source)
    if number < 0:
        raise OptionValidationError(
            "alert_frequency", value, "alert_frequency must be >= 0"
        )
    if math.isinf(number):
        return math.inf
    return int(number)


def _parse_padding(value: Any, source: Optional[str] = None) -> int:
    if isinstance(value, bool):
        raise OptionParseError(
            value, "caller_context_padding must be a number", source
        )
    try:
        count = int(float(value)) if isinstance(value, str) else int(value)
    except (TypeError, ValueError, OverflowError):
        raise OptionParseError(
            value, "caller_context_padding must be a number", source
        ) from None
    if count <= 0:
        raise OptionValidationError(
            "caller_context_padding",
            value,
            "caller_context_padding must have a count > 0",
        )
    return count


OPTION_NAMES = ("caller_context_padding", "alert_frequency", "has_final_report")


def _env_value(var_name: str) -> Optional[str]:
    raw = os.environ.get(var_name)
    if raw is None:
        return None
    value = raw.strip()
    return value if value else None


class Options:
    """Container for the options that drive tracking and reporting."""

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        """Restore every option to its default."""
        self._caller_context_padding: int = DEFAULT_CALLER_CONTEXT_PADDING
        self._alert_frequency: Frequency = DEFAULT_ALERT_FREQUENCY
        self._has_final_report: bool = DEFAULT_HAS_FINAL_REPORT

    @property
    def caller_context_padding(self) -> int:
        """Lines of source captured before and after a call site."""
        env = _env_value(ENV_CALLER_CONTEXT_PADDING)
        if env is not None:
            return _parse_padding(env, source=ENV_CALLER_CONTEXT_PADDING)
        return self._caller_context_padding

    @caller_context_padding.setter
    def caller_context_padding(self, count: Any) -> None:
        self._caller_context_padding = _parse_padding(count)

    @property
    def alert_frequency(self) -> Frequency:
        """Maximum number of alerts per call site; ``math.inf`` for always."""
        env = _env_value(ENV_ALERT_FREQUENCY)
        if env is not None:
            return resolve_alert_frequency(env, source=ENV_ALERT_FREQUENCY)
        return self._alert_frequency

    @alert_frequency.setter
    def alert_frequency(self, value: Any) -> None:
        self._alert_frequency = resolve_alert_frequency(value)

    @property
    def has_final_report(self) -> bool:
        """Whether the final report is emitted when the process exits."""
        if os.environ.get(ENV_HAS_AT_EXIT_REPORT) == "true":
            return True
        return self._has_final_report

    @has_final_report.setter
    def has_final_report(self, value: bool) -> None:
        self._has_final_report = bool(value)

    def update(self, **values: Any) -> "Options":
        """Set several options at once; unknown names raise ``TypeError``."""
        for name, value in values.items():
            if name not in OPTION_NAMES:
                raise TypeError(f"Unknown option: {name!r}")
            setattr(self, name, value)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Return the effective option values, environment overrides applied."""
        frequency = self.alert_frequency
        return {
            "caller_context_padding": self.caller_context_padding,
            "alert_frequency": (
                AlertFrequency.ALWAYS.value if math.isinf(frequency) else frequency
            ),
            "has_final_report": self.has_final_report,
        }


def load_options_file(
    path: Union[str, Path], options: Optional[Options] = None
) -> Options:
    """Apply the options stored in a YAML file.

    The file holds the option names as keys, either at the top level or
    under a ``deprecatable`` mapping:

        deprecatable:
          caller_context_padding: 3
          alert_frequency: always
          has_final_report: false

    Args:
        path: YAML file to read.
        options: Options to update. Defaults to the process-wide options.

    Returns:
        The updated Options.

    Raises:
        ConfigFileError: If the file cannot be read, is not valid YAML or is
            not a mapping.
        OptionError: If a value is invalid.
    """
    if options is None:
        from deprecatable.state import get_options

        options = get_options()

    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigFileError(path, f"cannot read file: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise ConfigFileError(path, f"not UTF-8 text: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigFileError(path, f"invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise ConfigFileError(path, "expected a mapping of option names")
    if "deprecatable" in data:
        data = data["deprecatable"] or {}
        if not isinstance(data, dict):
            raise ConfigFileError(path, "'deprecatable' must be a mapping")

    for key, value in data.items():
        if key not in OPTION_NAMES:
            logger.warning("Ignoring unknown option '%s' in %s", key, path)
            continue
        setattr(options, key, value)
        logger.debug("Option %s set to %r from %s", key, value, path)

    return options
