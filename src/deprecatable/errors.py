"""Error types for deprecatable."""

from typing import Any, Optional


class DeprecatableError(Exception):
    """Base class for all errors raised by deprecatable."""


class OptionError(DeprecatableError, ValueError):
    """Raised when an option is given an unusable value."""


class OptionValidationError(OptionError):
    """Raised when an option value parses but is out of range.

    Attributes:
        option: Name of the option being set.
        value: The rejected value.
    """

    def __init__(self, option: str, value: Any, message: Optional[str] = None):
        self.option = option
        self.value = value
        super().__init__(message or f"{option}: invalid value {value!r}")


class OptionParseError(OptionError):
    """Raised when an option value cannot be parsed.

    Attributes:
        value: The raw value that failed to parse.
        source: Environment variable the value came from, if any.
    """

    def __init__(
        self, value: Any, message: Optional[str] = None, source: Optional[str] = None
    ):
        self.value = value
        self.source = source
        text = message or f"could not parse {value!r}"
        if source:
            text = f"{source}: {text}"
        super().__init__(text)


class AlertFrequencyParseError(OptionParseError):
    """Raised when an alert frequency is neither a known token nor a number."""

    def __init__(self, value: Any, source: Optional[str] = None):
        super().__init__(
            value,
            f"alert_frequency must be 'never', 'once', 'always' or a number, "
            f"got {value!r}",
            source=source,
        )


class ConfigFileError(OptionError):
    """Raised when an options file cannot be loaded."""

    def __init__(self, path: Any, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


class MethodNotFoundError(DeprecatableError, AttributeError):
    """Raised when deprecating a method that the target does not define."""

    def __init__(self, owner_name: str, method_name: str):
        self.owner_name = owner_name
        self.method_name = method_name
        super().__init__(
            f"Cannot deprecate {owner_name}.{method_name}: "
            f"{owner_name} has no attribute {method_name!r}"
        )
