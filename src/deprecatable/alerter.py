"""Alerters: how deprecation notices reach the developer.

An alerter has two jobs: ``alert`` is called when a deprecated method is
invoked from a call site and the alert frequency allows it, and
``final_report`` summarizes every deprecated method when the process exits.

Any object with those two methods can be installed with
``deprecatable.set_alerter``. The implementations here all produce the same
text and only differ in where it goes:

- StderrAlerter: standard error (the default)
- StringIOAlerter: an in-memory buffer, for tests
- LoggingAlerter: a ``logging.Logger`` at WARNING level
"""

import io
import logging
import sys
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable, List, Optional, TextIO

from deprecatable.core.constants import (
    ALERT_LABEL_WIDTH,
    ALERT_PREFIX,
    ENV_ALERT_FREQUENCY,
)

if TYPE_CHECKING:
    from deprecatable.core.call_site import CallSite
    from deprecatable.core.deprecated_method import DeprecatedMethod
    from deprecatable.core.registry import Registry


class Alerter(ABC):
    """Base interface for all alerters."""

    @abstractmethod
    def alert(self, deprecated_method: "DeprecatedMethod", call_site: "CallSite"):
        """Report that ``deprecated_method`` was invoked from ``call_site``."""
        pass

    @abstractmethod
    def final_report(self, registry: Optional["Registry"] = None):
        """Report every deprecated method in ``registry`` and its call sites.

        Args:
            registry: Registry to report on. Defaults to the process-wide one.
        """
        pass


def _label(text: str) -> str:
    return text.rjust(ALERT_LABEL_WIDTH)


class TextAlerter(Alerter):
    """Alerter that renders notices as lines of text.

    Subclasses decide where the lines go by implementing ``write_line``.
    """

    prefix = ALERT_PREFIX

    @abstractmethod
    def write_line(self, line: str) -> None:
        """Emit a single formatted line (without a trailing newline)."""
        pass

    def alert(self, deprecated_method, call_site):
        self.write_lines(self.format_alert(deprecated_method, call_site))

    def final_report(self, registry=None):
        if registry is None:
            from deprecatable.state import get_registry

            registry = get_registry()
        self.write_lines(self.format_final_report(registry))

    def write_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.write_line(f"{self.prefix}{line}")

    def format_definition(self, deprecated_method) -> str:
        return (
            f"{_label('defined at')} : "
            f"{deprecated_method.file}:{deprecated_method.line_number}"
        )

    def format_metadata(self, deprecated_method) -> List[str]:
        """Removal date, removal version and message, when present."""
        lines = []
        if deprecated_method.removal_date:
            lines.append(
                f"{_label('to be removed after')} : {deprecated_method.removal_date}"
            )
        if deprecated_method.removal_version:
            lines.append(
                f"{_label('to be removed in')} : "
                f"Version {deprecated_method.removal_version}"
            )
        if deprecated_method.message:
            lines.append(
                f"{_label('developer message')} : {deprecated_method.message}"
            )
        return lines

    def format_context(self, call_site) -> List[str]:
        return [line.rstrip() for line in call_site.formatted_context_lines()]

    def format_alert(self, deprecated_method, call_site) -> List[str]:
        lines = [
            f"Deprecated method: {deprecated_method.qualified_name} invoked",
            self.format_definition(deprecated_method),
            f"{_label('called at')} : {call_site.file}:{call_site.line_number}",
        ]
        lines.extend(self.format_metadata(deprecated_method))
        lines.append("")
        lines.append(
            "Please go look at the following location and see if the code "
            "needs to be updated:"
        )
        lines.append("")
        lines.extend(self.format_context(call_site))
        lines.append("")
        lines.append(
            f"To turn this alert off set {ENV_ALERT_FREQUENCY}=never "
            f'or options.alert_frequency = "never"'
        )
        return lines

    def format_final_report(self, registry) -> List[str]:
        lines = [
            "",
            "Deprecatable 'at_exit' Report",
            "=============================",
            "",
            "To turn this report off set options.has_final_report = False "
            "in your code",
            "",
        ]
        for deprecated_method in registry.items():
            lines.append("-" * 72)
            lines.append(f"Deprecated method: {deprecated_method.qualified_name}")
            lines.append(self.format_definition(deprecated_method))
            lines.extend(self.format_metadata(deprecated_method))
            call_sites = deprecated_method.call_sites
            if not call_sites:
                lines.append("")
                lines.append("Not called")
            for call_site in call_sites:
                count = call_site.invocation_count
                noun = "time" if count == 1 else "times"
                lines.append("")
                lines.append(
                    f"Called {count} {noun} from "
                    f"{call_site.file}:{call_site.line_number}"
                )
                lines.append("")
                lines.extend(self.format_context(call_site))
            lines.append("")
        return lines


class StderrAlerter(TextAlerter):
    """Writes alerts to standard error, or to the given stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # sys.stderr is looked up late so redirections are honored
        return self._stream if self._stream is not None else sys.stderr

    def write_line(self, line: str) -> None:
        self.stream.write(f"{line}\n")


class StringIOAlerter(TextAlerter):
    """Collects alerts in memory instead of writing them anywhere."""

    def __init__(self):
        self._buffer = io.StringIO()

    def write_line(self, line: str) -> None:
        self._buffer.write(f"{line}\n")

    def getvalue(self) -> str:
        return self._buffer.getvalue()

    def clear(self) -> None:
        self._buffer = io.StringIO()

    def __str__(self) -> str:
        return self.getvalue()


class LoggingAlerter(TextAlerter):
    """Sends every alert line to a logger at WARNING level."""

    prefix = ""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("deprecatable.alerts")

    def write_line(self, line: str) -> None:
        self.logger.warning(line)
