"""CallSite: one location in caller code that invoked a deprecated method."""

import os
from typing import List, Optional

from deprecatable.core.call_site_context import CallSiteContext


class CallSite:
    """A unique ``(file, line)`` from which a deprecated method was invoked.

    Tracks how often the location invoked the method and lazily extracts the
    surrounding source, which is assumed not to change while the process runs.

    Attributes:
        file: Absolute path of the calling file.
        line_number: 1-indexed line of the call.
        context_padding: Lines before and after the call to capture.
        invocation_count: Number of invocations recorded so far.
    """

    @staticmethod
    def gen_key(file: str, line_number: int) -> str:
        """Return the identity key for a call site at ``file:line_number``."""
        return f"{os.path.abspath(file)}:{line_number}"

    def __init__(self, file: str, line_number: int, context_padding: int):
        self.file = os.path.abspath(file)
        self.line_number = line_number
        self.context_padding = context_padding
        self.invocation_count = 0
        self._context: Optional[CallSiteContext] = None

    def __repr__(self) -> str:
        return f"CallSite({self.key}, invocations={self.invocation_count})"

    @property
    def key(self) -> str:
        return CallSite.gen_key(self.file, self.line_number)

    def increment_invocation_count(self, count: int = 1) -> int:
        """Add ``count`` to the invocation count.

        Args:
            count: Amount to add; rarely anything but the default.

        Returns:
            The new invocation count.
        """
        self.invocation_count += count
        return self.invocation_count

    @property
    def context(self) -> CallSiteContext:
        if self._context is None:
            self._context = CallSiteContext(
                self.file, self.line_number, self.context_padding
            )
        return self._context

    def formatted_context_lines(self) -> List[str]:
        return self.context.formatted_context_lines()
