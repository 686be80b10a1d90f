"""Source context extraction for call sites.

A ``CallSiteContext`` reads a source file and keeps the line at a call site
together with ``padding`` lines before and after it, so alerts can show the
caller's code. The window is truncated at the start and end of the file
instead of failing, and an unreadable file simply yields an empty window:
the context exists for display only.
"""

import logging
import os
from typing import List, Optional

from deprecatable.core.constants import CONTEXT_NOT_POINTER, CONTEXT_POINTER

logger = logging.getLogger(__name__)


class CallSiteContext:
    """The lines of source surrounding a single call site.

    Attributes:
        file: Path of the source file.
        line_number: 1-indexed line at the center of the window.
        padding: Lines captured before and after ``line_number``.
        context_lines: Raw lines of the window, line terminators kept.
        context_line_numbers: 1-indexed line numbers parallel to
            ``context_lines``.
        context_index: Index of ``line_number`` within ``context_lines``,
            or None when the window is empty.
    """

    pointer = CONTEXT_POINTER
    not_pointer = CONTEXT_NOT_POINTER

    def __init__(self, file: str, line_number: int, padding: int):
        if line_number < 1:
            raise ValueError(f"line_number must be >= 1, got {line_number}")
        if padding < 0:
            raise ValueError(f"padding must be >= 0, got {padding}")

        self.file = file
        self.line_number = line_number
        self.padding = padding

        self.context_lines: List[str] = []
        self.context_line_numbers: List[int] = []
        self.context_index: Optional[int] = None
        self._formatted: Optional[List[str]] = None

        self._extract()

    @property
    def location_header(self) -> str:
        return f"Location: {self.file}:{self.line_number}\n"

    def __len__(self) -> int:
        return len(self.context_lines)

    def formatted_context_lines(self) -> List[str]:
        """Format the window for display.

        Each line is the pointer (or blanks of the same width), the line
        number right-justified to the widest number in the window, and the
        raw source text with its original line terminator.

        Returns:
            List of formatted lines, empty when nothing could be read.
        """
        if self._formatted is None:
            self._formatted = []
            if self.context_line_numbers:
                width = len(str(self.context_line_numbers[-1]))
                for idx, (number, text) in enumerate(
                    zip(self.context_line_numbers, self.context_lines)
                ):
                    if idx == self.context_index:
                        prefix = self.pointer
                    else:
                        prefix = self.not_pointer
                    number_text = str(number).rjust(width)
                    self._formatted.append(f"{prefix} {number_text}: {text}")
        return self._formatted

    def _extract(self) -> None:
        try:
            with open(self.file, "r", encoding="utf-8", errors="replace") as f:
                file_lines = f.readlines()
        except OSError as e:
            logger.debug("No context available for %s: %s", self.file, e)
            return

        if self.line_number > len(file_lines):
            logger.debug(
                "Line %d is past the end of %s (%d lines)",
                self.line_number,
                self.file,
                len(file_lines),
            )
            return

        start = max(1, self.line_number - self.padding)
        stop = min(len(file_lines), self.line_number + self.padding)

        self.context_line_numbers = list(range(start, stop + 1))
        self.context_lines = file_lines[start - 1 : stop]
        self.context_index = self.line_number - start


def extract_context(file: str, line_number: int, padding: int) -> CallSiteContext:
    """Read ``file`` and return the context window around ``line_number``.

    Args:
        file: Path to the source file; made absolute.
        line_number: 1-indexed target line.
        padding: Number of lines before and after the target to include.

    Returns:
        A freshly extracted CallSiteContext. Nothing is cached between calls.
    """
    return CallSiteContext(os.path.abspath(file), line_number, padding)
