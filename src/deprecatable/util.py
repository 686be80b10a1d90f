"""Stack inspection helpers."""

import os
import sys
from typing import Tuple


def location_of_caller(depth: int = 1) -> Tuple[str, int]:
    """Find where the function calling this one was called from.

        def foo():
            bar()  # <--- this file and line number is returned

        def bar():
            return location_of_caller()

    Args:
        depth: How many frames above the calling function to look. The
            default of 1 is the immediate caller of the calling function.

    Returns:
        Tuple of (absolute file path, line number).
    """
    frame = sys._getframe(depth + 1)
    return os.path.abspath(frame.f_code.co_filename), frame.f_lineno
