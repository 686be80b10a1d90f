#!/usr/bin/env python3
"""Show how the caller_context_padding option works.

Run from the project root:

    python examples/caller_context_padding.py 3

The padding can be changed by:

  1) Setting ``get_options().caller_context_padding`` in Python code.
  2) Setting the DEPRECATABLE_CALLER_CONTEXT_PADDING environment variable.

It must be an integer >= 1. When both are used the environment variable wins.
"""

import os
import sys

from deprecatable import deprecate, get_options
from deprecatable.logging_config import configure_logging


class B:
    def __init__(self):
        self.call_count = 0

    def deprecate_me(self):
        self.call_count += 1
        print(f"deprecate_me call {self.call_count}")


deprecate(
    B,
    "deprecate_me",
    message="This method is to be completely removed",
    removal_version="4.2",
)


def usage():
    print(__doc__)
    print("Here are some example ways to run this program:\n")
    script = os.path.relpath(__file__)
    for padding in (1, 2, 3):
        print(f"    python {script} {padding}")
    for env_setting in (1, 2, 3):
        for cmd_line in (1, 2, 3):
            if env_setting == cmd_line:
                continue
            print(
                f"    DEPRECATABLE_CALLER_CONTEXT_PADDING={env_setting} "
                f"python {script} {cmd_line}"
            )
    print()
    sys.exit(1)


def main():
    configure_logging()
    options = get_options()
    # The final report is shown in examples/at_exit.py
    options.has_final_report = False

    padding = sys.argv[1] if len(sys.argv) > 1 else None
    if padding is None and not os.environ.get("DEPRECATABLE_CALLER_CONTEXT_PADDING"):
        usage()
    if padding is not None:
        options.caller_context_padding = int(float(padding))

    print()
    print(
        "Running with DEPRECATABLE_CALLER_CONTEXT_PADDING => "
        f"{os.environ.get('DEPRECATABLE_CALLER_CONTEXT_PADDING')}"
    )
    print(
        f"Running with options.caller_context_padding => "
        f"{options.caller_context_padding}"
    )
    print("-" * 72)
    print()

    b = B()
    for _ in range(4):
        # Context before 1.1
        # Context before 1.2
        b.deprecate_me()
        # Context after 1.1
        # Context after 1.2

    for _ in range(2):
        # Context before 2.1
        # Context before 2.2
        b.deprecate_me()
        # Context after 2.1
        # Context after 2.2


if __name__ == "__main__":
    main()
