#!/usr/bin/env python3
"""Show how the alert_frequency option works.

Run from the project root:

    python examples/alert_frequency.py once

The alert frequency can be changed by:

  1) Setting ``get_options().alert_frequency`` in Python code.
  2) Setting the DEPRECATABLE_ALERT_FREQUENCY environment variable.

Either may be 'never', 'once', 'always' or a number. When both are used the
environment variable wins.
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
    for setting in ("never", "once", "always"):
        print(f"    python {script} {setting}")
    for env_setting in ("never", "once", "always"):
        for cmd_line in ("never", "once", "always"):
            if env_setting == cmd_line:
                continue
            print(
                f"    DEPRECATABLE_ALERT_FREQUENCY={env_setting} "
                f"python {script} {cmd_line}"
            )
    print()
    sys.exit(1)


def main():
    configure_logging()
    options = get_options()
    # The final report is shown in examples/at_exit.py
    options.has_final_report = False

    alert_frequency = sys.argv[1] if len(sys.argv) > 1 else None
    if alert_frequency is None and not os.environ.get("DEPRECATABLE_ALERT_FREQUENCY"):
        usage()
    if alert_frequency is not None:
        options.alert_frequency = alert_frequency

    print()
    print(
        "Running with DEPRECATABLE_ALERT_FREQUENCY => "
        f"{os.environ.get('DEPRECATABLE_ALERT_FREQUENCY')}"
    )
    print(f"Running with options.alert_frequency => {options.alert_frequency}")
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
