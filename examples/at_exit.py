#!/usr/bin/env python3
"""Show the report printed when the program exits.

Run from the project root:

    python examples/at_exit.py

Alerts are turned off so that only the final report is printed.
"""

from deprecatable import deprecated, get_options


class B:
    @deprecated(
        message="This method is to be completely removed", removal_version="4.2"
    )
    def deprecate_me_1(self):
        print("I've been deprecated! (1)")

    @deprecated(
        message="This method is to be completely removed", removal_date="2020-02-20"
    )
    def deprecate_me_2(self):
        print("I've been deprecated! (2)")


def main():
    get_options().alert_frequency = "never"
    b = B()

    for _ in range(4):
        # Context before 1.1
        # Context before 1.2
        b.deprecate_me_1()
        # Context after 1.1
        # Context after 1.2

        # Context before 2.1
        # Context before 2.2
        b.deprecate_me_2()
        # Context after 2.1
        # Context after 2.2

    # do a bunch of things

    for _ in range(2):
        # Context before 3.1
        # Context before 3.2
        b.deprecate_me_1()
        # Context after 3.1
        # Context after 3.2

        # Context before 4.1
        # Context before 4.2
        b.deprecate_me_2()
        # Context after 4.1
        # Context after 4.2


if __name__ == "__main__":
    main()
