"""
Run isort and black over the project.

    python scripts/format.py          # rewrite files in place
    python scripts/format.py --check  # report files that would change
"""

import argparse
import subprocess
import sys

TARGETS = ["src/deprecatable", "scripts", "tests", "examples"]


def tool_commands(check):
    isort = ["isort"] + (["--check-only", "--diff"] if check else [])
    black = ["black"] + (["--check", "--diff"] if check else [])
    return [isort + TARGETS, black + TARGETS]


def run_tool(command):
    print(f"Running {command[0]}...")
    try:
        return subprocess.run(command, shell=False).returncode
    except FileNotFoundError:
        print(f"Command not found: {command[0]}. Install the dev extra.")
        return 1


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument(
        "--check", action="store_true", help="Only report, do not modify files"
    )
    args = parser.parse_args(argv)

    failed = [cmd[0] for cmd in tool_commands(args.check) if run_tool(cmd) != 0]
    if failed:
        print(f"Failed: {', '.join(failed)}")
        return 1
    print("Formatting clean." if args.check else "Formatting done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
