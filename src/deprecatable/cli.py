#!/usr/bin/env python3
"""Command-line interface for deprecatable.

    deprecatable run [options] script.py [args ...]
        Run a Python script with deprecation tracking configured from the
        command line. The final report is printed when the script finishes.

    deprecatable options [--config FILE]
        Print the effective options, environment overrides included.
"""

import argparse
import logging
import runpy
import sys
from typing import List, Optional

import yaml

from deprecatable.errors import OptionError
from deprecatable.logging_config import configure_logging
from deprecatable.options import Options, load_options_file
from deprecatable.state import get_options

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deprecatable",
        description="Track and report calls to deprecated methods",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: LOG_LEVEL environment variable or INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser(
        "run", help="Run a Python script with deprecation tracking"
    )
    _add_config_argument(run_parser)
    run_parser.add_argument(
        "--alert-frequency",
        default=None,
        help="Alerts per call site: never, once, always or a number",
    )
    run_parser.add_argument(
        "--context-padding",
        default=None,
        help="Lines of source shown before and after each call site",
    )
    run_parser.add_argument(
        "--no-final-report",
        action="store_true",
        help="Do not print the report when the script exits",
    )
    run_parser.add_argument("script", help="Path of the script to run")
    run_parser.add_argument(
        "script_args", nargs=argparse.REMAINDER, help="Arguments for the script"
    )

    options_parser = subparsers.add_parser(
        "options", help="Show the effective options"
    )
    _add_config_argument(options_parser)

    return parser


def _add_config_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        default=None,
        help="YAML file with option values",
    )


def apply_options(args: argparse.Namespace, options: Options) -> Options:
    """Apply the option arguments of ``args`` onto ``options``."""
    if args.config:
        load_options_file(args.config, options)
    if getattr(args, "alert_frequency", None) is not None:
        options.alert_frequency = args.alert_frequency
    if getattr(args, "context_padding", None) is not None:
        options.caller_context_padding = args.context_padding
    if getattr(args, "no_final_report", False):
        options.has_final_report = False
    return options


def run_script(script: str, script_args: List[str]) -> None:
    """Execute ``script`` as ``__main__`` with ``sys.argv`` set for it."""
    saved_argv = sys.argv
    sys.argv = [script] + list(script_args)
    try:
        runpy.run_path(script, run_name="__main__")
    finally:
        sys.argv = saved_argv


def show_options(options: Options) -> None:
    yaml.safe_dump(
        {"deprecatable": options.to_dict()},
        sys.stdout,
        default_flow_style=False,
        sort_keys=False,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the deprecatable console script."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    options = get_options()
    try:
        apply_options(args, options)
        if args.command == "options":
            show_options(options)
            return 0
    except (OptionError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logger.debug("Running %s with options %s", args.script, options.to_dict())
    run_script(args.script, args.script_args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
