# algobench/tools/bench_cli.py
#
# Implements the command-line interface for `algobench`. The tool loads a
# benchmark script, picks up the TestSuite objects it defines at module level
# and runs them one after the other.

import argparse
import asyncio
import logging
import os
import runpy
import sys

from ..suite import TestSuite

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def find_suites(namespace: dict, name=None) -> list:
    """Returns the TestSuite objects in `namespace`, in definition order."""
    if name is not None:
        suite = namespace.get(name)
        return [suite] if isinstance(suite, TestSuite) else []
    suites = []
    for value in namespace.values():
        # A suite bound to several names still runs once.
        if isinstance(value, TestSuite) and not any(value is s for s in suites):
            suites.append(value)
    return suites


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algobench",
        description="Run the benchmark suites defined in a Python script."
    )
    parser.add_argument(
        "script_path",
        help="The path to the Python script defining one or more TestSuite objects."
    )
    parser.add_argument(
        "--suite",
        default=None,
        help="Only run the module-level TestSuite bound to this name."
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("ALGOBENCH_LOG_LEVEL", "WARNING"),
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostic log level (default: $ALGOBENCH_LOG_LEVEL or WARNING)."
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)
    logger = logging.getLogger("algobench")

    if not os.path.isfile(args.script_path):
        parser.error(f"script not found: {args.script_path}")

    # Make the script's directory and the working directory importable, the
    # way `python script.py` run from the project root would.
    for path in (os.getcwd(), os.path.dirname(os.path.abspath(args.script_path))):
        if path not in sys.path:
            sys.path.insert(0, path)

    # Not run as __main__, so the script's own `main()` guard stays inactive
    # and only its module-level suites are picked up.
    namespace = runpy.run_path(args.script_path, run_name="__algobench__")
    suites = find_suites(namespace, args.suite)
    if not suites:
        target = f"named '{args.suite}'" if args.suite else "at module level"
        parser.error(f"no TestSuite found {target} in {args.script_path}")

    for suite in suites:
        logger.info("Running suite with %d tests from %s", len(suite.tests), args.script_path)
        asyncio.run(suite.run())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
