"""Command-line entry point: self-check, demo, or usage text."""

import argparse
import sys
from typing import List, Optional

from .environment import get_global_environment
from .expression_tree import Expression
from .logging_system import LogLevel, configure_logging
from .self_check import DEMO_BINDINGS, build_demo_tree, run_self_check


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arith-tree",
        description="Evaluate arithmetic expression trees."
    )
    parser.add_argument(
        "--run-tests", action="store_true",
        help="Run the self-check for the expression evaluation code. "
             "This option should be used without any additional arguments."
    )
    parser.add_argument(
        "--demo", action="store_true",
        help="Evaluate -Num1 + 2 * (4 - Num2) with Num1=3 and Num2=7."
    )
    parser.add_argument(
        "--log-level", default="moderate",
        choices=[level.name.lower() for level in LogLevel],
        help="Verbosity of the diagnostic stream (default: moderate)."
    )
    return parser


def run_demo() -> float:
    env = get_global_environment()
    env.update(DEMO_BINDINGS)
    try:
        result = Expression(build_demo_tree()).evaluate(env)
    finally:
        env.clear()
    print(f"Result: {result:g}")
    return result


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(LogLevel[args.log_level.upper()])

    if args.run_tests:
        return 0 if run_self_check() else 1
    if args.demo:
        run_demo()
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
