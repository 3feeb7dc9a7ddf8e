"""
Command-line interface for vocabulary.

This module is responsible for argument parsing and delegating to the
run orchestration in the app module.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, List, Optional, Sequence

from .app import run
from .config import Options
from .console import Colorizer
from .errors import VocabularyError
from .logging_utils import configure_logging
from .vcs import describe_version


class _GitVersionAction(argparse.Action):
    """
    Print the git tag description and exit, looked up only when asked for.
    """

    def __init__(self, option_strings: List[str], dest: str = argparse.SUPPRESS, **kwargs: Any) -> None:
        super().__init__(option_strings, dest=dest, nargs=0, default=argparse.SUPPRESS, **kwargs)

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: Optional[str] = None,
    ) -> None:
        print(describe_version())
        parser.exit()


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vocabulary",
        description="Create simple vocabulary flash cards from the command line.",
    )

    general = parser.add_argument_group("General options")
    general.add_argument(
        "-m",
        "--manual-input",
        action="store_true",
        help="Input a flash card manually.",
    )

    specific = parser.add_argument_group("Specific options")
    specific.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Run in debug mode.",
    )

    common = parser.add_argument_group("Common options")
    common.add_argument(
        "-c",
        "--colorize",
        action="store_true",
        help="Colorize the output of the script for easier reading.",
    )
    common.add_argument(
        "--version",
        action=_GitVersionAction,
        help="Show version and exit.",
    )

    return parser


def parse_cmd_arguments(args: Sequence[str]) -> Options:
    """
    Parse command-line arguments into an Options record.

    Called without any arguments, the usage text is printed and the
    process exits successfully.
    """

    parser = build_arg_parser()
    args = list(args)

    if not args:
        parser.print_help()
        parser.exit()

    namespace = parser.parse_args(args)
    return Options(
        colorize=namespace.colorize,
        debug=namespace.debug,
        manual_input=namespace.manual_input,
    )


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        options = parse_cmd_arguments(argv)
    except VocabularyError as exc:
        print(f"vocabulary: error: {exc}", file=sys.stderr)
        return 1

    configure_logging(debug=options.debug, colorize=options.colorize)

    try:
        run(options, colorizer=Colorizer(enabled=options.colorize))
    except KeyboardInterrupt:
        # Graceful shutdown on Ctrl+C
        return 130
    except VocabularyError as exc:
        print(f"vocabulary: error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
