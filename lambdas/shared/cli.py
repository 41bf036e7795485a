"""Command-line dice roller.

Usage::

    dice-roll "2d6+3"
    echo "1d20-1+1d4" | dice-roll --as-json
"""

import argparse
import json
import sys

from .dice import resolve
from .exceptions import InvalidSpecificationError, ParseError, ResolutionError
from .formatting import format_step
from .limits import check_limits
from .notation import parse


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(prog="dice-roll", description="Roll dice notation like 2d6+3")
    parser.add_argument(
        "expression",
        nargs="?",
        default="-",
        help='Dice expression, e.g. "1d20-1+1d4"; "-" (default) reads it from stdin',
    )
    parser.add_argument(
        "--as-json",
        action="store_true",
        help="Print the full roll response as JSON instead of the summary line",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the roller.

    Args:
        argv: Command-line arguments (defaults to ``sys.argv[1:]``)

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    expression = sys.stdin.read() if args.expression == "-" else args.expression

    try:
        resolution = resolve(check_limits(parse(expression)))
    except (ParseError, InvalidSpecificationError, ResolutionError) as e:
        print(e.message, file=sys.stderr)
        return 1

    if args.as_json:
        print(json.dumps(resolution.to_response(), indent=2))
    else:
        print(format_step(resolution.steps[0]))
    return 0


if __name__ == "__main__":
    sys.exit(main())
