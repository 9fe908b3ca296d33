"""Command line interface for the seven-segment wiring solver."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Optional

from .analysis import count_known_outputs, solve_readout
from .display import format_value
from .errors import MalformedReadout, NoMatchingDigit, UnresolvableWiring
from .readout import load_readouts


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sevenseg",
        description=(
            "Deduce scrambled seven-segment display wiring and decode the output readings."
        ),
    )
    parser.add_argument(
        "-i",
        "--input",
        default="input",
        help="Puzzle input file, one readout per line (default: input).",
    )
    parser.add_argument(
        "-s",
        "--solve",
        action="store_true",
        help="Decode every readout and print the sum of the output values.",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Print each decoded output as seven-segment digits (implies --solve).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log solver passes.",
    )
    return parser


def run(input_file: str, *, solve: bool, show: bool = False) -> tuple[int, Optional[int], Optional[str]]:
    """Process an input file and return the exit code, answer, and message."""

    try:
        readouts = load_readouts(input_file)
    except FileNotFoundError as exc:
        return 1, None, str(exc)
    except MalformedReadout as exc:
        return 1, None, f"Malformed input: {exc}"

    if not (solve or show):
        return 0, count_known_outputs(readouts), None

    total = 0
    for index, readout in enumerate(readouts, start=1):
        try:
            value = solve_readout(readout)
        except UnresolvableWiring as exc:
            return 1, None, f"Readout #{index}: {exc}"
        except NoMatchingDigit as exc:
            return 2, None, f"Readout #{index}: internal error: {exc}"

        if show:
            print(format_value(value, color=sys.stdout.isatty()))
            print()
        total += value

    return 0, total, None


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    exit_code, answer, message = run(args.input, solve=args.solve, show=args.show)

    if message:
        print(message)
    if answer is not None:
        print(answer)
    return exit_code


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
