"""Command-line driver: decide for each formula given on the command line
whether it is a tautology.

Usage::

    python -m setlogic [--random N] [--seed S] [--verbose] [FORMULA ...]
"""
from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Optional, Sequence, TextIO

from .generator import generate_formula
from .parser import FormulaParser, ParseError
from .support.logging import DeltaTimeFormatter
from .tautology import is_tautology, Options, show_progress


MAX_ATOMS = 25
"""Default bound on the number of atoms for the command line.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='setlogic',
        description='Decide whether formulas of set algebra are tautologies.')
    parser.add_argument(
        'formulas', metavar='FORMULA', nargs='*',
        help='a fully parenthesized formula, e.g. "(A \\cap B) \\subseteq A"')
    parser.add_argument(
        '-r', '--random', metavar='N', type=int, default=0,
        help='additionally check N randomly generated formulas')
    parser.add_argument(
        '-s', '--seed', metavar='S', type=int, default=None,
        help='seed for the random formula generator')
    parser.add_argument(
        '--max-atoms', metavar='K', type=int, default=MAX_ATOMS,
        help=f'refuse formulas with more than K atoms (default {MAX_ATOMS})')
    parser.add_argument(
        '-v', '--verbose', action='store_true',
        help='log progress of the enumeration to stderr')
    return parser


def check(s: str, options: Options, out: Optional[TextIO] = None) -> bool:
    """Parse `s`, decide it, and print the verdict to `out`, which defaults to
    :data:`sys.stdout`. Parse errors propagate.
    """
    if out is None:
        out = sys.stdout
    parser = FormulaParser(s)
    f = parser.parse()
    n = parser.number_of_atoms()
    if is_tautology(f, n, options):
        print(f'Formula {f} is a tautology', file=out)
        return True
    print(f'Formula {f} isn\'t a tautology', file=out)
    return False


def log_to_stderr() -> None:
    """Send the log of the package to :data:`sys.stderr` and switch on
    progress messages. Repeated calls attach a single handler.
    """
    logger = logging.getLogger('setlogic')
    if not any(isinstance(h.formatter, DeltaTimeFormatter) for h in logger.handlers):
        handler = logging.StreamHandler(stream=sys.stderr)
        handler.setFormatter(DeltaTimeFormatter('%(delta)s %(levelname)s: %(message)s'))
        logger.addHandler(handler)
    logger.propagate = False
    show_progress(True)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point. Returns 0 if all formulas could be parsed and
    decided, 1 otherwise.
    """
    args = build_parser().parse_args(argv)
    if args.verbose:
        log_to_stderr()
    options = Options(max_atoms=args.max_atoms)
    rng = random.Random(args.seed)
    formulas = list(args.formulas)
    formulas.extend(generate_formula(rng) for _ in range(args.random))
    status = 0
    for s in formulas:
        try:
            check(s, options)
        except (ParseError, ValueError) as exc:
            print(f'{s}: {exc}', file=sys.stderr)
            status = 1
    return status


if __name__ == '__main__':
    sys.exit(main())
