"""Decide tautologies of set algebra by exhaustive enumeration of valuations.

A formula is a tautology if it evaluates to :obj:`True` under all :math:`2^n`
valuations of its `n` atoms. The procedure is exponential in `n` and is meant
for small numbers of atoms. Callers may bound `n` via
:attr:`Options.max_atoms`.

>>> from setlogic.parser import parse
>>> f, n = parse('(A ∩ B) ⊆ (A ∪ C)')
>>> is_tautology(f, n)
True
>>> f, n = parse('(A ∪ B) ⊆ (A ∩ C)')
>>> is_tautology(f, n)
False
>>> counterexample(f, n)
(True, True, False)
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Optional

from .formula import Formula
from .support.logging import RateFilter, Timer
from .valuation import number_of_atoms, Valuation, valuations


logging.basicConfig(
    format='%(levelname)s[%(relativeCreated)0.0f ms]: %(message)s',
    level=logging.CRITICAL)

logger = logging.getLogger(__name__)

progress_logger = logger.getChild('progress')

rate_filter = RateFilter()
progress_logger.addFilter(rate_filter)


def show_progress(flag: bool = True) -> None:
    """Log progress of the enumeration at level INFO, or switch logging off.
    """
    if flag:
        logging.getLogger().setLevel(logging.INFO)
    else:
        logging.getLogger().setLevel(logging.CRITICAL)


@dataclass(frozen=True)
class Options:
    """Options for :func:`is_tautology` and related functions.
    """

    max_atoms: Optional[int] = None
    """The maximal number of atoms admitted for enumeration, or :obj:`None`
    for no bound.
    """

    log_rate: float = 1.0
    """The minimal time in seconds between two progress messages.
    """


def counterexample(f: Formula, n: Optional[int] = None,
                   options: Optional[Options] = None) -> Optional[Valuation]:
    """The first valuation in the order of :func:`.valuations` under which
    `f` is false, or :obj:`None` if `f` is a tautology.

    If `n` is :obj:`None`, the number of atoms is derived from the largest
    atom identifier occurring in `f`.

    >>> from setlogic.parser import parse
    >>> f, n = parse('A ∩ A')
    >>> counterexample(f, n)
    (False,)
    >>> counterexample(parse('A ∪ U')[0]) is None
    True
    """
    if options is None:
        options = Options()
    n = number_of_atoms(f, n)
    if options.max_atoms is not None and n > options.max_atoms:
        raise ValueError(f'{n} atoms exceed the maximum of {options.max_atoms}; '
                         f'enumeration of 2^{n} valuations refused')
    rate_filter.set_rate(options.log_rate)
    timer = Timer()
    logger.info(f'{counterexample.__qualname__}: enumerating 2^{n} valuations of {f}')
    progress = progress_logger.isEnabledFor(logging.INFO)
    for count, valuation in enumerate(valuations(n), start=1):
        if not f.eval(valuation):
            logger.info(f'{counterexample.__qualname__}: falsified by {valuation} '
                        f'after {count} valuations in {timer.get():.3f} s')
            return valuation
        if progress:
            progress_logger.info(f'{counterexample.__qualname__}: {count} of {2 ** n} valuations checked')
    logger.info(f'{counterexample.__qualname__}: tautology after {2 ** n} valuations '
                f'in {timer.get():.3f} s')
    return None


def is_satisfiable(f: Formula, n: Optional[int] = None,
                   options: Optional[Options] = None) -> bool:
    """Whether `f` evaluates to :obj:`True` under at least one valuation.

    >>> from setlogic.parser import parse
    >>> is_satisfiable(parse('A ∩ ∅')[0])
    False
    >>> is_satisfiable(parse('A \\\\ B')[0])
    True
    """
    return counterexample(f.complement(), n, options) is not None


def is_tautology(f: Formula, n: Optional[int] = None,
                 options: Optional[Options] = None) -> bool:
    """Whether `f` evaluates to :obj:`True` under all :math:`2^n` valuations.
    The enumeration stops at the first falsifying valuation.

    >>> from setlogic.parser import parse
    >>> is_tautology(*parse('(A = A)'))
    True
    >>> is_tautology(*parse('A ∩ ∅'))
    False
    """
    return counterexample(f, n, options) is None
