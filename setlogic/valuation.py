"""Valuations and truth tables.

A valuation of `n` atoms is a tuple of `n` Booleans, where position `i` holds
the truth value of the atom with identifier `i`.
"""
from __future__ import annotations

from itertools import product
from typing import Iterator, Optional, TypeAlias

from .formula import Formula


Valuation: TypeAlias = tuple[bool, ...]


def valuations(n: int) -> Iterator[Valuation]:
    """Lazily enumerate all :math:`2^n` valuations of `n` atoms. Each position
    is fixed to :obj:`True` before :obj:`False`, with position 0 varying
    slowest. Only one valuation is alive at a time.

    >>> list(valuations(2))
    [(True, True), (True, False), (False, True), (False, False)]
    >>> list(valuations(0))
    [()]
    """
    if n < 0:
        raise ValueError(f'number of atoms must be non-negative; {n} is invalid')
    return product((True, False), repeat=n)


def number_of_atoms(f: Formula, n: Optional[int] = None) -> int:
    """Check `n` against the atoms of `f`. If `n` is :obj:`None`, derive it
    from the largest atom identifier occurring in `f`.

    >>> from setlogic.parser import parse
    >>> f, _ = parse('A ∩ (B ∪ U)')
    >>> number_of_atoms(f)
    2
    >>> number_of_atoms(f, 1)
    Traceback (most recent call last):
    ...
    ValueError: valuations of length 1 do not cover atom identifier 1
    """
    max_id = f.max_id()
    if n is None:
        return max(max_id + 1, 0)
    if n <= max_id:
        raise ValueError(f'valuations of length {n} do not cover atom identifier {max_id}')
    return n


def truth_table(f: Formula, n: Optional[int] = None) -> list[tuple[Valuation, bool]]:
    """The truth table of `f` as a list of rows ``(valuation, value)`` in the
    order of :func:`valuations`.

    >>> from setlogic.parser import parse
    >>> f, n = parse('A \\\\ B')
    >>> for valuation, value in truth_table(f, n):
    ...     print(valuation, value)
    (True, True) False
    (True, False) True
    (False, True) False
    (False, False) False
    """
    return [(valuation, f.eval(valuation)) for valuation in valuations(number_of_atoms(f, n))]
