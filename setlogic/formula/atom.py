"""Atoms are the leaves of formulas. An atom denotes either a set variable or
one of the two reserved sets, the empty set and the universe. Atoms are
identified by integers. The reserved sets have negative identifiers
:data:`EMPTYSET` and :data:`UNIVERSE`; set variables have non-negative
identifiers, which are assigned by the parser in the order of first
occurrence.
"""
from __future__ import annotations

from typing import Final, final, Sequence

from .formula import Formula


MIN: Final = -2
"""Valid atom identifiers are greater than or equal to :data:`MIN`.
"""

EMPTYSET: Final = -2
"""The identifier of the empty set.
"""

UNIVERSE: Final = -1
"""The identifier of the universe.
"""


@final
class Atom(Formula):
    """A set variable or one of the reserved sets.

    >>> Atom(0, 'A')
    Atom(0, 'A')
    >>> print(Atom(3))
    A3
    >>> print(Atom(EMPTYSET), Atom(UNIVERSE))
    ∅ U

    The name is optional and used for printing only. Reserved atoms always
    print as ``∅`` and ``U``, respectively.

    >>> Atom(-3)
    Traceback (most recent call last):
    ...
    ValueError: atom identifier must be an integer >= -2; -3 is invalid
    """

    id: int
    """The unique identifier of the atom. Set variables have identifiers
    ``>= 0``.
    """

    name: str
    """The name used for printing, possibly empty.
    """

    @property
    def args(self) -> tuple[int, str]:
        return (self.id, self.name)

    def __init__(self, id: int, name: str = '') -> None:
        if not isinstance(id, int) or isinstance(id, bool) or id < MIN:
            raise ValueError(f'atom identifier must be an integer >= {MIN}; {id!r} is invalid')
        if not isinstance(name, str):
            raise ValueError(f'atom name must be a string; {name!r} is {type(name)}')
        super().__init__()
        self.id = id
        self.name = name
        object.__setattr__(self, '_frozen', True)

    def eval(self, valuation: Sequence[bool]) -> bool:
        """The universe is true, the empty set is false, and the truth value of
        a set variable is looked up in `valuation`.

        >>> Atom(UNIVERSE).eval([])
        True
        >>> Atom(EMPTYSET).eval([True])
        False
        >>> Atom(1, 'B').eval([True, False])
        False
        """
        match self.id:
            case -1:
                return True
            case -2:
                return False
            case i:
                return bool(valuation[i])

    def is_reserved(self) -> bool:
        """Whether `self` is the empty set or the universe.
        """
        return self.id < 0
