"""We introduce formulas with a binary connective at the top level as a
subclass of :class:`.Formula`.
"""
from __future__ import annotations

from enum import Enum
from typing import Final, final, Sequence

from .formula import Formula


class Conn(Enum):
    r"""Binary connectives of set algebra. The value of each member is its
    display symbol.

    +------------------+------------------+------------------------+-------------------------+---------------+
    | :math:`\cap`     | :math:`\cup`     | :math:`\setminus`      | :math:`\subseteq`       | :math:`=`     |
    +------------------+------------------+------------------------+-------------------------+---------------+
    | :attr:`INTER`    | :attr:`UNION`    | :attr:`DIFF`           | :attr:`SUBSETEQ`        | :attr:`EQUAL` |
    +------------------+------------------+------------------------+-------------------------+---------------+

    >>> Conn.INTER
    Conn.INTER
    >>> print(Conn.DIFF)
    \
    """  # noqa

    INTER = '∩'
    UNION = '∪'
    DIFF = '\\'
    SUBSETEQ = '⊆'
    EQUAL = '='

    @property
    def latex(self) -> str:
        """The LaTeX command for the connective.
        """
        return _LATEX[self]

    @property
    def symbol(self) -> str:
        """How to print the connective.
        """
        return self.value

    def apply(self, lhs: bool, rhs: bool) -> bool:
        """Combine the truth values of the two sides.

        Difference is true when the left hand side is true and the right hand
        side is false. Subset is material implication.

        >>> [Conn.DIFF.apply(l, r) for l in (True, False) for r in (True, False)]
        [False, True, False, False]
        >>> [Conn.SUBSETEQ.apply(l, r) for l in (True, False) for r in (True, False)]
        [True, False, True, True]
        """
        match self:
            case Conn.INTER:
                return lhs and rhs
            case Conn.UNION:
                return lhs or rhs
            case Conn.DIFF:
                return lhs and not rhs
            case Conn.SUBSETEQ:
                return not lhs or rhs
            case Conn.EQUAL:
                return lhs == rhs
            case _:
                assert False, self

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}.{self.name}'

    def __str__(self) -> str:
        return self.value


_LATEX: Final = {
    Conn.INTER: '\\cap',
    Conn.UNION: '\\cup',
    Conn.DIFF: '\\setminus',
    Conn.SUBSETEQ: '\\subseteq',
    Conn.EQUAL: '='}


@final
class Bin(Formula):
    r"""A binary connection of two subformulas.

    >>> from setlogic.formula import Atom
    >>> A, B = Atom(0, 'A'), Atom(1, 'B')
    >>> f = Bin(A, Conn.EQUAL, Bin(B, Conn.UNION, A))
    >>> f
    Bin(Atom(0, 'A'), Conn.EQUAL, Bin(Atom(1, 'B'), Conn.UNION, Atom(0, 'A')))
    >>> print(f)
    (A = (B ∪ A))
    >>> Bin(A, '∩', B)
    Traceback (most recent call last):
    ...
    ValueError: '∩' is not a connective
    """

    lhs: Formula
    """The left subformula.
    """

    conn: Conn
    """The connective.
    """

    rhs: Formula
    """The right subformula.
    """

    @property
    def args(self) -> tuple[Formula, Conn, Formula]:
        return (self.lhs, self.conn, self.rhs)

    def __init__(self, lhs: Formula, conn: Conn, rhs: Formula) -> None:
        for arg in (lhs, rhs):
            if not isinstance(arg, Formula):
                raise ValueError(f'{arg!r} is not a Formula')
        if not isinstance(conn, Conn):
            raise ValueError(f'{conn!r} is not a connective')
        super().__init__()
        self.lhs = lhs
        self.conn = conn
        self.rhs = rhs
        object.__setattr__(self, '_frozen', True)

    def eval(self, valuation: Sequence[bool]) -> bool:
        """Evaluate both subformulas and combine them via
        :meth:`Conn.apply`.

        >>> from setlogic.formula import Atom, UNIVERSE
        >>> A = Atom(0, 'A')
        >>> (A | Atom(UNIVERSE)).eval([False])
        True
        >>> (A - A).eval([True])
        False
        """
        return self.conn.apply(self.lhs.eval(valuation), self.rhs.eval(valuation))
