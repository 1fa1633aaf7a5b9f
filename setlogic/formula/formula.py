from __future__ import annotations

from abc import abstractmethod
from typing import Any, Final, Iterator, Optional, Sequence, Self
from typing_extensions import TypeIs

from IPython.lib import pretty


class Formula:
    r"""This abstract base class implements representations of and methods on
    formulas of set algebra recursively built from atoms using binary
    connectives:

    1. Atoms:

       a. Set variables :math:`A, B, \dots`

       b. The empty set :math:`\emptyset` and the universe :math:`U`

    2. Binary connectives:

       a. Intersection :math:`\cap` and union :math:`\cup`

       b. Difference :math:`\setminus`

       c. Subset :math:`\subseteq` and equality :math:`=`

    There are exactly two kinds of formulas. Atoms are implemented by the
    final class :class:`.atom.Atom` and binary connections by the final class
    :class:`.binary.Bin`. As an abstract base class, :class:`Formula` cannot be
    instantiated.

    Formulas are immutable. Their attributes are set once during
    initialization, and any later assignment raises an :exc:`AttributeError`.

    Formulas are interpreted over valuations. A valuation is a sequence of
    Booleans indexed by the identifiers of the ordinary atoms. An atom is
    true if the corresponding set contains a fixed generic element, and the
    connectives translate accordingly into Boolean operators. In that sense,
    a formula is a tautology if it holds for all valuations.
    """

    _hash: Optional[int]
    _frozen: bool = False

    @property
    def op(self) -> type[Self]:
        """Operator. This property can be used with instances of subclasses of
        :class:`Formula`. It yields the respective subclass.
        """
        return type(self)

    @property
    @abstractmethod
    def args(self) -> tuple[Any, ...]:
        """The arguments of a formula as a tuple.
        """
        ...

    def __and__(self, other: Formula) -> Formula:
        """Override the :obj:`& <object.__and__>` operator to build an
        intersection.

        >>> from setlogic.formula import Atom
        >>> Atom(0, 'A') & Atom(1, 'B')
        Bin(Atom(0, 'A'), Conn.INTER, Atom(1, 'B'))
        """
        return Bin(self, Conn.INTER, other)

    def __eq__(self, other: object) -> bool:
        """A recursive test for equality of the `self` and `other`.

        Note that this is not the connective for equality of sets.

        >>> from setlogic.formula import Atom
        >>> f1 = Atom(0, 'A') | Atom(1, 'B')
        >>> f2 = Atom(0, 'A') | Atom(1, 'B')
        >>> f1 == f2
        True
        >>> f1 is f2
        False
        """
        if self is other:
            return True
        if not isinstance(other, Formula):
            return False
        if self.op is not other.op:
            return False
        if hash(self) != hash(other):
            return False
        return self.args == other.args

    def __hash__(self) -> int:
        if self._hash is None:
            object.__setattr__(self, '_hash', hash((self.op.__name__, self.args)))
        assert self._hash is not None
        return self._hash

    @abstractmethod
    def __init__(self, *args: object) -> None:
        """This abstract base class is not supposed to have instances itself.
        Technically this is enforced via this abstract initializer.
        """
        object.__setattr__(self, '_hash', None)

    def __or__(self, other: Formula) -> Formula:
        """Override the :obj:`| <object.__or__>` operator to build a union.

        >>> from setlogic.formula import Atom, UNIVERSE
        >>> print(Atom(0, 'A') | Atom(UNIVERSE))
        (A ∪ U)
        """
        return Bin(self, Conn.UNION, other)

    def __repr__(self) -> str:
        """A representation of the :class:`Formula` `self` that is suitable
        for use as an input.
        """
        return f'{self.op.__name__}({", ".join(repr(arg) for arg in self.args)})'

    def __rshift__(self, other: Formula) -> Formula:
        """Override the :obj:`>> <object.__rshift__>` operator to build a
        subset relation.

        >>> from setlogic.formula import Atom
        >>> print(Atom(0, 'A') >> Atom(1, 'B'))
        (A ⊆ B)
        """
        return Bin(self, Conn.SUBSETEQ, other)

    def __setattr__(self, name: str, value: object) -> None:
        if self._frozen:
            raise AttributeError(f'{self.op.__name__} is immutable; cannot set {name}')
        super().__setattr__(name, value)

    def __str__(self) -> str:
        """Representation of the formula used in printing. Binary connections
        are always parenthesized, so that the output can be parsed again.
        """
        match self:
            case Atom():
                if self.id == EMPTYSET:
                    return '∅'
                if self.id == UNIVERSE:
                    return 'U'
                return self.name if self.name else f'A{self.id}'
            case Bin():
                return f'({self.lhs} {self.conn.symbol} {self.rhs})'
            case _:
                assert False, type(self)

    def __sub__(self, other: Formula) -> Formula:
        """Override the :obj:`- <object.__sub__>` operator to build a
        difference.

        >>> from setlogic.formula import Atom
        >>> print(Atom(0, 'A') - Atom(1, 'B'))
        (A \\ B)
        """
        return Bin(self, Conn.DIFF, other)

    def as_latex(self) -> str:
        r"""LaTeX representation as a string, which can be used elsewhere.

        >>> from setlogic.formula import Atom, EMPTYSET
        >>> f = (Atom(0, 'A') - Atom(EMPTYSET)) >> Atom(0, 'A')
        >>> f.as_latex()
        '(A \\setminus \\emptyset) \\subseteq A'

        .. seealso:: :meth:`_repr_latex_` -- LaTeX representation for Jupyter
            notebooks
        """
        SPACING: Final = ' '

        def _as_latex(f: Formula, toplevel: bool) -> str:
            match f:
                case Atom():
                    if f.id == EMPTYSET:
                        return '\\emptyset'
                    if f.id == UNIVERSE:
                        return 'U'
                    return f.name if f.name else f'A_{{{f.id}}}'
                case Bin():
                    s = (f'{_as_latex(f.lhs, False)}{SPACING}{f.conn.latex}'
                         f'{SPACING}{_as_latex(f.rhs, False)}')
                    return s if toplevel else f'({s})'
                case _:
                    assert False, type(f)

        return _as_latex(self, True)

    def atoms(self) -> Iterator[Atom]:
        """An iterator over all occurrences of atoms in `self`, from left to
        right. Reserved atoms are included.

        >>> from setlogic.parser import parse
        >>> f, _ = parse('(A ∩ B) ∪ (A ∩ ∅)')
        >>> [str(atom) for atom in f.atoms()]
        ['A', 'B', 'A', '∅']
        """
        match self:
            case Atom():
                yield self
            case Bin():
                yield from self.lhs.atoms()
                yield from self.rhs.atoms()
            case _:
                assert False, type(self)

    def complement(self) -> Formula:
        """The complement :math:`U \\setminus f` of `self`, which is true
        exactly when `self` is false. There is no unary negation in the
        language; the complement takes its place.

        >>> from setlogic.formula import Atom
        >>> print(Atom(0, 'A').complement())
        (U \\ A)
        """
        return Bin(Atom(UNIVERSE, 'U'), Conn.DIFF, self)

    def depth(self) -> int:
        """The depth of a formula is the maximal length of a path from the root
        to an atom in the expression tree.

        >>> from setlogic.parser import parse
        >>> f, _ = parse('((A ∩ B) ∪ C) = A')
        >>> f.depth()
        3
        """
        match self:
            case Atom():
                return 0
            case Bin():
                return max(self.lhs.depth(), self.rhs.depth()) + 1
            case _:
                assert False, type(self)

    @abstractmethod
    def eval(self, valuation: Sequence[bool]) -> bool:
        """Evaluate `self` under `valuation`, which assigns a truth value to
        every ordinary atom occurring in `self`, indexed by its identifier.
        """
        ...

    @staticmethod
    def is_atom(f: Formula) -> TypeIs[Atom]:
        """Type narrowing :func:`isinstance` test for :class:`.atom.Atom`.
        """
        return isinstance(f, Atom)

    @staticmethod
    def is_bin(f: Formula) -> TypeIs[Bin]:
        """Type narrowing :func:`isinstance` test for :class:`.binary.Bin`.
        """
        return isinstance(f, Bin)

    def max_id(self) -> int:
        """The largest identifier of an atom occurring in `self`. Adding 1
        yields the minimal length of a valuation admissible for :meth:`eval`.

        >>> from setlogic.parser import parse
        >>> f, n = parse('(A ∩ B) ⊆ U')
        >>> f.max_id(), n
        (1, 2)
        >>> f, n = parse('∅ ⊆ U')
        >>> f.max_id() + 1, n
        (0, 0)
        """
        return max(atom.id for atom in self.atoms())

    def _repr_latex_(self) -> str:
        r"""A LaTeX representation for Jupyter notebooks. In general, the
        method :meth:`as_latex` should be used instead.

        >>> from setlogic.formula import Atom
        >>> (Atom(0, 'A') & Atom(1, 'B'))._repr_latex_()
        '$\\displaystyle A \\cap B$'
        """
        return f'$\\displaystyle {self.as_latex()}$'

    def _repr_pretty_(self, p: pretty.RepresentationPrinter, cycle: bool) -> None:
        assert not cycle
        op = self.op.__name__
        with p.group(len(op) + 1, op + '(', ')'):
            for idx, arg in enumerate(self.args):
                if idx:
                    p.text(',')
                    p.breakable()
                p.pretty(arg)

    def size(self) -> int:
        """The number of nodes of the expression tree.

        >>> from setlogic.parser import parse
        >>> f, _ = parse('(A ∩ B) ∪ C')
        >>> f.size()
        5
        """
        match self:
            case Atom():
                return 1
            case Bin():
                return self.lhs.size() + self.rhs.size() + 1
            case _:
                assert False, type(self)


# The following imports are intentionally late to avoid circularity.
from .atom import Atom, EMPTYSET, UNIVERSE
from .binary import Bin, Conn
