r"""Implementation of formulas of set algebra.

An abstract base class :class:`Formula` implements representations of and
methods on formulas recursively built from atoms using binary connectives.
There are exactly two kinds of formulas:

+-------------------------------+-----------------------------------------+
| atoms                         | binary connections                      |
+-------------------------------+-----------------------------------------+
| :class:`Atom`                 | :class:`Bin`                            |
+-------------------------------+-----------------------------------------+

Atoms are identified by integers. The empty set and the universe are reserved
atoms with the identifiers :data:`EMPTYSET` and :data:`UNIVERSE`:

>>> A, B = Atom(0, 'A'), Atom(1, 'B')
>>> f = Bin(Bin(A, Conn.INTER, B), Conn.SUBSETEQ, A)
>>> print(f)
((A ∩ B) ⊆ A)

Formulas can be evaluated with respect to a valuation of their set variables.
The valuation is indexed by the identifiers of the atoms:

>>> f.eval([True, False])
True
>>> (A - Atom(EMPTYSET)).eval([False])
False

Formulas can also be built using infix operators:

>>> (A & B) >> A == f
True
"""

from .formula import Formula  # noqa

from .atom import Atom, EMPTYSET, MIN, UNIVERSE  # noqa

from .binary import Bin, Conn  # noqa


__all__ = [
    'Formula', 'Atom', 'Bin', 'Conn',

    'EMPTYSET', 'UNIVERSE'
]
