"""This module :mod:`setlogic.bnf` computes Boolean normal forms of formulas of
set algebra via Boolean abstraction. Set variables become propositional
variables, the universe and the empty set become truth values, and the
connectives become the corresponding Boolean operators. Technically, we use
the logic module of `SymPy <https://docs.sympy.org/latest/modules/logic.html>`_
for the Boolean computations.

Since the language has no unary negation, negated atoms in normal forms are
rendered as complements :math:`U \\setminus A`.

The Boolean abstraction also provides :func:`is_valid`, a decision procedure
independent of the enumeration in :mod:`setlogic.tautology`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import functools
from typing import ClassVar

import sympy
from sympy.logic import boolalg
from sympy.logic.inference import satisfiable

from .formula import Atom, Bin, Conn, EMPTYSET, Formula, UNIVERSE


@dataclass
class BooleanAbstraction:
    """Translation of formulas into SymPy Boolean expressions and back. An
    instance remembers the correspondence between atoms and SymPy symbols, so
    that expressions obtained from :meth:`to_sympy` can be translated back by
    :meth:`from_sympy`.

    >>> from setlogic.parser import parse
    >>> ba = BooleanAbstraction()
    >>> ba.to_sympy(parse('(A ∩ U) ∪ (B ∩ ∅)')[0])
    A
    >>> print(ba.from_sympy(ba.to_sympy(parse('B ∩ ∅')[0])))
    ∅
    """

    _sympy_ops: ClassVar[dict[Conn, type[boolalg.Boolean]]] = {
        Conn.INTER: boolalg.And,
        Conn.UNION: boolalg.Or,
        Conn.SUBSETEQ: boolalg.Implies,
        Conn.EQUAL: boolalg.Equivalent}

    _atoms_to_sympy: dict[int, sympy.Symbol] = field(default_factory=dict)
    _sympy_to_atoms: dict[sympy.Symbol, Atom] = field(default_factory=dict)

    def from_sympy(self, e: boolalg.Boolean) -> Formula:
        """Translate a SymPy Boolean expression over the symbols created by
        :meth:`to_sympy` back into a formula.
        """
        match e:
            case sympy.Symbol():
                try:
                    return self._sympy_to_atoms[e]
                except KeyError:
                    raise ValueError(f'{e} does not originate from an atom') from None
            case boolalg.BooleanTrue():
                return Atom(UNIVERSE, 'U')
            case boolalg.BooleanFalse():
                return Atom(EMPTYSET, '∅')
            case boolalg.Not(args=(arg,)):
                return self.from_sympy(arg).complement()
            case boolalg.And(args=args):
                return self._fold(Conn.INTER, args)
            case boolalg.Or(args=args):
                return self._fold(Conn.UNION, args)
            case boolalg.Implies(args=(lhs, rhs)):
                return Bin(self.from_sympy(lhs), Conn.SUBSETEQ, self.from_sympy(rhs))
            case boolalg.Equivalent(args=args):
                fs = [self.from_sympy(arg) for arg in args]
                pairs = [Bin(fs[0], Conn.EQUAL, g) for g in fs[1:]]
                return functools.reduce(lambda lhs, rhs: Bin(lhs, Conn.INTER, rhs), pairs)
            case boolalg.Xor(args=(lhs, rhs)):
                g = self.from_sympy(lhs)
                h = self.from_sympy(rhs)
                return Bin(Bin(g, Conn.DIFF, h), Conn.UNION, Bin(h, Conn.DIFF, g))
            case _:
                raise ValueError(f'cannot translate {e} of type {type(e)}')

    def to_sympy(self, f: Formula) -> boolalg.Boolean:
        """Translate `f` into a SymPy Boolean expression.
        """
        match f:
            case Atom(id=-1):
                return sympy.true
            case Atom(id=-2):
                return sympy.false
            case Atom():
                return self._symbol(f)
            case Bin(conn=Conn.DIFF):
                return boolalg.And(self.to_sympy(f.lhs), boolalg.Not(self.to_sympy(f.rhs)))
            case Bin():
                return self._sympy_ops[f.conn](self.to_sympy(f.lhs), self.to_sympy(f.rhs))
            case _:
                assert False, type(f)

    def _fold(self, conn: Conn, args: tuple[boolalg.Boolean, ...]) -> Formula:
        fs = (self.from_sympy(arg) for arg in args)
        return functools.reduce(lambda lhs, rhs: Bin(lhs, conn, rhs), fs)

    def _symbol(self, atom: Atom) -> sympy.Symbol:
        try:
            return self._atoms_to_sympy[atom.id]
        except KeyError:
            pass
        name = str(atom)
        if any(s.name == name for s in self._sympy_to_atoms):
            name = f'{name}_{atom.id}'
        symbol = sympy.Symbol(name)
        self._atoms_to_sympy[atom.id] = symbol
        self._sympy_to_atoms[symbol] = atom
        return symbol


def cnf(f: Formula) -> Formula:
    """Compute a simplified conjunctive normal form of `f`.

    >>> from setlogic.parser import parse
    >>> f, _ = parse('A ∪ (B ∩ C)')
    >>> print(cnf(f))
    ((A ∪ B) ∩ (A ∪ C))
    """
    ba = BooleanAbstraction()
    return ba.from_sympy(boolalg.simplify_logic(ba.to_sympy(f), form='cnf', force=True))


def dnf(f: Formula) -> Formula:
    """Compute a simplified disjunctive normal form of `f`.

    >>> from setlogic.parser import parse
    >>> f, _ = parse('A ∩ (B ∪ C)')
    >>> print(dnf(f))
    ((A ∩ B) ∪ (A ∩ C))
    >>> print(dnf(parse('A ⊆ A')[0]))
    U
    """
    ba = BooleanAbstraction()
    return ba.from_sympy(boolalg.simplify_logic(ba.to_sympy(f), form='dnf', force=True))


def is_valid(f: Formula) -> bool:
    """Decide whether `f` is a tautology using a SAT solver on its Boolean
    abstraction.

    >>> from setlogic.parser import parse
    >>> is_valid(parse('(A ∩ B) ⊆ A')[0])
    True
    >>> is_valid(parse('A ⊆ (A ∩ B)')[0])
    False
    """
    e = BooleanAbstraction().to_sympy(f)
    return satisfiable(boolalg.Not(e)) is False
