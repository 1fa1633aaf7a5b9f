"""
Tests for normal forms via Boolean abstraction.
"""

import random

import pytest
import sympy

from setlogic.bnf import BooleanAbstraction, cnf, dnf, is_valid
from setlogic.formula import Atom, Conn
from setlogic.generator import generate_formula
from setlogic.parser import parse
from setlogic.valuation import valuations


def equivalent(f, g, n):
    return all(f.eval(v) == g.eval(v) for v in valuations(n))


class TestBooleanAbstraction:

    def test_reserved_atoms(self):
        ba = BooleanAbstraction()
        assert ba.to_sympy(Atom(-1)) is sympy.true
        assert ba.to_sympy(Atom(-2)) is sympy.false

    def test_symbols_are_shared(self):
        ba = BooleanAbstraction()
        f, _ = parse('A ∩ (B ∪ A)')
        e = ba.to_sympy(f)
        assert len(e.free_symbols) == 2

    def test_name_clash(self):
        ba = BooleanAbstraction()
        e = ba.to_sympy(Atom(0, 'X') & Atom(1, 'X'))
        assert len(e.free_symbols) == 2

    def test_difference(self):
        ba = BooleanAbstraction()
        f, _ = parse('A \\ B')
        a, b = sympy.symbols('A B')
        assert ba.to_sympy(f) == sympy.And(a, sympy.Not(b))

    def test_round_trip_is_equivalent(self):
        ba = BooleanAbstraction()
        f, n = parse('(A = B) ⊆ (A \\ C)')
        g = ba.from_sympy(ba.to_sympy(f))
        assert equivalent(f, g, n)

    def test_xor(self):
        ba = BooleanAbstraction()
        f, n = parse('A ∪ B')
        a, b = (ba.to_sympy(atom) for atom in f.atoms())
        g = ba.from_sympy(sympy.Xor(a, b))
        assert [g.eval(v) for v in valuations(n)] == [False, True, True, False]

    def test_foreign_symbol(self):
        with pytest.raises(ValueError):
            BooleanAbstraction().from_sympy(sympy.Symbol('Z'))

    def test_untranslatable(self):
        ba = BooleanAbstraction()
        f, _ = parse('(A ∩ B) ∪ C')
        a, b, c = (ba.to_sympy(atom) for atom in f.atoms())
        with pytest.raises(ValueError):
            ba.from_sympy(sympy.ITE(a, b, c))


class TestNormalForms:

    def test_cnf(self):
        f, _ = parse('A ∪ (B ∩ C)')
        g = cnf(f)
        assert g.conn is Conn.INTER
        assert equivalent(f, g, 3)

    def test_dnf(self):
        f, _ = parse('A ∩ (B ∪ C)')
        g = dnf(f)
        assert g.conn is Conn.UNION
        assert equivalent(f, g, 3)

    def test_tautology_simplifies_to_universe(self):
        assert str(dnf(parse('(A ∩ B) ⊆ A')[0])) == 'U'
        assert str(cnf(parse('A \\ A')[0])) == '∅'

    def test_input_already_in_normal_form_is_simplified(self):
        assert str(dnf(parse('(A ∩ B) ∪ (A \\ A)')[0])) == '(A ∩ B)'
        assert str(cnf(parse('A ∩ (U \\ A)')[0])) == '∅'

    def test_random_formulas(self):
        rng = random.Random(1)
        for _ in range(20):
            f, n = parse(generate_formula(rng, max_connectives=8))
            assert equivalent(f, cnf(f), n)
            assert equivalent(f, dnf(f), n)

    def test_is_valid(self):
        assert is_valid(parse('(A ∩ (B ∪ C)) = ((A ∩ B) ∪ (A ∩ C))')[0])
        assert not is_valid(parse('A = B')[0])
