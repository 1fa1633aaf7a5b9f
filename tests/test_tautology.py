"""
Tests for the exhaustive tautology check.
"""

import logging
import random

import pytest

from setlogic.bnf import is_valid
from setlogic.generator import generate_formula
from setlogic.parser import parse
from setlogic.tautology import counterexample, is_satisfiable, is_tautology, Options
from setlogic.valuation import truth_table, valuations


class TestTautology:
    """Small formulas with known verdicts."""

    def test_self_intersection(self):
        f, n = parse('A ∩ A')
        assert n == 1
        assert not is_tautology(f, n)
        assert counterexample(f, n) == (False,)

    def test_union_with_universe(self):
        f, n = parse('A ∪ U')
        assert is_tautology(f, n)

    def test_intersection_with_empty_set(self):
        f, n = parse('A ∩ ∅')
        assert not is_tautology(f, n)

    def test_reflexive_equality(self):
        f, n = parse('(A = A)')
        assert is_tautology(f, n)

    @pytest.mark.parametrize('s', [
        '(A ∩ B) ⊆ A',
        'A ⊆ (A ∪ B)',
        '(A \\ B) ⊆ A',
        '∅ ⊆ A',
        'A ⊆ U',
        '(A ∩ (B ∪ C)) = ((A ∩ B) ∪ (A ∩ C))',
        '(U \\ (A ∪ B)) = ((U \\ A) ∩ (U \\ B))',
        '((A \\ B) ∩ B) = ∅',
        'U = U'])
    def test_laws_of_set_algebra(self, s):
        assert is_tautology(*parse(s))

    @pytest.mark.parametrize('s', [
        'A ⊆ B',
        'A = B',
        '(A \\ B) = (B \\ A)',
        'U ⊆ A',
        '∅',
        'U = ∅'])
    def test_non_tautologies(self, s):
        assert not is_tautology(*parse(s))

    def test_no_ordinary_atoms(self):
        f, n = parse('∅ ⊆ U')
        assert n == 0
        assert is_tautology(f, n)
        assert counterexample(parse('U ⊆ ∅')[0], 0) == ()

    def test_counterexample_is_first_falsifying_row(self):
        f, n = parse('(A ∪ B) ⊆ (A ∩ C)')
        rows = truth_table(f, n)
        expected = next(valuation for valuation, value in rows if not value)
        assert counterexample(f, n) == expected
        assert f.eval(expected) is False

    def test_agrees_with_truth_table(self):
        rng = random.Random(4711)
        for _ in range(50):
            f, n = parse(generate_formula(rng))
            assert is_tautology(f, n) == all(value for _, value in truth_table(f, n))

    def test_agrees_with_sat_solver(self):
        rng = random.Random(42)
        for _ in range(50):
            f, n = parse(generate_formula(rng))
            assert is_tautology(f, n) == is_valid(f)

    def test_default_number_of_atoms(self):
        f, _ = parse('(A ∩ B) ⊆ A')
        assert is_tautology(f)

    def test_extra_atoms_do_not_change_verdict(self):
        f, n = parse('A ∩ A')
        assert counterexample(f, n + 2) == (False, True, True)

    def test_too_few_atoms(self):
        f, _ = parse('A ∩ B')
        with pytest.raises(ValueError):
            is_tautology(f, 1)

    def test_many_atoms_without_bound(self):
        s = 'X25'
        for i in reversed(range(25)):
            s = f'(X{i} ∩ {s})'
        f, n = parse(s)
        assert n == 26
        assert Options().max_atoms is None
        assert not is_tautology(f, n)
        assert counterexample(f, n) == (True,) * 25 + (False,)

    def test_max_atoms(self):
        f, n = parse('(A ∩ B) ∩ (C ∩ D)')
        with pytest.raises(ValueError, match='4 atoms exceed the maximum of 3'):
            is_tautology(f, n, Options(max_atoms=3))
        assert not is_tautology(f, n, Options(max_atoms=4))

    def test_options_are_frozen(self):
        options = Options()
        with pytest.raises(AttributeError):
            options.max_atoms = 3

    def test_progress_is_logged(self, caplog):
        f, n = parse('(A ∩ B) ⊆ A')
        with caplog.at_level(logging.INFO, logger='setlogic'):
            assert is_tautology(f, n, Options(log_rate=0.0))
        messages = [record.getMessage() for record in caplog.records]
        assert any('enumerating 2^2 valuations' in m for m in messages)
        assert any('4 of 4 valuations checked' in m for m in messages)
        assert any('tautology after 4 valuations' in m for m in messages)


class TestSatisfiable:
    """Satisfiability via the complement."""

    def test_satisfiable(self):
        assert is_satisfiable(*parse('A \\ B'))
        assert is_satisfiable(*parse('A = B'))

    def test_unsatisfiable(self):
        assert not is_satisfiable(*parse('A ∩ ∅'))
        assert not is_satisfiable(*parse('(A \\ B) ∩ B'))

    def test_tautologies_are_satisfiable(self):
        assert is_satisfiable(*parse('A ∪ U'))


class TestValuations:
    """Enumeration order."""

    def test_count(self):
        assert len(list(valuations(5))) == 32

    def test_order(self):
        assert list(valuations(1)) == [(True,), (False,)]
        assert list(valuations(3))[1] == (True, True, False)

    def test_negative(self):
        with pytest.raises(ValueError):
            valuations(-1)
