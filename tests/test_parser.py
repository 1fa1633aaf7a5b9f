"""
Tests for the atom dictionary and the recursive descent parser.
"""

import pytest

from setlogic.formula import Atom, Bin, Conn, EMPTYSET, UNIVERSE
from setlogic.parser import AtomDict, FormulaParser, parse, ParseError


class TestAtomDict:
    """Identifier assignment."""

    def test_first_occurrence_order(self):
        d = AtomDict()
        assert [d.atom_id(name) for name in ['X', 'Y', 'X', 'Z', 'Y']] == [0, 1, 0, 2, 1]
        assert d.number_of_atoms() == 3
        assert len(d) == 3

    def test_reserved_names(self):
        d = AtomDict()
        assert d.atom_id('0') == EMPTYSET
        assert d.atom_id('∅') == EMPTYSET
        assert d.atom_id('U') == UNIVERSE
        assert d.number_of_atoms() == 0
        assert d.atom_id('A') == 0

    def test_contains(self):
        d = AtomDict()
        assert 'U' in d
        assert 'A' not in d
        d.atom('A')
        assert 'A' in d

    def test_bijection(self):
        d = AtomDict()
        names = ['p', 'q', 'r', 'q', 'p', 's']
        ids = {name: d.atom_id(name) for name in names}
        assert sorted(ids.values()) == list(range(d.number_of_atoms()))
        assert list(d.names()) == ['p', 'q', 'r', 's']


class TestParser:
    """Parsing of well-formed and ill-formed input."""

    def test_atom(self):
        f, n = parse('A')
        assert f == Atom(0, 'A')
        assert n == 1

    def test_binary(self):
        f, n = parse('A ∩ B')
        assert f == Bin(Atom(0, 'A'), Conn.INTER, Atom(1, 'B'))
        assert n == 2

    def test_nested(self):
        f, n = parse('((A ∪ B) \\ C) ⊆ (A ≡ 0)')
        assert str(f) == '(((A ∪ B) \\ C) ⊆ (A = ∅))'
        assert n == 3

    def test_ascii_spelling(self):
        f, _ = parse('(A \\cap B) \\subseteq (A \\cup B)')
        g, _ = parse('(A ∩ B) ⊆ (A ∪ B)')
        assert f == g

    def test_minus_is_difference(self):
        f, _ = parse('A - B')
        assert f.conn is Conn.DIFF

    def test_redundant_parentheses(self):
        f, _ = parse('((A))')
        assert f == Atom(0, 'A')

    def test_reserved_atoms(self):
        f, n = parse('∅ ∪ U')
        assert f == Bin(Atom(EMPTYSET, '∅'), Conn.UNION, Atom(UNIVERSE, 'U'))
        assert n == 0

    def test_identifiers_follow_first_occurrence(self):
        f, _ = parse('(Y ∩ X) ∪ (X ∩ Z)')
        assert [atom.id for atom in f.atoms()] == [0, 1, 1, 2]

    def test_identifiers_independent_of_spelling(self):
        f, n = parse('(P ∩ Q) ⊆ P')
        g, m = parse('(foo ∩ bar) ⊆ foo')
        assert n == m == 2
        assert [a.id for a in f.atoms()] == [a.id for a in g.atoms()]

    def test_independent_registries(self):
        f1, _ = parse('B ∩ A')
        f2, _ = parse('A ∩ B')
        assert f1.lhs.id == 0 and f1.lhs.name == 'B'
        assert f2.lhs.id == 0 and f2.lhs.name == 'A'

    def test_atom_names(self):
        parser = FormulaParser('(B ∩ A) ∪ (0 ∩ B)')
        parser.parse()
        assert parser.atom_names() == ['B', 'A']
        assert parser.number_of_atoms() == 2

    def test_missing_closing_parenthesis(self):
        with pytest.raises(ParseError) as excinfo:
            parse('(A')
        assert excinfo.value.msg == "')' expected"
        assert excinfo.value.remaining == ''

    def test_missing_connective(self):
        with pytest.raises(ParseError) as excinfo:
            parse('A B')
        assert excinfo.value.msg == 'end of input expected'
        assert excinfo.value.remaining == 'B'

    def test_invalid_character_after_formula(self):
        with pytest.raises(ParseError) as excinfo:
            parse('A & B')
        assert excinfo.value.msg == 'end of input expected'
        assert excinfo.value.remaining == '& B'

    def test_chained_connectives(self):
        with pytest.raises(ParseError) as excinfo:
            parse('A ∩ B ∩ C')
        assert excinfo.value.msg == 'end of input expected'
        assert excinfo.value.remaining == '∩ C'

    @pytest.mark.parametrize('s, remaining', [
        ('', ''),
        (')', ')'),
        ('A ∩', ''),
        ('∩ A', '∩ A'),
        ('& B', '& B'),
        ('\\ A', '\\ A'),
        ('A ∩ (\\ B)', '\\ B)')])
    def test_beginning_of_formula_expected(self, s, remaining):
        with pytest.raises(ParseError) as excinfo:
            parse(s)
        assert excinfo.value.msg == 'beginning of formula expected'
        assert excinfo.value.remaining == remaining

    def test_deep_nesting(self):
        f, _ = parse('(' * 100 + 'A' + ')' * 100)
        assert f == Atom(0, 'A')
        with pytest.raises(ParseError) as excinfo:
            parse('(' * 100000 + 'A' + ')' * 100000)
        assert excinfo.value.msg == 'formula nested too deeply'

    def test_letters_only_in_names(self):
        with pytest.raises(ParseError) as excinfo:
            parse('A²')
        assert excinfo.value.msg == 'end of input expected'
        assert excinfo.value.remaining == '²'

    def test_error_message(self):
        with pytest.raises(ParseError, match=r"^Parse error: '\)' expected at $"):
            parse('(A ∩ B')

    def test_parse_error_is_no_trace_exception(self):
        from setlogic.support.excepthook import NoTraceException
        assert issubclass(ParseError, NoTraceException)
