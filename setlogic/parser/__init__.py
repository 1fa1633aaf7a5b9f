"""Parsing of formulas of set algebra from strings.

Both symbolic and ASCII spellings of the connectives are accepted:

>>> f, n = parse('((A \\\\cap B) \\\\cup (A - B)) \\\\subseteq A')
>>> print(f)
(((A ∩ B) ∪ (A \\ B)) ⊆ A)
>>> n
2
"""

from .atomdict import AtomDict  # noqa

from .parser import FormulaParser, parse, ParseError  # noqa

from .scanner import Scanner, Token, TokenType  # noqa


__all__ = [
    'AtomDict', 'FormulaParser', 'parse', 'ParseError', 'Scanner', 'Token', 'TokenType'
]
