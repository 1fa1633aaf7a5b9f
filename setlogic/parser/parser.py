"""A recursive descent parser for fully parenthesized formulas of set algebra,
following the grammar

.. code-block:: text

    formula    ::= factor [ connective factor ]
    factor     ::= '(' formula ')' | atom | emptyset
    connective ::= '∩' | '∪' | '\\' | '⊆' | '='

The parser does not implement operator precedence. Formulas such as
``A ∩ B ∩ C`` must be parenthesized to either ``(A ∩ B) ∩ C`` or
``A ∩ (B ∩ C)``.

The parser has the following states, each of which is implemented by a
method:

0. :meth:`FormulaParser.parse` (initial state): parse a formula and then
   expect the end of input;
1. parse a formula: parse a factor and then look for a connective;
2. parse a factor: a parenthesized formula, the empty set, or an atom;
3. parse a connective: if at a connective, parse a second factor.
"""
from __future__ import annotations

import logging
from typing import NoReturn

from ..formula import Bin, Formula
from ..support.excepthook import NoTraceException
from .atomdict import AtomDict
from .scanner import RPAREN, EOF, Scanner, TokenType


class ParseError(NoTraceException):
    """Raised if the input does not match the grammar. The exception carries
    a short message and the remaining input at the point of failure.

    >>> exc = ParseError("')' expected", '')
    >>> exc.msg, exc.remaining
    ("')' expected", '')
    >>> str(exc)
    "Parse error: ')' expected at "
    """

    def __init__(self, msg: str, remaining: str) -> None:
        super().__init__(msg, remaining)
        self.msg = msg
        self.remaining = remaining

    def __str__(self) -> str:
        return f'Parse error: {self.msg} at {self.remaining}'


class FormulaParser:
    """Parse a string into a formula. The parser owns an :class:`.AtomDict`
    for the lifetime of the parser, so that after parsing the number of
    atoms is known.

    >>> parser = FormulaParser('(A ∪ B) = (B ∪ A)')
    >>> f = parser.parse()
    >>> print(f)
    ((A ∪ B) = (B ∪ A))
    >>> parser.number_of_atoms()
    2
    >>> FormulaParser('A B').parse()
    Traceback (most recent call last):
    ...
    setlogic.parser.parser.ParseError: Parse error: end of input expected at B
    """

    def __init__(self, s: str) -> None:
        self.scanner = Scanner(s)
        self.atom_dict = AtomDict()

    def atom_names(self) -> list[str]:
        """The names of the ordinary atoms seen so far, ordered by their
        identifiers.
        """
        return list(self.atom_dict.names())

    def number_of_atoms(self) -> int:
        """The number of different ordinary atoms seen so far.
        """
        return self.atom_dict.number_of_atoms()

    def parse(self) -> Formula:
        """Parse the whole input into a single formula. Nesting deeper than
        the interpreter's recursion limit permits is reported as a
        :exc:`ParseError`.
        """
        try:
            f = self._parse_formula()
        except RecursionError:
            self._error('formula nested too deeply')
        self._parse_eof()
        logging.debug(f'{self.parse.__qualname__}: {f} has {self.number_of_atoms()} atoms')
        return f

    def _error(self, msg: str) -> NoReturn:
        raise ParseError(msg, self.scanner.remaining())

    def _parse_connective(self, f: Formula) -> Formula:
        # If the next token is a connective, parse the second factor.
        # Otherwise, f is complete.
        conn = self.scanner.peek().connective()
        if conn is None:
            return f
        self.scanner.next()
        return Bin(f, conn, self._parse_factor())

    def _parse_eof(self) -> None:
        if self.scanner.peek() is not EOF:
            self._error('end of input expected')

    def _parse_factor(self) -> Formula:
        token = self.scanner.peek()
        match token.type:
            case TokenType.LPAREN:
                self.scanner.next()
                f = self._parse_formula()
                self._parse_rparen()
                return f
            case TokenType.EMPTYSET:
                self.scanner.next()
                return self.atom_dict.atom('∅')
            case TokenType.ATOM:
                self.scanner.next()
                return self.atom_dict.atom(token.value)
            case _:
                self._error('beginning of formula expected')

    def _parse_formula(self) -> Formula:
        f = self._parse_factor()
        return self._parse_connective(f)

    def _parse_rparen(self) -> None:
        if self.scanner.peek() is not RPAREN:
            self._error("')' expected")
        self.scanner.next()


def parse(s: str) -> tuple[Formula, int]:
    """Parse `s` and return the formula together with the number of its
    ordinary atoms.

    >>> f, n = parse('A ∩ (B \\\\cup 0)')
    >>> f
    Bin(Atom(0, 'A'), Conn.INTER, Bin(Atom(1, 'B'), Conn.UNION, Atom(-2, '∅')))
    >>> n
    2
    """
    parser = FormulaParser(s)
    f = parser.parse()
    return f, parser.number_of_atoms()
