"""Transform an input string into a sequence of tokens.

Create a :class:`Scanner` from an input string and call :meth:`Scanner.next`
repeatedly to obtain the tokens in sequence. Use :meth:`Scanner.peek` to look
ahead at the next token without consuming it.

>>> s = Scanner('(A ∪ B) ⊆ (A \\\\cap 0)')
>>> ' '.join(token.value for token in s)
'( A ∪ B ) ⊆ ( A ∩ ∅ )'
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import auto, Enum
from typing import Final, Iterator, Optional

from ..formula import Conn


class TokenType(Enum):
    """Classification of tokens for parsing formulas.
    """

    ATOM = auto()
    """Set variable; ``U`` is the universe.
    """

    EMPTYSET = auto()
    """Empty set: ``0`` or ``∅``.
    """

    LPAREN = auto()
    """Opening parenthesis: ``(``.
    """

    RPAREN = auto()
    """Closing parenthesis: ``)``.
    """

    INTER = auto()
    """Intersection: ``∩`` or ``\\cap``.
    """

    UNION = auto()
    """Union: ``∪`` or ``\\cup``.
    """

    DIFF = auto()
    """Difference: ``\\`` or ``-``.
    """

    SUBSETEQ = auto()
    """Subset: ``⊆`` or ``\\subseteq``.
    """

    EQUAL = auto()
    """Equality: ``=`` or ``≡``.
    """

    INVALID = auto()
    """Invalid character.
    """

    EOF = auto()
    """End of input.
    """


_CONNECTIVES: Final = {
    TokenType.INTER: Conn.INTER,
    TokenType.UNION: Conn.UNION,
    TokenType.DIFF: Conn.DIFF,
    TokenType.SUBSETEQ: Conn.SUBSETEQ,
    TokenType.EQUAL: Conn.EQUAL}


@dataclass(frozen=True)
class Token:
    """A single token of input. The type suffices for most tokens; the value
    is interesting for atoms.
    """

    type: TokenType
    value: str

    def connective(self) -> Optional[Conn]:
        """The connective denoted by `self`, or :obj:`None` if `self` is not a
        connective.

        >>> Token(TokenType.SUBSETEQ, '⊆').connective()
        Conn.SUBSETEQ
        >>> Token(TokenType.ATOM, 'A').connective() is None
        True
        """
        return _CONNECTIVES.get(self.type)

    def __str__(self) -> str:
        return self.value


LPAREN: Final = Token(TokenType.LPAREN, '(')
RPAREN: Final = Token(TokenType.RPAREN, ')')
EMPTYSET: Final = Token(TokenType.EMPTYSET, '∅')
INTER: Final = Token(TokenType.INTER, '∩')
UNION: Final = Token(TokenType.UNION, '∪')
DIFF: Final = Token(TokenType.DIFF, '\\')
SUBSETEQ: Final = Token(TokenType.SUBSETEQ, '⊆')
EQUAL: Final = Token(TokenType.EQUAL, '=')
EOF: Final = Token(TokenType.EOF, '')

_LEXEMES: Final = (
    ('\\cap', INTER),
    ('\\cup', UNION),
    ('\\subseteq', SUBSETEQ),
    ('(', LPAREN),
    (')', RPAREN),
    ('∩', INTER),
    ('∪', UNION),
    ('-', DIFF),
    ('\\', DIFF),
    ('⊆', SUBSETEQ),
    ('=', EQUAL),
    ('≡', EQUAL),
    ('∅', EMPTYSET))
"""Fixed lexemes in the order in which they are tried. Multi-character
spellings come first, so that ``\\cap`` is not read as a difference followed
by the atom ``cap``.
"""


def _is_name_char(c: str) -> bool:
    # Letters and decimal digits; excludes superscripts and vulgar fractions.
    return c.isalpha() or c.isdecimal()


class Scanner:
    """A scanner with one token lookahead.

    Invariant: the unconsumed input never starts with whitespace.

    >>> s = Scanner('  A \\\\subseteq  B ')
    >>> s.peek()
    Token(type=<TokenType.ATOM: 1>, value='A')
    >>> s.next().value, s.next().value, s.remaining()
    ('A', '⊆', 'B ')
    >>> s.next().value, s.next() is EOF, s.next() is EOF
    ('B', True, True)
    """

    def __init__(self, s: str) -> None:
        self._input = s
        self._pos = 0
        self._token: Optional[Token] = None
        self._token_length = 0
        self._trim(0)

    def __iter__(self) -> Iterator[Token]:
        """Consume and yield all tokens up to, but not including, the end of
        input.
        """
        while (token := self.next()) is not EOF:
            yield token

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.remaining()!r})'

    def _trim(self, n: int) -> None:
        # Discard n characters plus following whitespace.
        i = self._pos + n
        while i < len(self._input) and self._input[i].isspace():
            i += 1
        self._pos = i

    def _scan_token(self) -> Token:
        # Determine the next token and its length without consuming it.
        if self._pos >= len(self._input):
            self._token_length = 0
            return EOF
        for lexeme, token in _LEXEMES:
            if self._input.startswith(lexeme, self._pos):
                self._token_length = len(lexeme)
                return token
        i = self._pos
        while i < len(self._input) and _is_name_char(self._input[i]):
            i += 1
        if i > self._pos:
            self._token_length = i - self._pos
            atom = self._input[self._pos:i]
            if atom == '0':
                return EMPTYSET
            return Token(TokenType.ATOM, atom)
        self._token_length = 1
        return Token(TokenType.INVALID, self._input[self._pos])

    def next(self) -> Token:
        """Get the next token and remove it from the input. At the end of the
        input, :data:`EOF` is returned, repeatedly.
        """
        token = self.peek()
        self._trim(self._token_length)
        self._token_length = 0
        self._token = None
        return token

    def peek(self) -> Token:
        """Look ahead at the next token without consuming it.
        """
        if self._token is None:
            self._token = self._scan_token()
        return self._token

    def remaining(self) -> str:
        """The remaining input as a string, including a token peeked at.
        """
        return self._input[self._pos:]
