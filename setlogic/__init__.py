__version__ = 0.1

___author___ = 'setlogic contributors'
___license__ = 'GPL-2.0-or-later'
___status__ = 'Prototype'

from . import formula

from .formula import Atom, Bin, Conn, EMPTYSET, Formula, UNIVERSE  # noqa

from .parser import FormulaParser, parse, ParseError  # noqa

from .tautology import counterexample, is_satisfiable, is_tautology, Options  # noqa

from .valuation import truth_table, valuations  # noqa

__all__ = formula.__all__ + [
    'FormulaParser', 'parse', 'ParseError',

    'counterexample', 'is_satisfiable', 'is_tautology', 'Options',

    'truth_table', 'valuations'
]
