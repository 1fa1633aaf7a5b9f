"""Random formulas for fuzzing the parser and the tautology checker.
"""
from __future__ import annotations

import random
from typing import Optional, Sequence


ATOMS: Sequence[str] = ('0', 'U', 'A', 'B', 'C')

CONNECTIVES: Sequence[str] = ('\\cap', '\\cup', '\\subseteq', '=', '\\')


def generate_formula(rng: Optional[random.Random] = None, *,
                     atoms: Sequence[str] = ATOMS,
                     connectives: Sequence[str] = CONNECTIVES,
                     min_connectives: int = 5,
                     max_connectives: int = 15) -> str:
    """Generate a random formula with between `min_connectives` and
    `max_connectives` binary connectives, nested to the right:
    ``(a ∘ (b ∘ ... (y ∘ z)...))``. The result is always syntactically
    correct.

    >>> import random
    >>> from setlogic.parser import parse
    >>> s = generate_formula(random.Random(0), min_connectives=2, max_connectives=2)
    >>> s.count('(') == s.count(')') == 2
    True
    >>> f, n = parse(s)
    >>> f.depth()
    2
    """
    if not 1 <= min_connectives <= max_connectives:
        raise ValueError(f'invalid range of connectives [{min_connectives}, {max_connectives}]')
    if rng is None:
        rng = random.Random()
    k = rng.randint(min_connectives, max_connectives)
    s = ''
    for _ in range(k):
        s += f'({rng.choice(atoms)} {rng.choice(connectives)} '
    s += rng.choice(atoms)
    s += ')' * k
    return s
