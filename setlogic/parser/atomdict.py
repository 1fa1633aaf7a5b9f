from __future__ import annotations

from typing import Final, Iterator

from ..formula import Atom, EMPTYSET, UNIVERSE


RESERVED: Final = {'0': EMPTYSET, '∅': EMPTYSET, 'U': UNIVERSE}
"""Spellings of the reserved atoms.
"""


class AtomDict:
    """Dictionary translating atom names into unique identifiers. Fresh
    identifiers are assigned in the order of first occurrence, starting at 0.
    The dictionary is pre-initialized with the reserved atoms for the empty
    set and the universe, which do not consume fresh identifiers.

    >>> d = AtomDict()
    >>> d.atom_id('B'), d.atom_id('A'), d.atom_id('U'), d.atom_id('B')
    (0, 1, -1, 0)
    >>> d.number_of_atoms()
    2
    >>> list(d.names())
    ['B', 'A']
    >>> d
    AtomDict({'B': 0, 'A': 1})
    """

    def __contains__(self, name: object) -> bool:
        return name in self._ids

    def __init__(self) -> None:
        self._ids: dict[str, int] = dict(RESERVED)
        self._names: list[str] = []

    def __len__(self) -> int:
        return self.number_of_atoms()

    def __repr__(self) -> str:
        entries = {name: self._ids[name] for name in self._names}
        return f'{self.__class__.__name__}({entries})'

    def atom(self, name: str) -> Atom:
        """Create an atom from its name, with the correct unique identifier.

        >>> d = AtomDict()
        >>> d.atom('X'), d.atom('∅')
        (Atom(0, 'X'), Atom(-2, '∅'))
        """
        return Atom(self.atom_id(name), name)

    def atom_id(self, name: str) -> int:
        """The unique identifier of the atom `name`. If `name` has not been
        seen before, it is assigned the next fresh identifier.
        """
        try:
            return self._ids[name]
        except KeyError:
            id = len(self._names)
            self._ids[name] = id
            self._names.append(name)
            return id

    def names(self) -> Iterator[str]:
        """The names of the ordinary atoms, ordered by their identifiers.
        """
        yield from self._names

    def number_of_atoms(self) -> int:
        """The number of different ordinary atoms seen so far.
        """
        return len(self._names)
