"""
Reserved words for the VScript lexer.

The keyword table is built once and never mutated. A lexer receives its
table at construction, so alternate keyword sets can be swapped in
without touching module state.
"""

from enum import Enum, auto
from types import MappingProxyType
from typing import Hashable, Iterator, Mapping, Optional


class Keyword(Enum):
    """Identity of each reserved word."""
    FN = auto()                     # fn
    RETURN = auto()                 # return


class KeywordTable:
    """
    Immutable mapping from reserved spelling to keyword identity.

    Matching is exact and case-sensitive: no prefixes, no case folding.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, Hashable]):
        self._entries = MappingProxyType(dict(entries))

    def lookup(self, spelling: str) -> Optional[Hashable]:
        """Return the keyword identity for `spelling`, or None."""
        return self._entries.get(spelling)

    def __contains__(self, spelling: object) -> bool:
        return spelling in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"KeywordTable({sorted(self._entries)!r})"


DEFAULT_KEYWORDS = KeywordTable({
    "fn": Keyword.FN,
    "return": Keyword.RETURN,
})
