"""Static lookup tables for nickname and location alias equivalence.

Both tables are built once at import time and never mutated. To support
more entries, build a new table from the shipped seed plus your own
entries with ``extended()``.
"""

import re
from types import MappingProxyType
from typing import Iterable, Mapping

NICKNAME_SEED: dict[str, tuple[str, ...]] = {
    'william': ('will', 'bill', 'billy'),
    'robert': ('rob', 'bob', 'bobby'),
    'richard': ('rick', 'dick', 'rich'),
    'james': ('jim', 'jimmy', 'jamie'),
    'michael': ('mike', 'mikey'),
    'elizabeth': ('liz', 'beth', 'lizzy', 'betty'),
    'jennifer': ('jen', 'jenny'),
    'margaret': ('maggie', 'meg', 'peggy'),
    'katherine': ('kate', 'kathy', 'katie'),
    'jonathan': ('jon', 'john', 'johnny'),
    'christopher': ('chris',),
    'nicholas': ('nick',),
    'alexander': ('alex',),
    'benjamin': ('ben',),
    'daniel': ('dan', 'danny'),
    'matthew': ('matt',),
    'anthony': ('tony',),
    'joseph': ('joe', 'joey'),
    'david': ('dave',),
}

LOCATION_ALIAS_SEED: dict[str, tuple[str, ...]] = {
    'san francisco': ('sf', 'bay area', 'sf bay area'),
    'new york': ('nyc', 'new york city', 'ny', 'manhattan'),
    'los angeles': ('la', 'socal'),
}

_PUNCT_RE = re.compile(r'[.,]')
_WHITESPACE_RE = re.compile(r'\s+')


def normalize_location(value: str) -> str:
    """Lowercase, turn periods/commas into spaces and collapse whitespace."""
    value = _PUNCT_RE.sub(' ', value.lower())
    return _WHITESPACE_RE.sub(' ', value).strip()


def _freeze(entries: Mapping[str, Iterable[str]]) -> Mapping[str, frozenset[str]]:
    """Build an immutable key → closure (key plus its variants) mapping."""
    return MappingProxyType({
        key.lower(): frozenset({key.lower(), *(v.lower() for v in variants)})
        for key, variants in entries.items()
    })


class NicknameTable:
    """Formal first names and their informal variants."""

    def __init__(self, entries: Mapping[str, Iterable[str]]):
        self._closures = _freeze(entries)

    def __contains__(self, formal: str) -> bool:
        return formal.lower() in self._closures

    def __len__(self) -> int:
        return len(self._closures)

    def closure(self, formal: str) -> frozenset[str]:
        """Return the formal name together with its variants."""
        return self._closures.get(formal.lower(), frozenset())

    def extended(self, entries: Mapping[str, Iterable[str]]) -> 'NicknameTable':
        """Return a new table with extra entries merged into this one."""
        merged = {key: set(names) for key, names in self._closures.items()}
        for key, variants in entries.items():
            merged.setdefault(key.lower(), set()).update(v.lower() for v in variants)
        return NicknameTable(merged)

    def are_variants(self, first: str, second: str) -> bool:
        """Check whether two first-name tokens are interchangeable.

        Identical tokens (case-insensitive) always are; otherwise both must
        sit in the closure of the same table entry.
        """
        a, b = first.lower(), second.lower()
        if a == b:
            return True
        return any(a in names and b in names for names in self._closures.values())


class LocationAliasTable:
    """Canonical place names and the aliases they are known by."""

    def __init__(self, entries: Mapping[str, Iterable[str]]):
        self._closures = _freeze(entries)

    def __contains__(self, canonical: str) -> bool:
        return canonical.lower() in self._closures

    def __len__(self) -> int:
        return len(self._closures)

    def extended(self, entries: Mapping[str, Iterable[str]]) -> 'LocationAliasTable':
        """Return a new table with extra entries merged into this one."""
        merged = {key: set(names) for key, names in self._closures.items()}
        for key, aliases in entries.items():
            merged.setdefault(key.lower(), set()).update(a.lower() for a in aliases)
        return LocationAliasTable(merged)

    def are_aliases(self, first: str, second: str) -> bool:
        """Check whether two raw location strings name the same place.

        Each normalized input only has to *contain* one of an entry's
        strings, so "San Francisco, CA" still matches "SF".
        """
        n1 = normalize_location(first)
        n2 = normalize_location(second)
        for names in self._closures.values():
            if any(name in n1 for name in names) and any(name in n2 for name in names):
                return True
        return False


NICKNAMES = NicknameTable(NICKNAME_SEED)
LOCATION_ALIASES = LocationAliasTable(LOCATION_ALIAS_SEED)
