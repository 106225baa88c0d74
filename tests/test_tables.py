"""Tests for profilematch.tables module."""

import pytest

from profilematch.tables import (
    LOCATION_ALIAS_SEED,
    LOCATION_ALIASES,
    NICKNAME_SEED,
    NICKNAMES,
    LocationAliasTable,
    NicknameTable,
    normalize_location,
)


class TestNicknameTable:
    """Tests for nickname equivalence."""

    def test_seed_loaded(self):
        assert len(NICKNAMES) == len(NICKNAME_SEED)
        assert 'william' in NICKNAMES

    @pytest.mark.parametrize('formal, nick', [
        ('william', 'bill'),
        ('robert', 'bob'),
        ('elizabeth', 'liz'),
        ('katherine', 'kate'),
    ])
    def test_formal_and_variant(self, formal, nick):
        assert NICKNAMES.are_variants(formal, nick)
        assert NICKNAMES.are_variants(nick, formal)

    def test_two_variants_of_same_entry(self):
        assert NICKNAMES.are_variants('bill', 'billy')

    def test_case_insensitive(self):
        assert NICKNAMES.are_variants('WILLIAM', 'Bill')

    def test_identical_unknown_names(self):
        assert NICKNAMES.are_variants('Xavier', 'xavier')

    def test_different_entries_not_variants(self):
        assert not NICKNAMES.are_variants('bob', 'bill')

    def test_unknown_names_not_variants(self):
        assert not NICKNAMES.are_variants('jane', 'joan')

    def test_closure_includes_formal_name(self):
        assert NICKNAMES.closure('Michael') == frozenset({'michael', 'mike', 'mikey'})

    def test_extended_returns_new_table(self):
        extended = NICKNAMES.extended({'susan': ['sue', 'suzy']})
        assert extended.are_variants('susan', 'sue')
        assert not NICKNAMES.are_variants('susan', 'sue')
        assert extended.are_variants('william', 'bill')

    def test_extended_merges_existing_entry(self):
        extended = NICKNAMES.extended({'William': ['liam']})
        assert extended.are_variants('liam', 'bill')

    def test_custom_table(self):
        table = NicknameTable({'margarethe': ['grete']})
        assert table.are_variants('Grete', 'Margarethe')
        assert not table.are_variants('william', 'bill')


class TestNormalizeLocation:
    """Tests for location normalization."""

    def test_punctuation_becomes_space(self):
        assert normalize_location('San Francisco,CA') == 'san francisco ca'

    def test_collapses_whitespace(self):
        assert normalize_location('  New   York ,  N.Y. ') == 'new york n y'

    def test_empty(self):
        assert normalize_location('') == ''


class TestLocationAliasTable:
    """Tests for location alias matching."""

    def test_seed_loaded(self):
        assert len(LOCATION_ALIASES) == len(LOCATION_ALIAS_SEED)
        assert 'new york' in LOCATION_ALIASES

    def test_canonical_and_alias(self):
        assert LOCATION_ALIASES.are_aliases('San Francisco', 'SF')

    def test_two_aliases(self):
        assert LOCATION_ALIASES.are_aliases('NYC', 'Manhattan')

    def test_containment_within_input(self):
        assert LOCATION_ALIASES.are_aliases('San Francisco, CA', 'Bay Area')

    def test_unrelated(self):
        assert not LOCATION_ALIASES.are_aliases('Tokyo', 'London')

    def test_different_entries(self):
        assert not LOCATION_ALIASES.are_aliases('San Francisco', 'Manhattan')

    def test_extended(self):
        table = LOCATION_ALIASES.extended({'london': ['ldn']})
        assert table.are_aliases('London, UK', 'LDN')
        assert not LOCATION_ALIASES.are_aliases('London, UK', 'LDN')

    def test_custom_table(self):
        table = LocationAliasTable({'munich': ['münchen', 'muc']})
        assert table.are_aliases('München', 'Munich')
