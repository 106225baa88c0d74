"""Weighted aggregation of field matcher scores into one match score."""

from typing import Callable

from profilematch import MatchResult, Person, Profile
from profilematch.fields import (
    match_date_of_birth,
    match_email_to_username,
    match_employer_in_bio,
    match_job_title_in_bio,
    match_location,
    match_name,
    match_phone_in_bio,
)

WEIGHTS: dict[str, float] = {
    'name': 0.30,
    'location': 0.12,
    'employer': 0.18,
    'email_username': 0.18,
    'job_title': 0.10,
    'phone': 0.07,
    'date_of_birth': 0.05,
}

# (factor key, weight key, person field, profile field, matcher)
FACTORS: tuple[tuple[str, str, str, str, Callable[..., float]], ...] = (
    ('name_match', 'name', 'name', 'display_name', match_name),
    ('location_match', 'location', 'location', 'location', match_location),
    ('employer_in_bio', 'employer', 'employer', 'bio', match_employer_in_bio),
    ('job_title_in_bio', 'job_title', 'job_title', 'bio', match_job_title_in_bio),
    ('email_username_match', 'email_username', 'email', 'username', match_email_to_username),
    ('phone_in_bio', 'phone', 'phone', 'bio', match_phone_in_bio),
    ('dob_match', 'date_of_birth', 'date_of_birth', 'bio', match_date_of_birth),
)

FACTOR_KEYS: tuple[str, ...] = tuple(f[0] for f in FACTORS)
FACTOR_WEIGHTS: dict[str, float] = {f[0]: WEIGHTS[f[1]] for f in FACTORS}


def _present(value: object) -> bool:
    """Empty strings and empty sequences count as missing."""
    if isinstance(value, str):
        return bool(value.strip())
    return bool(value)


def calculate_factors(person: Person, profile: Profile) -> dict[str, float]:
    """Run every field matcher whose two operands are both present.

    Args:
        person: The person to match.
        profile: The candidate profile.

    Returns:
        Mapping of factor key to score, in fixed factor order. A factor
        is absent when one of its operands is missing.
    """
    factors: dict[str, float] = {}
    for key, _, person_field, profile_field, matcher in FACTORS:
        left = getattr(person, person_field)
        right = getattr(profile, profile_field)
        if _present(left) and _present(right):
            factors[key] = matcher(left, right)
    return factors


def aggregate(factors: dict[str, float]) -> float:
    """Weighted mean over the present factors, rounded to two decimals.

    Weights are renormalized over the factors that exist, so missing data
    never lowers the score. No factors at all gives 0.0.
    """
    numerator = 0.0
    denominator = 0.0
    for key, score in factors.items():
        weight = FACTOR_WEIGHTS[key]
        numerator += score * weight
        denominator += weight
    if denominator <= 0:
        return 0.0
    return round(numerator / denominator, 2)


def calculate_match_score(person: Person, profile: Profile) -> MatchResult:
    """Score one candidate profile against a person.

    Args:
        person: The person to match.
        profile: The candidate profile.

    Returns:
        MatchResult with the overall score and its factor breakdown.
    """
    factors = calculate_factors(person, profile)
    return MatchResult(profile=profile, score=aggregate(factors), factors=factors)

