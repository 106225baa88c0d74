"""Ranking of candidate profiles against one person."""

import logging
from typing import Sequence

from profilematch import MatchResult, Person, Profile
from profilematch.scoring import calculate_match_score

log = logging.getLogger(__name__)


def match_profiles(person: Person, profiles: Sequence[Profile]) -> list[MatchResult]:
    """Score every candidate profile and rank them best-first.

    Each profile is scored independently. Ties keep their input order
    (``sorted`` is stable); no secondary sort key is applied.

    Args:
        person: The person to match.
        profiles: Candidate profiles, in input order.

    Returns:
        List of MatchResult sorted by descending score.
    """
    results = [calculate_match_score(person, profile) for profile in profiles]
    ranked = sorted(results, key=lambda r: r.score, reverse=True)

    if ranked:
        best = ranked[0]
        log.info(
            "Matching finished: %d profiles scored, best %s/%s (%.2f)",
            len(ranked), best.profile.platform, best.profile.username, best.score,
        )
    else:
        log.info("Matching finished: no profiles to score")
    return ranked
