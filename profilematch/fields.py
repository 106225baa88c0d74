"""Field matchers scoring one attribute of a person against a profile.

Every matcher takes two optional operands and returns a score between
0.0 and 1.0. A missing or blank operand yields exactly 0.0; no matcher
raises on any string input.
"""

import re
from datetime import date
from typing import Optional

from dateutil import parser as date_parser

from profilematch import StrOrSeq
from profilematch.similarity import similarity
from profilematch.tables import (
    LOCATION_ALIASES,
    NICKNAMES,
    LocationAliasTable,
    NicknameTable,
    normalize_location,
)

# Score thresholds
LAST_NAME_THRESHOLD = 0.8
JOB_TITLE_SIMILARITY_THRESHOLD = 0.5
MIN_PHONE_DIGITS = 7
PHONE_DIGITS = 10

_NON_DIGIT_RE = re.compile(r'[^0-9]')
_USERNAME_NOISE_RE = re.compile(r'[._\-0-9]')
_BORN_RE = re.compile(r'born\s+(?:in\s+)?([0-9]{4})', re.IGNORECASE)
_AGE_RE = re.compile(r'([0-9]{1,2})\s*(?:years?\s*old|yo|y/o)', re.IGNORECASE)


def _blank(value: Optional[str]) -> bool:
    return not value or not value.strip()


def _as_list(values: Optional[StrOrSeq]) -> list[str]:
    """Wrap a single string in a list; keep sequences in order."""
    if not values:
        return []
    if isinstance(values, str):
        return [values]
    return [v for v in values if isinstance(v, str)]


def match_name(
    person_name: Optional[str],
    profile_name: Optional[str],
    nicknames: NicknameTable = NICKNAMES,
) -> float:
    """Score a person's name against a profile display name.

    Checks, in order:
    1. Exact match after lowercasing and collapsing whitespace → 1.0
    2. Nickname-equivalent first names → 0.95 if the last names are
       similar (> 0.8), else 0.7
    3. Profile first name is an initial of the person's → 0.5 + 0.3 times
       the last-name similarity, or 0.4 without last names
    4. Plain similarity of the full trimmed names

    Args:
        person_name: Name of the person.
        profile_name: Display name on the profile.
        nicknames: Nickname table to consult.

    Returns:
        Score between 0.0 and 1.0.
    """
    if _blank(person_name) or _blank(profile_name):
        return 0.0
    name1 = person_name.strip()
    name2 = profile_name.strip()

    parts1 = name1.lower().split()
    parts2 = name2.lower().split()
    if not parts1 or not parts2:
        return 0.0

    if ' '.join(parts1) == ' '.join(parts2):
        return 1.0

    if nicknames.are_variants(parts1[0], parts2[0]):
        if len(parts1) > 1 and len(parts2) > 1:
            if similarity(parts1[-1], parts2[-1]) > LAST_NAME_THRESHOLD:
                return 0.95
        return 0.7

    # "J. Doe" vs "Jane Doe"; a trailing period still counts as an initial
    initial = parts2[0].rstrip('.')
    if len(initial) == 1 and parts1[0].startswith(initial):
        if len(parts1) > 1 and len(parts2) > 1:
            return 0.5 + similarity(parts1[-1], parts2[-1]) * 0.3
        return 0.4

    return similarity(name1, name2)


def match_location(
    person_location: Optional[str],
    profile_location: Optional[str],
    aliases: LocationAliasTable = LOCATION_ALIASES,
) -> float:
    """Score a person's location against a profile location.

    Alias matches are checked before substring containment, so "Bay Area"
    vs "San Francisco" scores 0.9 even though neither contains the other.

    Args:
        person_location: Location of the person.
        profile_location: Location on the profile.
        aliases: Location alias table to consult.

    Returns:
        1.0 on normalized equality, 0.9 on an alias match, 0.85 on
        containment, otherwise the similarity of the normalized strings.
    """
    if _blank(person_location) or _blank(profile_location):
        return 0.0
    n1 = normalize_location(person_location)
    n2 = normalize_location(profile_location)
    if not n1 or not n2:
        return 0.0

    if n1 == n2:
        return 1.0
    if aliases.are_aliases(person_location, profile_location):
        return 0.9
    if n1 in n2 or n2 in n1:
        return 0.85
    return similarity(n1, n2)


def match_employer_in_bio(employer: Optional[str], bio: Optional[str]) -> float:
    """Score how clearly the employer is mentioned in the bio.

    A verbatim mention scores 1.0. Otherwise every employer word longer
    than two characters found in the bio earns partial credit, up to 0.5.
    """
    if _blank(employer) or _blank(bio):
        return 0.0
    employer = employer.lower()
    bio = bio.lower()
    if employer in bio:
        return 1.0

    words = [w for w in employer.split() if len(w) > 2]
    matched = [w for w in words if w in bio]
    if matched:
        return 0.5 * (len(matched) / len(words))
    return 0.0


def match_job_title_in_bio(job_title: Optional[str], bio: Optional[str]) -> float:
    """Score how clearly the job title is mentioned in the bio.

    Abbreviations such as "SWE" are not expanded and do not match.

    Args:
        job_title: Job title of the person.
        bio: Biography text of the profile.

    Returns:
        1.0 for a verbatim mention, up to 0.6 for words longer than three
        characters found in the bio, half the whole-string similarity when
        that exceeds 0.5, else 0.0.
    """
    if _blank(job_title) or _blank(bio):
        return 0.0
    title = job_title.lower()
    bio = bio.lower()
    if title in bio:
        return 1.0

    words = [w for w in title.split() if len(w) > 3]
    matched = [w for w in words if w in bio]
    if matched:
        return 0.6 * (len(matched) / len(words))

    sim = similarity(title, bio)
    if sim > JOB_TITLE_SIMILARITY_THRESHOLD:
        return sim * 0.5
    return 0.0


def _strip_username(value: str) -> str:
    return _USERNAME_NOISE_RE.sub('', value.lower())


def match_email_to_username(
    emails: Optional[StrOrSeq],
    username: Optional[str],
) -> float:
    """Score email local parts against a profile username.

    Emails are tried in order and the first one reaching any tier wins;
    later emails are not inspected for a better score. A string without
    '@' is used whole as its local part.

    Args:
        emails: One email or an ordered sequence of emails.
        username: Username on the profile.

    Returns:
        1.0 for a case-insensitive exact match, 0.9 when equal after
        dropping dots/underscores/hyphens/digits, 0.7 when one stripped
        form contains the other, else 0.0.
    """
    if _blank(username):
        return 0.0
    user_lower = username.lower()
    user_stripped = _strip_username(username)

    for email in _as_list(emails):
        local = email.split('@')[0].lower()
        if local == user_lower:
            return 1.0
        local_stripped = _strip_username(local)
        if local_stripped == user_stripped:
            return 0.9
        if local_stripped in user_stripped or user_stripped in local_stripped:
            return 0.7
    return 0.0


def normalize_phone(phone: str) -> str:
    """Keep the last ten digits of a phone number."""
    return _NON_DIGIT_RE.sub('', phone)[-PHONE_DIGITS:]


def match_phone_in_bio(phones: Optional[StrOrSeq], bio: Optional[str]) -> float:
    """Score whether a phone number appears in the bio.

    Only the digits of the bio are compared, so any formatting matches.
    Phones are tried in order; the first one found wins.

    Args:
        phones: One phone number or an ordered sequence of them.
        bio: Biography text of the profile.

    Returns:
        1.0 if the full number appears, 0.8 if only its last seven digits
        do, else 0.0. Numbers shorter than seven digits never match.
    """
    if _blank(bio):
        return 0.0
    bio_digits = _NON_DIGIT_RE.sub('', bio)
    if not bio_digits:
        return 0.0

    for phone in _as_list(phones):
        normalized = normalize_phone(phone)
        if len(normalized) < MIN_PHONE_DIGITS:
            continue
        if normalized in bio_digits:
            return 1.0
        if normalized[-MIN_PHONE_DIGITS:] in bio_digits:
            return 0.8
    return 0.0


def parse_birth_year(value: str) -> Optional[int]:
    """Parse a free-form date string and return its year, or None."""
    try:
        return date_parser.parse(value).year
    except (ValueError, OverflowError):
        return None


def extract_year_from_bio(bio: str, today: Optional[date] = None) -> Optional[int]:
    """Extract a candidate birth year from biography text.

    "born 1990" / "born in 1990" gives the year directly. Otherwise an age
    such as "30 years old", "30yo" or "30 y/o" between 11 and 99 is turned
    into ``current year - age``.
    """
    born = _BORN_RE.search(bio)
    if born:
        return int(born.group(1))

    age_match = _AGE_RE.search(bio)
    if age_match:
        age = int(age_match.group(1))
        if 10 < age < 100:
            return (today or date.today()).year - age
    return None


def match_date_of_birth(
    date_of_birth: Optional[str],
    bio: Optional[str],
    today: Optional[date] = None,
) -> float:
    """Score a date of birth against a birth year or age stated in the bio.

    Args:
        date_of_birth: Free-form date string of the person.
        bio: Biography text of the profile.
        today: Reference date for age-based years (defaults to today).

    Returns:
        1.0 if the years match, 0.7 if they are one year apart, else 0.0.
    """
    if _blank(date_of_birth) or _blank(bio):
        return 0.0
    person_year = parse_birth_year(date_of_birth)
    if person_year is None:
        return 0.0

    bio_year = extract_year_from_bio(bio, today)
    if bio_year is None:
        return 0.0
    if bio_year == person_year:
        return 1.0
    if abs(bio_year - person_year) == 1:
        return 0.7
    return 0.0
