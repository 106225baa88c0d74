"""Core module for profile-matcher."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence, Union

# A single value or an ordered sequence of values, evaluated in order
StrOrSeq = Union[str, Sequence[str]]


@dataclass(frozen=True)
class Person:
    """The real-world person candidate profiles are scored against.

    Every field is optional; absence simply removes the matching factor.
    """

    name: Optional[str] = None
    location: Optional[str] = None
    employer: Optional[str] = None
    job_title: Optional[str] = None
    date_of_birth: Optional[str] = None   # free-form date string
    email: Optional[StrOrSeq] = None
    phone: Optional[StrOrSeq] = None


@dataclass(frozen=True)
class Profile:
    """A candidate social-media profile."""

    platform: str
    username: str
    display_name: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    profile_url: Optional[str] = None
    # Mapping the profile was parsed from, echoed back in responses
    raw: Optional[Mapping[str, Any]] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class MatchResult:
    """Score of one candidate profile against a person."""

    profile: Profile
    score: float          # 0.0 – 1.0, rounded to two decimals
    factors: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self):
        """Freeze the factor breakdown."""
        object.__setattr__(self, 'factors', MappingProxyType(dict(self.factors)))
