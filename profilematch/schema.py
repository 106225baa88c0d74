"""Pydantic models describing the shape of a match request."""

from typing import Any, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

MIN_PROFILES = 1
MAX_PROFILES = 20


def coalesce(data: Any, canonical: str, alias: Optional[str]) -> Any:
    """Resolve a field that may arrive under two spellings.

    The canonical spelling wins whenever it holds a non-empty value.
    """
    value = data.get(canonical)
    if alias is None or (value is not None and value != ''):
        return value
    alias_value = data.get(alias)
    return alias_value if alias_value is not None else value


def _resolve_spellings(data: Any, pairs: tuple[tuple[str, str], ...]) -> Any:
    """Collapse every (canonical, alias) pair into the canonical key."""
    if not isinstance(data, dict):
        return data
    data = dict(data)
    for canonical, alias in pairs:
        value = coalesce(data, canonical, alias)
        data.pop(alias, None)
        if value is not None:
            data[canonical] = value
    return data


class PersonIn(BaseModel):
    """The person block of a request; every field is optional."""

    model_config = ConfigDict(extra='ignore')

    name: Optional[str] = None
    location: Optional[str] = None
    employer: Optional[str] = None
    job_title: Optional[str] = Field(
        default=None, validation_alias=AliasChoices('jobTitle', 'job_title'),
    )
    date_of_birth: Optional[str] = Field(
        default=None, validation_alias=AliasChoices('dateOfBirth', 'date_of_birth'),
    )
    email: Optional[Union[str, list[str]]] = None
    phone: Optional[Union[str, list[str]]] = None

    @model_validator(mode='before')
    @classmethod
    def _canonical_spellings(cls, data: Any) -> Any:
        return _resolve_spellings(
            data, (('jobTitle', 'job_title'), ('dateOfBirth', 'date_of_birth')),
        )


class ProfileIn(BaseModel):
    """One candidate profile of a request."""

    model_config = ConfigDict(extra='ignore')

    platform: str
    username: str
    display_name: Optional[str] = Field(
        default=None, validation_alias=AliasChoices('displayName', 'display_name'),
    )
    bio: Optional[str] = None
    location: Optional[str] = None
    profile_url: Optional[str] = Field(
        default=None, validation_alias=AliasChoices('profileUrl', 'profile_url'),
    )

    @model_validator(mode='before')
    @classmethod
    def _canonical_spellings(cls, data: Any) -> Any:
        return _resolve_spellings(
            data, (('displayName', 'display_name'), ('profileUrl', 'profile_url')),
        )


class MatchRequest(BaseModel):
    """A person and the 1..20 profiles to rank against them."""

    person: PersonIn
    profiles: list[ProfileIn] = Field(min_length=MIN_PROFILES, max_length=MAX_PROFILES)
