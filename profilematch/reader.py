"""Request reader: JSON loading, validation and field-name coalescing.

The matching core receives canonical field names only. Everything that
arrives from outside (HTTP bodies, request files) passes through
``parse_request`` first.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from profilematch import Person, Profile
from profilematch.schema import (
    MAX_PROFILES,
    MIN_PROFILES,
    MatchRequest,
    coalesce,
)

log = logging.getLogger(__name__)

__all__ = [
    'MAX_PROFILES',
    'MIN_PROFILES',
    'RequestValidationError',
    'coalesce',
    'parse_request',
    'read_request',
]


class RequestValidationError(ValueError):
    """Raised when a match request does not have the expected shape."""

    def __init__(self, details: list[dict[str, str]]):
        self.details = details
        summary = '; '.join(f"{d['path']}: {d['message']}" for d in details)
        super().__init__(f"Invalid request: {summary}")

    @classmethod
    def from_pydantic(cls, exc: ValidationError) -> 'RequestValidationError':
        """Flatten pydantic errors into ``{path, message}`` details."""
        return cls([
            {'path': '.'.join(str(part) for part in err['loc']), 'message': err['msg']}
            for err in exc.errors()
        ])


def parse_request(data: Any) -> tuple[Person, list[Profile]]:
    """Validate a match request and build the core's input objects.

    Args:
        data: Decoded JSON body, ``{"person": {...}, "profiles": [...]}``.

    Returns:
        Tuple of the Person and the Profiles in request order.

    Raises:
        RequestValidationError: If any part of the request is malformed.
            All problems found are reported together.
    """
    try:
        request = MatchRequest.model_validate(data)
    except ValidationError as exc:
        raise RequestValidationError.from_pydantic(exc) from exc

    p = request.person
    person = Person(
        name=p.name,
        location=p.location,
        employer=p.employer,
        job_title=p.job_title,
        date_of_birth=p.date_of_birth,
        email=tuple(p.email) if isinstance(p.email, list) else p.email,
        phone=tuple(p.phone) if isinstance(p.phone, list) else p.phone,
    )
    profiles = [
        Profile(
            platform=item.platform,
            username=item.username,
            display_name=item.display_name,
            bio=item.bio,
            location=item.location,
            profile_url=item.profile_url,
            raw=dict(raw),
        )
        for item, raw in zip(request.profiles, data['profiles'])
    ]
    return person, profiles


def read_request(path: str | Path) -> tuple[Person, list[Profile]]:
    """Read and validate a match request from a JSON file.

    Args:
        path: Path to the JSON request file.

    Returns:
        Tuple of the Person and the Profiles in request order.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid JSON or not a valid request.
    """
    path = Path(path)
    with open(path, 'r', encoding='utf-8-sig') as f:
        content = f.read()

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc

    try:
        person, profiles = parse_request(data)
    except RequestValidationError as exc:
        log.warning("Invalid request in %s: %d problem(s)", path, len(exc.details))
        raise

    log.info("%d profiles read from %s", len(profiles), path)
    return person, profiles
