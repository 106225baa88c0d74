"""Shared test fixtures."""

from pathlib import Path

import pytest

from profilematch import Person, Profile


DATA_DIR = Path(__file__).resolve().parent / 'data'


@pytest.fixture(scope='session')
def data_dir() -> Path:
    """Path to the test data directory."""
    return DATA_DIR


@pytest.fixture
def full_person() -> Person:
    """A person with every field populated."""
    return Person(
        name='Jane Doe',
        email='janedoe@example.com',
        phone='555-123-4567',
        location='San Francisco, CA',
        date_of_birth='1990-05-15',
        employer='Acme Corp',
        job_title='Software Engineer',
    )


@pytest.fixture
def full_profile() -> Profile:
    """A profile agreeing with ``full_person`` on every field."""
    return Profile(
        platform='linkedin',
        username='janedoe',
        display_name='Jane Doe',
        bio='Software Engineer at Acme Corp | Born 1990 | 5551234567',
        location='San Francisco, CA',
    )
