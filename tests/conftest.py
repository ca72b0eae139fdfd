"""
Pytest configuration and shared fixtures for climb log tests.

Provides:
- boulder / sport_climb: ready-made climbs
- sample_attempt: a dated attempt
- collection: a store holding both climbs
- db_path: a store path inside the test's temp directory
"""
import pytest

from climblog.models.enums import ClimbStyle, ClimbType, Performance
from climblog.schemas.climb import Attempt, Climb, ClimbDate
from climblog.services.collection_store import ClimbCollection
from climblog.services.grade_tables import lookup_grade


@pytest.fixture
def boulder() -> Climb:
    """Midnight Lightning, V8, three stars, no attempts."""
    return Climb(
        name="Midnight Lightning",
        location="Yosemite",
        type=ClimbType.BOULDER,
        grade=lookup_grade("V8", ClimbType.BOULDER),
        stars=3,
        comments="Camp 4 classic",
    )


@pytest.fixture
def sport_climb() -> Climb:
    return Climb(
        name="Biographie",
        location="Ceuse",
        type=ClimbType.SPORT,
        grade=lookup_grade("5.15a", ClimbType.SPORT),
        stars=4,
    )


@pytest.fixture
def sample_attempt() -> Attempt:
    return Attempt(
        date=ClimbDate(year=2024, month=3, day=15),
        style=ClimbStyle.LEAD,
        performance=Performance.SEND,
        comments="finally",
    )


@pytest.fixture
def collection(boulder, sport_climb) -> ClimbCollection:
    return ClimbCollection([boulder, sport_climb])


@pytest.fixture
def db_path(tmp_path):
    """Store file path that does not exist yet."""
    return tmp_path / "climblog.db"
