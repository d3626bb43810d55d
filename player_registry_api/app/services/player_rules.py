"""
Validation and derived-field rules for players.

Everything here is pure: no database access and no logging.  The
derivation helpers do not guard their input, so callers must run the
matching ``is_*_valid`` check first.
"""

import math
from datetime import datetime
from typing import Any, Optional

NAME_MAX_LENGTH = 12
TITLE_MAX_LENGTH = 30
EXPERIENCE_MIN = 0
EXPERIENCE_MAX = 10_000_000
BIRTHDAY_MIN_YEAR = 2000
BIRTHDAY_MAX_YEAR = 3000


def _year_start_millis(year: int) -> int:
    """Epoch milliseconds of January 1 of ``year`` in the local timezone."""
    return int(datetime(year, 1, 1).timestamp() * 1000)


def is_name_valid(text: Optional[str]) -> bool:
    return text is not None and 0 < len(text) <= NAME_MAX_LENGTH


def is_title_valid(text: Optional[str]) -> bool:
    return text is not None and 0 < len(text) <= TITLE_MAX_LENGTH


def is_birthday_valid(timestamp: Optional[int]) -> bool:
    """Return True if ``timestamp`` (epoch millis) lies strictly inside 2000..3000."""
    if timestamp is None:
        return False
    return (
        _year_start_millis(BIRTHDAY_MIN_YEAR) < timestamp < _year_start_millis(BIRTHDAY_MAX_YEAR)
        and timestamp > 0
    )


def is_experience_valid(value: Optional[int]) -> bool:
    return value is not None and EXPERIENCE_MIN <= value <= EXPERIENCE_MAX


def is_valid_player(candidate: Any) -> bool:
    """Check every field required to create a player.

    Race and profession only need to be present; any member of the
    enumeration is accepted.
    """
    return (
        candidate is not None
        and is_name_valid(candidate.name)
        and is_title_valid(candidate.title)
        and candidate.race is not None
        and candidate.profession is not None
        and is_birthday_valid(candidate.birthday)
        and is_experience_valid(candidate.experience)
    )


def compute_level(experience: int) -> int:
    # The square root is truncated before the division; doing both in
    # floating point changes results next to level boundaries.
    return (int(math.sqrt(2500 + 200 * experience)) - 50) // 100


def compute_until_next_level(level: int, experience: int) -> int:
    return 50 * (level + 1) * (level + 2) - experience
