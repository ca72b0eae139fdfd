"""
Field parsers for user-entered climb and attempt values.

Each parser takes one trimmed line of input and returns the typed value, or
raises ValidationFailure so the caller can ask again. Grade and enum parsing
live with their tables (`grade_tables.parse_grade`, `TagEnum.from_alias`).
"""
from climblog.exceptions import ValidationFailure
from climblog.services.layout_config import LONG_TEXT_WIDTH, MAX_INT_VALUE, TEXT_ENCODING
from climblog.utils import equals_ignore_case, is_integer

MIN_STARS = 0
MAX_STARS = 4


def _parse_non_negative(text: str, field: str) -> int:
    if not is_integer(text):
        raise ValidationFailure(
            f"{field} must be a whole number, got `{text}`",
            context={"field": field, "input": text},
        )
    value = int(text)
    if value > MAX_INT_VALUE:
        raise ValidationFailure(
            f"{field} must be at most {MAX_INT_VALUE}, got `{text}`",
            context={"field": field, "input": text},
        )
    return value


def parse_stars(text: str) -> int:
    """
    Star rating, 0 to 4 inclusive.

    Examples:
        >>> parse_stars("4")
        4
        >>> parse_stars("5")
        Traceback (most recent call last):
        ...
        climblog.exceptions.ValidationFailure: stars must be between 0 and 4, got `5`
    """
    stars = _parse_non_negative(text, "stars")
    if not MIN_STARS <= stars <= MAX_STARS:
        raise ValidationFailure(
            f"stars must be between {MIN_STARS} and {MAX_STARS}, got `{text}`",
            context={"field": "stars", "input": text},
        )
    return stars


def parse_year(text: str) -> int:
    return _parse_non_negative(text, "year")


def parse_month(text: str) -> int:
    """Month number, 1 to 12."""
    month = _parse_non_negative(text, "month")
    if not 1 <= month <= 12:
        raise ValidationFailure(
            f"month must be between 1 and 12, got `{text}`",
            context={"field": "month", "input": text},
        )
    return month


def parse_day(text: str) -> int:
    # No calendar check: day is independent of month and year
    return _parse_non_negative(text, "day")


def parse_confirmation(text: str) -> bool:
    """
    Yes/no answer.

    Raises:
        ValidationFailure: For anything other than y, yes, n or no
    """
    if equals_ignore_case(text, "y") or equals_ignore_case(text, "yes"):
        return True
    if equals_ignore_case(text, "n") or equals_ignore_case(text, "no"):
        return False
    raise ValidationFailure(f"expected y or n, got `{text}`")


def parse_identity_text(text: str, field: str = "name") -> str:
    """
    Climb name or location.

    Must fit its store slot uncut, otherwise two climbs that differ only past
    the slot width would collide once saved.
    """
    if len(text.encode(TEXT_ENCODING)) > LONG_TEXT_WIDTH:
        raise ValidationFailure(
            f"{field} must be at most {LONG_TEXT_WIDTH} bytes, got `{text}`",
            context={"field": field, "input": text},
        )
    return text
