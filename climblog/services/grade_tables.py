"""
Grade Tables for the Climb Log

Ordered grade labels, easiest to hardest. A climb stores its grade as an
index into one of these tables; which table is implied by the climb type
and never stored.

Grade Systems:
- V-scale (Bouldering): VB, V0- ... V17+   -> BOULDER climbs
- YDS (Yosemite Decimal System): 5.4 ... 5.15+   -> every other type

Lookup is an exact, case-sensitive match against the table labels.
"""
from typing import Optional, Tuple

from climblog.exceptions import ValidationFailure
from climblog.models.enums import ClimbType


# =============================================================================
# GRADE TABLES
# =============================================================================

def _modified(base: str) -> Tuple[str, str, str]:
    """base-, base, base+"""
    return (f"{base}-", base, f"{base}+")


def _lettered(base: str) -> Tuple[str, ...]:
    """base-, base a-d, base+"""
    return (f"{base}-", *(f"{base}{letter}" for letter in "abcd"), f"{base}+")


V_GRADES: Tuple[str, ...] = (
    "VB",
    *(label for n in range(0, 18) for label in _modified(f"V{n}")),
)

YDS_GRADES: Tuple[str, ...] = (
    "5.4",
    "5.5",
    "5.6",
    *(label for n in range(7, 10) for label in _modified(f"5.{n}")),
    *(label for n in range(10, 16) for label in _lettered(f"5.{n}")),
)


def grades_for_type(climb_type: ClimbType) -> Tuple[str, ...]:
    """Grade table used by a climb type (V-scale for boulders, else YDS)."""
    if climb_type == ClimbType.BOULDER:
        return V_GRADES
    return YDS_GRADES


# =============================================================================
# LOOKUP
# =============================================================================

def lookup_grade(label: str, climb_type: ClimbType) -> Optional[int]:
    """
    Find the table position of a grade label.

    Args:
        label: Grade label (e.g., "V8", "5.10a")
        climb_type: Climb type selecting the table

    Returns:
        Index into the table, or None if the label is not in it

    Examples:
        >>> lookup_grade("VB", ClimbType.BOULDER)
        0
        >>> lookup_grade("v8", ClimbType.BOULDER) is None
        True
        >>> lookup_grade("V8", ClimbType.SPORT) is None
        True
    """
    grades = grades_for_type(climb_type)
    try:
        return grades.index(label)
    except ValueError:
        return None


def grade_label(index: int, climb_type: ClimbType) -> str:
    """
    Label at a table position; the inverse of `lookup_grade`.

    Raises:
        IndexError: If the index is outside the table
    """
    grades = grades_for_type(climb_type)
    if not 0 <= index < len(grades):
        raise IndexError(f"grade index {index} outside {climb_type.value} table")
    return grades[index]


def is_valid_grade_index(index: int, climb_type: ClimbType) -> bool:
    return 0 <= index < len(grades_for_type(climb_type))


def parse_grade(text: str, climb_type: ClimbType) -> int:
    """
    Validate a user-entered grade and return its index.

    Raises:
        ValidationFailure: If the label is not in the type's table
    """
    index = lookup_grade(text.strip(), climb_type)
    if index is None:
        raise ValidationFailure(
            f"`{text}` is not a valid {climb_type.value.lower()} grade",
            context={"input": text, "type": climb_type.value},
        )
    return index


def grade_prompt_hint(climb_type: ClimbType) -> str:
    """Short description of accepted labels, for prompts."""
    if climb_type == ClimbType.BOULDER:
        return "V[B-17][-/+]"
    return "5.[4-15][a-d][-/+]"
