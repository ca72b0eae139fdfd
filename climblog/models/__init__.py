"""
Enumerations export.
"""
from climblog.models.enums import (
    TagEnum,
    ClimbType,
    ClimbStyle,
    Performance,
    stars_to_display,
)

__all__ = [
    "TagEnum",
    "ClimbType",
    "ClimbStyle",
    "Performance",
    "stars_to_display",
]
