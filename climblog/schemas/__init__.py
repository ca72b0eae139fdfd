"""
Pydantic schemas export.
"""
from climblog.schemas.climb import (
    ClimbDate,
    Attempt,
    Climb,
)

__all__ = [
    "ClimbDate",
    "Attempt",
    "Climb",
]
