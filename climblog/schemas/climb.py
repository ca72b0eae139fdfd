"""
Pydantic schemas for climbs and attempts.
"""
from typing import List, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from climblog.models.enums import ClimbStyle, ClimbType, Performance
from climblog.services.grade_tables import grade_label, is_valid_grade_index
from climblog.services.layout_config import LONG_TEXT_WIDTH, MAX_INT_VALUE, TEXT_ENCODING


class ClimbDate(BaseModel):
    """Attempt date. Fields are independent; only month is checked against the calendar."""
    year: int = Field(ge=0, le=MAX_INT_VALUE)
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=0, le=MAX_INT_VALUE)

    def __str__(self) -> str:
        return f"{self.year}-{self.month}-{self.day}"


class Attempt(BaseModel):
    """One dated effort on a climb."""
    date: ClimbDate
    style: ClimbStyle
    performance: Performance
    comments: str = ""


class Climb(BaseModel):
    """
    A logged climb.

    `grade` is an index into the grade table selected by `type`.
    Attempts keep insertion order.
    """
    name: str
    location: str
    type: ClimbType
    grade: int
    stars: int = Field(ge=0, le=4)
    comments: str = ""
    attempts: List[Attempt] = Field(default_factory=list)

    model_config = {
        "validate_assignment": True,
        "json_schema_extra": {
            "example": {
                "name": "Midnight Lightning",
                "location": "Yosemite",
                "type": "BOULDER",
                "grade": 26,
                "stars": 3,
                "comments": "Camp 4 classic",
                "attempts": [],
            }
        },
    }

    @field_validator("name", "location")
    @classmethod
    def _check_identity_width(cls, value: str) -> str:
        # Identity fields are stored uncut so uniqueness survives a save
        if len(value.encode(TEXT_ENCODING)) > LONG_TEXT_WIDTH:
            raise ValueError(f"must be at most {LONG_TEXT_WIDTH} bytes")
        return value

    @model_validator(mode="after")
    def _check_grade(self) -> "Climb":
        if not is_valid_grade_index(self.grade, self.type):
            raise ValueError(
                f"grade index {self.grade} is not valid for {self.type.value}"
            )
        return self

    @property
    def grade_label(self) -> str:
        """Grade label resolved through the type's table."""
        return grade_label(self.grade, self.type)

    @property
    def identity_key(self) -> Tuple[str, str]:
        """Case-folded (name, location); unique within a collection."""
        return (self.name.casefold(), self.location.casefold())

    def matches(self, name: str, location: str) -> bool:
        return self.identity_key == (name.casefold(), location.casefold())
