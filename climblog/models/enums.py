"""
Enumeration classes for the climb log.

This module defines strongly-typed enums for:
- Climb types (which also select the grade table)
- Attempt styles
- Attempt performance (outcome)

Each enum value is both the display string and the on-disk tag. Users type
short or long aliases ("b", "boulder"), matched case-insensitively.
"""

from enum import Enum
from typing import Dict, List

from climblog.exceptions import TagDecodeError, ValidationFailure
from climblog.services.layout_config import TAG_WIDTH
from climblog.utils import clean_input, pack_text, unpack_text


class TagEnum(str, Enum):
    """Base for enums stored as fixed-width tags."""

    @classmethod
    def get_values(cls) -> List[str]:
        """Return list of enum values."""
        return [e.value for e in cls]

    @classmethod
    def from_alias(cls, text: str) -> "TagEnum":
        """
        Resolve a user-typed alias.

        Raises:
            ValidationFailure: If the alias is not accepted for this enum
        """
        member = _ALIASES[cls].get(clean_input(text).casefold())
        if member is None:
            raise ValidationFailure(
                f"unrecognized {cls.__name__} `{text}`",
                context={"input": text},
            )
        return member

    def encode_tag(self) -> bytes:
        """Fixed-width on-disk tag for this member."""
        return pack_text(self.value, TAG_WIDTH)

    @classmethod
    def decode_tag(cls, raw: bytes) -> "TagEnum":
        """
        Decode a tag written by `encode_tag`.

        Raises:
            TagDecodeError: If the tag matches no member
        """
        try:
            return cls(unpack_text(raw))
        except ValueError:
            raise TagDecodeError(cls.__name__, raw) from None


class ClimbType(TagEnum):
    """Climbing disciplines. BOULDER uses the V-scale, the rest use YDS."""

    BOULDER = "BOULDER"
    SPORT = "SPORT"
    TOP_ROPE = "TOP ROPE"
    TRAD = "TRAD"


class ClimbStyle(TagEnum):
    """How an attempt was protected."""

    LEAD = "LEAD"
    TOP_ROPE = "TR"
    SOLO = "SOLO"


class Performance(TagEnum):
    """Outcome of an attempt."""

    FELL = "FELL"
    FLASH = "FLASH"
    HUNG = "HUNG"
    ONSIGHT = "ONSIGHT"
    REDPOINT = "REDPOINT"
    SEND = "SEND"


_ALIASES: Dict[type, Dict[str, TagEnum]] = {
    ClimbType: {
        "b": ClimbType.BOULDER,
        "boulder": ClimbType.BOULDER,
        "s": ClimbType.SPORT,
        "sport": ClimbType.SPORT,
        "tr": ClimbType.TOP_ROPE,
        "top rope": ClimbType.TOP_ROPE,
        "t": ClimbType.TRAD,
        "trad": ClimbType.TRAD,
    },
    ClimbStyle: {
        "l": ClimbStyle.LEAD,
        "lead": ClimbStyle.LEAD,
        "t": ClimbStyle.TOP_ROPE,
        "top rope": ClimbStyle.TOP_ROPE,
        "s": ClimbStyle.SOLO,
        "solo": ClimbStyle.SOLO,
    },
    Performance: {
        "fe": Performance.FELL,
        "fell": Performance.FELL,
        "fl": Performance.FLASH,
        "flash": Performance.FLASH,
        "h": Performance.HUNG,
        "hung": Performance.HUNG,
        "o": Performance.ONSIGHT,
        "onsight": Performance.ONSIGHT,
        "r": Performance.REDPOINT,
        "redpoint": Performance.REDPOINT,
        "s": Performance.SEND,
        "send": Performance.SEND,
    },
}


STAR_DISPLAY = ("O", "*", "**", "***", "****")


def stars_to_display(stars: int) -> str:
    """Render a 0-4 star rating ("O" for zero)."""
    return STAR_DISPLAY[stars]
