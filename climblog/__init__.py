"""
climblog - personal climbing log.

Records climbs and attempts in memory and persists them to a single
fixed-width binary store file.
"""
from climblog.schemas import Attempt, Climb, ClimbDate
from climblog.models import ClimbStyle, ClimbType, Performance
from climblog.services.collection_store import ClimbCollection
from climblog.services.binary_codec import (
    decode_collection,
    encode_collection,
    load,
    load_or_create,
    save,
)

__version__ = "1.0.0"

__all__ = [
    "Attempt",
    "Climb",
    "ClimbDate",
    "ClimbStyle",
    "ClimbType",
    "Performance",
    "ClimbCollection",
    "decode_collection",
    "encode_collection",
    "load",
    "load_or_create",
    "save",
]
