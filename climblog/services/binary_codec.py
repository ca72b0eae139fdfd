"""
Binary Store Codec

Reads and writes the whole climb collection as one fixed-width binary file,
in a single pass. There are no partial updates, no checksum and no version
header; the layout in `layout_config` is the only format.

Integer fields are decimal ASCII text (see `utils.fixed_width`), so a value
has to fit in 4 digits. Text fields longer than their slot are cut on write.

Saving is not atomic: a failed write may leave a partial file.
"""
import io
import logging
from pathlib import Path
from typing import BinaryIO, Iterable, List, Union

from pydantic import ValidationError

from climblog.exceptions import (
    CorruptStoreError,
    DuplicateClimbError,
    StorageFailure,
    TagDecodeError,
)
from climblog.models.enums import ClimbStyle, ClimbType, Performance
from climblog.schemas.climb import Attempt, Climb, ClimbDate
from climblog.services.collection_store import ClimbCollection
from climblog.services.layout_config import LONG_TEXT_WIDTH, TAG_WIDTH
from climblog.utils import FieldReader, pack_int, pack_text

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


# =============================================================================
# ENCODE
# =============================================================================

def _encode_attempt(attempt: Attempt) -> bytes:
    return b"".join((
        pack_int(attempt.date.year),
        pack_int(attempt.date.month),
        pack_int(attempt.date.day),
        attempt.style.encode_tag(),
        attempt.performance.encode_tag(),
        pack_text(attempt.comments, LONG_TEXT_WIDTH),
    ))


def _encode_climb(climb: Climb) -> bytes:
    parts = [
        pack_text(climb.name, LONG_TEXT_WIDTH),
        pack_text(climb.location, LONG_TEXT_WIDTH),
        pack_text(climb.comments, LONG_TEXT_WIDTH),
        climb.type.encode_tag(),
        pack_int(climb.grade),
        pack_int(climb.stars),
        pack_int(len(climb.attempts)),
    ]
    parts.extend(_encode_attempt(attempt) for attempt in climb.attempts)
    return b"".join(parts)


def encode_collection(climbs: Iterable[Climb]) -> bytes:
    """
    Encode a collection to the store format.

    Raises:
        FieldOverflowError: If an integer field does not fit its slot
    """
    climbs = list(climbs)
    parts = [pack_int(len(climbs))]
    parts.extend(_encode_climb(climb) for climb in climbs)
    return b"".join(parts)


def write_collection(climbs: Iterable[Climb], stream: BinaryIO) -> None:
    """Write the count followed by every climb record, in order."""
    stream.write(encode_collection(climbs))


# =============================================================================
# DECODE
# =============================================================================

def _read_attempt(reader: FieldReader) -> Attempt:
    year = reader.read_int()
    month = reader.read_int()
    day = reader.read_int()
    style = ClimbStyle.decode_tag(reader.read(TAG_WIDTH))
    performance = Performance.decode_tag(reader.read(TAG_WIDTH))
    comments = reader.read_text(LONG_TEXT_WIDTH)
    return Attempt(
        date=ClimbDate(year=year, month=month, day=day),
        style=style,
        performance=performance,
        comments=comments,
    )


def _read_climb(reader: FieldReader) -> Climb:
    name = reader.read_text(LONG_TEXT_WIDTH)
    location = reader.read_text(LONG_TEXT_WIDTH)
    comments = reader.read_text(LONG_TEXT_WIDTH)
    climb_type = ClimbType.decode_tag(reader.read(TAG_WIDTH))
    grade = reader.read_int()
    stars = reader.read_int()
    attempt_count = reader.read_int()
    attempts = [_read_attempt(reader) for _ in range(attempt_count)]
    return Climb(
        name=name,
        location=location,
        type=climb_type,
        grade=grade,
        stars=stars,
        comments=comments,
        attempts=attempts,
    )


def read_collection(stream: BinaryIO) -> List[Climb]:
    """
    Read a whole collection from a binary stream.

    Raises:
        CorruptStoreError: On a short read, a malformed field, an unknown
            tag, an invalid record, or bytes left after the last record
    """
    reader = FieldReader(stream)
    try:
        count = reader.read_int()
        climbs = [_read_climb(reader) for _ in range(count)]
    except TagDecodeError as e:
        raise CorruptStoreError(
            f"{e.detail} at byte {reader.offset}", context=e.context
        ) from e
    except ValidationError as e:
        raise CorruptStoreError(
            f"invalid record before byte {reader.offset}: {e}"
        ) from e

    if not reader.at_end():
        raise CorruptStoreError(
            f"trailing data after {count} climbs at byte {reader.offset}",
            context={"offset": reader.offset},
        )
    return climbs


def decode_collection(data: bytes) -> List[Climb]:
    """Decode bytes produced by `encode_collection`."""
    return read_collection(io.BytesIO(data))


# =============================================================================
# FILE OPERATIONS
# =============================================================================

def save(climbs: Iterable[Climb], filepath: PathLike) -> None:
    """
    Overwrite the store file with the collection.

    Args:
        climbs: A ClimbCollection or any iterable of climbs
        filepath: Store file path

    Raises:
        FieldOverflowError: If a record cannot be encoded (file untouched)
        StorageFailure: If the file cannot be written
    """
    data = encode_collection(climbs)
    logger.info(f"Saving climb log to: {filepath}")
    try:
        with open(filepath, "wb") as f:
            f.write(data)
    except OSError as e:
        logger.error(f"Failed to save climb log: {e}")
        raise StorageFailure(
            f"cannot write store `{filepath}`: {e.strerror or e}",
            context={"path": str(filepath)},
        ) from e
    logger.info(f"Climb log saved ({len(data)} bytes)")


def load(filepath: PathLike) -> ClimbCollection:
    """
    Read the store file into a new collection.

    Raises:
        StorageFailure: If the file cannot be opened or read
        CorruptStoreError: If its contents do not decode
    """
    logger.info(f"Loading climb log from: {filepath}")
    try:
        with open(filepath, "rb") as f:
            climbs = read_collection(f)
    except CorruptStoreError:
        logger.error(f"Store file is corrupt: {filepath}")
        raise
    except OSError as e:
        logger.error(f"Failed to load climb log: {e}")
        raise StorageFailure(
            f"cannot read store `{filepath}`: {e.strerror or e}",
            context={"path": str(filepath)},
        ) from e

    try:
        collection = ClimbCollection(climbs)
    except DuplicateClimbError as e:
        raise CorruptStoreError(
            f"duplicate record in store: {e.detail}", context=e.context
        ) from e
    logger.info(f"Loaded {len(collection)} climbs")
    return collection


def load_or_create(filepath: PathLike, create_missing: bool = True) -> ClimbCollection:
    """
    Load the store, or start empty when the file does not exist yet.

    Only a missing file is treated as a first run; an unreadable or corrupt
    file still raises.
    """
    if create_missing and not Path(filepath).exists():
        logger.info(f"No store at {filepath}, starting with an empty climb log")
        return ClimbCollection()
    return load(filepath)
