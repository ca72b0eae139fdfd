"""
Fixed-width field helpers for the climb log store.

Every field in the store occupies a slot of known width. Integers are written
as left-justified decimal text, text is written left-aligned; the unused tail
of a slot is filled with NUL bytes.
"""
import codecs
import logging
from typing import BinaryIO

from climblog.exceptions import CorruptStoreError, FieldOverflowError
from climblog.services.layout_config import (
    INT_WIDTH,
    PAD_BYTE,
    TEXT_ENCODING,
)

logger = logging.getLogger(__name__)


def pack_int(value: int, width: int = INT_WIDTH) -> bytes:
    """
    Encode an integer as decimal ASCII, left-justified and NUL-padded.

    Args:
        value: Non-negative integer to encode
        width: Slot width in bytes

    Returns:
        Exactly `width` bytes

    Raises:
        FieldOverflowError: If the value is negative or its decimal text
            is wider than the slot

    Example:
        >>> pack_int(42)
        b'42\\x00\\x00'
    """
    text = str(value).encode("ascii")
    if value < 0 or len(text) > width:
        raise FieldOverflowError(value, width)
    return text.ljust(width, PAD_BYTE)


def unpack_int(raw: bytes) -> int:
    """
    Decode an integer slot written by `pack_int`.

    Raises:
        CorruptStoreError: If the slot does not hold decimal digits
    """
    digits = raw.split(PAD_BYTE, 1)[0]
    if not digits or not digits.isdigit():
        raise CorruptStoreError(
            f"invalid integer field: {raw!r}",
            context={"raw": raw},
        )
    return int(digits)


def pack_text(text: str, width: int) -> bytes:
    """
    Encode text into a fixed-width slot.

    Text longer than the slot is cut at the slot width, which is all the
    store format can hold.
    """
    data = text.encode(TEXT_ENCODING)
    if len(data) > width:
        logger.warning(f"Text truncated to {width} bytes: {text!r}")
        data = data[:width]
    return data.ljust(width, PAD_BYTE)


def unpack_text(raw: bytes) -> str:
    """
    Decode a text slot, stopping at the first NUL byte.

    A multibyte character cut at the end of the slot by `pack_text` is
    dropped; any other invalid byte decodes as U+FFFD.
    """
    decoder = codecs.getincrementaldecoder(TEXT_ENCODING)(errors="replace")
    # final=False holds back an incomplete trailing sequence
    return decoder.decode(raw.split(PAD_BYTE, 1)[0], final=False)


class FieldReader:
    """Reads consecutive fixed-width fields from a binary stream."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self.offset = 0

    def read(self, width: int) -> bytes:
        """Read exactly `width` bytes or raise CorruptStoreError."""
        data = self._stream.read(width)
        if len(data) != width:
            raise CorruptStoreError(
                f"unexpected end of store at byte {self.offset} "
                f"(wanted {width}, got {len(data)})",
                context={"offset": self.offset},
            )
        self.offset += width
        return data

    def read_int(self) -> int:
        return unpack_int(self.read(INT_WIDTH))

    def read_text(self, width: int) -> str:
        return unpack_text(self.read(width))

    def at_end(self) -> bool:
        """True if no bytes remain in the stream."""
        return self._stream.read(1) == b""
