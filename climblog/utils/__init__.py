"""
Climb Log Utility Functions

This module provides helpers shared by the store codec and the shell:
- Fixed-width field packing and unpacking
- Line input normalization and comparison
"""

# Fixed-width fields
from .fixed_width import (
    FieldReader,
    pack_int,
    unpack_int,
    pack_text,
    unpack_text,
)

# Input text
from .text_utils import (
    clean_input,
    equals_ignore_case,
    is_integer,
)

__all__ = [
    # Fixed-width
    "FieldReader",
    "pack_int",
    "unpack_int",
    "pack_text",
    "unpack_text",
    # Input text
    "clean_input",
    "equals_ignore_case",
    "is_integer",
]
