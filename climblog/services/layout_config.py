"""
Climb Log Storage Format - Configuration

Fixed slot widths for the on-disk record layout. There is a single, implicit
format version: changing any of these values breaks every existing store.

Layout:
    [count:4]
    per climb:   [name:45][location:45][comments:45][type:8]
                 [grade:4][stars:4][attempt_count:4]
    per attempt: [year:4][month:4][day:4][style:8][performance:8][comments:45]
"""

# =============================================================================
# SLOT WIDTHS (bytes)
# =============================================================================

# Integers are stored as left-justified decimal ASCII, not binary
INT_WIDTH = 4

# Names, locations and free-text comments
LONG_TEXT_WIDTH = 45

# Enumeration tags (climb type, attempt style, attempt performance)
TAG_WIDTH = 8

# Unused tail of every slot
PAD_BYTE = b"\x00"

TEXT_ENCODING = "utf-8"

# Largest value whose decimal text still fits an integer slot
MAX_INT_VALUE = 10 ** INT_WIDTH - 1


# =============================================================================
# RECORD SIZES (bytes)
# =============================================================================

CLIMB_HEADER_SIZE = 3 * LONG_TEXT_WIDTH + TAG_WIDTH + 3 * INT_WIDTH        # 155
ATTEMPT_RECORD_SIZE = 3 * INT_WIDTH + 2 * TAG_WIDTH + LONG_TEXT_WIDTH      # 73


# Store filename used when nothing else is configured
DEFAULT_DB_NAME = "climblog.db"
