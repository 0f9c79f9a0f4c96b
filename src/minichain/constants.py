"""Constants for fixed-width unsigned quantities."""

from enum import IntEnum


class IntWidth(IntEnum):
    """Supported unsigned integer widths (bits)."""

    U32 = 32
    U64 = 64
    U128 = 128


U32_MAX = (1 << IntWidth.U32) - 1
U64_MAX = (1 << IntWidth.U64) - 1
U128_MAX = (1 << IntWidth.U128) - 1  # default balance ceiling
