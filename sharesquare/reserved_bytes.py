"""Encoding of the reserved bytes found in compact shares."""

from __future__ import annotations

from sharesquare.shares import COMPACT_SHARE_RESERVED_BYTES, SHARE_SIZE


def new_reserved_bytes(byte_index: int) -> bytes:
    """Encode the index of the first unit that starts in a compact share."""
    if byte_index >= SHARE_SIZE:
        raise ValueError(
            f"byte index {byte_index} must be less than share size {SHARE_SIZE}"
        )
    if byte_index < 0:
        raise ValueError(f"byte index {byte_index} must not be negative")
    return byte_index.to_bytes(COMPACT_SHARE_RESERVED_BYTES, "big")


def parse_reserved_bytes(reserved_bytes: bytes) -> int:
    """Decode reserved bytes into the byte index they hold."""
    if len(reserved_bytes) != COMPACT_SHARE_RESERVED_BYTES:
        raise ValueError(
            f"reserved bytes must be of length {COMPACT_SHARE_RESERVED_BYTES}"
        )
    byte_index = int.from_bytes(reserved_bytes, "big")
    if byte_index >= SHARE_SIZE:
        raise ValueError(f"byte index must be less than share size {SHARE_SIZE}")
    return byte_index