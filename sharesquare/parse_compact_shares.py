"""Recovering length-delimited units from compact shares."""

from __future__ import annotations

from typing import Iterable, Sequence

from sharesquare.shares import Share

MAX_VARINT_LEN64 = 10


def parse_delimiter(data: bytes) -> tuple[bytes, int]:
    """Split a uvarint length prefix off ``data``; return the rest and the length."""
    data = bytes(data)
    if not data:
        return data, 0
    window = data[:MAX_VARINT_LEN64].ljust(MAX_VARINT_LEN64, b"\x00")
    value = 0
    shift = 0
    for index, byte in enumerate(window):
        if index == MAX_VARINT_LEN64 - 1 and byte > 1:
            raise ValueError("varint length delimiter overflows a 64-bit integer")
        if byte < 0x80:
            value |= byte << shift
            break
        value |= (byte & 0x7F) << shift
        shift += 7
    consumed = max(1, (value.bit_length() + 6) // 7)
    return data[consumed:], value


def _parse_raw_data(raw_data: bytes) -> list[bytes]:
    units = []
    while True:
        rest, unit_len = parse_delimiter(raw_data)
        if unit_len == 0:
            return units
        if unit_len > len(rest):
            raise ValueError(
                f"unit length {unit_len} exceeds the {len(rest)} bytes of data left"
            )
        units.append(rest[:unit_len])
        raw_data = rest[unit_len:]


def parse_compact_shares(
    shares: Sequence[Share], supported_versions: Iterable[int]
) -> list[bytes]:
    """Return the units stored in ``shares``, without any delimiters or headers."""
    if not shares:
        return []
    if not shares[0].is_sequence_start():
        raise ValueError("first share is not the start of a sequence")
    supported = list(supported_versions)
    for share in shares:
        share.check_versions(supported)
    raw_data = b"".join(share.raw_data() for share in shares)
    return _parse_raw_data(raw_data)