"""Incremental construction of a single share."""

from __future__ import annotations

from sharesquare.reserved_bytes import new_reserved_bytes, parse_reserved_bytes
from sharesquare.shares import (
    COMPACT_SHARE_RESERVED_BYTES,
    NAMESPACE_SIZE,
    SEQUENCE_LEN_BYTES,
    SHARE_INFO_BYTES,
    SHARE_SIZE,
    SHARE_VERSION_ZERO,
    Namespace,
    Share,
    new_info_byte,
    new_share,
    zero_pad,
)


class Builder:
    """Builds one share: header first, then data up to the share size."""

    def __init__(
        self,
        namespace: Namespace | None = None,
        share_version: int = SHARE_VERSION_ZERO,
        is_first_share: bool = False,
    ) -> None:
        self.namespace = namespace
        self.share_version = share_version
        self.is_first_share = is_first_share
        self.is_compact_share = namespace is not None and (
            namespace.is_tx() or namespace.is_pay_for_blob()
        )
        self._raw = bytearray()
        if namespace is not None:
            self._prepare()

    def _prepare(self) -> None:
        info = new_info_byte(self.share_version, self.is_first_share)
        raw = bytearray(self.namespace.to_bytes())
        raw.append(info.value)
        if self.is_first_share:
            raw += bytes(SEQUENCE_LEN_BYTES)
        if self.is_compact_share:
            raw += bytes(COMPACT_SHARE_RESERVED_BYTES)
        self._raw = raw

    def available_bytes(self) -> int:
        return SHARE_SIZE - len(self._raw)

    def import_raw_share(self, raw_bytes: bytes) -> Builder:
        self._raw = bytearray(raw_bytes)
        return self

    def add_data(self, raw_data: bytes) -> bytes | None:
        """Append as much of ``raw_data`` as fits; return the rest, or None."""
        raw_data = bytes(raw_data or b"")
        pending_left = SHARE_SIZE - len(self._raw)
        if len(raw_data) <= pending_left:
            self._raw += raw_data
            return None
        self._raw += raw_data[:pending_left]
        return raw_data[pending_left:]

    def build(self) -> Share:
        return new_share(bytes(self._raw))

    def is_empty_share(self) -> bool:
        """Return True if no data has been written after the header."""
        expected = NAMESPACE_SIZE + SHARE_INFO_BYTES
        if self.is_compact_share:
            expected += COMPACT_SHARE_RESERVED_BYTES
        if self.is_first_share:
            expected += SEQUENCE_LEN_BYTES
        return len(self._raw) == expected

    def zero_pad_if_necessary(self) -> int:
        padded, padding = zero_pad(bytes(self._raw), SHARE_SIZE)
        self._raw = bytearray(padded)
        return padding

    def _index_of_reserved_bytes(self) -> int:
        index = NAMESPACE_SIZE + SHARE_INFO_BYTES
        if self.is_first_share:
            index += SEQUENCE_LEN_BYTES
        return index

    def maybe_write_reserved_bytes(self) -> None:
        """Record where the next unit starts, unless already recorded."""
        if not self.is_compact_share:
            raise ValueError("this is not a compact share")
        index = self._index_of_reserved_bytes()
        current = parse_reserved_bytes(
            bytes(self._raw[index : index + COMPACT_SHARE_RESERVED_BYTES])
        )
        if current != 0:
            return
        self._raw[index : index + COMPACT_SHARE_RESERVED_BYTES] = new_reserved_bytes(
            len(self._raw)
        )

    def write_sequence_len(self, sequence_len: int) -> None:
        """Write the sequence length into the first share's header."""
        if not self.is_first_share:
            raise ValueError("not the first share")
        start = NAMESPACE_SIZE + SHARE_INFO_BYTES
        end = start + SEQUENCE_LEN_BYTES
        if len(self._raw) < end:
            raise ValueError("share is too short to hold a sequence length")
        self._raw[start:end] = sequence_len.to_bytes(SEQUENCE_LEN_BYTES, "big")

    def flip_sequence_start(self) -> None:
        self._raw[NAMESPACE_SIZE] ^= 0x01


def new_empty_builder() -> Builder:
    """Return a builder with no namespace and no data."""
    return Builder()