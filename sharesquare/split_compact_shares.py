"""Splitting transactions into compact shares."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

from sharesquare.share_builder import Builder
from sharesquare.shares import (
    CONTINUATION_COMPACT_SHARE_CONTENT_SIZE,
    FIRST_COMPACT_SHARE_CONTENT_SIZE,
    SHARE_VERSION_ZERO,
    Namespace,
    Share,
)


@dataclass(frozen=True)
class ShareRange:
    """Indexes of the first and last share a unit occupies."""

    start: int
    end: int


def _uvarint(value: int) -> bytes:
    if value < 0:
        raise ValueError(f"length {value} must not be negative")
    out = bytearray()
    while value >= 0x80:
        out.append((value & 0x7F) | 0x80)
        value >>= 7
    out.append(value)
    return bytes(out)


def marshal_delimited_tx(tx: bytes) -> bytes:
    """Prefix a transaction with its length encoded as a uvarint."""
    tx = bytes(tx)
    return _uvarint(len(tx)) + tx


def tx_key(tx: bytes) -> bytes:
    """Return the key identifying a transaction: the SHA-256 digest of its bytes."""
    return hashlib.sha256(bytes(tx)).digest()


class CompactShareSplitter:
    """Writes length-delimited units compactly across a growing list of shares."""

    def __init__(self, namespace: Namespace, share_version: int = SHARE_VERSION_ZERO) -> None:
        self.namespace = namespace
        self.share_version = share_version
        self._shares: list[Share] = []
        self._builder = Builder(namespace, share_version, True)
        self._done = False
        self._share_ranges: dict[bytes, ShareRange] = {}

    def write_tx(self, tx: bytes) -> None:
        """Add the delimited transaction and record the shares it occupies."""
        raw_data = marshal_delimited_tx(tx)
        start_share = len(self._shares)
        self._write(raw_data)
        end_share = self.count() - 1
        self._share_ranges[tx_key(tx)] = ShareRange(start_share, end_share)

    def _write(self, raw_data: bytes) -> None:
        if self._done:
            if not self._builder.is_empty_share():
                self._shares.pop()
            self._done = False

        self._builder.maybe_write_reserved_bytes()

        while True:
            left_over = self._builder.add_data(raw_data)
            if left_over is None:
                break
            self._stack_pending()
            raw_data = left_over

        if self._builder.available_bytes() == 0:
            self._stack_pending()

    def _stack_pending(self) -> None:
        self._shares.append(self._builder.build())
        self._builder = Builder(self.namespace, self.share_version, False)

    def export(self, share_range_offset: int = 0) -> tuple[list[Share], dict[bytes, ShareRange]]:
        """Finalize the shares; return them and the share ranges shifted by the offset."""
        if self._is_empty():
            return [], {}

        share_ranges = {
            key: ShareRange(r.start + share_range_offset, r.end + share_range_offset)
            for key, r in self._share_ranges.items()
        }

        if self._done:
            return list(self._shares), share_ranges

        bytes_of_padding = 0
        if not self._builder.is_empty_share():
            bytes_of_padding = self._builder.zero_pad_if_necessary()
            self._stack_pending()

        self._write_sequence_len(self._sequence_len(bytes_of_padding))
        self._done = True
        return list(self._shares), share_ranges

    def _write_sequence_len(self, sequence_len: int) -> None:
        if self._is_empty():
            return
        builder = Builder(self.namespace, self.share_version, True)
        builder.import_raw_share(self._shares[0].to_bytes())
        builder.write_sequence_len(sequence_len)
        self._shares[0] = builder.build()

    def _sequence_len(self, bytes_of_padding: int) -> int:
        if not self._shares:
            return 0
        continuation = (len(self._shares) - 1) * CONTINUATION_COMPACT_SHARE_CONTENT_SIZE
        return FIRST_COMPACT_SHARE_CONTENT_SIZE + continuation - bytes_of_padding

    def _is_empty(self) -> bool:
        return not self._shares and self._builder.is_empty_share()

    def count(self) -> int:
        """Return how many shares ``export`` would produce now."""
        if not self._builder.is_empty_share() and not self._done:
            return len(self._shares) + 1
        return len(self._shares)