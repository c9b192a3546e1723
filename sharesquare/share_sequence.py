"""Contiguous runs of shares that belong to one namespace and one sequence."""

from __future__ import annotations

from dataclasses import dataclass, field

from sharesquare.shares import (
    CONTINUATION_COMPACT_SHARE_CONTENT_SIZE,
    CONTINUATION_SPARSE_SHARE_CONTENT_SIZE,
    FIRST_COMPACT_SHARE_CONTENT_SIZE,
    FIRST_SPARSE_SHARE_CONTENT_SIZE,
    Namespace,
    Share,
)


@dataclass
class ShareSequence:
    """Shares of one namespace holding one blob, or one run of compact units."""

    namespace: Namespace
    shares: list[Share] = field(default_factory=list)

    def raw_data(self) -> bytes:
        """Return the sequence's data with headers and trailing padding removed."""
        data = b"".join(share.raw_data() for share in self.shares)
        return data[: self.sequence_len()]

    def sequence_len(self) -> int:
        """Return the sequence length written in the first share."""
        if not self.shares:
            raise ValueError(
                "invalid sequence length because share sequence has no shares"
            )
        return self.shares[0].sequence_len()

    def validate_sequence_len(self) -> None:
        """Raise if the share count does not match the written sequence length."""
        if not self.shares:
            raise ValueError(
                "invalid sequence length because share sequence has no shares"
            )
        needed = _number_of_shares_needed(self.shares[0])
        if len(self.shares) != needed:
            raise ValueError(
                f"share sequence has {len(self.shares)} shares but needed {needed} shares"
            )


def _number_of_shares_needed(first_share: Share) -> int:
    sequence_len = first_share.sequence_len()
    if first_share.is_compact_share():
        return compact_shares_needed(sequence_len)
    return sparse_shares_needed(sequence_len)


def _shares_needed(sequence_len: int, first_size: int, continuation_size: int) -> int:
    if sequence_len == 0:
        return 0
    if sequence_len <= first_size:
        return 1
    remaining = sequence_len - first_size
    return 1 + -(-remaining // continuation_size)


def compact_shares_needed(sequence_len: int) -> int:
    """Return how many compact shares hold ``sequence_len`` bytes of units."""
    return _shares_needed(
        sequence_len,
        FIRST_COMPACT_SHARE_CONTENT_SIZE,
        CONTINUATION_COMPACT_SHARE_CONTENT_SIZE,
    )


def sparse_shares_needed(sequence_len: int) -> int:
    """Return how many sparse shares hold a sequence of ``sequence_len`` bytes."""
    return _shares_needed(
        sequence_len,
        FIRST_SPARSE_SHARE_CONTENT_SIZE,
        CONTINUATION_SPARSE_SHARE_CONTENT_SIZE,
    )