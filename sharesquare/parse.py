"""Parsing transactions, blobs and share sequences out of shares."""

from __future__ import annotations

from typing import Iterable

from sharesquare.parse_compact_shares import parse_compact_shares
from sharesquare.parse_sparse_shares import Blob, parse_sparse_shares
from sharesquare.share_sequence import ShareSequence
from sharesquare.shares import SUPPORTED_SHARE_VERSIONS, Share


def parse_txs(shares: Iterable[Share]) -> list[bytes]:
    """Return every transaction stored in the compact shares given."""
    return parse_compact_shares(list(shares), SUPPORTED_SHARE_VERSIONS)


def parse_blobs(shares: Iterable[Share]) -> list[Blob]:
    """Return every blob stored in the sparse shares given."""
    return parse_sparse_shares(list(shares), SUPPORTED_SHARE_VERSIONS)


def parse_shares(shares: Iterable[Share]) -> list[ShareSequence]:
    """Group shares into sequences and check each sequence's length."""
    sequences: list[ShareSequence] = []
    current: ShareSequence | None = None
    for share in shares:
        share.validate()
        is_start = share.is_sequence_start()
        namespace = share.namespace()
        if is_start:
            if current is not None and current.shares:
                sequences.append(current)
            current = ShareSequence(namespace, [share])
        else:
            if current is None or current.namespace != namespace:
                raise ValueError(
                    "share sequence has inconsistent namespace with the following share"
                )
            current.shares.append(share)
    if current is not None and current.shares:
        sequences.append(current)
    for sequence in sequences:
        sequence.validate_sequence_len()
    return sequences