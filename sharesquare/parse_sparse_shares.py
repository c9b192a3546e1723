"""Recovering blobs from sparse shares."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from sharesquare.shares import Namespace, Share


@dataclass(frozen=True)
class Blob:
    """Data submitted to one namespace."""

    namespace_id: bytes
    data: bytes
    share_version: int
    namespace_version: int

    @property
    def namespace(self) -> Namespace:
        return Namespace(self.namespace_version, self.namespace_id)


@dataclass
class _Sequence:
    namespace: Namespace
    share_version: int
    sequence_len: int
    chunks: list[bytes] = field(default_factory=list)

    def to_blob(self) -> Blob:
        data = b"".join(self.chunks)[: self.sequence_len]
        return Blob(
            namespace_id=self.namespace.id,
            data=data,
            share_version=self.share_version,
            namespace_version=self.namespace.version,
        )


def parse_sparse_shares(
    shares: Sequence[Share], supported_versions: Iterable[int]
) -> list[Blob]:
    """Return the blobs stored in ``shares``, skipping padding shares."""
    supported = list(supported_versions)
    sequences: list[_Sequence] = []
    for share in shares:
        version = share.version()
        if version not in supported:
            raise ValueError(
                f"unsupported share version {version} is not present in "
                f"supported share versions {supported}"
            )
        if share.is_padding():
            continue
        if share.is_sequence_start():
            sequences.append(
                _Sequence(
                    namespace=share.namespace(),
                    share_version=version,
                    sequence_len=share.sequence_len(),
                    chunks=[share.raw_data()],
                )
            )
        else:
            if not sequences:
                raise ValueError("continuation share without a sequence start share")
            sequences[-1].chunks.append(share.raw_data())
    return [sequence.to_blob() for sequence in sequences]