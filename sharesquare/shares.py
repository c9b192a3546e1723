"""Shares: fixed-size chunks of namespaced data, and the pieces they carry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

SHARE_SIZE = 512
NAMESPACE_VERSION_SIZE = 1
NAMESPACE_ID_SIZE = 32
NAMESPACE_SIZE = NAMESPACE_VERSION_SIZE + NAMESPACE_ID_SIZE
NAMESPACE_VERSION_ZERO_ID_SIZE = 10
NAMESPACE_VERSION_ZERO_PREFIX_SIZE = NAMESPACE_ID_SIZE - NAMESPACE_VERSION_ZERO_ID_SIZE
NAMESPACE_VERSION_MAX = 255
SHARE_INFO_BYTES = 1
SEQUENCE_LEN_BYTES = 4
COMPACT_SHARE_RESERVED_BYTES = 4
SHARE_VERSION_ZERO = 0
MAX_SHARE_VERSION = 127
SUPPORTED_SHARE_VERSIONS = (SHARE_VERSION_ZERO,)

FIRST_COMPACT_SHARE_CONTENT_SIZE = (
    SHARE_SIZE
    - NAMESPACE_SIZE
    - SHARE_INFO_BYTES
    - SEQUENCE_LEN_BYTES
    - COMPACT_SHARE_RESERVED_BYTES
)
CONTINUATION_COMPACT_SHARE_CONTENT_SIZE = (
    SHARE_SIZE - NAMESPACE_SIZE - SHARE_INFO_BYTES - COMPACT_SHARE_RESERVED_BYTES
)
FIRST_SPARSE_SHARE_CONTENT_SIZE = (
    SHARE_SIZE - NAMESPACE_SIZE - SHARE_INFO_BYTES - SEQUENCE_LEN_BYTES
)
CONTINUATION_SPARSE_SHARE_CONTENT_SIZE = SHARE_SIZE - NAMESPACE_SIZE - SHARE_INFO_BYTES


@dataclass(frozen=True)
class Namespace:
    """A namespace: a version byte followed by an identifier."""

    version: int
    id: bytes

    def to_bytes(self) -> bytes:
        return bytes([self.version]) + bytes(self.id)

    def is_tx(self) -> bool:
        return self == TX_NAMESPACE

    def is_pay_for_blob(self) -> bool:
        return self == PAY_FOR_BLOB_NAMESPACE

    def is_tail_padding(self) -> bool:
        return self == TAIL_PADDING_NAMESPACE

    def is_reserved_padding(self) -> bool:
        return self == RESERVED_PADDING_NAMESPACE


def _v0(suffix: int) -> Namespace:
    return Namespace(
        SHARE_VERSION_ZERO,
        bytes(NAMESPACE_ID_SIZE - 1) + bytes([suffix]),
    )


TX_NAMESPACE = _v0(1)
INTERMEDIATE_STATE_ROOTS_NAMESPACE = _v0(2)
PAY_FOR_BLOB_NAMESPACE = _v0(4)
RESERVED_PADDING_NAMESPACE = _v0(255)
TAIL_PADDING_NAMESPACE = Namespace(
    NAMESPACE_VERSION_MAX, b"\xff" * (NAMESPACE_ID_SIZE - 1) + b"\xfe"
)
PARITY_SHARES_NAMESPACE = Namespace(NAMESPACE_VERSION_MAX, b"\xff" * NAMESPACE_ID_SIZE)


def namespace_from_bytes(data: bytes) -> Namespace:
    """Decode a namespace from its serialized form."""
    if len(data) != NAMESPACE_SIZE:
        raise ValueError(f"invalid namespace length: {len(data)} must be {NAMESPACE_SIZE}")
    return Namespace(data[0], bytes(data[NAMESPACE_VERSION_SIZE:]))


@dataclass(frozen=True)
class InfoByte:
    """The byte after the namespace: share version and sequence start flag."""

    value: int

    def version(self) -> int:
        return self.value >> 1

    def is_sequence_start(self) -> bool:
        return self.value % 2 == 1


def new_info_byte(version: int, is_sequence_start: bool) -> InfoByte:
    """Build an info byte, rejecting versions above the maximum."""
    if not 0 <= version <= MAX_SHARE_VERSION:
        raise ValueError(
            f"version {version} must be less than or equal to {MAX_SHARE_VERSION}"
        )
    return InfoByte((version << 1) | int(is_sequence_start))


def parse_info_byte(value: int) -> InfoByte:
    """Parse a raw byte into an info byte."""
    return new_info_byte(value >> 1, value % 2 == 1)


def zero_pad(data: bytes, width: int) -> tuple[bytes, int]:
    """Pad ``data`` with zeros up to ``width``; return it and the padding count."""
    data = bytes(data)
    if len(data) >= width:
        return data, 0
    missing = width - len(data)
    return data + bytes(missing), missing


@dataclass(frozen=True)
class Share:
    """The raw bytes of one share, namespace included."""

    data: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))

    def __len__(self) -> int:
        return len(self.data)

    def namespace(self) -> Namespace:
        if len(self.data) < NAMESPACE_SIZE:
            raise ValueError("share is too short to contain a namespace")
        return namespace_from_bytes(self.data[:NAMESPACE_SIZE])

    def info_byte(self) -> InfoByte:
        if len(self.data) < NAMESPACE_SIZE + SHARE_INFO_BYTES:
            raise ValueError("share is too short to contain an info byte")
        return parse_info_byte(self.data[NAMESPACE_SIZE])

    def validate(self) -> None:
        _validate_size(self.data)

    def version(self) -> int:
        return self.info_byte().version()

    def check_versions(self, supported_versions: Iterable[int]) -> None:
        """Raise if this share's version is not among ``supported_versions``."""
        supported = list(supported_versions)
        version = self.version()
        if version not in supported:
            raise ValueError(
                f"unsupported share version {version} is not present in the "
                f"list of supported share versions {supported}"
            )

    def is_sequence_start(self) -> bool:
        return self.info_byte().is_sequence_start()

    def is_compact_share(self) -> bool:
        ns = self.namespace()
        return ns.is_tx() or ns.is_pay_for_blob()

    def sequence_len(self) -> int:
        """Return the sequence length, or 0 for a continuation share."""
        if not self.is_sequence_start():
            return 0
        start = NAMESPACE_SIZE + SHARE_INFO_BYTES
        end = start + SEQUENCE_LEN_BYTES
        if len(self.data) < end:
            raise ValueError("share is too short to contain a sequence length")
        return int.from_bytes(self.data[start:end], "big")

    def is_padding(self) -> bool:
        is_namespace_padding = self.is_sequence_start() and self.sequence_len() == 0
        ns = self.namespace()
        return is_namespace_padding or ns.is_tail_padding() or ns.is_reserved_padding()

    def raw_data(self) -> bytes:
        """Return the data after the namespace, info byte, length and reserved bytes."""
        start = self._raw_data_start_index()
        if len(self.data) < start:
            raise ValueError("share is too short to contain raw data")
        return self.data[start:]

    def to_bytes(self) -> bytes:
        return self.data

    def _raw_data_start_index(self) -> int:
        index = NAMESPACE_SIZE + SHARE_INFO_BYTES
        if self.is_sequence_start():
            index += SEQUENCE_LEN_BYTES
        if self.is_compact_share():
            index += COMPACT_SHARE_RESERVED_BYTES
        return index


def _validate_size(data: bytes) -> None:
    if len(data) != SHARE_SIZE:
        raise ValueError(f"share data must be {SHARE_SIZE} bytes, got {len(data)}")


def new_share(data: bytes) -> Share:
    """Create a share, checking that it has exactly the share size."""
    _validate_size(data)
    return Share(data)


def to_bytes(shares: Iterable[Share]) -> list[bytes]:
    return [share.data for share in shares]


def from_bytes(chunks: Iterable[bytes]) -> list[Share]:
    return [Share(chunk) for chunk in chunks]