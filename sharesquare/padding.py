"""Padding shares that fill gaps in a data square."""

from __future__ import annotations

from sharesquare.share_builder import Builder
from sharesquare.shares import (
    FIRST_SPARSE_SHARE_CONTENT_SIZE,
    RESERVED_PADDING_NAMESPACE,
    SHARE_VERSION_ZERO,
    TAIL_PADDING_NAMESPACE,
    Namespace,
    Share,
)


def namespace_padding_share(namespace: Namespace) -> Share:
    """Return a padding share in ``namespace``, the namespace of the preceding blob."""
    builder = Builder(namespace, SHARE_VERSION_ZERO, True)
    builder.write_sequence_len(0)
    builder.add_data(bytes(FIRST_SPARSE_SHARE_CONTENT_SIZE))
    return builder.build()


def namespace_padding_shares(namespace: Namespace, count: int) -> list[Share]:
    """Return ``count`` namespace padding shares."""
    if count < 0:
        raise ValueError(f"padding share count {count} must not be negative")
    return [namespace_padding_share(namespace) for _ in range(count)]


def reserved_padding_share() -> Share:
    """Return a share that pads after the reserved namespaces."""
    return namespace_padding_share(RESERVED_PADDING_NAMESPACE)


def reserved_padding_shares(count: int) -> list[Share]:
    """Return ``count`` reserved padding shares."""
    return namespace_padding_shares(RESERVED_PADDING_NAMESPACE, count)


def tail_padding_share() -> Share:
    """Return a share that pads the square after the last blob."""
    return namespace_padding_share(TAIL_PADDING_NAMESPACE)


def tail_padding_shares(count: int) -> list[Share]:
    """Return ``count`` tail padding shares."""
    return namespace_padding_shares(TAIL_PADDING_NAMESPACE, count)