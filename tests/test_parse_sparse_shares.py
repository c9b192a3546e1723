import random

import pytest

from sharesquare.padding import namespace_padding_shares
from sharesquare.parse_sparse_shares import Blob, parse_sparse_shares
from sharesquare.share_builder import Builder
from sharesquare.shares import (
    CONTINUATION_SPARSE_SHARE_CONTENT_SIZE,
    FIRST_SPARSE_SHARE_CONTENT_SIZE,
    SHARE_SIZE,
    SHARE_VERSION_ZERO,
    SUPPORTED_SHARE_VERSIONS,
    Namespace,
    Share,
    new_info_byte,
    zero_pad,
)


def _random_blob(rng, index, size):
    ns = Namespace(0, bytes(22) + bytes([index + 1]) + rng.randbytes(9))
    return Blob(
        namespace_id=ns.id,
        data=rng.randbytes(size),
        share_version=SHARE_VERSION_ZERO,
        namespace_version=ns.version,
    )


def _blob_shares(blob):
    ns = blob.namespace
    builder = Builder(ns, blob.share_version, True)
    builder.write_sequence_len(len(blob.data))
    leftover = builder.add_data(blob.data)
    shares = []
    while leftover is not None:
        shares.append(builder.build())
        builder = Builder(ns, blob.share_version, False)
        leftover = builder.add_data(leftover)
    builder.zero_pad_if_necessary()
    shares.append(builder.build())
    return shares


def _split(blobs):
    return [share for blob in blobs for share in _blob_shares(blob)]


CASES = [
    (10, 1),
    (10, 10),
    (CONTINUATION_SPARSE_SHARE_CONTENT_SIZE * 4, 1),
    (CONTINUATION_SPARSE_SHARE_CONTENT_SIZE * 4, 10),
    (FIRST_SPARSE_SHARE_CONTENT_SIZE, 1),
]


@pytest.mark.parametrize("blob_size, blob_count", CASES)
def test_identically_sized_blobs(blob_size, blob_count):
    rng = random.Random(blob_size * 31 + blob_count)
    blobs = [_random_blob(rng, i, blob_size) for i in range(blob_count)]
    blobs.sort(key=lambda b: b.namespace.to_bytes())
    parsed = parse_sparse_shares(_split(blobs), SUPPORTED_SHARE_VERSIONS)
    assert [b.namespace_id for b in parsed] == [b.namespace_id for b in blobs]
    assert [b.data for b in parsed] == [b.data for b in blobs]


@pytest.mark.parametrize("blob_size, blob_count", CASES)
def test_randomly_sized_blobs(blob_size, blob_count):
    rng = random.Random(blob_size * 17 + blob_count)
    blobs = [_random_blob(rng, i, rng.randint(1, blob_size)) for i in range(blob_count)]
    parsed = parse_sparse_shares(_split(blobs), SUPPORTED_SHARE_VERSIONS)
    assert parsed == blobs


def test_unsupported_share_version():
    ns = Namespace(0, bytes(22) + b"\x01" * 10)
    raw = ns.to_bytes() + bytes([new_info_byte(5, True).value])
    share = Share(zero_pad(raw, SHARE_SIZE)[0])
    with pytest.raises(ValueError):
        parse_sparse_shares([share], SUPPORTED_SHARE_VERSIONS)


def test_continuation_without_start():
    rng = random.Random(3)
    blob = _random_blob(rng, 0, CONTINUATION_SPARSE_SHARE_CONTENT_SIZE * 2)
    shares = _blob_shares(blob)
    with pytest.raises(ValueError):
        parse_sparse_shares(shares[1:], SUPPORTED_SHARE_VERSIONS)


def test_parse_empty():
    assert parse_sparse_shares([], SUPPORTED_SHARE_VERSIONS) == []


def test_namespaced_padding_is_skipped():
    rng = random.Random(11)
    blobs = [
        _random_blob(rng, 0, CONTINUATION_SPARSE_SHARE_CONTENT_SIZE // 2),
        _random_blob(rng, 1, CONTINUATION_SPARSE_SHARE_CONTENT_SIZE * 4),
    ]
    blobs.sort(key=lambda b: b.namespace.to_bytes())
    shares = (
        _blob_shares(blobs[0])
        + namespace_padding_shares(blobs[0].namespace, 4)
        + _blob_shares(blobs[1])
        + namespace_padding_shares(blobs[1].namespace, 10)
    )
    assert parse_sparse_shares(shares, SUPPORTED_SHARE_VERSIONS) == blobs