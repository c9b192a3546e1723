# sharesquare

`sharesquare` works with fixed-size 512-byte *shares*. Every share begins
with a 33-byte namespace (a version byte and a 32-byte identifier) and an
info byte that holds the share version and a sequence-start flag.

- **Compact shares** hold transactions. Each unit in them is prefixed with
  a uvarint length, and every share carries reserved bytes that point at the
  first unit starting in it.
- **Sparse shares** hold blob data, one share sequence per blob.
- **Padding shares** (namespace, reserved and tail padding) fill gaps.

Malformed input raises `ValueError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

Split transactions into compact shares and parse them back:

```python
from sharesquare.shares import TX_NAMESPACE
from sharesquare.split_compact_shares import CompactShareSplitter, tx_key
from sharesquare.parse import parse_txs, parse_shares

splitter = CompactShareSplitter(TX_NAMESPACE, 0)
splitter.write_tx(b"\x0a")
splitter.write_tx(b"\x0b" * 600)

shares, ranges = splitter.export(0)
print(len(shares), splitter.count())   # 2 2
print(ranges[tx_key(b"\x0a")])         # ShareRange(start=0, end=0)
assert parse_txs(shares) == [b"\x0a", b"\x0b" * 600]

sequences = parse_shares(shares)        # one ShareSequence for the tx namespace
assert len(sequences) == 1 and len(sequences[0].shares) == 2
```

`export` may be called repeatedly, and more transactions may be written
after an export; the next export includes them. The share ranges are keyed
by `tx_key(tx)`, the SHA-256 digest of the transaction, and are shifted by
the offset passed to `export`.

Padding shares:

```python
from sharesquare.padding import tail_padding_shares, namespace_padding_share
from sharesquare.shares import Namespace

padding = tail_padding_shares(2)
assert all(share.is_padding() for share in padding)

ns = Namespace(0, bytes(22) + b"\x01" * 10)
assert namespace_padding_share(ns).sequence_len() == 0
```

## Modules

- `sharesquare.shares`: the `Share`, `Namespace` and `InfoByte` types, the
  reserved namespaces (`TX_NAMESPACE`, `PAY_FOR_BLOB_NAMESPACE`,
  `RESERVED_PADDING_NAMESPACE`, `TAIL_PADDING_NAMESPACE`, ...), size
  constants, `new_share`, `namespace_from_bytes`, `new_info_byte`,
  `parse_info_byte`, `zero_pad`, `to_bytes` and `from_bytes`.
- `sharesquare.share_builder`: `Builder` assembles one share at a time;
  `new_empty_builder` returns one with no header, for importing raw bytes.
- `sharesquare.reserved_bytes`: `new_reserved_bytes` and
  `parse_reserved_bytes`.
- `sharesquare.share_sequence`: `ShareSequence`, plus
  `compact_shares_needed` and `sparse_shares_needed`.
- `sharesquare.padding`: namespace, reserved and tail padding shares.
- `sharesquare.split_compact_shares`: `CompactShareSplitter`, `ShareRange`,
  `marshal_delimited_tx` and `tx_key`.
- `sharesquare.parse_compact_shares`: `parse_compact_shares` and
  `parse_delimiter`.
- `sharesquare.parse_sparse_shares`: `Blob` and `parse_sparse_shares`.
- `sharesquare.parse`: `parse_txs`, `parse_blobs` and `parse_shares`.
- `sharesquare.powers_of_two`: `round_up_power_of_two`,
  `round_down_power_of_two`, `round_up_power_of_two_strict` and
  `is_power_of_two`.

## What it does not do

The package reads blobs out of sparse shares but has no splitter that writes
blobs into sparse shares, and it does not lay out a whole data square
(transactions, padding, blobs and tail padding together). It has no command
line interface.