# blockkit

Small, dependency-free helpers for writing block-oriented cryptographic code
in Python.

## What is inside

- `blockkit.block_buffer` — `BlockBuffer(block_size, kind, data)`, a
  fixed-size buffer (block size 1 to 255) that hands data to a compression
  function in whole blocks. `BufferKind.EAGER` keeps the cursor below the
  block size; `BufferKind.LAZY` holds a full block back until more data
  arrives. Properties `pos`, `data`, `size`, `remaining` and `kind`; methods
  `digest_blocks`, `pad_with_zeros`, `reset`, `set` and `copy`. Eager buffers
  also offer `set_data` (hand out generated keystream-like data) and the
  padding methods `digest_pad`, `len64_padding_be`, `len64_padding_le` and
  `len128_padding_be`; on a lazy buffer these raise `TypeError`.
- `blockkit.block_padding` — padding schemes `Pkcs7`, `Iso10126`, `AnsiX923`,
  `Iso7816`, `ZeroPadding` and `NoPadding`, sharing the `Padding` interface:
  `pad(block, pos)` returns a new padded block, `unpad(block)` returns the
  message, `unpad_blocks(blocks)` unpads a message spread over several blocks.
  Each scheme has a `TYPE` (`PadType`). Malformed padding raises `UnpadError`
  (a `ValueError`).
- `blockkit.dbl` — `dbl` and `inv_dbl`: doubling and inverse doubling over
  GF(2^64), GF(2^128) and GF(2^256) for 8-, 16- and 32-byte big-endian blocks.
- `blockkit.cmov` — `cmovz(condition, src, dst)` and `cmovnz(...)` return
  `src` or `dst` depending on whether `condition` is zero.
- `blockkit.hex_literal` — `hex_bytes(*literals)` turns hex strings, with
  whitespace and `//` or `/* */` comments, into `bytes`; errors raise
  `HexLiteralError`.
- `blockkit.comments` — `exclude_comments`, the comment filter used by
  `hex_bytes`, working on strings or bytes; malformed comments raise
  `CommentError`.
- `blockkit.blobby` — a compact, de-duplicating store for a sequence of binary
  blobs (handy for test vectors): `encode_blobs`, `BlobIterator` and
  `BlobGroupIterator(data, size)`, with git-flavoured VLQ numbers of up to
  four bytes (`encode_vlq`, `read_vlq`). Malformed data raises `BlobbyError`,
  whose `kind` is an `ErrorKind`.

## Install

```
pip install .
```

## Examples

```python
from blockkit.hex_literal import hex_bytes
from blockkit.block_padding import Pkcs7

block = hex_bytes("74657374 ffffffff")   # b"test" + garbage
padded = Pkcs7().pad(block, 4)
assert padded == b"test\x04\x04\x04\x04"
assert Pkcs7().unpad(padded) == b"test"
```

```python
from blockkit.block_buffer import BlockBuffer, BufferKind

blocks = []
buf = BlockBuffer(4, BufferKind.EAGER)
buf.digest_blocks(b"0123456789", blocks.extend)
assert blocks == [b"0123", b"4567"]
assert buf.data == b"89"
```

```python
from blockkit.blobby import BlobGroupIterator, BlobIterator, encode_blobs

data, index_len = encode_blobs([b"hello", b"", b"hello", b"world"])
assert list(BlobIterator(data)) == [b"hello", b"", b"hello", b"world"]
assert list(BlobGroupIterator(data, 2)) == [(b"hello", b""), (b"hello", b"world")]
```

## Command line

`blobby-convert` converts between a text file of hex-encoded blobs (one per
line) and the binary blob format:

```
blobby-convert encode vectors.txt vectors.blb
blobby-convert decode vectors.blb vectors.txt
```

Encoding prints the index length; both modes print the number of records
processed. The command exits with status 1 on an unknown mode, unreadable
files or malformed data, and 2 when arguments are missing.

## Running the tests

```
pip install .[test]
pytest
```