"""Storage of a sequence of binary blobs with de-duplication.

The format uses git-flavoured variable-length quantities (VLQ) for unsigned
numbers. Data starts with the number ``d`` of de-duplicated blobs, followed by
``d`` entries, each a length ``m`` and ``m`` bytes. Then follows any number of
entries, each starting with an unsigned integer ``n``. If its least
significant bit is 0, ``n >> 1`` bytes of blob follow; otherwise the entry
refers to de-duplicated blob number ``n >> 1``.
"""

from __future__ import annotations

import enum
from collections import Counter
from collections.abc import Iterable, Iterator

_NEXT_MASK = 0b1000_0000
_VAL_MASK = 0b0111_1111
_MAX_VLQ_BYTES = 4


class ErrorKind(enum.Enum):
    """Kinds of malformed blob data."""

    INVALID_VLQ = "decoded VLQ number is too big"
    INVALID_INDEX = "invalid de-duplicated blob index"
    UNEXPECTED_END = "unexpected end of data"
    NOT_ENOUGH_ELEMENTS = "not enough elements for a blob group"


class BlobbyError(ValueError):
    """Raised when blob data is malformed."""

    def __init__(self, kind: ErrorKind, position: int | None = None) -> None:
        super().__init__(kind.value)
        self.kind = kind
        self.position = position

    def __repr__(self) -> str:
        return f"BlobbyError({self.kind.name})"


def read_vlq(data: bytes, pos: int) -> tuple[int, int]:
    """Read a VLQ value at ``data[pos:]``; return it with the position after it.

    Values longer than four bytes raise ``BlobbyError`` with
    ``ErrorKind.INVALID_VLQ``; its ``position`` is the offset after the
    four bytes that were consumed.
    """
    if pos >= len(data):
        raise BlobbyError(ErrorKind.UNEXPECTED_END, pos)
    byte = data[pos]
    pos += 1
    more = byte & _NEXT_MASK
    value = byte & _VAL_MASK
    for _ in range(_MAX_VLQ_BYTES - 1):
        if not more:
            return value, pos
        if pos >= len(data):
            raise BlobbyError(ErrorKind.UNEXPECTED_END, pos)
        byte = data[pos]
        pos += 1
        more = byte & _NEXT_MASK
        value = ((value + 1) << 7) + (byte & _VAL_MASK)
    if more:
        raise BlobbyError(ErrorKind.INVALID_VLQ, pos)
    return value, pos


def encode_vlq(value: int) -> bytes:
    """Encode ``value`` as a VLQ of at most four bytes."""
    if value < 0:
        raise ValueError("integer must not be negative")
    out = bytearray([value & _VAL_MASK])
    value >>= 7
    while value:
        if len(out) == _MAX_VLQ_BYTES:
            raise ValueError("integer is too big")
        value -= 1
        out.append(_NEXT_MASK | (value & _VAL_MASK))
        value >>= 7
    out.reverse()
    return bytes(out)


def _index_priority(blob: bytes) -> int:
    if blob == b"\x00":
        return 2
    if blob == b"\x01":
        return 1
    return 0


def encode_blobs(blobs: Iterable[bytes]) -> tuple[bytes, int]:
    """Encode ``blobs``; return the encoded data and the size of its index.

    Non-empty blobs that occur more than once are placed in the index and
    referenced from the blob sequence.
    """
    blobs = [bytes(blob) for blob in blobs]
    counts = Counter(blob for blob in blobs if blob)

    index = sorted(blob for blob, count in counts.items() if count > 1)
    index.sort(key=lambda blob: (_index_priority(blob), counts[blob]))
    index.reverse()
    positions = {blob: i for i, blob in enumerate(index)}

    out = bytearray(encode_vlq(len(index)))
    for blob in index:
        out += encode_vlq(len(blob))
        out += blob

    for blob in blobs:
        dup_pos = positions.get(blob)
        if dup_pos is not None:
            out += encode_vlq((dup_pos << 1) + 1)
        else:
            out += encode_vlq(len(blob) << 1)
            out += blob

    return bytes(out), len(index)


class BlobIterator:
    """Iterator over the blobs stored in encoded data.

    A malformed entry raises ``BlobbyError``; the iterator is exhausted after.
    """

    def __init__(self, data: bytes) -> None:
        data = bytes(data)
        count, pos = read_vlq(data, 0)
        dedup = []
        for _ in range(count):
            length, pos = read_vlq(data, pos)
            end = pos + length
            if end > len(data):
                raise BlobbyError(ErrorKind.UNEXPECTED_END, pos)
            dedup.append(data[pos:end])
            pos = end
        self._data = data[pos:]
        self._dedup = tuple(dedup)
        self._pos = 0

    def __iter__(self) -> BlobIterator:
        return self

    def __next__(self) -> bytes:
        if self._pos >= len(self._data):
            raise StopIteration
        try:
            return self._read()
        except BlobbyError:
            self._exhaust()
            raise

    def _read(self) -> bytes:
        value, self._pos = read_vlq(self._data, self._pos)
        is_ref = value & 1
        value >>= 1
        if is_ref:
            if value >= len(self._dedup):
                raise BlobbyError(ErrorKind.INVALID_INDEX, self._pos)
            return self._dedup[value]
        start = self._pos
        self._pos += value
        if self._pos > len(self._data):
            raise BlobbyError(ErrorKind.UNEXPECTED_END, start)
        return self._data[start:self._pos]

    def _exhaust(self) -> None:
        self._pos = len(self._data)


class BlobGroupIterator:
    """Iterator over tuples of ``size`` consecutive blobs."""

    def __init__(self, data: bytes, size: int) -> None:
        if size < 1:
            raise ValueError("group size must be positive")
        self._inner = BlobIterator(data)
        self._size = size

    def __iter__(self) -> BlobGroupIterator:
        return self

    def __next__(self) -> tuple[bytes, ...]:
        group = []
        for i in range(self._size):
            try:
                group.append(next(self._inner))
            except StopIteration:
                if i == 0:
                    raise
                self._inner._exhaust()
                raise BlobbyError(ErrorKind.NOT_ENOUGH_ELEMENTS) from None
        return tuple(group)

    def _blobs(self) -> Iterator[bytes]:
        return self._inner