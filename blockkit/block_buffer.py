"""Fixed size buffer for block processing of data."""

from __future__ import annotations

import enum
from collections.abc import Callable, Sequence

_MAX_BLOCK_SIZE = 255


class BufferKind(enum.Enum):
    """How full a buffer may get before its block is processed.

    An eager buffer keeps its position in ``0..block_size`` and processes a
    block as soon as it is full. A lazy buffer keeps its position in
    ``0..=block_size`` and holds a full block back until more data arrives.
    """

    EAGER = "eager"
    LAZY = "lazy"

    def _invariant(self, pos: int, block_size: int) -> bool:
        if self is BufferKind.EAGER:
            return pos < block_size
        return pos <= block_size

    def _split_blocks(self, data: bytes, block_size: int) -> tuple[list[bytes], bytes]:
        if self is BufferKind.EAGER:
            count = len(data) // block_size
        elif not data:
            return [], b""
        elif len(data) % block_size == 0:
            count = len(data) // block_size - 1
        else:
            count = len(data) // block_size
        split = count * block_size
        blocks = [data[i:i + block_size] for i in range(0, split, block_size)]
        return blocks, data[split:]


class BlockBuffer:
    """Buffer that collects data and hands it on in whole blocks."""

    def __init__(
        self,
        block_size: int,
        kind: BufferKind = BufferKind.EAGER,
        data: bytes = b"",
    ) -> None:
        if not 0 < block_size <= _MAX_BLOCK_SIZE:
            raise ValueError(f"block size must be in 1..{_MAX_BLOCK_SIZE}")
        kind = BufferKind(kind)
        data = bytes(data)
        if not kind._invariant(len(data), block_size):
            raise ValueError("data length is not valid for this buffer kind")
        self._size = block_size
        self._kind = kind
        self._buffer = bytearray(block_size)
        self._buffer[:len(data)] = data
        self._pos = len(data)

    def __repr__(self) -> str:
        return (
            f"BlockBuffer(block_size={self._size}, kind={self._kind.name}, "
            f"data={self.data!r})"
        )

    @property
    def kind(self) -> BufferKind:
        """The kind of this buffer."""
        return self._kind

    @property
    def pos(self) -> int:
        """Current cursor position."""
        return self._pos

    @property
    def data(self) -> bytes:
        """Data currently stored in the buffer."""
        return bytes(self._buffer[:self._pos])

    @property
    def size(self) -> int:
        """Size of the internal block in bytes."""
        return self._size

    @property
    def remaining(self) -> int:
        """Number of unused bytes in the internal block."""
        return self._size - self._pos

    def copy(self) -> BlockBuffer:
        """Return an independent copy of this buffer."""
        clone = BlockBuffer(self._size, self._kind)
        clone._buffer[:] = self._buffer
        clone._pos = self._pos
        return clone

    __copy__ = copy

    def digest_blocks(
        self, data: bytes, compress: Callable[[list[bytes]], object]
    ) -> None:
        """Feed ``data``; call ``compress`` with lists of complete blocks."""
        data = bytes(data)
        pos = self._pos
        rem = self._size - pos
        if self._kind._invariant(len(data), rem):
            self._buffer[pos:pos + len(data)] = data
            self._pos = pos + len(data)
            return
        if pos != 0:
            self._buffer[pos:] = data[:rem]
            data = data[rem:]
            compress([bytes(self._buffer)])

        blocks, leftover = self._kind._split_blocks(data, self._size)
        if blocks:
            compress(blocks)

        self._buffer[:len(leftover)] = leftover
        self._pos = len(leftover)

    def reset(self) -> None:
        """Set the cursor position to zero."""
        self._pos = 0

    def pad_with_zeros(self) -> bytes:
        """Pad the stored data with zeros and return the resulting block."""
        self._buffer[self._pos:] = bytes(self._size - self._pos)
        self._pos = 0
        return bytes(self._buffer)

    def set(self, block: bytes, pos: int) -> None:
        """Replace the block content and the cursor position."""
        block = bytes(block)
        if len(block) != self._size:
            raise ValueError("block length must equal the block size")
        if pos < 0 or not self._kind._invariant(pos, self._size):
            raise ValueError("position is not valid for this buffer kind")
        self._buffer[:] = block
        self._pos = pos

    def _require_eager(self) -> None:
        if self._kind is not BufferKind.EAGER:
            raise TypeError("operation is only available for eager buffers")

    def _generate(
        self, process_blocks: Callable[[int], Sequence[bytes]], count: int
    ) -> list[bytes]:
        blocks = [bytes(block) for block in process_blocks(count)]
        if len(blocks) != count or any(len(b) != self._size for b in blocks):
            raise ValueError(f"expected {count} block(s) of {self._size} bytes")
        return blocks

    def set_data(
        self, length: int, process_blocks: Callable[[int], Sequence[bytes]]
    ) -> bytes:
        """Return ``length`` bytes of generated data.

        Buffered bytes are used first; ``process_blocks(count)`` must return
        ``count`` freshly generated blocks. Unused bytes of the last generated
        block are kept for the next call.
        """
        self._require_eager()
        if length < 0:
            raise ValueError("length must not be negative")
        pos = self._pos
        out = bytearray()
        if pos != 0:
            rem = self._size - pos
            if length < rem:
                self._pos = pos + length
                return bytes(self._buffer[pos:pos + length])
            out += self._buffer[pos:]
            length -= rem

        out += b"".join(self._generate(process_blocks, length // self._size))

        tail = length % self._size
        if tail:
            (block,) = self._generate(process_blocks, 1)
            out += block[:tail]
            self._buffer[:] = block
        self._pos = tail
        return bytes(out)

    def digest_pad(
        self, delim: int, suffix: bytes, compress: Callable[[bytes], object]
    ) -> None:
        """Pad the data with ``delim``, zeros and ``suffix``, then compress.

        ``compress`` is called twice when the unused space is too small.
        """
        self._require_eager()
        suffix = bytes(suffix)
        if len(suffix) > self._size:
            raise ValueError("suffix is too long")
        pos = self._pos
        self._buffer[pos] = delim
        self._buffer[pos + 1:] = bytes(self._size - pos - 1)

        start = self._size - len(suffix)
        if self._size - pos - 1 < len(suffix):
            compress(bytes(self._buffer))
            compress(bytes(start) + suffix)
        else:
            self._buffer[start:] = suffix
            compress(bytes(self._buffer))
        self._pos = 0

    def len64_padding_be(
        self, data_len: int, compress: Callable[[bytes], object]
    ) -> None:
        """Pad with 0x80, zeros and the 64-bit big-endian message length."""
        self.digest_pad(0x80, data_len.to_bytes(8, "big"), compress)

    def len64_padding_le(
        self, data_len: int, compress: Callable[[bytes], object]
    ) -> None:
        """Pad with 0x80, zeros and the 64-bit little-endian message length."""
        self.digest_pad(0x80, data_len.to_bytes(8, "little"), compress)

    def len128_padding_be(
        self, data_len: int, compress: Callable[[bytes], object]
    ) -> None:
        """Pad with 0x80, zeros and the 128-bit big-endian message length."""
        self.digest_pad(0x80, data_len.to_bytes(16, "big"), compress)