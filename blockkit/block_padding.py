"""Padding and unpadding of messages divided into blocks.

A block is a ``bytes``-like object whose length is the block size. ``pad``
returns a new block in which the message occupies the first ``pos`` bytes
and the rest is padding; ``unpad`` returns the message held in a block.
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections.abc import Sequence

_MAX_COUNTED_BLOCK_SIZE = 255


class PadType(enum.Enum):
    """How a padding scheme relates to the message it pads."""

    REVERSIBLE = "reversible"
    AMBIGUOUS = "ambiguous"
    NO_PADDING = "no padding"


class UnpadError(ValueError):
    """Raised when a block holds malformed padding."""

    def __init__(self, message: str = "Unpad Error") -> None:
        super().__init__(message)


def _check_counted(block_size: int) -> None:
    if block_size > _MAX_COUNTED_BLOCK_SIZE:
        raise ValueError("block size is too big for PKCS#7")


def _check_pos_below(pos: int, block_size: int) -> None:
    if pos < 0 or pos >= block_size:
        raise ValueError("`pos` is bigger or equal to block size")


def _check_pos_within(pos: int, block_size: int) -> None:
    if pos < 0 or pos > block_size:
        raise ValueError("`pos` is bigger than block size")


class Padding(ABC):
    """A padding scheme for messages divided into blocks."""

    TYPE: PadType

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    @abstractmethod
    def pad(self, block: bytes, pos: int) -> bytes:
        """Return ``block`` with everything from ``pos`` on replaced by padding."""

    @abstractmethod
    def unpad(self, block: bytes) -> bytes:
        """Return the message stored in ``block``; raise ``UnpadError`` if malformed."""

    def unpad_blocks(self, blocks: Sequence[bytes]) -> bytes:
        """Return the message stored in ``blocks``, whose last block is padded."""
        blocks = [bytes(block) for block in blocks]
        if blocks:
            block_size = len(blocks[0])
            if any(len(block) != block_size for block in blocks):
                raise ValueError("all blocks must have the same size")
        if self.TYPE is PadType.NO_PADDING:
            return b"".join(blocks)
        if not blocks:
            if self.TYPE is PadType.AMBIGUOUS:
                return b""
            raise UnpadError()
        *head, last = blocks
        return b"".join(head) + self.unpad(last)


class ZeroPadding(Padding):
    """Pad with zeros.

    Not reversible for messages that end with zero bytes.
    """

    TYPE = PadType.AMBIGUOUS

    def pad(self, block: bytes, pos: int) -> bytes:
        block = bytes(block)
        _check_pos_within(pos, len(block))
        return block[:pos] + bytes(len(block) - pos)

    def unpad(self, block: bytes) -> bytes:
        return bytes(block).rstrip(b"\x00")


class Pkcs7(Padding):
    """Pad with bytes whose value is the number of bytes added (RFC 5652)."""

    TYPE = PadType.REVERSIBLE
    _strict = True

    def pad(self, block: bytes, pos: int) -> bytes:
        block = bytes(block)
        size = len(block)
        _check_counted(size)
        _check_pos_below(pos, size)
        count = size - pos
        return block[:pos] + bytes([count]) * count

    def unpad(self, block: bytes) -> bytes:
        block = bytes(block)
        size = len(block)
        _check_counted(size)
        if not size:
            raise UnpadError()
        count = block[-1]
        if count == 0 or count > size:
            raise UnpadError()
        start = size - count
        if self._strict and any(b != count for b in block[start:-1]):
            raise UnpadError()
        return block[:start]


class Iso10126(Pkcs7):
    """Like PKCS#7, but only the last padding byte is checked when unpadding.

    Padding is written with PKCS#7 bytes rather than random ones.
    """

    _strict = False


class AnsiX923(Padding):
    """Pad with zeros and a last byte holding the number of bytes added."""

    TYPE = PadType.REVERSIBLE

    def pad(self, block: bytes, pos: int) -> bytes:
        block = bytes(block)
        size = len(block)
        _check_counted(size)
        _check_pos_below(pos, size)
        count = size - pos
        return block[:pos] + bytes(count - 1) + bytes([count])

    def unpad(self, block: bytes) -> bytes:
        block = bytes(block)
        size = len(block)
        _check_counted(size)
        if not size:
            raise UnpadError()
        count = block[-1]
        if count == 0 or count > size:
            raise UnpadError()
        start = size - count
        if any(block[start:-1]):
            raise UnpadError()
        return block[:start]


class Iso7816(Padding):
    """Pad with the byte sequence ``80 00 .. 00``."""

    TYPE = PadType.REVERSIBLE

    def pad(self, block: bytes, pos: int) -> bytes:
        block = bytes(block)
        size = len(block)
        _check_pos_below(pos, size)
        return block[:pos] + b"\x80" + bytes(size - pos - 1)

    def unpad(self, block: bytes) -> bytes:
        stripped = bytes(block).rstrip(b"\x00")
        if not stripped or stripped[-1] != 0x80:
            raise UnpadError()
        return stripped[:-1]


class NoPadding(Padding):
    """Leave the block as it is; the whole block is the message."""

    TYPE = PadType.NO_PADDING

    def pad(self, block: bytes, pos: int) -> bytes:
        block = bytes(block)
        _check_pos_within(pos, len(block))
        return block

    def unpad(self, block: bytes) -> bytes:
        return bytes(block)