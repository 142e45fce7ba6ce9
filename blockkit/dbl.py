"""Doubling and inverse doubling of blocks over GF(2^n), big-endian."""

from __future__ import annotations

_REDUCTION = {
    8: 0b1_1011,
    16: 0b1000_0111,
    32: 0b100_0010_0101,
}


def _unpack(block: bytes) -> tuple[int, int, int]:
    block = bytes(block)
    try:
        constant = _REDUCTION[len(block)]
    except KeyError:
        raise ValueError("block must be 8, 16 or 32 bytes long") from None
    return int.from_bytes(block, "big"), len(block) * 8, constant


def dbl(block: bytes) -> bytes:
    """Multiply ``block`` by x in GF(2^n)."""
    value, bits, constant = _unpack(block)
    carry = value >> (bits - 1)
    value = ((value << 1) & ((1 << bits) - 1)) ^ (carry * constant)
    return value.to_bytes(bits // 8, "big")


def inv_dbl(block: bytes) -> bytes:
    """Divide ``block`` by x in GF(2^n)."""
    value, bits, constant = _unpack(block)
    low = value & 1
    value >>= 1
    if low:
        value ^= (1 << (bits - 1)) ^ (constant >> 1)
    return value.to_bytes(bits // 8, "big")