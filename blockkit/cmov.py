"""Conditional moves of integer values."""

from __future__ import annotations


def cmovz(condition: int, src: int, dst: int) -> int:
    """Return ``src`` if ``condition`` is zero, otherwise ``dst``."""
    mask = -int(condition == 0)
    return (src & mask) | (dst & ~mask)


def cmovnz(condition: int, src: int, dst: int) -> int:
    """Return ``src`` if ``condition`` is not zero, otherwise ``dst``."""
    mask = -int(condition != 0)
    return (src & mask) | (dst & ~mask)