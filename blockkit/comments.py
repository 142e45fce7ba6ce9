"""Removal of line (``//``) and block (``/* */``) comments from a stream.

The filter works on any iterable of single characters or of byte values,
in linear time and constant space, and yields the units outside comments.
A line comment ends at a newline, which is kept.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from typing import TypeVar

_SLASH = ord("/")
_STAR = ord("*")
_NEWLINE = ord("\n")

_Unit = TypeVar("_Unit", str, int)


class CommentError(ValueError):
    """Raised when the input holds a malformed comment."""


class _State(enum.Enum):
    NORMAL = enum.auto()
    POTENTIAL_COMMENT = enum.auto()
    LINE_COMMENT = enum.auto()
    BLOCK_COMMENT = enum.auto()
    POTENTIAL_BLOCK_END = enum.auto()


def _code(unit: str | int) -> int:
    return unit if isinstance(unit, int) else ord(unit)


def exclude_comments(data: Iterable[_Unit]) -> Iterator[_Unit]:
    """Yield the units of ``data`` that lie outside comments.

    ``data`` may be a string (characters are yielded) or bytes (byte values
    are yielded). Raises ``CommentError`` on an isolated ``/`` or on a block
    comment that is not terminated, as soon as that is known.
    """
    state = _State.NORMAL
    for unit in data:
        code = _code(unit)
        if state is _State.NORMAL:
            if code == _SLASH:
                state = _State.POTENTIAL_COMMENT
            else:
                yield unit
        elif state is _State.POTENTIAL_COMMENT:
            if code == _SLASH:
                state = _State.LINE_COMMENT
            elif code == _STAR:
                state = _State.BLOCK_COMMENT
            else:
                raise CommentError("encountered isolated `/`")
        elif state is _State.LINE_COMMENT:
            if code == _NEWLINE:
                state = _State.NORMAL
                yield unit
        elif state is _State.BLOCK_COMMENT:
            if code == _STAR:
                state = _State.POTENTIAL_BLOCK_END
        elif code == _SLASH:
            state = _State.NORMAL
        else:
            state = _State.BLOCK_COMMENT

    if state in (_State.BLOCK_COMMENT, _State.POTENTIAL_BLOCK_END):
        raise CommentError("block comment not terminated with */")
    if state is _State.POTENTIAL_COMMENT:
        raise CommentError("encountered isolated `/`")