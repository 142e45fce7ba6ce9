"""Conversion of hexadecimal text, with comments allowed, into bytes.

Hex digits in either case are decoded; spaces, tabs, carriage returns and
newlines are ignored, as are ``//`` line and ``/* */`` block comments.
"""

from __future__ import annotations

from collections.abc import Iterator

from blockkit.comments import CommentError, exclude_comments

_WHITESPACE = frozenset(" \r\n\t")


class HexLiteralError(ValueError):
    """Raised when hexadecimal text cannot be decoded."""


def _hex_values(literal: str) -> Iterator[int]:
    for char in exclude_comments(literal):
        if "0" <= char <= "9":
            yield ord(char) - ord("0")
        elif "A" <= char <= "F":
            yield ord(char) - ord("A") + 10
        elif "a" <= char <= "f":
            yield ord(char) - ord("a") + 10
        elif char in _WHITESPACE:
            continue
        elif ord(char) < 128:
            raise HexLiteralError(f"encountered invalid character: `{char}`")
        else:
            raise HexLiteralError("encountered invalid non-ASCII character")


def _decode_literal(literal: str) -> bytes:
    out = bytearray()
    values = _hex_values(literal)
    try:
        for high in values:
            low = next(values, None)
            if low is None:
                raise HexLiteralError("expected even number of hex characters")
            out.append((high << 4) | low)
    except CommentError as exc:
        raise HexLiteralError(str(exc)) from exc
    return bytes(out)


def hex_bytes(*args: str) -> bytes:
    """Decode each hexadecimal string in ``args`` and concatenate the results.

    Each string must hold an even number of hex digits on its own.
    """
    out = bytearray()
    for literal in args:
        if not isinstance(literal, str):
            raise HexLiteralError(f"expected string literal, got `{literal!r}`")
        out += _decode_literal(literal)
    return bytes(out)