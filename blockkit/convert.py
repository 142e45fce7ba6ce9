"""Convert between hex-per-line text files and blob storage files."""

from __future__ import annotations

import binascii
import sys
from collections.abc import Iterable, Sequence
from typing import BinaryIO

from blockkit.blobby import BlobbyError, BlobIterator, encode_blobs


def encode(reader: Iterable[str], writer: BinaryIO) -> int:
    """Encode hex lines from ``reader`` into ``writer``; return bytes written."""
    blobs = []
    for line in reader:
        line = line.removesuffix("\n").removesuffix("\r")
        try:
            blobs.append(binascii.unhexlify(line))
        except (binascii.Error, ValueError) as exc:
            raise ValueError(f"invalid hex data: {exc}") from exc
    data, idx_len = encode_blobs(blobs)
    print(f"Index len: {idx_len}")
    writer.write(data)
    return len(data)


def decode(reader: BinaryIO, writer: BinaryIO) -> int:
    """Decode blob data from ``reader`` as hex lines into ``writer``.

    Returns the number of records written.
    """
    data = reader.read()
    try:
        blobs = list(BlobIterator(data))
    except BlobbyError as exc:
        raise ValueError(f"invalid blobby data: {exc}") from exc
    for blob in blobs:
        writer.write(blob.hex().encode("ascii"))
        writer.write(b"\n")
    return len(blobs)


def main(argv: Sequence[str] | None = None) -> int:
    """Run ``encode|decode IN OUT``; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 3:
        print("usage: convert encode|decode IN OUT", file=sys.stderr)
        return 2
    mode, in_path, out_path = args[:3]
    if mode not in ("encode", "decode"):
        print("unknown mode", file=sys.stderr)
        return 1
    try:
        if mode == "encode":
            with open(in_path, encoding="utf-8") as src, open(out_path, "wb") as dst:
                count = encode(src, dst)
        else:
            with open(in_path, "rb") as src, open(out_path, "wb") as dst:
                count = decode(src, dst)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"Processed {count} record(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())