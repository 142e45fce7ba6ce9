"""Block buffers, padding schemes, GF(2^n) doubling, conditional moves, hex literals and blob storage."""

__version__ = "0.1.0"