"""Checksum utilities for hashlight.

CRC-8 drives color selection: a token's color is a pure function of the
checksum of its UTF-8 bytes.

Example:
    >>> from hashlight.utils.hashing import crc8
    >>> crc8("123456789")
    244
    >>> crc8(b"x")
    111
"""

from __future__ import annotations

CRC8_POLYNOMIAL = 0x07


def _make_crc8_table(polynomial: int) -> tuple[int, ...]:
    """Build the 256-entry lookup table for a non-reflected CRC-8."""
    table = []
    for byte in range(256):
        crc = byte
        for _ in range(8):
            if crc & 0x80:
                crc = ((crc << 1) ^ polynomial) & 0xFF
            else:
                crc = (crc << 1) & 0xFF
        table.append(crc)
    return tuple(table)


_CRC8_TABLE = _make_crc8_table(CRC8_POLYNOMIAL)


def crc8(content: str | bytes, initial: int = 0) -> int:
    """Compute the CRC-8 checksum of content.

    Polynomial 0x07, no reflection, zero xor-out. Strings are encoded
    as UTF-8 before hashing.

    Args:
        content: Text or raw bytes to checksum
        initial: Starting register value, for chaining partial inputs

    Returns:
        Checksum in the range [0, 255]

    Examples:
        >>> crc8("")
        0
        >>> crc8("hello") == crc8(b"hello")
        True
    """
    data = content.encode("utf-8") if isinstance(content, str) else content
    crc = initial & 0xFF
    for byte in data:
        crc = _CRC8_TABLE[crc ^ byte]
    return crc
