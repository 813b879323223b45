"""Little-endian integer fetches from arbitrary byte offsets.

Every read goes through an explicit ``<`` struct format, so the numeric
value of a byte window is the same on little- and big-endian hosts.
"""

from __future__ import annotations

import struct

_FORMATS = {
    8: struct.Struct("<B"),
    16: struct.Struct("<H"),
    32: struct.Struct("<I"),
    64: struct.Struct("<Q"),
}


def fetch(buffer: bytes | bytearray | memoryview, offset: int, width: int) -> int:
    """Read an unsigned little-endian integer of ``width`` bits.

    Args:
        buffer: Object supporting the buffer protocol
        offset: Byte offset of the first byte to read
        width: Integer width in bits (8, 16, 32 or 64)

    Returns:
        Unsigned integer assembled from ``width // 8`` bytes

    Raises:
        ValueError: If the width is unsupported or the read would fall
            outside the buffer

    Example:
        >>> fetch(b"\\x01\\x02\\x03\\x04", 0, 32)
        67305985
        >>> hex(fetch(b"\\x01\\x02\\x03\\x04", 2, 16))
        '0x403'
    """
    try:
        fmt = _FORMATS[width]
    except KeyError:
        raise ValueError(f"Unsupported fetch width: {width}") from None

    if offset < 0 or offset + fmt.size > len(buffer):
        raise ValueError(
            f"Fetch of {fmt.size} bytes at offset {offset} exceeds buffer of {len(buffer)} bytes"
        )

    return fmt.unpack_from(buffer, offset)[0]


def fetch8(buffer: bytes | bytearray | memoryview, offset: int = 0) -> int:
    """Read one byte."""
    return fetch(buffer, offset, 8)


def fetch16(buffer: bytes | bytearray | memoryview, offset: int = 0) -> int:
    """Read a 16-bit little-endian value."""
    return fetch(buffer, offset, 16)


def fetch32(buffer: bytes | bytearray | memoryview, offset: int = 0) -> int:
    """Read a 32-bit little-endian value."""
    return fetch(buffer, offset, 32)


def fetch64(buffer: bytes | bytearray | memoryview, offset: int = 0) -> int:
    """Read a 64-bit little-endian value."""
    return fetch(buffer, offset, 64)
