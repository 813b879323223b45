"""piHash non-cryptographic hash family.

Four widths share one pipeline:

1. Four lane registers (w, x, y, z) start from fixed seeds.
2. The input is absorbed chunk by chunk. Each lane takes a rotated,
   constant-scaled fetch from its slot in the chunk, the running byte
   offset and a sibling lane; x, y and z then rotate as a 3-cycle while w
   stays put as the carry lane.
3. The final chunk-sized window (the trailing bytes, or the whole input
   zero-padded when it is shorter than a chunk) is absorbed once more
   with the total input length standing in for the byte offset.
4. The lanes are cross-mixed, run through the avalanche mixer in a chain
   and either folded into one word (32/64-bit) or emitted as four words
   (128/256-bit).

The functions are pure: no state survives a call and the input buffer is
only read.
"""

from __future__ import annotations

from pihash.hashing.fetch import fetch8, fetch16, fetch32, fetch64
from pihash.hashing.mix import (
    MASK32,
    MASK64,
    mix32,
    mix64,
    rotl32,
    rotl64,
    rotr32,
    rotr64,
)

CHUNK32 = 4
CHUNK64 = 8
CHUNK128 = 16
CHUNK256 = 32

# Round constants shared by the 32, 64 and 128-bit variants
K1 = 0x21914047
K2 = 0x0356AC85
K3 = 0x0F7527D9
K4 = 0x1B873593

SEED32 = (0x297BFEF9, 0x0C240623, 0x39527119, 0x09BC0863)
SEED64 = (0x24E76FBDB, 0x251F30FB9, 0x1218121E1, 0x19403B6E1)
SEED128 = (0x5A44F074, 0x35E820F6, 0x674F1845, 0x7FB5DE7F)

# 256-bit variant: w and x are (hi, lo) pairs of 32-bit sub-registers
SEED256 = (
    (0x6A1F3B29, 0x2D5C81E7),
    (0x4B7E09D3, 0x17C36A95),
    0x2F4A7C15D3E1B869,
    0x5D0B1E7A93C4F2E7,
)
K256_A = 0x2F9B4E65
K256_B = 0x1D3C7A8B
K256_C = 0x6C8E9CF570932BD5
K256_D = 0x3A84FD2D1E5B7C4F


def _view(data: bytes | bytearray | memoryview, length: int | None) -> tuple[memoryview, int]:
    """Validate arguments and return a flat byte view plus the hashed length."""
    if isinstance(data, str):
        raise TypeError("Cannot hash str; encode it to bytes first")

    view = memoryview(data)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")

    if length is None:
        length = view.nbytes
    elif length < 0 or length > view.nbytes:
        raise ValueError(f"Length {length} out of range for buffer of {view.nbytes} bytes")

    return view, length


def _tail(view: memoryview, length: int, chunk_size: int) -> bytes:
    """Return the final chunk-sized window of the input.

    Inputs of at least one chunk yield their trailing ``chunk_size`` bytes.
    Shorter inputs are copied into a zero-filled chunk, so every length goes
    through the same absorption step. Zero-length input never reads the view.
    """
    if length >= chunk_size:
        return view[length - chunk_size:length].tobytes()

    buf = bytearray(chunk_size)
    if length:
        buf[:length] = view[:length]
    return bytes(buf)


def _loop_end(length: int, chunk_size: int) -> int:
    """Byte count covered by the forward loop; the last chunk is left to the tail."""
    if length == 0:
        return 0
    return (length - 1) // chunk_size * chunk_size


def hash32(data: bytes | bytearray | memoryview, length: int | None = None) -> int:
    """Hash data into a 32-bit value.

    Args:
        data: Bytes-like object to hash
        length: Number of leading bytes to hash, defaults to the whole buffer

    Returns:
        32-bit hash value

    Raises:
        TypeError: If data is a str
        ValueError: If length is negative or exceeds the buffer
    """
    view, length = _view(data, length)
    with view:
        w, x, y, z = SEED32

        for i in range(0, _loop_end(length, CHUNK32), CHUNK32):
            w ^= ((rotr32(fetch8(view, i), 11) + i * w) * K1) & MASK32
            x = (x + (rotl32(fetch8(view, i + 1), 17) + w * x) * K2) & MASK32
            y = (y + (rotr32(fetch8(view, i + 2), 3) + x * y) * K3) & MASK32
            z ^= ((rotr32(fetch8(view, i + 3), 23) + y * z) * K4) & MASK32
            x, y, z = y, z, x

        tail = _tail(view, length, CHUNK32)

    w ^= ((rotr32(fetch8(tail, 0), 11) + length * w) * K1) & MASK32
    x = (x + (rotl32(fetch8(tail, 1), 17) + w * x) * K2) & MASK32
    y = (y + (rotr32(fetch8(tail, 2), 3) + x * y) * K3) & MASK32
    z ^= ((rotr32(fetch8(tail, 3), 23) + y * z) * K4) & MASK32

    w = ((w + x - y) & MASK32) ^ z
    x = (x - w) & MASK32
    y ^= w
    z = (z + w) & MASK32

    w = (w + mix32(w)) & MASK32
    x = (x + mix32(x) + w) & MASK32
    y = (y + mix32(y) + x) & MASK32
    z = (z + mix32(z) + y) & MASK32

    return w ^ x ^ y ^ z


def hash64(data: bytes | bytearray | memoryview, length: int | None = None) -> int:
    """Hash data into a 64-bit value.

    Each lane takes a 16-bit fetch per 8-byte chunk.

    Args:
        data: Bytes-like object to hash
        length: Number of leading bytes to hash, defaults to the whole buffer

    Returns:
        64-bit hash value
    """
    view, length = _view(data, length)
    with view:
        w, x, y, z = SEED64

        for i in range(0, _loop_end(length, CHUNK64), CHUNK64):
            w ^= ((rotr64(fetch16(view, i), 61) + i * w) * K1) & MASK64
            x = (x + (rotl64(fetch16(view, i + 2), 16) + w * x) * K2) & MASK64
            y = (y + (rotr64(fetch16(view, i + 4), 13) + x * y) * K3) & MASK64
            z ^= ((rotr64(fetch16(view, i + 6), 19) + y * z) * K4) & MASK64
            x, y, z = y, z, x

        tail = _tail(view, length, CHUNK64)

    w ^= ((rotr64(fetch16(tail, 0), 61) + length * w) * K1) & MASK64
    x = (x + (rotl64(fetch16(tail, 2), 16) + w * x) * K2) & MASK64
    y = (y + (rotr64(fetch16(tail, 4), 13) + x * y) * K3) & MASK64
    z ^= ((rotr64(fetch16(tail, 6), 19) + y * z) * K4) & MASK64

    w = ((w + x - y) & MASK64) ^ z
    x = (x - w) & MASK64
    y ^= w
    z = (z + w) & MASK64

    w = (w + mix64(w)) & MASK64
    x = (x + mix64(x) + w) & MASK64
    y = (y + mix64(y) + x) & MASK64
    z = (z + mix64(z) + y) & MASK64

    return w ^ x ^ y ^ z


def hash128(
    data: bytes | bytearray | memoryview, length: int | None = None
) -> tuple[int, int, int, int]:
    """Hash data into four 32-bit words.

    Args:
        data: Bytes-like object to hash
        length: Number of leading bytes to hash, defaults to the whole buffer

    Returns:
        Tuple of four 32-bit words, most-significant first

    Example:
        >>> "".join(f"{word:08x}" for word in hash128(b""))
        '421cfbb69b37a2f231af23d19f66e069'
    """
    view, length = _view(data, length)
    with view:
        w, x, y, z = SEED128

        for i in range(0, _loop_end(length, CHUNK128), CHUNK128):
            w ^= (rotr32(fetch32(view, i), 7) * K1 + (i ^ w)) & MASK32
            x = (x + rotl32(fetch32(view, i + 4), 19) * K4 + (w ^ x)) & MASK32
            y = (y + rotr32(fetch32(view, i + 8), 13) * K3 + (x ^ y)) & MASK32
            z ^= (rotr32(fetch32(view, i + 12), 11) * K2 + (y ^ z)) & MASK32
            x, y, z = y, z, x

        tail = _tail(view, length, CHUNK128)

    w ^= (rotr32(fetch32(tail, 0), 7) * K1 + (length ^ w)) & MASK32
    x = (x + rotl32(fetch32(tail, 4), 19) * K4 + (w ^ x)) & MASK32
    y = (y + rotr32(fetch32(tail, 8), 13) * K3 + (x ^ y)) & MASK32
    z ^= (rotr32(fetch32(tail, 12), 11) * K2 + (y ^ z)) & MASK32

    w = ((w + x - y) & MASK32) ^ z
    x = (x - w) & MASK32
    y ^= w
    z = (z + w) & MASK32

    w = (mix32(w) + length) & MASK32
    x = (mix32(x) + w) & MASK32
    y = (mix32(y) + x) & MASK32
    z = (mix32(z) + y) & MASK32

    return w, x, y, z


def hash256(
    data: bytes | bytearray | memoryview, length: int | None = None
) -> tuple[int, int, int, int]:
    """Hash data into four 64-bit words.

    Lanes y and z use true 64-bit arithmetic. Lanes w and x are each kept as
    a pair of 32-bit sub-registers and only joined into 64-bit values for
    cross-lane coupling and at finalization.

    Args:
        data: Bytes-like object to hash
        length: Number of leading bytes to hash, defaults to the whole buffer

    Returns:
        Tuple of four 64-bit words, most-significant first
    """
    view, length = _view(data, length)
    with view:
        (w_hi, w_lo), (x_hi, x_lo), y, z = SEED256

        for i in range(0, _loop_end(length, CHUNK256), CHUNK256):
            w_hi, w_lo, x_hi, x_lo, y, z = _absorb256(
                view, i, i, w_hi, w_lo, x_hi, x_lo, y, z
            )
            x_hi, x_lo, y, z = y >> 32, y & MASK32, z, (x_hi << 32) | x_lo

        tail = _tail(view, length, CHUNK256)

    w_hi, w_lo, x_hi, x_lo, y, z = _absorb256(
        tail, 0, length, w_hi, w_lo, x_hi, x_lo, y, z
    )

    w = (w_hi << 32) | w_lo
    x = (x_hi << 32) | x_lo

    w = ((w + x - y) & MASK64) ^ z
    x = (x - w) & MASK64
    y ^= w
    z = (z + w) & MASK64

    w = (mix64(w) + length) & MASK64
    x = (mix64(x) + w) & MASK64
    y = (mix64(y) + x) & MASK64
    z = (mix64(z) + y) & MASK64

    return w, x, y, z


def _absorb256(
    buf: bytes | memoryview,
    offset: int,
    position: int,
    w_hi: int,
    w_lo: int,
    x_hi: int,
    x_lo: int,
    y: int,
    z: int,
) -> tuple[int, int, int, int, int, int]:
    """Absorb one 32-byte chunk into the 256-bit lane state."""
    w_hi ^= (rotr32(fetch32(buf, offset), 7) * K256_A + ((position & MASK32) ^ w_lo)) & MASK32
    w_lo = (w_lo + rotl32(fetch32(buf, offset + 4), 13) * K256_B + ((position >> 32) ^ w_hi)) & MASK32
    x_hi = (x_hi + rotr32(fetch32(buf, offset + 8), 19) * K256_A + (w_lo ^ x_hi)) & MASK32
    x_lo ^= (rotl32(fetch32(buf, offset + 12), 11) * K256_B + (x_hi ^ x_lo)) & MASK32

    x = (x_hi << 32) | x_lo
    y = (y + rotr64(fetch64(buf, offset + 16), 29) * K256_C + (x ^ y)) & MASK64
    z ^= (rotl64(fetch64(buf, offset + 24), 41) * K256_D + (y ^ z)) & MASK64

    return w_hi, w_lo, x_hi, x_lo, y, z
