"""Register rotations and the avalanche mixers.

``mix32`` and ``mix64`` are the single-register finishing functions used by
the piHash finalizer. They live in their own module so the avalanche tester
can exercise them directly; ``pihash.hashing`` does not re-export them.
"""

from __future__ import annotations

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF

# mix32 constants
_M32_PHI = 0x2CA803F9
_M32_L = 0x3583C01F
_M32_PSI = 0x34504DB3
_M32_R = 0x243E4223

# mix64 constants
_M64_PHI = 0x483B86D5483B86D5
_M64_L = 0x3AF1DE9B3AF1DE9B
_M64_PSI = 0x28330D1B28330D1B
_M64_R = 0x13A7CE5913A7CE59


def rotl32(x: int, k: int) -> int:
    """Rotate x left by k bits (32-bit)."""
    k &= 31
    return ((x << k) | (x >> (32 - k))) & MASK32


def rotr32(x: int, k: int) -> int:
    """Rotate x right by k bits (32-bit)."""
    k &= 31
    return ((x >> k) | (x << (32 - k))) & MASK32


def rotl64(x: int, k: int) -> int:
    """Rotate x left by k bits (64-bit)."""
    k &= 63
    return ((x << k) | (x >> (64 - k))) & MASK64


def rotr64(x: int, k: int) -> int:
    """Rotate x right by k bits (64-bit)."""
    k &= 63
    return ((x >> k) | (x << (64 - k))) & MASK64


def mix32(num: int) -> int:
    """Scramble a 32-bit register.

    Multiply by an odd constant, fold a rotated copy back in, add a scaled
    right-shifted copy, multiply by a rotated copy and finally xor in a
    scaled left-shifted copy. All arithmetic wraps modulo 2**32.

    Args:
        num: 32-bit register value

    Returns:
        Mixed 32-bit value
    """
    num = (num * _M32_PHI) & MASK32
    num ^= rotl32(num, 16)
    num ^= (_M32_L * (num >> 11) + _M32_PSI) & MASK32
    num = (num * rotr32(num, 4)) & MASK32
    num ^= ((_M32_R * num) << 7) & MASK32
    return num


def mix64(num: int) -> int:
    """Scramble a 64-bit register.

    Same shape as :func:`mix32` with 64-bit constants and shifts.

    Args:
        num: 64-bit register value

    Returns:
        Mixed 64-bit value
    """
    num = (num * _M64_PHI) & MASK64
    num ^= rotl64(num, 31)
    num ^= (_M64_L * (num >> 27) + _M64_PSI) & MASK64
    num = (num * rotr64(num, 33)) & MASK64
    num ^= ((_M64_R * num) << 37) & MASK64
    return num
