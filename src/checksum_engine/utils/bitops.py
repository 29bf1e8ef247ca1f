from __future__ import annotations

from typing import List


def nbyte(n: int, value: int) -> int:
    """
    Return byte `n` of `value`, byte 0 being the least significant one.
    Negative values are taken in two's complement.
    """
    return (value >> (8 * n)) & 0xFF


def reverse_byte(value: int) -> int:
    """
    Reverse the bit order of a single byte: 0b00000001 -> 0b10000000.
    """
    value &= 0xFF
    value = ((value & 0xF0) >> 4) | ((value & 0x0F) << 4)
    value = ((value & 0xCC) >> 2) | ((value & 0x33) << 2)
    value = ((value & 0xAA) >> 1) | ((value & 0x55) << 1)
    return value


def reverse_bytes_and_bits(value: int, nbytes: int) -> int:
    """
    Swap the byte order of the low `nbytes` bytes and bit-reverse each of them.
    For nbytes=4 this maps 0x04C11DB7 -> 0xEDB88320.
    """
    out = 0
    for i in range(nbytes):
        out |= reverse_byte(nbyte(nbytes - 1 - i, value)) << (8 * i)
    return out


def value_to_bytes_le(value: int, itemsize: int) -> List[int]:
    """
    Decompose one scalar into `itemsize` bytes, least significant first.
    """
    return [nbyte(i, value) for i in range(itemsize)]
