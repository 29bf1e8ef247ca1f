from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from checksum_engine.algorithms.modules._crc import CRCParameters
from checksum_engine.utils.bitops import reverse_byte, reverse_bytes_and_bits


@dataclass(frozen=True)
class CRC16(CRCParameters):
    """
    16-bit CRC, MSB-first shift register. Input bytes enter at the top byte
    of the register.

    out_reverse swaps the two register bytes and bit-reverses each of them,
    i.e. reflects all 16 bits.
    """
    width: ClassVar[int] = 16

    def accumulate(self, register: int, value: int) -> int:
        register ^= (reverse_byte(value) if self.in_reverse else value) << 8
        poly = self.polynomial
        for _ in range(8):
            if register & 0x8000:
                register = ((register << 1) ^ poly) & 0xFFFF
            else:
                register = (register << 1) & 0xFFFF
        return register

    def set_final(self, register: int) -> int:
        if self.out_reverse:
            register = reverse_bytes_and_bits(register, 2)
        register ^= self.final_xor
        return register & 0xFFFF


# CRC-16, poly 0x8005, no reflection (check("123456789") = 0xFEE8)
PRESET = CRC16(0x8005)
