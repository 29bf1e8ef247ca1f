from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from checksum_engine.algorithms.modules._crc import CRCParameters
from checksum_engine.utils.bitops import nbyte, reverse_byte


@dataclass(frozen=True)
class CRC8(CRCParameters):
    """
    8-bit CRC, MSB-first shift register.

    in_reverse:  bit-reverse each input byte before folding it in
    out_reverse: bit-reverse the register before the final XOR
    """
    width: ClassVar[int] = 8

    def accumulate(self, register: int, value: int) -> int:
        register ^= reverse_byte(value) if self.in_reverse else value
        poly = self.polynomial
        for _ in range(8):
            if register & 0x80:
                register = ((register << 1) ^ poly) & 0xFF
            else:
                register = (register << 1) & 0xFF
        return register

    def set_final(self, register: int) -> int:
        if self.out_reverse:
            register = reverse_byte(nbyte(0, register))
        register ^= self.final_xor
        return register & 0xFF


# CRC-8, poly 0x07, no reflection (check("123456789") = 0xF4)
PRESET = CRC8(0x07)
