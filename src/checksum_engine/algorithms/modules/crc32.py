from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from checksum_engine.algorithms.modules._crc import CRCParameters
from checksum_engine.utils.bitops import reverse_byte, reverse_bytes_and_bits


@dataclass(frozen=True)
class CRC32(CRCParameters):
    """
    32-bit CRC, LSB-first (right shifting) shift register.

    The register runs reflected, so the reflection flags work the other way
    round compared to CRC8/CRC16:
      - input bytes are bit-reversed when in_reverse is False
      - the register is reflected on output when out_reverse is False
    With both flags set this is the usual zlib/PKZIP CRC-32; with both cleared
    it is the MSB-first form (BZIP2, MPEG-2, cksum).

    The base is loaded as is, without reflection. Non-reflected parameter sets
    therefore only match their catalog entries when base is symmetric
    (0 or 0xFFFFFFFF).
    """
    width: ClassVar[int] = 32

    # polynomial with its 32 bits reversed, derived from polynomial
    reflected_polynomial: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "reflected_polynomial", reverse_bytes_and_bits(self.polynomial, 4))

    def accumulate(self, register: int, value: int) -> int:
        register ^= value if self.in_reverse else reverse_byte(value)
        poly = self.reflected_polynomial
        for _ in range(8):
            register = (register >> 1) ^ (poly & -(register & 1))
        return register

    def set_final(self, register: int) -> int:
        if not self.out_reverse:
            register = reverse_bytes_and_bits(register, 4)
        return (register ^ self.final_xor) & 0xFFFFFFFF


# CRC-32 as used by zip/zlib/PNG (check("123456789") = 0xCBF43926)
PRESET = CRC32(0x04C11DB7, 0xFFFFFFFF, 0xFFFFFFFF, True, True)
