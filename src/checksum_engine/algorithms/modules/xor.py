from __future__ import annotations

from dataclasses import dataclass

from checksum_engine.algorithms.base import ChecksumAlgorithm


@dataclass(frozen=True)
class XorChecksum(ChecksumAlgorithm):
    """
    Running XOR of all bytes. Base 0, no finalization.

    This is NOT a CRC; it only catches an odd number of flips per bit lane.
    """

    def accumulate(self, register: int, value: int) -> int:
        return register ^ value


PRESET = XorChecksum()
