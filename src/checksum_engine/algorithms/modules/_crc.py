from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, TypeVar

from checksum_engine.algorithms.base import ChecksumAlgorithm


_Self = TypeVar("_Self", bound="CRCParameters")


@dataclass(frozen=True)
class CRCParameters(ChecksumAlgorithm):
    """
    Parameters shared by the CRC engines of every register width.

    polynomial:  generator polynomial without the implicit top bit (width bits)
    base:        register value before the first byte
    final_xor:   mask XORed into the register after output reflection
    in_reverse:  input reflection flag
    out_reverse: output reflection flag

    Instances are immutable. The with_*() setters return a new instance of the
    concrete subclass, so configuration can still be chained:

        CRC16(0x1021).with_base(0xFFFF).with_in_reverse().with_out_reverse()
    """
    polynomial: int
    base: int = 0
    final_xor: int = 0
    in_reverse: bool = False
    out_reverse: bool = False

    def __post_init__(self) -> None:
        hi = (1 << self.width) - 1
        _check_int("polynomial", self.polynomial, 0, hi)
        _check_int("base", self.base, 0, hi)
        _check_int("final_xor", self.final_xor, 0, hi)
        _check_bool("in_reverse", self.in_reverse)
        _check_bool("out_reverse", self.out_reverse)

    def set_base(self) -> int:
        return self.base

    # ----------------------------
    # Fluent configuration
    # ----------------------------

    def with_polynomial(self: _Self, polynomial: int) -> _Self:
        return replace(self, polynomial=polynomial)

    def with_base(self: _Self, base: int) -> _Self:
        return replace(self, base=base)

    def with_final_xor(self: _Self, final_xor: int) -> _Self:
        return replace(self, final_xor=final_xor)

    def with_in_reverse(self: _Self, in_reverse: bool = True) -> _Self:
        return replace(self, in_reverse=in_reverse)

    def with_out_reverse(self: _Self, out_reverse: bool = True) -> _Self:
        return replace(self, out_reverse=out_reverse)


def _check_int(name: str, v: Any, lo: int, hi: int) -> None:
    if isinstance(v, bool) or not isinstance(v, int):
        raise TypeError(f"{name} must be int")
    if not (lo <= v <= hi):
        raise ValueError(f"{name} out of range [{lo:#x},{hi:#x}]")


def _check_bool(name: str, v: Any) -> None:
    if not isinstance(v, bool):
        raise TypeError(f"{name} must be bool")
