from __future__ import annotations

import abc
from typing import ClassVar


class ChecksumAlgorithm(abc.ABC):
    """
    Three-phase checksum contract: set_base -> accumulate* -> set_final.

    The register is a plain int owned by the caller and threaded through the
    return values, so an algorithm instance holds no per-computation state and
    can be shared between threads.

    Implementations only have to provide accumulate(). Input values are bytes
    in [0, 255]; this is a precondition and is not checked here.
    """

    width: ClassVar[int] = 8

    def set_base(self) -> int:
        """
        Initial register value. Zero unless the variant says otherwise.
        """
        return 0

    @abc.abstractmethod
    def accumulate(self, register: int, value: int) -> int:
        """
        Fold one byte into the register and return the new register.
        """
        raise NotImplementedError

    def accumulate_at(self, register: int, value: int, position: int) -> int:
        """
        Position-aware entry point used by the scalar sequence driver.
        The position is the global byte index since set_base(); variants that
        do not depend on it get the plain accumulate() behavior.
        """
        return self.accumulate(register, value)

    def set_final(self, register: int) -> int:
        """
        Output transform (reflection, final XOR, masking). Identity by default.
        """
        return register
