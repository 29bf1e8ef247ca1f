from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple, Union
import importlib
import logging
import operator
import pkgutil

import numpy as np

from checksum_engine.algorithms.base import ChecksumAlgorithm
from checksum_engine.utils.bitops import value_to_bytes_le


_logger = logging.getLogger(__name__)

_MODULES_PKG = "checksum_engine.algorithms.modules"

BytesLike = Union[bytes, bytearray, memoryview, np.ndarray]


class Checksum:
    """
    Drives one algorithm through set_base -> accumulate* -> set_final.

    The driver holds nothing but a reference to the (immutable) algorithm, so
    a single Checksum may be used from several threads at once; each call
    keeps its register in a local variable.
    """

    def __init__(self, algorithm: ChecksumAlgorithm) -> None:
        if not isinstance(algorithm, ChecksumAlgorithm):
            raise TypeError("algorithm must be a ChecksumAlgorithm")
        self.algorithm = algorithm

    def __repr__(self) -> str:
        return f"Checksum({self.algorithm!r})"

    def calculate(self, data: BytesLike, begin: int = 0, end: Optional[int] = None) -> int:
        """
        Checksum of the byte range data[begin:end].

        Requires 0 <= begin <= end <= len(data); anything else raises
        ValueError instead of silently wrapping like a slice would.
        """
        view = _as_byte_view(data)
        if end is None:
            end = len(view)
        begin, end = _check_range(begin, end, len(view))

        alg = self.algorithm
        acc = alg.accumulate
        register = alg.set_base()
        for b in view[begin:end]:
            register = acc(register, b)
        return alg.set_final(register)

    def calculate_n(self, data: BytesLike, length: int, offset: int = 0) -> int:
        """
        Checksum of `length` bytes starting at `offset`.
        Same as calculate(data, offset, offset + length).
        """
        return self.calculate(data, offset, offset + length)

    def calculate_values(self, values: Union[np.ndarray, Iterable[int]], itemsize: Optional[int] = None) -> int:
        """
        Checksum of a sequence of fixed-width integers.

        Every element is split into `itemsize` bytes, least significant
        first, and fed to accumulate_at() with a byte position counter that
        runs across the whole sequence. A uint32 array therefore yields the
        checksum of its little-endian byte image, whatever the host byte
        order.

        itemsize defaults to the dtype item size for numpy integer arrays and
        is mandatory otherwise.
        """
        if isinstance(values, np.ndarray):
            if not np.issubdtype(values.dtype, np.integer):
                raise TypeError(f"calculate_values: integer dtype required, got {values.dtype}")
            if itemsize is None:
                itemsize = values.dtype.itemsize
            values = values.reshape(-1).tolist()
        if itemsize is None:
            raise ValueError("calculate_values: itemsize is required for non-numpy sequences")
        if isinstance(itemsize, bool):
            raise TypeError("calculate_values: itemsize must be int")
        itemsize = operator.index(itemsize)
        if itemsize <= 0:
            raise ValueError("calculate_values: itemsize must be > 0")

        alg = self.algorithm
        acc = alg.accumulate_at
        register = alg.set_base()
        position = 0
        for v in values:
            for b in value_to_bytes_le(v, itemsize):
                register = acc(register, b, position)
                position += 1
        return alg.set_final(register)

    def verify(self, data: BytesLike, expected: int) -> bool:
        return self.calculate(data) == expected


# ----------------------------
# Module-selected checksum
# ----------------------------

@dataclass(frozen=True)
class Config:
    """
    Checksum selection by algorithm module.

    module: algorithm module name (e.g. "crc32")
    module_cfg: instance of the same class as that module's PRESET
                (or None -> module PRESET); any other type raises TypeError
    """
    module: str = "crc32"
    module_cfg: Any = None


def available_modules() -> list[str]:
    """
    Enumerate available algorithm modules under algorithms/modules.
    """
    pkg = importlib.import_module(_MODULES_PKG)
    names = [m.name for m in pkgutil.iter_modules(pkg.__path__)]
    return sorted([n for n in names if not n.startswith("_")])


def _import_algorithm_module(name: str):
    if not isinstance(name, str) or not name:
        raise ValueError("cfg.module must be a non-empty string")
    return importlib.import_module(f"{_MODULES_PKG}.{name}")


def _resolve_algorithm(cfg: Config) -> ChecksumAlgorithm:
    mod = _import_algorithm_module(cfg.module)
    if not hasattr(mod, "PRESET"):
        raise AttributeError(f"algorithm module '{cfg.module}' missing PRESET")

    alg = cfg.module_cfg if cfg.module_cfg is not None else mod.PRESET
    if not isinstance(alg, type(mod.PRESET)):
        raise TypeError(
            f"cfg.module_cfg for '{cfg.module}' must be a {type(mod.PRESET).__name__}, "
            f"got {type(alg).__name__}"
        )
    _logger.debug("Resolved checksum module %r -> %r", cfg.module, alg)
    return alg


def calculate(data: BytesLike, *, cfg: Config) -> int:
    """
    Checksum of all bytes in `data` with the algorithm selected by cfg.
    """
    return Checksum(_resolve_algorithm(cfg)).calculate(data)


# ----------------------------
# Internal
# ----------------------------

def _as_byte_view(data: BytesLike) -> memoryview:
    if isinstance(data, np.ndarray):
        if data.dtype != np.uint8:
            raise TypeError(f"data array must have dtype uint8, got {data.dtype}")
        data = np.ascontiguousarray(data).reshape(-1)
    elif not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("data must be bytes-like")
    return memoryview(data).cast("B")


def _check_range(begin: Any, end: Any, size: int) -> Tuple[int, int]:
    """
    Normalize begin/end to int (numpy integers included) and check
    0 <= begin <= end <= size.
    """
    if isinstance(begin, bool) or isinstance(end, bool):
        raise TypeError("begin/end must be int")
    begin = operator.index(begin)
    end = operator.index(end)
    if not (0 <= begin <= end <= size):
        raise ValueError(f"invalid range [{begin}, {end}) for {size} bytes")
    return begin, end
