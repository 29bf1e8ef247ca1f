"""
Ready-made checksum algorithms.

XOR, CRC8, CRC16 and CRC32 are the default presets of the algorithm modules.
CATALOG adds named CRC parameter sets (names as in the reveng catalogue,
https://reveng.sourceforge.io/crc-catalogue/all.htm) that this engine
reproduces bit for bit, each with its check value: the CRC of b"123456789".
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List
import logging

from checksum_engine.algorithms.base import ChecksumAlgorithm
from checksum_engine.algorithms.modules import crc8, crc16, crc32, xor
from checksum_engine.algorithms.modules.crc8 import CRC8 as _CRC8
from checksum_engine.algorithms.modules.crc16 import CRC16 as _CRC16
from checksum_engine.algorithms.modules.crc32 import CRC32 as _CRC32
from checksum_engine.checksum import Checksum


_logger = logging.getLogger(__name__)

CHECK_INPUT = b"123456789"

XOR = xor.PRESET
CRC8 = crc8.PRESET
CRC16 = crc16.PRESET
CRC32 = crc32.PRESET


@dataclass(frozen=True)
class CatalogEntry:
    name: str
    algorithm: ChecksumAlgorithm
    check: int


_ENTRIES = [
    CatalogEntry("CRC-8/SMBUS", CRC8, 0xF4),
    CatalogEntry("CRC-8/MAXIM-DOW", _CRC8(0x31, in_reverse=True, out_reverse=True), 0xA1),
    CatalogEntry("CRC-8/I-432-1", _CRC8(0x07, final_xor=0x55), 0xA1),
    CatalogEntry("CRC-8/CDMA2000", _CRC8(0x9B, base=0xFF), 0xDA),
    CatalogEntry("CRC-16/UMTS", CRC16, 0xFEE8),
    CatalogEntry("CRC-16/ARC", _CRC16(0x8005, in_reverse=True, out_reverse=True), 0xBB3D),
    CatalogEntry("CRC-16/MODBUS", _CRC16(0x8005, 0xFFFF, 0, True, True), 0x4B37),
    CatalogEntry("CRC-16/IBM-3740", _CRC16(0x1021, base=0xFFFF), 0x29B1),
    CatalogEntry("CRC-16/XMODEM", _CRC16(0x1021), 0x31C3),
    CatalogEntry("CRC-16/KERMIT", _CRC16(0x1021, in_reverse=True, out_reverse=True), 0x2189),
    CatalogEntry("CRC-32/ISO-HDLC", CRC32, 0xCBF43926),
    CatalogEntry("CRC-32/BZIP2", _CRC32(0x04C11DB7, 0xFFFFFFFF, 0xFFFFFFFF), 0xFC891918),
    CatalogEntry("CRC-32/MPEG-2", _CRC32(0x04C11DB7, 0xFFFFFFFF), 0x0376E6E7),
    CatalogEntry("CRC-32/CKSUM", _CRC32(0x04C11DB7, final_xor=0xFFFFFFFF), 0x765E7680),
    CatalogEntry("CRC-32/JAMCRC", _CRC32(0x04C11DB7, 0xFFFFFFFF, 0, True, True), 0x340BC6D9),
    CatalogEntry("CRC-32/ISCSI", _CRC32(0x1EDC6F41, 0xFFFFFFFF, 0xFFFFFFFF, True, True), 0xE3069283),
]

# Common aliases
_ALIASES = {
    "CRC-8": "CRC-8/SMBUS",
    "CRC-16": "CRC-16/UMTS",
    "CRC-16/BUYPASS": "CRC-16/UMTS",
    "CRC-16/CCITT-FALSE": "CRC-16/IBM-3740",
    "CRC-32": "CRC-32/ISO-HDLC",
    "CRC-32C": "CRC-32/ISCSI",
}

CATALOG: Dict[str, CatalogEntry] = {e.name: e for e in _ENTRIES}


def names() -> List[str]:
    return [e.name for e in _ENTRIES]


def get(name: str) -> ChecksumAlgorithm:
    """
    Look up a catalog algorithm by name, case-insensitively.
    Raises KeyError for unknown names.
    """
    return get_entry(name).algorithm


def get_entry(name: str) -> CatalogEntry:
    if not isinstance(name, str):
        raise TypeError("name must be str")
    key = name.upper()
    key = _ALIASES.get(key, key)
    try:
        return CATALOG[key]
    except KeyError:
        raise KeyError(f"unknown checksum algorithm: {name!r}") from None


def self_test() -> List[str]:
    """
    Recompute every check value. Returns the names of failing entries.
    """
    failed = []
    for e in _ENTRIES:
        got = Checksum(e.algorithm).calculate(CHECK_INPUT)
        if got != e.check:
            _logger.warning("%s: check value %#x, expected %#x", e.name, got, e.check)
            failed.append(e.name)
        else:
            _logger.debug("%s: check value %#x ok", e.name, got)
    return failed
