import crcmod
import pytest

from checksum_engine.algorithms.modules.crc16 import CRC16, PRESET
from checksum_engine.checksum import Checksum


@pytest.mark.parametrize("value", [0x00, 0x01, 0x31, 0x80, 0xFF])
def test_crc16_single_byte_matches_reference(value: int):
    ref = crcmod.mkCrcFun(0x18005, initCrc=0x0000, rev=False, xorOut=0x0000)
    data = bytes([value])
    assert Checksum(PRESET).calculate(data) == ref(data)


def test_crc16_single_byte_one():
    # 0x0100 shifted through 8 rounds: 0x8005 fed back once at the last step
    assert Checksum(PRESET).calculate(b"\x01") == 0x8005


def test_crc16_check_value(check_input):
    assert Checksum(PRESET).calculate(check_input) == 0xFEE8


def test_crc16_buffers_match_reference(random_buffers):
    ref = crcmod.mkCrcFun(0x18005, initCrc=0x0000, rev=False, xorOut=0x0000)
    c = Checksum(PRESET)
    for buf in random_buffers:
        assert c.calculate(buf) == ref(buf)


def test_crc16_ccitt_false_matches_reference(random_buffers, check_input):
    ref = crcmod.mkCrcFun(0x11021, initCrc=0xFFFF, rev=False, xorOut=0x0000)
    c = Checksum(CRC16(0x1021, base=0xFFFF))
    assert c.calculate(check_input) == 0x29B1
    for buf in random_buffers:
        assert c.calculate(buf) == ref(buf)


def test_crc16_reflected_matches_reference(random_buffers):
    # CRC-16/MODBUS
    ref = crcmod.mkCrcFun(0x18005, initCrc=0xFFFF, rev=True, xorOut=0x0000)
    c = Checksum(CRC16(0x8005, 0xFFFF, 0x0000, True, True))
    for buf in random_buffers:
        assert c.calculate(buf) == ref(buf)


def test_crc16_output_reflection_swaps_and_reverses_bytes():
    alg = CRC16(0x8005, out_reverse=True)
    # 0x0180 -> bytes (0x01, 0x80) swapped and bit-reversed -> (0x01, 0x80)
    assert alg.set_final(0x0180) == 0x0180
    assert alg.set_final(0x0001) == 0x8000
    assert alg.set_final(0x1200) == 0x0048


def test_crc16_empty_is_base_then_final():
    alg = CRC16(0x1021, base=0x1D0F, final_xor=0xFFFF)
    assert Checksum(alg).calculate(b"") == 0x1D0F ^ 0xFFFF


def test_crc16_digest_fits_width(random_buffers):
    c = Checksum(CRC16(0x1021, base=0xFFFF, final_xor=0xFFFF, in_reverse=True, out_reverse=True))
    for buf in random_buffers:
        assert 0 <= c.calculate(buf) <= 0xFFFF


def test_crc16_rejects_out_of_width_polynomial():
    with pytest.raises(ValueError):
        CRC16(0x18005)


def test_crc16_set_final_masks_to_width():
    assert PRESET.set_final(0x12345678) == 0x5678
