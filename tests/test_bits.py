import pytest

from obdcodec.core.bits import BitArray, bytes_to_int, twos_comp, u16be


def test_byte_roundtrips_through_its_own_bits():
    for b in range(256):
        assert BitArray(bytes([b])).value(0, 8) == b


def test_bits_are_msb_first_across_bytes():
    bits = BitArray(b"\x80\x01")
    assert len(bits) == 16
    assert bits[0] == 1
    assert bits[7] == 0
    assert bits[15] == 1
    assert bits.bits == [1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1]


def test_value_spans_byte_boundary():
    assert BitArray(b"\x0F\xF0").value(4, 12) == 0xFF
    assert BitArray(b"\x85").value(1, 8) == 5


def test_index_of_first_set_and_clear_bit():
    assert BitArray(b"\x00\x10").index(1) == 11
    assert BitArray(b"\xFF\x7F").index(0) == 8
    assert BitArray(b"\x00\x00").index(1) is None


def test_out_of_range_access_is_a_programming_error():
    bits = BitArray(b"\x01")
    with pytest.raises(IndexError):
        bits[8]
    with pytest.raises(IndexError):
        bits.value(4, 9)


@pytest.mark.parametrize("n", [1, 4, 8, 16, 32])
@pytest.mark.parametrize("x", [0, 1, 0x7F, 0x80, 0xFF, 0x1234, -1, -200])
def test_twos_comp_masking_is_idempotent(x, n):
    once = twos_comp(x, n)
    assert twos_comp(once, n) == once
    assert 0 <= once < (1 << n)


def test_byte_helpers():
    assert bytes_to_int(b"") == 0
    assert bytes_to_int(b"\x01\x02") == 258
    assert bytes_to_int(b"\x01\x00\x00") == 0x010000
    assert u16be(b"\x00\x1A\xF8", 1) == 0x1AF8
