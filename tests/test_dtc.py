import pytest

from obdcodec.core.errors import TruncatedPayload
from obdcodec.decoders.dtc import (
    NO_DESCRIPTION,
    TroubleCode,
    decode_dtcs,
    decode_single_dtc,
    describe_dtc,
    parse_dtc,
)


def test_parse_chassis_code():
    # 0x41 >> 6 = 1 -> C, (0x41 >> 4) & 3 = 0, low 14 bits = 0x0123
    dtc = parse_dtc(b"\x41\x23")
    assert dtc.code == "C0123"
    assert dtc.description == NO_DESCRIPTION


def test_parse_known_powertrain_code():
    dtc = parse_dtc(b"\x01\x33")
    assert dtc == TroubleCode("P0133", "O2 Sensor Circuit Slow Response (Bank 1 Sensor 1)")


def test_parse_network_codes():
    assert parse_dtc(b"\xC1\x00").code == "U0100"
    assert parse_dtc(b"\xD1\x23").code == "U1123"
    assert parse_dtc(b"\x9F\xFF").code == "B1FFF"


def test_empty_slot_is_no_code():
    assert parse_dtc(b"\x00\x00") is None
    assert decode_dtcs(b"\x00\x00") == []


def test_frame_of_codes_skips_empty_slots():
    codes = decode_dtcs(b"\x01\x33\x00\x00\x03\x01")
    assert [c.code for c in codes] == ["P0133", "P0301"]
    assert codes[1].description == "Cylinder 1 Misfire Detected"


def test_dangling_odd_byte_is_ignored():
    assert [c.code for c in decode_dtcs(b"\x01\x33\x03")] == ["P0133"]
    assert decode_dtcs(b"\x03") == []
    assert decode_dtcs(b"") == []


def test_single_dtc():
    assert decode_single_dtc(b"\x03\x01") == [parse_dtc(b"\x03\x01")]
    assert decode_single_dtc(b"\x00\x00") == []
    with pytest.raises(TruncatedPayload):
        decode_single_dtc(b"\x03")


def test_single_dtc_ignores_longer_spans():
    assert decode_single_dtc(b"\x03\x01\x01\x33") == []
    assert decode_single_dtc(b"\x03\x01\x00") == []


def test_trouble_code_validates_format():
    with pytest.raises(ValueError):
        TroubleCode("X0123")
    with pytest.raises(ValueError):
        TroubleCode("P4123")
    with pytest.raises(ValueError):
        TroubleCode("p0123")


def test_describe_is_case_insensitive_with_default():
    assert describe_dtc("p0420") == "Catalyst System Efficiency Below Threshold (Bank 1)"
    assert describe_dtc("P3FFF") == NO_DESCRIPTION
