import pytest

from obdcodec.core.errors import FailureKind
from obdcodec.core.units import Measurement, Unit
from obdcodec.decoders.dispatch import Decoder, ResultKind, decode, try_decode
from obdcodec.decoders.monitor import Monitor
from obdcodec.decoders.status import Status

SAMPLES = {
    Decoder.PID: b"\xBE\x1F\xA8\x13",
    Decoder.STATUS: b"\x01\x85\x07\xE5\x00",
    Decoder.SINGLE_DTC: b"\x01\x33",
    Decoder.FUEL_STATUS: b"\x02\x01",
    Decoder.AIR_STATUS: b"\x04",
    Decoder.O2_SENSORS: b"\x83",
    Decoder.O2_SENSORS_ALT: b"\x83",
    Decoder.OBD_COMPLIANCE: b"\x06",
    Decoder.AUX_INPUT_STATUS: b"\x80",
    Decoder.SENSOR_VOLTAGE_BIG: b"\x80\x00\x80\x00",
    Decoder.CURRENT_CENTERED: b"\x80\x00\x80\x00",
    Decoder.FUEL_TYPE: b"\x01",
    Decoder.DTC: b"\x01\x33\x00\x00",
    Decoder.MONITOR: bytes([0x00, 0x01, 0x0A, 0x0C, 0x80, 0x00, 0x00, 0x1F, 0x40]),
    Decoder.CVN: b"\x12\xAB\x00\xFF",
    Decoder.ENCODED_STRING: b"ABC123",
    Decoder.NONE: b"",
}

EXPECTED_TYPE = {
    ResultKind.MEASUREMENT: Measurement,
    ResultKind.TEXT: str,
    ResultKind.BOOL: bool,
    ResultKind.TROUBLE_CODES: list,
    ResultKind.STATUS: Status,
    ResultKind.MONITOR: Monitor,
    ResultKind.NONE: type(None),
}


@pytest.mark.parametrize("decoder", list(Decoder), ids=lambda d: d.value)
def test_every_decoder_returns_its_promised_variant(decoder):
    value = decode(decoder, SAMPLES.get(decoder, b"\x00\x10"))
    assert isinstance(value, EXPECTED_TYPE[decoder.result_kind])


def test_accepts_byte_sequences():
    assert decode(Decoder.TEMP, [0x7B]) == Measurement(83.0, Unit.CELSIUS)
    assert decode(Decoder.TEMP, bytearray(b"\x7B")) == Measurement(83.0, Unit.CELSIUS)
    with pytest.raises(ValueError):
        decode(Decoder.TEMP, [0x100])


def test_count_is_uas_0x01():
    assert decode(Decoder.COUNT, b"\x00\x2A") == decode(Decoder.UAS_0x01, b"\x00\x2A")


def test_dtc_routes():
    assert [c.code for c in decode(Decoder.DTC, b"\x41\x23\x00\x00")] == ["C0123"]
    assert decode(Decoder.DTC, b"\x00\x00") == []


def test_from_name():
    assert Decoder.from_name("UAS_0x16") is Decoder.UAS_0x16
    assert Decoder.from_name("fuel-status") is Decoder.FUEL_STATUS
    with pytest.raises(KeyError):
        Decoder.from_name("rpm_turbo")


def test_try_decode_success_and_failure():
    ok = try_decode(Decoder.PERCENT, b"\xFF")
    assert ok.ok and ok.error is None
    assert ok.value.value == pytest.approx(100.0)

    bad = try_decode(Decoder.FUEL_TYPE, b"\xFF")
    assert not bad.ok
    assert bad.value is None
    assert bad.error.kind is FailureKind.INDEX_OUT_OF_RANGE

    short = try_decode(Decoder.STATUS, b"\x01")
    assert short.error.kind is FailureKind.TRUNCATED_PAYLOAD
