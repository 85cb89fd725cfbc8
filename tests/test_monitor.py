import logging

import pytest

from obdcodec.core.errors import FailureKind, UnknownScaleId
from obdcodec.core.units import Measurement, Unit
from obdcodec.decoders.monitor import Monitor, MonitorTest, decode_monitor, parse_monitor_test

# [unused, tid, uas id, value(2), min(2), max(2)]
O2_RTL = bytes([0x00, 0x01, 0x0A, 0x0C, 0x80, 0x00, 0x00, 0x1F, 0x40])
MISFIRE = bytes([0x00, 0x0B, 0x24, 0x00, 0x05, 0x00, 0x00, 0x00, 0x0A])
NO_SCALE = bytes([0x00, 0x02, 0x08, 0x00, 0x05, 0x00, 0x00, 0x00, 0x0A])


def test_parse_one_record():
    t = parse_monitor_test(O2_RTL)
    assert t.tid == 0x01
    assert t.name == "RTLThresholdVoltage"
    assert t.value.unit is Unit.MILLIVOLTS
    assert t.value.value == pytest.approx(390.4)
    assert t.min == 0.0
    assert t.max == pytest.approx(976.0)
    assert t.passed
    assert str(t) == "The voltage at which the sensor switches from rich to lean : 390.4 [PASSED]"


def test_out_of_range_value_fails_test():
    t = parse_monitor_test(bytes([0x00, 0x0B, 0x24, 0x00, 0x0B, 0x00, 0x00, 0x00, 0x0A]))
    assert t.value.value == 11
    assert not t.passed
    assert str(t).endswith("[FAILED]")


def test_unknown_test_id_gets_placeholder(caplog):
    with caplog.at_level(logging.WARNING):
        t = parse_monitor_test(bytes([0x00, 0x40, 0x01, 0x00, 0x05, 0x00, 0x00, 0x00, 0x0A]))
    assert t.name == "TID: $40 CID: $01"
    assert t.description == "Unknown"
    assert "Test ID: 40" in caplog.text


def test_unknown_scale_id_raises():
    with pytest.raises(UnknownScaleId):
        parse_monitor_test(NO_SCALE)


def test_record_with_unknown_scale_is_skipped():
    mon = decode_monitor(O2_RTL + NO_SCALE)
    assert len(mon) == 1
    assert list(mon) == [0x01]
    offset, err = mon.skipped[0]
    assert offset == 9
    assert err.kind is FailureKind.UNKNOWN_SCALE_ID


def test_trailing_bytes_are_dropped(caplog):
    with caplog.at_level(logging.WARNING):
        mon = decode_monitor(O2_RTL + MISFIRE + b"\xAA\xBB")
    assert len(mon) == 2
    assert mon[0x0B].value == Measurement(5.0, Unit.COUNT)
    assert mon[0x0B].name == "MisFireAverage"
    assert "dropping 2 trailing bytes" in caplog.text
    offset, err = mon.notices[0]
    assert offset == 18
    assert err.kind is FailureKind.TRUNCATED_RECORD_BLOCK
    assert err.dropped == 2


def test_tolerated_anomalies_are_reported_as_notices():
    unknown_tid = bytes([0x00, 0x40, 0x01, 0x00, 0x05, 0x00, 0x00, 0x00, 0x0A])
    mon = decode_monitor(O2_RTL + unknown_tid + b"\xAA\xBB")
    assert len(mon) == 2
    assert mon.skipped == []
    kinds = [(offset, err.kind) for offset, err in mon.notices]
    assert kinds == [(18, FailureKind.TRUNCATED_RECORD_BLOCK), (9, FailureKind.UNKNOWN_TEST_ID)]
    assert mon.notices[1][1].tid == 0x40


def test_clean_block_has_no_notices():
    mon = decode_monitor(O2_RTL + MISFIRE)
    assert mon.notices == []
    assert mon.skipped == []


def test_later_duplicate_tid_wins():
    second = bytes([0x00, 0x0B, 0x24, 0x00, 0x07, 0x00, 0x00, 0x00, 0x0A])
    mon = decode_monitor(MISFIRE + second)
    assert len(mon) == 1
    assert mon[0x0B].value.value == 7


def test_empty_and_short_payloads():
    assert len(decode_monitor(b"")) == 0
    assert len(decode_monitor(b"\x00\x01\x0A")) == 0


def test_each_decode_builds_a_fresh_monitor():
    a = decode_monitor(O2_RTL)
    b = decode_monitor(MISFIRE)
    assert 0x01 in a and 0x01 not in b
    assert a.get(0x0B) is None


def test_monitor_only_accepts_complete_tests():
    mon = Monitor()
    with pytest.raises(TypeError):
        mon.add({"tid": 1})
    t = MonitorTest(0x01, "n", "d", Measurement(1.0, Unit.VOLTS), 0.0, 2.0)
    mon.add(t)
    assert list(mon.values()) == [t]
