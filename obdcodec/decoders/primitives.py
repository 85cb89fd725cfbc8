# obdcodec/decoders/primitives.py
"""
Single-field PID decoders. Each takes the data bytes of one response
(mode/PID echo already stripped) and returns a Measurement, str or bool,
or raises a DecodeError.
"""
from __future__ import annotations

import logging
import re

from obdcodec.core.bits import BitArray, bytes_to_int, twos_comp, u16be
from obdcodec.core.errors import IndexOutOfRange, InvalidBitPattern, MalformedText, require
from obdcodec.core.uas import decode_uas
from obdcodec.core.units import Measurement, Unit
from obdcodec.core.util import bytes_to_hex
from obdcodec.tables.reference import FUEL_STATUS, FUEL_TYPES, OBD_COMPLIANCE

log = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")


def uas(uas_id: int):
    """Decoder bound to a fixed Units and Scaling id."""
    def decode(data: bytes) -> Measurement:
        require(data, 1, f"UAS 0x{uas_id:02X}")
        return decode_uas(uas_id, data)
    decode.__name__ = f"uas_0x{uas_id:02x}"
    return decode


# linear

def temp(data: bytes) -> Measurement:
    require(data, 1, "temperature")
    return Measurement(bytes_to_int(data) - 40.0, Unit.CELSIUS)


def pressure(data: bytes) -> Measurement:
    require(data, 1, "pressure")
    return Measurement(float(data[0]), Unit.KILOPASCALS)


def fuel_pressure(data: bytes) -> Measurement:
    require(data, 1, "fuel pressure")
    return Measurement(data[0] * 3.0, Unit.KILOPASCALS)


def timing_advance(data: bytes) -> Measurement:
    require(data, 1, "timing advance")
    return Measurement(data[0] / 2.0 - 64.0, Unit.DEGREES)


def sensor_voltage(data: bytes) -> Measurement:
    # 0 to 1.275 V
    require(data, 1, "sensor voltage")
    return Measurement(data[0] / 200, Unit.VOLTS)


def sensor_voltage_big(data: bytes) -> Measurement:
    require(data, 4, "wide-range sensor voltage")
    return Measurement(u16be(data, 2) * 8.0 / 65535, Unit.VOLTS)


def max_maf(data: bytes) -> Measurement:
    require(data, 1, "max MAF")
    return Measurement(data[0] * 10.0, Unit.GRAMS_PER_SECOND)


def fuel_rate(data: bytes) -> Measurement:
    require(data, 1, "fuel rate")
    return Measurement(bytes_to_int(data) * 0.05, Unit.LITERS_PER_HOUR)


def inject_timing(data: bytes) -> Measurement:
    require(data, 1, "injection timing")
    return Measurement((bytes_to_int(data) - 26880) / 128, Unit.DEGREES)


def abs_evap_pressure(data: bytes) -> Measurement:
    require(data, 1, "absolute evap pressure")
    return Measurement(bytes_to_int(data) / 200, Unit.KILOPASCALS)


def evap_pressure_alt(data: bytes) -> Measurement:
    # -32767 to 32768 Pa
    require(data, 1, "evap pressure")
    return Measurement(bytes_to_int(data) - 32767.0, Unit.PASCAL)


def evap_pressure(data: bytes) -> Measurement:
    # each byte is two's-complemented on its own, not the pair
    require(data, 2, "evap pressure")
    a = twos_comp(data[0], 8)
    b = twos_comp(data[1], 8)
    return Measurement(((a * 256.0) + b) / 4.0, Unit.KILOPASCALS)


# percent

def percent(data: bytes) -> Measurement:
    require(data, 1, "percent")
    return Measurement(data[0] * 100.0 / 255.0, Unit.PERCENT)


def percent_centered(data: bytes) -> Measurement:
    require(data, 1, "percent")
    return Measurement((data[0] - 128) * 100.0 / 128.0, Unit.PERCENT)


def absolute_load(data: bytes) -> Measurement:
    require(data, 1, "absolute load")
    return Measurement(bytes_to_int(data) * 100.0 / 255.0, Unit.PERCENT)


def current_centered(data: bytes) -> Measurement:
    # -128 to 128 mA, from bytes C and D
    require(data, 4, "current")
    return Measurement(u16be(data, 2) / 256.0 - 128.0, Unit.MILLIAMPERES)


# categorical

def _lookup(table: tuple[str, ...], name: str, i: int) -> str:
    if i >= len(table):
        log.error("Invalid response for %s (no table entry for %d)", name, i)
        raise IndexOutOfRange(name, i, len(table))
    return table[i]


def fuel_type(data: bytes) -> str:
    require(data, 1, "fuel type")
    return _lookup(FUEL_TYPES, "fuel type", data[0])


def obd_compliance(data: bytes) -> str:
    require(data, 1, "OBD compliance")
    return _lookup(OBD_COMPLIANCE, "OBD compliance", data[-1])


# bit flags

def _single_bit(bits: list[int]) -> int | None:
    """Position of the only set bit, counted from the LSB; None unless exactly one is set."""
    if bits.count(1) != 1:
        return None
    return len(bits) - 1 - bits.index(1)


def fuel_status(data: bytes) -> str:
    """
    Two status bytes (fuel system 1 and 2), one bit set in each.
    A half with zero/several bits set is dropped; the other half still reports.
    """
    require(data, 2, "fuel status")
    bits = BitArray(data[:2])

    statuses = []
    for half, label in ((bits.slice(0, 8), "high"), (bits.slice(8, 16), "low")):
        index = _single_bit(half)
        if index is None:
            log.error("Invalid response for fuel status (multiple/no bits set in %s bits)", label)
            statuses.append(None)
        elif index >= len(FUEL_STATUS):
            log.error("Invalid response for fuel status (%s bits set)", label)
            statuses.append(None)
        else:
            statuses.append(FUEL_STATUS[index])

    status_1, status_2 = statuses
    if status_1 is not None and status_2 is not None:
        return f"Status 1: {status_1}, Status 2: {status_2}"
    if status_1 is not None or status_2 is not None:
        return f"Status: {status_1 if status_1 is not None else status_2}"
    log.error("No valid fuel status found.")
    raise InvalidBitPattern("fuel status: no byte has exactly one valid bit set")


def air_status(data: bytes) -> Measurement:
    require(data, 1, "secondary air status")
    index = _single_bit(BitArray(data[:1]).bits)
    if index is None:
        raise InvalidBitPattern(f"secondary air status: expected exactly one bit set in 0x{data[0]:02X}")
    return Measurement(float(index), Unit.NONE)


def aux_input_status(data: bytes) -> bool:
    require(data, 1, "aux input status")
    return ((data[0] >> 7) & 1) == 1


def pid(data: bytes) -> str:
    """Supported-PID bitmap, MSB first: bit i set means PID base+i+1 is supported."""
    require(data, 1, "supported PIDs")
    return "".join(str(b) for b in BitArray(data))


def o2_sensors(data: bytes) -> str:
    # banks 1-2, four sensors each
    require(data, 1, "O2 sensors present")
    bits = BitArray(data[:1])
    return f"{bits.slice(0, 4)}, {bits.slice(4, 8)}"


def o2_sensors_alt(data: bytes) -> str:
    # banks 1-4, two sensors each
    require(data, 1, "O2 sensors present")
    bits = BitArray(data[:1])
    return ", ".join(str(bits.slice(i, i + 2)) for i in range(0, 8, 2))


# text

def encoded_string(data: bytes) -> str:
    try:
        text = bytes(data).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedText(f"not valid UTF-8: {exc}") from exc
    return _NON_ALNUM.sub("", text)


def cvn(data: bytes) -> str:
    require(data, 1, "CVN")
    return bytes_to_hex(data, sep="")


def drop(data: bytes) -> None:
    return None
