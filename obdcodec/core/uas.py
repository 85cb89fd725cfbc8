# obdcodec/core/uas.py
"""
Units and Scaling (UAS) registry from the OBD monitor-test tables.

Each id maps to a sign flag, scale, unit and offset:
  value = twos_comp_if_signed(bytes_to_int(span)) * scale + offset
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from .bits import bytes_to_int, twos_comp
from .errors import UnknownScaleId
from .units import Measurement, Unit


@dataclass(frozen=True)
class UAS:
    signed: bool
    scale: float
    unit: Unit
    offset: float = 0.0

    def decode(self, data: bytes) -> Measurement:
        value = bytes_to_int(data)
        if self.signed:
            value = twos_comp(value, len(data) * 8)
        return Measurement(value=value * self.scale + self.offset, unit=self.unit)


UAS_IDS = MappingProxyType({
    # unsigned
    0x01: UAS(False, 1.0, Unit.COUNT),
    0x02: UAS(False, 0.1, Unit.COUNT),
    0x03: UAS(False, 0.01, Unit.COUNT),
    0x04: UAS(False, 0.001, Unit.COUNT),
    0x05: UAS(False, 0.0000305, Unit.COUNT),
    0x06: UAS(False, 0.000305, Unit.COUNT),
    0x07: UAS(False, 0.25, Unit.RPM),
    0x09: UAS(False, 1, Unit.KPH),

    0x0A: UAS(False, 0.122, Unit.MILLIVOLTS),
    0x0B: UAS(False, 0.001, Unit.VOLTS),

    0x10: UAS(False, 1, Unit.MILLISECONDS),
    0x11: UAS(False, 100, Unit.MILLISECONDS),
    0x12: UAS(False, 1, Unit.SECONDS),
    0x13: UAS(False, 1, Unit.MICROOHMS),
    0x14: UAS(False, 1, Unit.OHMS),
    0x15: UAS(False, 1, Unit.KILOOHMS),
    0x16: UAS(False, 0.1, Unit.CELSIUS, offset=-40.0),
    0x17: UAS(False, 0.01, Unit.KILOPASCALS),
    0x18: UAS(False, 0.0117, Unit.KILOPASCALS),
    0x19: UAS(False, 0.079, Unit.KILOPASCALS),
    0x1A: UAS(False, 1, Unit.KILOPASCALS),
    0x1B: UAS(False, 10, Unit.KILOPASCALS),
    0x1C: UAS(False, 0.01, Unit.DEGREES),
    0x1D: UAS(False, 0.5, Unit.DEGREES),
    0x1E: UAS(False, 0.0000305, Unit.RATIO),
    0x1F: UAS(False, 0.05, Unit.RATIO),
    0x20: UAS(False, 0.00390625, Unit.RATIO),
    0x21: UAS(False, 1, Unit.MILLIHERTZ),
    0x22: UAS(False, 1, Unit.HERTZ),
    0x23: UAS(False, 1, Unit.KILOHERTZ),
    0x24: UAS(False, 1, Unit.COUNT),
    0x25: UAS(False, 1, Unit.KILOMETERS),

    0x27: UAS(False, 0.01, Unit.GRAMS_PER_SECOND),

    0x34: UAS(False, 1, Unit.MINUTES),

    # signed
    0x81: UAS(True, 1.0, Unit.COUNT),
    0x82: UAS(True, 0.1, Unit.COUNT),
    0x83: UAS(True, 0.01, Unit.COUNT),
    0x84: UAS(True, 0.001, Unit.COUNT),
    0x85: UAS(True, 0.0000305, Unit.COUNT),
    0x86: UAS(True, 0.000305, Unit.COUNT),
    0x87: UAS(True, 1, Unit.PPM),

    0x8A: UAS(True, 0.122, Unit.MILLIVOLTS),
    0x8B: UAS(True, 0.001, Unit.VOLTS),
    0x8C: UAS(True, 0.01, Unit.VOLTS),
    0x8D: UAS(True, 0.00390625, Unit.MILLIAMPERES),
    0x8E: UAS(True, 0.001, Unit.AMPERES),

    0x90: UAS(True, 1, Unit.MILLISECONDS),

    0x96: UAS(True, 0.1, Unit.CELSIUS),

    0x99: UAS(True, 0.1, Unit.KILOPASCALS),

    0xFC: UAS(True, 0.01, Unit.KILOPASCALS),
    0xFD: UAS(True, 0.001, Unit.KILOPASCALS),
    0xFE: UAS(True, 0.25, Unit.PASCAL),
})


def lookup_uas(uas_id: int) -> UAS:
    try:
        return UAS_IDS[uas_id]
    except KeyError:
        raise UnknownScaleId(uas_id) from None


def decode_uas(uas_id: int, data: bytes) -> Measurement:
    return lookup_uas(uas_id).decode(data)
