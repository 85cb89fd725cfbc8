# obdcodec/decoders/dispatch.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Optional

from obdcodec.core.errors import DecodeError
from obdcodec.core.util import ByteLike, as_bytes
from obdcodec.decoders import primitives as p
from obdcodec.decoders.dtc import decode_dtcs, decode_single_dtc
from obdcodec.decoders.monitor import decode_monitor
from obdcodec.decoders.status import decode_status


class ResultKind(Enum):
    MEASUREMENT = "measurement"
    TEXT = "text"
    BOOL = "bool"
    TROUBLE_CODES = "trouble_codes"
    STATUS = "status"
    MONITOR = "monitor"
    NONE = "none"


class Decoder(Enum):
    PID = "pid"
    STATUS = "status"
    SINGLE_DTC = "single_dtc"
    FUEL_STATUS = "fuel_status"
    PERCENT = "percent"
    TEMP = "temp"
    PERCENT_CENTERED = "percent_centered"
    FUEL_PRESSURE = "fuel_pressure"
    PRESSURE = "pressure"
    UAS_0x07 = "uas_0x07"
    UAS_0x09 = "uas_0x09"
    UAS_0x12 = "uas_0x12"
    TIMING_ADVANCE = "timing_advance"
    UAS_0x27 = "uas_0x27"
    AIR_STATUS = "air_status"
    O2_SENSORS = "o2_sensors"
    SENSOR_VOLTAGE = "sensor_voltage"
    OBD_COMPLIANCE = "obd_compliance"
    O2_SENSORS_ALT = "o2_sensors_alt"
    AUX_INPUT_STATUS = "aux_input_status"
    UAS_0x25 = "uas_0x25"
    UAS_0x19 = "uas_0x19"
    UAS_0x1B = "uas_0x1b"
    UAS_0x01 = "uas_0x01"
    UAS_0x16 = "uas_0x16"
    UAS_0x0B = "uas_0x0b"
    UAS_0x1E = "uas_0x1e"
    EVAP_PRESSURE = "evap_pressure"
    SENSOR_VOLTAGE_BIG = "sensor_voltage_big"
    CURRENT_CENTERED = "current_centered"
    ABSOLUTE_LOAD = "absolute_load"
    UAS_0x34 = "uas_0x34"
    MAX_MAF = "max_maf"
    FUEL_TYPE = "fuel_type"
    ABS_EVAP_PRESSURE = "abs_evap_pressure"
    EVAP_PRESSURE_ALT = "evap_pressure_alt"
    INJECT_TIMING = "inject_timing"
    DTC = "dtc"
    FUEL_RATE = "fuel_rate"
    MONITOR = "monitor"
    COUNT = "count"
    CVN = "cvn"
    ENCODED_STRING = "encoded_string"
    NONE = "none"

    @property
    def result_kind(self) -> ResultKind:
        return _ROUTES[self][1]

    @classmethod
    def from_name(cls, name: str) -> "Decoder":
        key = name.strip().lower().replace("-", "_")
        try:
            return cls(key)
        except ValueError:
            raise KeyError(f"Unknown decoder: {name}") from None


M = ResultKind.MEASUREMENT
T = ResultKind.TEXT

_ROUTES: MappingProxyType[Decoder, tuple[Callable[[bytes], Any], ResultKind]] = MappingProxyType({
    Decoder.PID: (p.pid, T),
    Decoder.STATUS: (decode_status, ResultKind.STATUS),
    Decoder.SINGLE_DTC: (decode_single_dtc, ResultKind.TROUBLE_CODES),
    Decoder.FUEL_STATUS: (p.fuel_status, T),
    Decoder.PERCENT: (p.percent, M),
    Decoder.TEMP: (p.temp, M),
    Decoder.PERCENT_CENTERED: (p.percent_centered, M),
    Decoder.FUEL_PRESSURE: (p.fuel_pressure, M),
    Decoder.PRESSURE: (p.pressure, M),
    Decoder.UAS_0x07: (p.uas(0x07), M),
    Decoder.UAS_0x09: (p.uas(0x09), M),
    Decoder.UAS_0x12: (p.uas(0x12), M),
    Decoder.TIMING_ADVANCE: (p.timing_advance, M),
    Decoder.UAS_0x27: (p.uas(0x27), M),
    Decoder.AIR_STATUS: (p.air_status, M),
    Decoder.O2_SENSORS: (p.o2_sensors, T),
    Decoder.SENSOR_VOLTAGE: (p.sensor_voltage, M),
    Decoder.OBD_COMPLIANCE: (p.obd_compliance, T),
    Decoder.O2_SENSORS_ALT: (p.o2_sensors_alt, T),
    Decoder.AUX_INPUT_STATUS: (p.aux_input_status, ResultKind.BOOL),
    Decoder.UAS_0x25: (p.uas(0x25), M),
    Decoder.UAS_0x19: (p.uas(0x19), M),
    Decoder.UAS_0x1B: (p.uas(0x1B), M),
    Decoder.UAS_0x01: (p.uas(0x01), M),
    Decoder.UAS_0x16: (p.uas(0x16), M),
    Decoder.UAS_0x0B: (p.uas(0x0B), M),
    Decoder.UAS_0x1E: (p.uas(0x1E), M),
    Decoder.EVAP_PRESSURE: (p.evap_pressure, M),
    Decoder.SENSOR_VOLTAGE_BIG: (p.sensor_voltage_big, M),
    Decoder.CURRENT_CENTERED: (p.current_centered, M),
    Decoder.ABSOLUTE_LOAD: (p.absolute_load, M),
    Decoder.UAS_0x34: (p.uas(0x34), M),
    Decoder.MAX_MAF: (p.max_maf, M),
    Decoder.FUEL_TYPE: (p.fuel_type, T),
    Decoder.ABS_EVAP_PRESSURE: (p.abs_evap_pressure, M),
    Decoder.EVAP_PRESSURE_ALT: (p.evap_pressure_alt, M),
    Decoder.INJECT_TIMING: (p.inject_timing, M),
    Decoder.DTC: (decode_dtcs, ResultKind.TROUBLE_CODES),
    Decoder.FUEL_RATE: (p.fuel_rate, M),
    Decoder.MONITOR: (decode_monitor, ResultKind.MONITOR),
    Decoder.COUNT: (p.uas(0x01), M),
    Decoder.CVN: (p.cvn, T),
    Decoder.ENCODED_STRING: (p.encoded_string, T),
    Decoder.NONE: (p.drop, ResultKind.NONE),
})

_missing = set(Decoder) - set(_ROUTES)
if _missing:
    raise RuntimeError(f"No route for decoder(s): {sorted(d.name for d in _missing)}")


def decode(decoder: Decoder, data: ByteLike) -> Any:
    """
    Decode one response payload with the given decoder.
    The return type follows decoder.result_kind; failures raise DecodeError.
    """
    func, _ = _ROUTES[decoder]
    return func(as_bytes(data))


@dataclass(frozen=True)
class DecodeOutcome:
    decoder: Decoder
    value: Any = None
    error: Optional[DecodeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def try_decode(decoder: Decoder, data: ByteLike) -> DecodeOutcome:
    try:
        return DecodeOutcome(decoder, value=decode(decoder, data))
    except DecodeError as exc:
        return DecodeOutcome(decoder, error=exc)
