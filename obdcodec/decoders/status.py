# obdcodec/decoders/status.py
from __future__ import annotations

from dataclasses import dataclass, field

from obdcodec.core.bits import BitArray
from obdcodec.core.errors import require
from obdcodec.tables.reference import BASE_TESTS, COMPRESSION_TESTS, IGNITION_TYPES, SPARK_TESTS


@dataclass(frozen=True)
class StatusTest:
    name: str = ""
    supported: bool = False
    ready: bool = False


@dataclass(frozen=True)
class Status:
    mil: bool = False
    dtc_count: int = 0
    ignition_type: str = ""
    misfire_monitoring: StatusTest = StatusTest()
    fuel_system_monitoring: StatusTest = StatusTest()
    component_monitoring: StatusTest = StatusTest()
    # ignition-specific monitors, only when the full 32-bit field is present
    tests: dict[str, StatusTest] = field(default_factory=dict)

    @property
    def malfunction_indicator_on(self) -> bool:
        return self.mil

    @property
    def trouble_code_count(self) -> int:
        return self.dtc_count


_BASE_FIELDS = {
    "MISFIRE_MONITORING": "misfire_monitoring",
    "FUEL_SYSTEM_MONITORING": "fuel_system_monitoring",
    "COMPONENT_MONITORING": "component_monitoring",
}


def decode_status(data: bytes) -> Status:
    """
    data[0] is skipped; the bit field after it reads:

                ┌Components not ready
                |┌Fuel not ready
                ||┌Misfire not ready
                |||┌Spark vs. Compression
                ||||┌Components supported
                |||||┌Fuel supported
      ┌MIL      ||||||┌Misfire supported
      |         |||||||
      10000011 00000111 11111111 00000000
       [# DTC] X        [supprt] [~ready]
    """
    require(data, 3, "status")
    bits = BitArray(data[1:])

    ignition_type = IGNITION_TYPES[bits[12]]
    out = {
        "mil": bits[0] == 1,
        "dtc_count": bits.value(1, 8),
        "ignition_type": ignition_type,
    }

    for index, name in enumerate(reversed(BASE_TESTS)):
        out[_BASE_FIELDS[name]] = StatusTest(name, bits[13 + index] != 0, bits[9 + index] == 0)

    tests: dict[str, StatusTest] = {}
    if len(bits) >= 32:
        names = SPARK_TESTS if ignition_type == "Spark" else COMPRESSION_TESTS
        for index, name in enumerate(reversed(names)):
            if name is None:
                continue
            tests[name] = StatusTest(name, bits[16 + index] != 0, bits[24 + index] == 0)

    return Status(tests=tests, **out)
