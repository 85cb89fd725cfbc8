# obdcodec/tables/reference.py
from __future__ import annotations

from types import MappingProxyType

IGNITION_TYPES = ("Spark", "Compression")

BASE_TESTS = (
    "MISFIRE_MONITORING",
    "FUEL_SYSTEM_MONITORING",
    "COMPONENT_MONITORING",
)

# None marks a reserved slot
SPARK_TESTS = (
    "CATALYST_MONITORING",
    "HEATED_CATALYST_MONITORING",
    "EVAPORATIVE_SYSTEM_MONITORING",
    "SECONDARY_AIR_SYSTEM_MONITORING",
    None,
    "OXYGEN_SENSOR_MONITORING",
    "OXYGEN_SENSOR_HEATER_MONITORING",
    "EGR_VVT_SYSTEM_MONITORING",
)

COMPRESSION_TESTS = (
    "NMHC_CATALYST_MONITORING",
    "NOX_SCR_AFTERTREATMENT_MONITORING",
    None,
    "BOOST_PRESSURE_MONITORING",
    None,
    "EXHAUST_GAS_SENSOR_MONITORING",
    "PM_FILTER_MONITORING",
    "EGR_VVT_SYSTEM_MONITORING",
)

FUEL_STATUS = (
    "Open loop due to insufficient engine temperature",
    "Closed loop, using oxygen sensor feedback to determine fuel mix",
    "Open loop due to engine load OR fuel cut due to deceleration",
    "Open loop due to system failure",
    "Closed loop, using at least one oxygen sensor but there is a fault in the feedback system",
)

FUEL_TYPES = (
    "Not available",
    "Gasoline",
    "Methanol",
    "Ethanol",
    "Diesel",
    "LPG",
    "CNG",
    "Propane",
    "Electric",
    "Bifuel running Gasoline",
    "Bifuel running Methanol",
    "Bifuel running Ethanol",
    "Bifuel running LPG",
    "Bifuel running CNG",
    "Bifuel running Propane",
    "Bifuel running Electricity",
    "Bifuel running electric and combustion engine",
    "Hybrid gasoline",
    "Hybrid Ethanol",
    "Hybrid Diesel",
    "Hybrid Electric",
    "Hybrid running electric and combustion engine",
    "Hybrid Regenerative",
    "Bifuel running diesel",
)

OBD_COMPLIANCE = (
    "Undefined",
    "OBD-II as defined by the CARB",
    "OBD as defined by the EPA",
    "OBD and OBD-II",
    "OBD-I",
    "Not OBD compliant",
    "EOBD (Europe)",
    "EOBD and OBD-II",
    "EOBD and OBD",
    "EOBD, OBD and OBD II",
    "JOBD (Japan)",
    "JOBD and OBD II",
    "JOBD and EOBD",
    "JOBD, EOBD, and OBD II",
    "Reserved",
    "Reserved",
    "Reserved",
    "Engine Manufacturer Diagnostics (EMD)",
    "Engine Manufacturer Diagnostics Enhanced (EMD+)",
    "Heavy Duty On-Board Diagnostics (Child/Partial) (HD OBD-C)",
    "Heavy Duty On-Board Diagnostics (HD OBD)",
    "World Wide Harmonized OBD (WWH OBD)",
    "Reserved",
    "Heavy Duty Euro OBD Stage I without NOx control (HD EOBD-I)",
    "Heavy Duty Euro OBD Stage I with NOx control (HD EOBD-I N)",
    "Heavy Duty Euro OBD Stage II without NOx control (HD EOBD-II)",
    "Heavy Duty Euro OBD Stage II with NOx control (HD EOBD-II N)",
    "Reserved",
    "Brazil OBD Phase 1 (OBDBr-1)",
    "Brazil OBD Phase 2 (OBDBr-2)",
    "Korean OBD (KOBD)",
    "India OBD I (IOBD I)",
    "India OBD II (IOBD II)",
    "Heavy Duty Euro OBD Stage VI (HD EOBD-IV)",
)

# tid -> (name, description)
TEST_IDS = MappingProxyType({
    0x01: ("RTLThresholdVoltage", "The voltage at which the sensor switches from rich to lean"),
    0x02: ("LTRThresholdVoltage", "The voltage at which the sensor switches from lean to rich"),
    0x03: ("LowVoltageSwitchTime", "The time it takes for the sensor to switch from rich to lean"),
    0x04: ("HighVoltageSwitchTime", "The time it takes for the sensor to switch from lean to rich"),
    0x05: ("RTLSwitchTime", "The time it takes for the sensor to switch from rich to lean"),
    0x06: ("LTRSwitchTime", "The time it takes for the sensor to switch from lean to rich"),
    0x07: ("MINVoltage", "The minimum voltage the sensor can output"),
    0x08: ("MAXVoltage", "The maximum voltage the sensor can output"),
    0x09: ("TransitionTime", "The time it takes for the sensor to transition from one voltage to another"),
    0x0A: ("SensorPeriod", "The time between sensor readings"),
    0x0B: ("MisFireAverage", "The average number of misfires per 1000 revolutions"),
    0x0C: ("MisFireCount", "The number of misfires since the last reset"),
})
