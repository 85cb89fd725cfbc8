from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Unit(str, Enum):
    NONE = ""
    COUNT = "count"
    PERCENT = "%"
    RATIO = "ratio"
    PPM = "ppm"
    RPM = "rpm"

    KPH = "km/h"
    KILOMETERS = "km"

    MILLIVOLTS = "mV"
    VOLTS = "V"
    MILLIAMPERES = "mA"
    AMPERES = "A"

    MILLISECONDS = "ms"
    SECONDS = "s"
    MINUTES = "min"

    MICROOHMS = "µΩ"
    OHMS = "Ω"
    KILOOHMS = "kΩ"

    CELSIUS = "°C"
    DEGREES = "°"

    PASCAL = "Pa"
    KILOPASCALS = "kPa"

    MILLIHERTZ = "mHz"
    HERTZ = "Hz"
    KILOHERTZ = "kHz"

    GRAMS_PER_SECOND = "g/s"
    LITERS_PER_HOUR = "L/h"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Measurement:
    value: float
    unit: Unit

    def __str__(self) -> str:
        if self.unit is Unit.NONE:
            return f"{self.value:g}"
        return f"{self.value:g} {self.unit}"
