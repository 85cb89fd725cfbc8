from __future__ import annotations

from typing import Any

from obdcodec.core.units import Measurement
from obdcodec.decoders.dtc import TroubleCode
from obdcodec.decoders.monitor import Monitor
from obdcodec.decoders.status import Status, StatusTest


def value_and_unit(value: Any) -> tuple[str, str]:
    """Flatten a decode result to (value, unit) text for CSV output."""
    if isinstance(value, Measurement):
        return f"{value.value:g}", value.unit.value
    if value is None:
        return "", ""
    if isinstance(value, bool):
        return ("1" if value else "0"), ""
    if isinstance(value, list):
        return ";".join(c.code if isinstance(c, TroubleCode) else str(c) for c in value), ""
    if isinstance(value, Status):
        return (
            f"mil={int(value.mil)} dtc={value.dtc_count} ignition={value.ignition_type}",
            "",
        )
    if isinstance(value, Monitor):
        return ";".join(f"{t.tid:02X}={t.value.value:g}" for t in value.values()), ""
    return str(value), ""


def _status_test_line(t: StatusTest) -> str:
    supported = "supported" if t.supported else "not supported"
    ready = "ready" if t.ready else "not ready"
    return f"  {t.name:<36} {supported:<14} {ready}"


def describe(value: Any) -> str:
    """Human-readable, possibly multi-line rendering of a decode result."""
    if isinstance(value, Status):
        lines = [
            f"MIL: {'on' if value.mil else 'off'}",
            f"DTC count: {value.dtc_count}",
            f"Ignition: {value.ignition_type}",
            _status_test_line(value.misfire_monitoring),
            _status_test_line(value.fuel_system_monitoring),
            _status_test_line(value.component_monitoring),
        ]
        lines.extend(_status_test_line(t) for t in value.tests.values())
        return "\n".join(lines)
    if isinstance(value, Monitor):
        lines = []
        for t in value.values():
            lines.append(f"{t.tid:02X} {t.name}: {t.value} (min {t.min:g}, max {t.max:g}) "
                         f"[{'PASSED' if t.passed else 'FAILED'}]")
        if not lines:
            lines.append("(no tests)")
        for offset, err in value.skipped:
            lines.append(f"  skipped @{offset}: {err.kind.value}: {err}")
        for offset, err in value.notices:
            lines.append(f"  note @{offset}: {err.kind.value}: {err}")
        return "\n".join(lines)
    if isinstance(value, list):
        if not value:
            return "(no codes)"
        return "\n".join(str(c) for c in value)
    if value is None:
        return "(none)"
    return str(value)
