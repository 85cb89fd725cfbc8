# obdcodec/decoders/monitor.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional

from obdcodec.core.errors import DecodeError, TruncatedPayload, TruncatedRecordBlock, UnknownTestId
from obdcodec.core.uas import lookup_uas
from obdcodec.core.units import Measurement
from obdcodec.tables.reference import TEST_IDS

log = logging.getLogger(__name__)

RECORD_SIZE = 9


@dataclass(frozen=True)
class MonitorTest:
    tid: int
    name: str
    description: str
    value: Measurement
    min: float
    max: float

    @property
    def passed(self) -> bool:
        return self.min <= self.value.value <= self.max

    def __str__(self) -> str:
        return f"{self.description} : {self.value.value:g} [{'PASSED' if self.passed else 'FAILED'}]"


@dataclass
class Monitor:
    """tid -> MonitorTest, in payload order; a repeated tid replaces the earlier test."""
    tests: dict[int, MonitorTest] = field(default_factory=dict)
    # (record offset, reason) for records that could not be decoded
    skipped: list[tuple[int, DecodeError]] = field(default_factory=list)
    # (byte offset, reason) for tolerated anomalies: unknown test ids, trailing bytes
    notices: list[tuple[int, DecodeError]] = field(default_factory=list)

    def add(self, test: MonitorTest) -> None:
        if not isinstance(test, MonitorTest):
            raise TypeError(f"Monitor only holds MonitorTest, got {type(test).__name__}")
        self.tests[test.tid] = test

    def __getitem__(self, tid: int) -> MonitorTest:
        return self.tests[tid]

    def __contains__(self, tid: object) -> bool:
        return tid in self.tests

    def __iter__(self) -> Iterator[int]:
        return iter(self.tests)

    def __len__(self) -> int:
        return len(self.tests)

    def get(self, tid: int) -> Optional[MonitorTest]:
        return self.tests.get(tid)

    def values(self):
        return self.tests.values()


def parse_monitor_test(record: bytes) -> MonitorTest:
    """
    One 9-byte test record:
      [0] unused  [1] tid  [2] uas id  [3:5] value  [5:7] min  [7:9] max
    Raises UnknownScaleId when the uas id has no registry entry.
    """
    if len(record) != RECORD_SIZE:
        raise TruncatedPayload("monitor test record", RECORD_SIZE, len(record))

    tid = record[1]
    cid = record[2]

    info = TEST_IDS.get(tid)
    if info is None:
        log.warning("Encountered unknown Test ID: %02x", tid)
        name, desc = f"TID: ${tid:02x} CID: ${cid:02x}", "Unknown"
    else:
        name, desc = info

    uas = lookup_uas(cid)

    return MonitorTest(
        tid=tid,
        name=name,
        description=desc,
        value=uas.decode(record[3:5]),
        min=uas.decode(record[5:7]).value,
        max=uas.decode(record[7:9]).value,
    )


def decode_monitor(data: bytes) -> Monitor:
    mon = Monitor()

    extra = len(data) % RECORD_SIZE
    if extra:
        log.warning("Monitor message of %d bytes is not a multiple of %d; dropping %d trailing bytes",
                    len(data), RECORD_SIZE, extra)
        mon.notices.append((len(data) - extra, TruncatedRecordBlock(len(data), RECORD_SIZE)))
        data = data[: len(data) - extra]

    for i in range(0, len(data), RECORD_SIZE):
        try:
            test = parse_monitor_test(data[i : i + RECORD_SIZE])
        except DecodeError as exc:
            log.error("Skipping monitor record at byte %d: %s", i, exc)
            mon.skipped.append((i, exc))
            continue
        if test.tid not in TEST_IDS:
            mon.notices.append((i, UnknownTestId(test.tid)))
        mon.add(test)

    return mon
