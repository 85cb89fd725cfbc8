# obdcodec/apps/batch_csv.py
"""
Decode a CSV of captured payloads.

Input columns (names configurable):  decoder, hex
Output columns:                      decoder, hex, ok, value, unit, error
"""
from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from obdcodec.core.errors import DecodeError
from obdcodec.core.util import bytes_to_hex, hex_to_bytes
from obdcodec.decoders.dispatch import Decoder, decode
from obdcodec.util.render import value_and_unit

log = logging.getLogger(__name__)

OUT_HEADER = ["decoder", "hex", "ok", "value", "unit", "error"]


@dataclass
class BatchConfig:
    csv_path: str
    out_path: str
    decoder_column: str = "decoder"
    hex_column: str = "hex"
    strict: bool = False      # stop at the first row that fails


@dataclass
class BatchRow:
    decoder: str
    hex: str
    ok: bool
    value: str = ""
    unit: str = ""
    error: str = ""

    def as_list(self) -> list[str]:
        return [self.decoder, self.hex, "1" if self.ok else "0", self.value, self.unit, self.error]


@dataclass
class BatchSummary:
    rows: int = 0
    failed: int = 0


class BatchAborted(RuntimeError):
    pass


def decode_row(decoder_name: str, hex_text: str) -> BatchRow:
    try:
        decoder = Decoder.from_name(decoder_name)
    except KeyError as exc:
        return BatchRow(decoder_name, hex_text, ok=False, error=str(exc.args[0]))

    try:
        payload = hex_to_bytes(hex_text)
    except ValueError as exc:
        return BatchRow(decoder.value, hex_text, ok=False, error=f"bad hex: {exc}")

    try:
        value = decode(decoder, payload)
    except DecodeError as exc:
        return BatchRow(decoder.value, bytes_to_hex(payload), ok=False, error=f"{exc.kind.value}: {exc}")

    v, unit = value_and_unit(value)
    return BatchRow(decoder.value, bytes_to_hex(payload), ok=True, value=v, unit=unit)


def decode_rows(rows: Iterable[dict], cfg: BatchConfig) -> Iterator[BatchRow]:
    for i, row in enumerate(rows, start=1):
        name = (row.get(cfg.decoder_column) or "").strip()
        hex_text = (row.get(cfg.hex_column) or "").strip()
        out = decode_row(name, hex_text)
        if not out.ok:
            log.warning("row %d (%s %s): %s", i, name, hex_text, out.error)
            if cfg.strict:
                raise BatchAborted(f"row {i}: {out.error}")
        yield out


def run_batch(cfg: BatchConfig) -> BatchSummary:
    src = Path(cfg.csv_path)
    if not src.exists():
        raise FileNotFoundError(cfg.csv_path)

    summary = BatchSummary()
    with src.open("r", newline="", encoding="utf-8") as f_in, \
            open(cfg.out_path, "w", newline="", encoding="utf-8") as f_out:
        r = csv.DictReader(f_in)
        missing = [c for c in (cfg.decoder_column, cfg.hex_column) if c not in (r.fieldnames or [])]
        if missing:
            raise ValueError(f"CSV is missing column(s): {', '.join(missing)}")

        w = csv.writer(f_out)
        w.writerow(OUT_HEADER)
        for out in decode_rows(r, cfg):
            summary.rows += 1
            if not out.ok:
                summary.failed += 1
            w.writerow(out.as_list())

    return summary
