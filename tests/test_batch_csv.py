import csv

import pytest

from obdcodec.apps.batch_csv import BatchAborted, BatchConfig, BatchRow, decode_row, run_batch


def _write_input(path, rows, header=("decoder", "hex")):
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(header)
        w.writerows(rows)


def _read_results(path):
    with open(path, "r", newline="", encoding="utf-8") as f:
        return [
            BatchRow(row["decoder"], row["hex"], row["ok"] == "1", row["value"], row["unit"], row["error"])
            for row in csv.DictReader(f)
        ]


ROWS = [
    ("temp", "7B"),
    ("dtc", "41 23 00 00"),
    ("fuel_type", "FF"),
    ("bogus", "00"),
    ("percent", "ZZ"),
]


def test_decode_row_measurement():
    row = decode_row("temp", "7b")
    assert row.ok
    assert (row.value, row.unit) == ("83", "°C")
    assert row.hex == "7B"


def test_batch_writes_one_row_per_input(tmp_path):
    src = tmp_path / "captures.csv"
    out = tmp_path / "results.csv"
    _write_input(src, ROWS)

    summary = run_batch(BatchConfig(csv_path=str(src), out_path=str(out)))
    assert summary.rows == 5
    assert summary.failed == 3

    results = _read_results(out)
    assert [r.ok for r in results] == [True, True, False, False, False]
    assert results[1].value == "C0123"
    assert results[2].error.startswith("index_out_of_range")
    assert results[3].error == "Unknown decoder: bogus"
    assert results[4].error.startswith("bad hex")


def test_strict_stops_at_first_failure(tmp_path):
    src = tmp_path / "captures.csv"
    _write_input(src, ROWS)
    cfg = BatchConfig(csv_path=str(src), out_path=str(tmp_path / "out.csv"), strict=True)
    with pytest.raises(BatchAborted):
        run_batch(cfg)


def test_missing_column(tmp_path):
    src = tmp_path / "captures.csv"
    _write_input(src, [("7B",)], header=("payload",))
    with pytest.raises(ValueError):
        run_batch(BatchConfig(csv_path=str(src), out_path=str(tmp_path / "out.csv")))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        run_batch(BatchConfig(csv_path=str(tmp_path / "nope.csv"), out_path=str(tmp_path / "out.csv")))
