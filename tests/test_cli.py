import pytest

from obdcodec.cli import main
from obdcodec.util.paths import default_output_name, resolve_output_path


def test_decode_measurement(capsys):
    assert main(["decode", "--decoder", "temp", "--hex", "7B"]) == 0
    assert capsys.readouterr().out.strip() == "83 °C"


def test_decode_status(capsys):
    assert main(["decode", "--decoder", "status", "--hex", "01 85 07 E5 00"]) == 0
    out = capsys.readouterr().out
    assert "MIL: on" in out
    assert "DTC count: 5" in out
    assert "CATALYST_MONITORING" in out


def test_decode_monitor_lists_notices(capsys):
    hex_text = "00 01 0A 0C 80 00 00 1F 40 AA"
    assert main(["decode", "--decoder", "monitor", "--hex", hex_text]) == 0
    out = capsys.readouterr().out
    assert "RTLThresholdVoltage" in out
    assert "note @9: truncated_record_block" in out


def test_decode_failure_exit_code(capsys):
    assert main(["decode", "--decoder", "fuel_type", "--hex", "FF"]) == 1
    assert "index_out_of_range" in capsys.readouterr().err


def test_bad_arguments_exit():
    with pytest.raises(SystemExit):
        main(["decode", "--decoder", "nope", "--hex", "7B"])
    with pytest.raises(SystemExit):
        main(["decode", "--decoder", "temp", "--hex", "7"])


def test_dtc_lookup(capsys):
    assert main(["dtc", "p0301", "C0123"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["P0301: Cylinder 1 Misfire Detected", "C0123: No description available."]


def test_decoders_listing(capsys):
    assert main(["decoders"]) == 0
    out = capsys.readouterr().out
    assert "fuel_status" in out
    assert "monitor" in out


def test_batch_command(tmp_path, capsys):
    src = tmp_path / "in.csv"
    src.write_text("decoder,hex\ntemp,7B\nfuel_type,FF\n", encoding="utf-8")
    out = tmp_path / "out.csv"
    assert main(["batch", "--file", str(src), "--out", str(out)]) == 2
    assert out.exists()
    assert "Decoded 2 rows (1 failed)" in capsys.readouterr().out


def test_output_paths(tmp_path):
    name = default_output_name("obdcodec", "batch", now=0)
    assert name.startswith("obdcodec_batch_") and name.endswith(".csv")
    assert resolve_output_path(None, name, base=tmp_path) == tmp_path / "logs" / name
    assert resolve_output_path("sub/x.csv", name, base=tmp_path) == tmp_path / "logs" / "sub" / "x.csv"
    assert (tmp_path / "logs" / "sub").is_dir()
