from __future__ import annotations

import argparse
import sys
from typing import Optional

from obdcodec.apps.batch_csv import BatchAborted, BatchConfig, run_batch
from obdcodec.core.errors import DecodeError
from obdcodec.core.util import bytes_to_hex
from obdcodec.decoders.dispatch import Decoder, decode
from obdcodec.decoders.dtc import describe_dtc
from obdcodec.util.cli import add_common_args, decoder_arg, hex_arg, resolve_output_path_from_args, setup_logging
from obdcodec.util.render import describe


def cmd_decoders(_: argparse.Namespace) -> int:
    for d in Decoder:
        print(f"{d.value:<20} {d.result_kind.value}")
    return 0


def cmd_decode(args: argparse.Namespace) -> int:
    try:
        value = decode(args.decoder, args.hex)
    except DecodeError as exc:
        print(f"{args.decoder.value} [{bytes_to_hex(args.hex)}]: {exc.kind.value}: {exc}", file=sys.stderr)
        return 1
    print(describe(value))
    return 0


def cmd_dtc(args: argparse.Namespace) -> int:
    for code in args.codes:
        print(f"{code.upper()}: {describe_dtc(code)}")
    return 0


def cmd_batch(args: argparse.Namespace) -> int:
    out = resolve_output_path_from_args(args, "out", "batch")
    cfg = BatchConfig(csv_path=args.file, out_path=out, strict=args.strict)
    try:
        summary = run_batch(cfg)
    except (FileNotFoundError, ValueError, BatchAborted) as exc:
        print(f"batch failed: {exc}", file=sys.stderr)
        return 1
    print(f"Decoded {summary.rows} rows ({summary.failed} failed). Wrote {out}")
    return 0 if summary.failed == 0 else 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="obdcodec")
    add_common_args(ap)
    sub = ap.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("decoders", help="List decoder names and their result kind")
    sp.set_defaults(func=cmd_decoders)

    sp = sub.add_parser("decode", help="Decode one payload")
    sp.add_argument("--decoder", required=True, type=decoder_arg, help="e.g. temp, dtc, monitor")
    sp.add_argument("--hex", required=True, type=hex_arg, help='payload bytes, e.g. "41 23"')
    sp.set_defaults(func=cmd_decode)

    sp = sub.add_parser("dtc", help="Describe trouble codes")
    sp.add_argument("codes", nargs="+", help="e.g. P0301")
    sp.set_defaults(func=cmd_dtc)

    sp = sub.add_parser("batch", help="Decode a CSV of decoder,hex rows")
    sp.add_argument("--file", required=True)
    sp.add_argument("--out", default=None, help="output csv path (default: logs/obdcodec_batch_YYYYmmdd_HHMMSS.csv)")
    sp.add_argument("--strict", action="store_true", help="Stop at the first row that fails")
    sp.set_defaults(func=cmd_batch)

    return ap


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.debug)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
