from __future__ import annotations

import argparse
import logging
import sys

from obdcodec.core.util import hex_to_bytes
from obdcodec.decoders.dispatch import Decoder
from obdcodec.util.paths import default_output_name, resolve_output_path

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def add_common_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("--debug", action="store_true", help="Verbose decoder logging")


def setup_logging(debug: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def decoder_arg(name: str) -> Decoder:
    try:
        return Decoder.from_name(name)
    except KeyError:
        raise argparse.ArgumentTypeError(
            f"unknown decoder '{name}' (see 'obdcodec decoders')"
        ) from None


def hex_arg(s: str) -> bytes:
    try:
        return hex_to_bytes(s)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def resolve_output_path_from_args(args: argparse.Namespace, arg_name: str, mode: str) -> str:
    default_name = default_output_name("obdcodec", mode)
    return str(resolve_output_path(getattr(args, arg_name), default_name))
