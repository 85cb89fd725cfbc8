# obdcodec/decoders/dtc.py
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from obdcodec.core.errors import require
from obdcodec.tables.dtc_codes import DTC_DESCRIPTIONS

NO_DESCRIPTION = "No description available."

_CATEGORIES = "PCBU"
_CODE_RE = re.compile(r"^[PCBU][0-3][0-9A-F]{3}$")


@dataclass(frozen=True)
class TroubleCode:
    code: str
    description: str = NO_DESCRIPTION

    def __post_init__(self) -> None:
        if not _CODE_RE.match(self.code):
            raise ValueError(f"Not a trouble code: {self.code!r}")

    def __str__(self) -> str:
        return f"{self.code}: {self.description}"


def describe_dtc(code: str) -> str:
    return DTC_DESCRIPTIONS.get(code.upper(), NO_DESCRIPTION)


def parse_dtc(pair: bytes) -> Optional[TroubleCode]:
    """
    One 2-byte DTC. None for an empty slot (00 00) or a span that is not a pair.

      BYTES:  0x41     0x23
      BIN:    01000001 00100011
              ||||
              ||++-- digit (0-3)
              ++---- category P/C/B/U
      DTC:    C0123
    """
    if len(pair) != 2 or pair == b"\x00\x00":
        return None
    first, second = pair[0], pair[1]
    code = _CATEGORIES[first >> 6]
    code += str((first >> 4) & 0b11)
    code += f"{((first & 0x3F) << 8) | second:04X}"[1:]
    return TroubleCode(code=code, description=describe_dtc(code))


def decode_dtcs(data: bytes) -> list[TroubleCode]:
    codes: list[TroubleCode] = []
    last = len(data) - 1
    for n in range(0, last, 2):
        end = min(n + 1, last)
        dtc = parse_dtc(data[n : end + 1])
        if dtc is None:
            continue
        codes.append(dtc)
    return codes


def decode_single_dtc(data: bytes) -> list[TroubleCode]:
    require(data, 2, "single DTC")
    # anything but exactly one pair carries no code
    dtc = parse_dtc(bytes(data))
    return [] if dtc is None else [dtc]
