from __future__ import annotations

import binascii
from typing import Iterable, Union

ByteLike = Union[bytes, bytearray, memoryview, Iterable[int]]


def hex_to_bytes(s: str) -> bytes:
    """
    Accepts:
      - "41 23 00 00"
      - "41230000"
      - with optional 0x prefixes
    """
    cleaned = (
        s.replace("0x", "")
        .replace("0X", "")
        .replace(" ", "")
        .replace("\n", "")
        .replace("\t", "")
        .replace("-", "")
        .strip()
    )
    if len(cleaned) % 2 != 0:
        raise ValueError(f"Hex string has odd length: {len(cleaned)}")
    return binascii.unhexlify(cleaned)


def bytes_to_hex(b: bytes, sep: str = " ") -> str:
    return sep.join(f"{x:02X}" for x in b)


def as_bytes(data: ByteLike) -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    out = bytearray()
    for x in data:
        if not 0 <= x <= 0xFF:
            raise ValueError(f"Byte value out of range: {x}")
        out.append(x)
    return bytes(out)
