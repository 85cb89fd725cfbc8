# obdcodec/core/bits.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


def bytes_to_int(buf: bytes) -> int:
    """Big-endian unsigned integer over the whole span."""
    v = 0
    for b in buf:
        v = (v << 8) | (b & 0xFF)
    return v


def u16be(buf: bytes, i: int) -> int:
    return (buf[i] << 8) | buf[i + 1]


def twos_comp(value: int, length: int) -> int:
    mask = (1 << length) - 1
    return value & mask


@dataclass(frozen=True)
class BitArray:
    """
    Read-only bit view over a byte buffer.
      bit 0 = MSB of byte 0, bit 8 = MSB of byte 1, ...
    Indexing past the end is a caller bug and raises IndexError.
    """
    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))

    def __len__(self) -> int:
        return len(self.data) * 8

    def __getitem__(self, i: int) -> int:
        if i < 0 or i >= len(self):
            raise IndexError(f"bit {i} out of range for {len(self)}-bit view")
        return (self.data[i // 8] >> (7 - i % 8)) & 1

    def __iter__(self):
        for i in range(len(self)):
            yield self[i]

    @property
    def bits(self) -> list[int]:
        return list(self)

    def slice(self, start: int, stop: int) -> list[int]:
        return [self[i] for i in range(start, stop)]

    def index(self, value: int) -> Optional[int]:
        for i, bit in enumerate(self):
            if bit == value:
                return i
        return None

    def value(self, start: int, stop: int) -> int:
        """Fold bits [start, stop) into an unsigned int, first bit most significant."""
        v = 0
        for i in range(start, stop):
            v = (v << 1) | self[i]
        return v
