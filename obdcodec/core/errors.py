from __future__ import annotations

from enum import Enum


class FailureKind(Enum):
    UNKNOWN_SCALE_ID = "unknown_scale_id"
    UNKNOWN_TEST_ID = "unknown_test_id"
    INVALID_BIT_PATTERN = "invalid_bit_pattern"
    MALFORMED_TEXT = "malformed_text"
    TRUNCATED_RECORD_BLOCK = "truncated_record_block"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    NO_CODE = "no_code"
    TRUNCATED_PAYLOAD = "truncated_payload"


class DecodeError(ValueError):
    """
    A payload (or one field of it) could not be decoded.
    Subclasses pin `kind`. UnknownTestId and TruncatedRecordBlock are tolerated:
    the monitor decoder records them on `Monitor.notices` instead of raising.
    NO_CODE is not a failure and yields no code.
    """
    kind: FailureKind

    def __init__(self, message: str, kind: FailureKind | None = None):
        super().__init__(message)
        if kind is not None:
            self.kind = kind


class UnknownScaleId(DecodeError):
    kind = FailureKind.UNKNOWN_SCALE_ID

    def __init__(self, uas_id: int):
        super().__init__(f"Unknown Units and Scaling ID: 0x{uas_id:02X}")
        self.uas_id = uas_id


class UnknownTestId(DecodeError):
    kind = FailureKind.UNKNOWN_TEST_ID

    def __init__(self, tid: int):
        super().__init__(f"Unknown Test ID: 0x{tid:02X}")
        self.tid = tid


class TruncatedRecordBlock(DecodeError):
    kind = FailureKind.TRUNCATED_RECORD_BLOCK

    def __init__(self, size: int, record_size: int):
        extra = size % record_size
        super().__init__(f"block of {size} bytes is not a multiple of {record_size}; "
                         f"{extra} trailing bytes dropped")
        self.size = size
        self.dropped = extra


class InvalidBitPattern(DecodeError):
    kind = FailureKind.INVALID_BIT_PATTERN


class MalformedText(DecodeError):
    kind = FailureKind.MALFORMED_TEXT


class IndexOutOfRange(DecodeError):
    kind = FailureKind.INDEX_OUT_OF_RANGE

    def __init__(self, table: str, index: int, size: int):
        super().__init__(f"{table}: index {index} outside table of {size} entries")
        self.table = table
        self.index = index
        self.size = size


class TruncatedPayload(DecodeError):
    kind = FailureKind.TRUNCATED_PAYLOAD

    def __init__(self, what: str, need: int, got: int):
        super().__init__(f"{what} needs {need} bytes, got {got}")
        self.need = need
        self.got = got


def require(data: bytes, n: int, what: str) -> None:
    if len(data) < n:
        raise TruncatedPayload(what, n, len(data))
