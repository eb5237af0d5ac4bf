"""In-process memory transport transcoder."""

import struct

from .base import Transcoder
from .port import parse_decimal


class MemoryTranscoder(Transcoder):
    """Decimal u64 <-> 8 bytes big-endian."""

    def to_bytes(self, address: str) -> bytes:
        value = parse_decimal(address, "memory address")
        if value >= 1 << 64:
            raise ValueError(f"memory address out of range: {value}")
        return struct.pack(">Q", value)

    def to_string(self, data: bytes) -> str:
        if len(data) != 8:
            raise ValueError(f"expected 8 bytes, got {len(data)}")
        return str(struct.unpack(">Q", data)[0])
