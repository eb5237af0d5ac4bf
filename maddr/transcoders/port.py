"""Transport port transcoder (tcp, udp, dccp, sctp)."""

import struct

from .base import Transcoder


def parse_decimal(text: str, what: str) -> int:
    """Parse canonical decimal text: ASCII digits only, no leading zeros."""
    if not (text.isascii() and text.isdigit()):
        raise ValueError(f"{what} must be a decimal number: {text!r}")
    value = int(text)
    if str(value) != text:
        raise ValueError(f"{what} has leading zeros: {text!r}")
    return value


def parse_port(text: str, minimum: int = 0) -> int:
    """Parse a decimal port number in ``[minimum, 65535]``."""
    port = parse_decimal(text, "port")
    if not minimum <= port <= 0xFFFF:
        raise ValueError(f"port out of range: {port}")
    return port


class PortTranscoder(Transcoder):
    """Decimal text <-> 2 bytes big-endian."""

    def to_bytes(self, address: str) -> bytes:
        return struct.pack(">H", parse_port(address))

    def to_string(self, data: bytes) -> str:
        if len(data) != 2:
            raise ValueError(f"expected 2 bytes, got {len(data)}")
        return str(struct.unpack(">H", data)[0])
