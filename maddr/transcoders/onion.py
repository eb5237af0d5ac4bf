"""Tor onion service transcoders (onion v2 and onion3)."""

import base64
import struct

from .base import Transcoder
from .port import parse_port


class OnionTranscoder(Transcoder):
    """``<base32 service id>:<port>`` <-> service id bytes + 2-byte port.

    Args:
        id_length: Length of the decoded service id in bytes (10 for v2, 35 for v3)
    """

    def __init__(self, id_length: int):
        self.id_length = id_length
        # base32 packs 5 bits per character
        self.text_length = id_length * 8 // 5

    def to_bytes(self, address: str) -> bytes:
        service, sep, port_text = address.partition(":")
        if not sep:
            raise ValueError(f"missing port in onion address: {address!r}")
        if len(service) != self.text_length:
            raise ValueError(f"onion service id must be {self.text_length} characters")
        if service != service.lower():
            raise ValueError(f"onion service id must be lowercase: {service!r}")
        service_id = base64.b32decode(service.upper())
        return service_id + struct.pack(">H", parse_port(port_text, minimum=1))

    def to_string(self, data: bytes) -> str:
        if len(data) != self.id_length + 2:
            raise ValueError(f"expected {self.id_length + 2} bytes, got {len(data)}")
        service = base64.b32encode(data[: self.id_length]).decode("ascii").lower()
        port = struct.unpack(">H", data[self.id_length :])[0]
        if port == 0:
            raise ValueError("onion port must be at least 1")
        return f"{service}:{port}"
