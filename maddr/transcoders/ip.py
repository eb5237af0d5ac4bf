"""IPv4 and IPv6 address transcoders."""

import ipaddress

from .base import Transcoder


class IP4Transcoder(Transcoder):
    """Dotted-quad text <-> 4 bytes."""

    def to_bytes(self, address: str) -> bytes:
        addr = ipaddress.IPv4Address(address)
        if str(addr) != address:
            raise ValueError(f"not in canonical form, expected {addr}")
        return addr.packed

    def to_string(self, data: bytes) -> str:
        if len(data) != 4:
            raise ValueError(f"expected 4 bytes, got {len(data)}")
        return str(ipaddress.IPv4Address(data))


class IP6Transcoder(Transcoder):
    """RFC 5952 text <-> 16 bytes.

    Only the compressed lowercase form is accepted, so ``0:0::1`` must be
    written ``::1``.
    """

    def to_bytes(self, address: str) -> bytes:
        if "%" in address:
            # zones travel in their own /ip6zone segment
            raise ValueError("scoped addresses are not allowed, use /ip6zone")
        addr = ipaddress.IPv6Address(address)
        if str(addr) != address:
            raise ValueError(f"not in canonical form, expected {addr}")
        return addr.packed

    def to_string(self, data: bytes) -> str:
        if len(data) != 16:
            raise ValueError(f"expected 16 bytes, got {len(data)}")
        return str(ipaddress.IPv6Address(data))
