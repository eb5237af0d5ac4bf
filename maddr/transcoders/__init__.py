"""Per-protocol address transcoders."""

from ..constants import ProtocolCode
from ..errors import UnknownCodecError
from .base import Transcoder
from .ip import IP4Transcoder, IP6Transcoder
from .memory import MemoryTranscoder
from .onion import OnionTranscoder
from .peer import PeerIDTranscoder
from .port import PortTranscoder
from .text import TextTranscoder

__all__ = [
    "Transcoder",
    "IP4Transcoder",
    "IP6Transcoder",
    "MemoryTranscoder",
    "OnionTranscoder",
    "PeerIDTranscoder",
    "PortTranscoder",
    "TextTranscoder",
    "get_transcoder",
    "list_transcoders",
]


# Transcoder table, built once at import
_TRANSCODERS: dict[int, Transcoder] = {}


def _register(code: int, transcoder: Transcoder) -> None:
    _TRANSCODERS[code] = transcoder


def get_transcoder(code: int) -> Transcoder:
    """Get the transcoder for a protocol code."""
    if code not in _TRANSCODERS:
        raise UnknownCodecError(f"No transcoder for protocol code: {code}")
    return _TRANSCODERS[code]


def list_transcoders() -> list[int]:
    """List all protocol codes that carry an address."""
    return list(_TRANSCODERS.keys())


_register(ProtocolCode.IP4, IP4Transcoder())
_register(ProtocolCode.IP6, IP6Transcoder())

_port = PortTranscoder()
for _code in (ProtocolCode.TCP, ProtocolCode.UDP, ProtocolCode.DCCP, ProtocolCode.SCTP):
    _register(_code, _port)

_text = TextTranscoder()
for _code in (
    ProtocolCode.IP6ZONE,
    ProtocolCode.DNS,
    ProtocolCode.DNS4,
    ProtocolCode.DNS6,
    ProtocolCode.DNSADDR,
    ProtocolCode.SNI,
):
    _register(_code, _text)
_register(ProtocolCode.UNIX, TextTranscoder(allow_slash=True))

_register(ProtocolCode.P2P, PeerIDTranscoder())
_register(ProtocolCode.ONION, OnionTranscoder(id_length=10))
_register(ProtocolCode.ONION3, OnionTranscoder(id_length=35))
_register(ProtocolCode.MEMORY, MemoryTranscoder())
