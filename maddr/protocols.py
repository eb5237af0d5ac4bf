"""Protocol descriptors and the process-wide protocol registry."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .constants import ProtocolCode, SizePolicy
from .errors import UnknownProtocolError


class Protocol(BaseModel):
    """A registered addressing scheme."""

    model_config = ConfigDict(frozen=True)

    code: int = Field(..., ge=0, description="Multicodec code")
    name: str = Field(..., min_length=1, description="Name used in the string form")
    size_policy: SizePolicy = Field(..., description="How the payload length is determined")
    bits: int = Field(0, ge=0, description="Payload size for FIXED protocols")

    @model_validator(mode="after")
    def check_bits(self) -> "Protocol":
        if self.size_policy is SizePolicy.FIXED:
            if self.bits <= 0 or self.bits % 8:
                raise ValueError(f"fixed-size protocol {self.name} needs a positive whole-byte size")
        elif self.bits:
            raise ValueError(f"{self.size_policy.value} protocol {self.name} cannot declare a bit size")
        return self

    @property
    def byte_size(self) -> int:
        """Payload length in bytes for FIXED protocols, 0 otherwise."""
        return self.bits // 8

    def __str__(self) -> str:
        return self.name


# ----------------------------------------------------------------------------
# Registry
# ----------------------------------------------------------------------------

_BY_CODE: dict[int, Protocol] = {}
_BY_NAME: dict[str, Protocol] = {}


def _register(code: int, name: str, size_policy: SizePolicy, bits: int = 0) -> None:
    proto = Protocol(code=int(code), name=name, size_policy=size_policy, bits=bits)
    # the first name registered for a code is canonical for binary decoding
    _BY_CODE.setdefault(code, proto)
    _BY_NAME[name] = proto


def protocol_with_code(code: int) -> Protocol:
    """Look up a protocol by its numeric code."""
    try:
        return _BY_CODE[code]
    except KeyError:
        raise UnknownProtocolError(f"Unknown protocol code: {code}") from None


def protocol_with_name(name: str) -> Protocol:
    """Look up a protocol by its string name."""
    try:
        return _BY_NAME[name]
    except KeyError:
        raise UnknownProtocolError(f"Unknown protocol name: {name!r}") from None


def is_protocol_name(token: str) -> bool:
    """Return True if ``token`` names a registered protocol."""
    return token in _BY_NAME


def list_protocols() -> list[Protocol]:
    """List every registered protocol, aliases included."""
    return list(_BY_NAME.values())


_register(ProtocolCode.IP4, "ip4", SizePolicy.FIXED, 32)
_register(ProtocolCode.TCP, "tcp", SizePolicy.FIXED, 16)
_register(ProtocolCode.DCCP, "dccp", SizePolicy.FIXED, 16)
_register(ProtocolCode.IP6, "ip6", SizePolicy.FIXED, 128)
_register(ProtocolCode.IP6ZONE, "ip6zone", SizePolicy.VARIABLE)
_register(ProtocolCode.DNS, "dns", SizePolicy.VARIABLE)
_register(ProtocolCode.DNS4, "dns4", SizePolicy.VARIABLE)
_register(ProtocolCode.DNS6, "dns6", SizePolicy.VARIABLE)
_register(ProtocolCode.DNSADDR, "dnsaddr", SizePolicy.VARIABLE)
_register(ProtocolCode.SCTP, "sctp", SizePolicy.FIXED, 16)
_register(ProtocolCode.UDP, "udp", SizePolicy.FIXED, 16)
_register(ProtocolCode.P2P_WEBRTC_STAR, "p2p-webrtc-star", SizePolicy.ZERO)
_register(ProtocolCode.P2P_WEBRTC_DIRECT, "p2p-webrtc-direct", SizePolicy.ZERO)
_register(ProtocolCode.P2P_STARDUST, "p2p-stardust", SizePolicy.ZERO)
_register(ProtocolCode.WEBRTC_DIRECT, "webrtc-direct", SizePolicy.ZERO)
_register(ProtocolCode.WEBRTC, "webrtc", SizePolicy.ZERO)
_register(ProtocolCode.P2P_CIRCUIT, "p2p-circuit", SizePolicy.ZERO)
_register(ProtocolCode.UDT, "udt", SizePolicy.ZERO)
_register(ProtocolCode.UTP, "utp", SizePolicy.ZERO)
_register(ProtocolCode.UNIX, "unix", SizePolicy.VARIABLE)
_register(ProtocolCode.P2P, "p2p", SizePolicy.VARIABLE)
_register(ProtocolCode.P2P, "ipfs", SizePolicy.VARIABLE)
_register(ProtocolCode.HTTPS, "https", SizePolicy.ZERO)
_register(ProtocolCode.ONION, "onion", SizePolicy.FIXED, 96)
_register(ProtocolCode.ONION3, "onion3", SizePolicy.FIXED, 296)
_register(ProtocolCode.TLS, "tls", SizePolicy.ZERO)
_register(ProtocolCode.SNI, "sni", SizePolicy.VARIABLE)
_register(ProtocolCode.NOISE, "noise", SizePolicy.ZERO)
_register(ProtocolCode.QUIC, "quic", SizePolicy.ZERO)
_register(ProtocolCode.QUIC_V1, "quic-v1", SizePolicy.ZERO)
_register(ProtocolCode.WEBTRANSPORT, "webtransport", SizePolicy.ZERO)
_register(ProtocolCode.WS, "ws", SizePolicy.ZERO)
_register(ProtocolCode.WSS, "wss", SizePolicy.ZERO)
_register(ProtocolCode.P2P_WEBSOCKET_STAR, "p2p-websocket-star", SizePolicy.ZERO)
_register(ProtocolCode.HTTP, "http", SizePolicy.ZERO)
_register(ProtocolCode.MEMORY, "memory", SizePolicy.FIXED, 64)
