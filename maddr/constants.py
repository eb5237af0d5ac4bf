"""Multiaddr protocol constants and enums."""

from enum import Enum, IntEnum

# ----------------------------------------------------------------------------
# Wire constants
# ----------------------------------------------------------------------------

MAX_VARINT_BYTES = 9  # 9 * 7 = 63 usable bits
MAX_VARINT_VALUE = (1 << 63) - 1

PATH_SEPARATOR = "/"

# ----------------------------------------------------------------------------
# Size policies
# ----------------------------------------------------------------------------


class SizePolicy(Enum):
    """How the length of a protocol's address payload is determined."""

    ZERO = "zero"  # marker protocol, no payload
    FIXED = "fixed"  # payload is always the same number of bits
    VARIABLE = "variable"  # payload is prefixed with a varint length


# ----------------------------------------------------------------------------
# Protocol codes (multicodec table)
# ----------------------------------------------------------------------------


class ProtocolCode(IntEnum):
    """Registered protocol codes."""

    IP4 = 0x0004
    TCP = 0x0006
    DCCP = 0x0021
    IP6 = 0x0029
    IP6ZONE = 0x002A
    DNS = 0x0035
    DNS4 = 0x0036
    DNS6 = 0x0037
    DNSADDR = 0x0038
    SCTP = 0x0084
    UDP = 0x0111
    P2P_WEBRTC_STAR = 0x0113
    P2P_WEBRTC_DIRECT = 0x0114
    P2P_STARDUST = 0x0115
    WEBRTC_DIRECT = 0x0118
    WEBRTC = 0x0119
    P2P_CIRCUIT = 0x0122
    UDT = 0x012D
    UTP = 0x012E
    UNIX = 0x0190
    P2P = 0x01A5  # also "ipfs", the legacy name
    HTTPS = 0x01BB
    ONION = 0x01BC
    ONION3 = 0x01BD
    TLS = 0x01C0
    SNI = 0x01C1
    NOISE = 0x01C6
    QUIC = 0x01CC
    QUIC_V1 = 0x01CD
    WEBTRANSPORT = 0x01D1
    WS = 0x01DD
    WSS = 0x01DE
    P2P_WEBSOCKET_STAR = 0x01DF
    HTTP = 0x01E0
    MEMORY = 0x0309


PEER_ID_PROTOCOLS = ("p2p", "ipfs")
PATH_PROTOCOL = "unix"

# ----------------------------------------------------------------------------
# Error codes
# ----------------------------------------------------------------------------


class ErrorCode(IntEnum):
    """Numeric error codes carried by MultiaddrError."""

    OK = 0x0000
    ERR_INVALID_FORMAT = 0x0001
    ERR_UNKNOWN_PROTOCOL = 0x0002
    ERR_UNKNOWN_CODEC = 0x0003
    ERR_ADDRESS_ENCODING = 0x0004
