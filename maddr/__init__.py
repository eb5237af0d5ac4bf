# Copyright 2025 Maida.AI
# SPDX-License-Identifier: Apache-2.0
r"""maddr - Self-describing, composable network addresses (multiaddr).

A multiaddr is an ordered stack of typed segments such as
``/ip4/127.0.0.1/tcp/9090/p2p/QmPeer``, with an equivalent compact binary form.

The package provides:
- String and binary codecs for multiaddrs, with validation on construction
- Segment model with lazily derived string/binary address forms
- Encapsulate, decapsulate and swap operations on segment stacks
- A static protocol registry and per-protocol address transcoders
- Unsigned varint encoding used by the binary form
"""

# Import public API from modules
from . import varint
from .constants import (
    MAX_VARINT_BYTES,
    MAX_VARINT_VALUE,
    ErrorCode,
    ProtocolCode,
    SizePolicy,
)
from .errors import (
    AddressEncodingError,
    InvalidFormatError,
    MultiaddrError,
    UnknownCodecError,
    UnknownProtocolError,
)
from .multiaddr import (
    Multiaddr,
    parse_bytes,
    parse_string,
)
from .protocols import (
    Protocol,
    is_protocol_name,
    list_protocols,
    protocol_with_code,
    protocol_with_name,
)
from .segment import Segment
from .transcoders import (
    Transcoder,
    get_transcoder,
    list_transcoders,
)

# Public API exports
__all__ = [
    # Core classes
    "Multiaddr",
    "Segment",
    "Protocol",
    "Transcoder",
    # Constants and enums
    "ProtocolCode",
    "SizePolicy",
    "ErrorCode",
    "MAX_VARINT_BYTES",
    "MAX_VARINT_VALUE",
    # Errors
    "MultiaddrError",
    "InvalidFormatError",
    "AddressEncodingError",
    "UnknownProtocolError",
    "UnknownCodecError",
    # Parsing utilities
    "parse_string",
    "parse_bytes",
    "varint",
    # Registry utilities
    "protocol_with_code",
    "protocol_with_name",
    "is_protocol_name",
    "list_protocols",
    "get_transcoder",
    "list_transcoders",
]
