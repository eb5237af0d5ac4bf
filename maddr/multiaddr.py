"""Multiaddr value: string/binary parsing, encoding and composition."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from . import varint
from .constants import PATH_PROTOCOL, PATH_SEPARATOR, PEER_ID_PROTOCOLS, SizePolicy
from .errors import InvalidFormatError, MultiaddrError, UnknownCodecError
from .protocols import Protocol, is_protocol_name, protocol_with_code, protocol_with_name
from .segment import Segment

logger = logging.getLogger(__name__)

# ----------------------------------------------------------------------------
# String and binary parsers
# ----------------------------------------------------------------------------


def parse_string(text: str) -> list[Segment]:
    """Split a ``/proto/address/...`` string into segments.

    Tokens that follow a protocol name and are not themselves protocol names
    are joined back with ``/`` as that protocol's address, which is what lets
    ``/unix/a/b/c`` carry a whole path. Unrecognized tokens in protocol
    position are skipped.

    The result is not validated; see ``Multiaddr.validate``.

    Raises:
        InvalidFormatError: If the string is empty, lacks the leading ``/``
            or has an empty protocol token
        UnknownProtocolError: If a protocol name cannot be resolved
    """
    if not text or not text.startswith(PATH_SEPARATOR):
        raise InvalidFormatError(f"multiaddr must start with '/': {text!r}")

    tokens = text[1:].split(PATH_SEPARATOR)
    segments: list[Segment] = []
    i = 0
    while i < len(tokens):
        name = tokens[i]
        i += 1
        if not name:
            raise InvalidFormatError(f"empty protocol name in {text!r}")
        if not is_protocol_name(name):
            logger.debug("Skipping unrecognized token %r in %r", name, text)
            continue

        proto = protocol_with_name(name)
        parts: list[str] = []
        while i < len(tokens) and not is_protocol_name(tokens[i]):
            parts.append(tokens[i])
            i += 1
        address = PATH_SEPARATOR.join(parts) if parts else None
        segments.append(Segment(proto, address=address))
    return segments


def parse_bytes(data: bytes) -> list[Segment]:
    """Decode a packed multiaddr into segments.

    Raises:
        InvalidFormatError: If a varint is malformed or a payload is truncated
        AddressEncodingError: If a payload does not decode for its protocol
            (a subclass of InvalidFormatError)
        UnknownProtocolError: If a protocol code is not registered
    """
    buf = bytes(data)
    segments: list[Segment] = []
    pos = 0
    while pos < len(buf):
        try:
            code, n = varint.decode(buf, pos)
        except ValueError as exc:
            raise InvalidFormatError(f"bad protocol code at offset {pos}: {exc}") from exc
        pos += n
        proto = protocol_with_code(code)

        if proto.size_policy is SizePolicy.ZERO:
            segments.append(Segment(proto))
            continue

        if proto.size_policy is SizePolicy.FIXED:
            size = proto.byte_size
        else:
            try:
                size, n = varint.decode(buf, pos)
            except ValueError as exc:
                raise InvalidFormatError(f"bad length for /{proto.name} at offset {pos}: {exc}") from exc
            pos += n

        if pos + size > len(buf):
            raise InvalidFormatError(
                f"/{proto.name} declares {size} bytes but only {len(buf) - pos} remain"
            )
        # payloads are decoded here so a bad one fails construction, not str()
        segments.append(Segment(proto, address_bytes=buf[pos : pos + size]).resolve())
        pos += size
    return segments


# ----------------------------------------------------------------------------
# Multiaddr
# ----------------------------------------------------------------------------


class Multiaddr:
    """A composable, self-describing network address.

    Args:
        addr: String form (``/ip4/127.0.0.1/tcp/80``), packed bytes, or another
            Multiaddr to copy

    Raises:
        MultiaddrError: If the input cannot be parsed or does not encode
    """

    __slots__ = ("_segments",)

    def __init__(self, addr: Multiaddr | str | bytes) -> None:
        if isinstance(addr, Multiaddr):
            self._segments = list(addr._segments)
        elif isinstance(addr, str):
            self._segments = parse_string(addr)
            self.validate()
        elif isinstance(addr, (bytes, bytearray, memoryview)):
            self._segments = parse_bytes(bytes(addr))
        else:
            raise TypeError(f"Cannot build a Multiaddr from {type(addr).__name__}")

    @classmethod
    def from_segments(cls, segments: Iterable[Segment]) -> Multiaddr:
        """Wrap an already-built segment sequence without re-validating it."""
        obj = cls.__new__(cls)
        obj._segments = list(segments)
        return obj

    @classmethod
    def from_protocol(cls, protocol: Protocol | str, address: str | None = None) -> Multiaddr:
        """Build a single-protocol Multiaddr, e.g. ``from_protocol("tcp", "80")``.

        A leading ``/`` on ``address`` is accepted (``from_protocol("unix", "/tmp/s")``).
        """
        name = protocol.name if isinstance(protocol, Protocol) else protocol
        text = PATH_SEPARATOR + name
        if address:
            text += address if address.startswith(PATH_SEPARATOR) else PATH_SEPARATOR + address
        return cls(text)

    @classmethod
    def join(cls, *addrs: Multiaddr | str | bytes) -> Multiaddr:
        """Encapsulate every argument in order into one Multiaddr."""
        segments: list[Segment] = []
        for addr in addrs:
            segments.extend(_coerce(addr)._segments)
        return cls.from_segments(segments)

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def to_bytes(self) -> bytes:
        """Return the canonical packed form.

        Raises:
            AddressEncodingError: If any segment's address does not encode
        """
        return b"".join(segment.to_bytes() for segment in self._segments)

    def validate(self) -> None:
        """Check that every segment encodes, raising on the first failure."""
        try:
            self.to_bytes()
        except MultiaddrError as exc:
            logger.debug("Validation failed for %s: %s", self._describe(), exc)
            raise

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __str__(self) -> str:
        if not self._segments:
            return PATH_SEPARATOR
        return "".join(str(segment) for segment in self._segments)

    def __repr__(self) -> str:
        return f"<Multiaddr {self._describe()}>"

    def _describe(self) -> str:
        # str() can fail for segments built by hand; fall back to names
        try:
            return str(self)
        except MultiaddrError:
            return PATH_SEPARATOR + PATH_SEPARATOR.join(self.proto_names())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Multiaddr):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def segments(self) -> tuple[Segment, ...]:
        """Segments from outermost (left) to innermost (right)."""
        return tuple(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(tuple(self._segments))

    def protocols(self) -> list[Protocol]:
        """Protocols contained by this Multiaddr, left to right."""
        return [segment.protocol for segment in self._segments]

    def proto_names(self) -> list[str]:
        """Protocol names, left to right."""
        return [segment.protocol.name for segment in self._segments]

    def proto_codes(self) -> list[int]:
        """Protocol codes, left to right."""
        return [segment.protocol.code for segment in self._segments]

    def value_for_protocol(self, protocol: Protocol | str | int) -> str | None:
        """Address of the first segment with the given protocol.

        Raises:
            UnknownCodecError: If no segment uses the protocol
        """
        code = _code_of(protocol)
        for segment in self._segments:
            if segment.protocol.code == code:
                return segment.address
        raise UnknownCodecError(f"Protocol not present in {self}: {protocol}")

    def split(self) -> list[Multiaddr]:
        """One single-segment Multiaddr per segment."""
        return [Multiaddr.from_segments([segment]) for segment in self._segments]

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def encapsulate(self, other: Multiaddr | Protocol | str | bytes, address: str | None = None) -> Multiaddr:
        """Wrap ``other`` inside this address: ``self ++ other``.

        ``other`` may also be a Protocol descriptor, in which case ``address``
        is its payload: ``addr.encapsulate(protocol_with_name("tcp"), "80")``.

        Raises:
            MultiaddrError: If ``other`` cannot be parsed or does not encode
        """
        if isinstance(other, Protocol):
            other = Multiaddr.from_protocol(other, address)
        elif address is not None:
            raise TypeError("address is only accepted together with a Protocol")
        return Multiaddr.from_segments(self._segments + _coerce(other)._segments)

    def decapsulate(self, other: Multiaddr | Protocol | str) -> Multiaddr:
        """Strip a trailing part of this address.

        With a Multiaddr, everything from the first segment equal to
        ``other``'s first segment is removed. With a protocol (descriptor or
        name, leading ``/`` optional), everything from the last segment using
        that protocol is removed. Returns ``self`` when nothing matches.
        """
        if isinstance(other, Multiaddr):
            if not other._segments:
                return self
            marker = other._segments[0]
            for idx, segment in enumerate(self._segments):
                if segment == marker:
                    return Multiaddr.from_segments(self._segments[:idx])
            return self

        name = other.name if isinstance(other, Protocol) else other.removeprefix(PATH_SEPARATOR)
        for idx in range(len(self._segments) - 1, -1, -1):
            if self._segments[idx].protocol.name == name:
                return Multiaddr.from_segments(self._segments[:idx])
        return self

    def pop(self) -> Segment | None:
        """Remove and return the innermost segment, or None when empty."""
        if not self._segments:
            return None
        return self._segments.pop()

    def get_peer_id(self) -> str | None:
        """Address of the last p2p/ipfs segment, or None."""
        for segment in reversed(self._segments):
            if segment.protocol.name in PEER_ID_PROTOCOLS:
                return segment.address
        return None

    def get_path(self) -> str | None:
        """Filesystem path of the last unix segment (with leading ``/``), or None."""
        for segment in reversed(self._segments):
            if segment.protocol.name == PATH_PROTOCOL:
                address = segment.address
                return None if address is None else PATH_SEPARATOR + address
        return None

    def swap(self, address: str, protocol: Protocol | str) -> Multiaddr:
        """Return a copy with the first ``protocol`` segment's address replaced.

        Returns ``self`` if the protocol is not present.

        Raises:
            AddressEncodingError: If the result does not encode
        """
        proto = _protocol_of(protocol)
        idx = self._index_of(proto)
        if idx is None:
            return self
        segments = list(self._segments)
        segments[idx] = Segment(proto, address=address)
        swapped = Multiaddr.from_segments(segments)
        swapped.validate()
        return swapped

    def swap_in_place(self, address: str, protocol: Protocol | str) -> None:
        """Replace the first ``protocol`` segment's address in this Multiaddr.

        Raises:
            UnknownCodecError: If the protocol is not present
            AddressEncodingError: If the result does not encode; the address
                is left unchanged
        """
        proto = _protocol_of(protocol)
        idx = self._index_of(proto)
        if idx is None:
            raise UnknownCodecError(f"Protocol not present in {self}: {proto.name}")
        previous = self._segments[idx]
        self._segments[idx] = Segment(proto, address=address)
        try:
            self.validate()
        except MultiaddrError:
            self._segments[idx] = previous
            raise

    def _index_of(self, proto: Protocol) -> int | None:
        for idx, segment in enumerate(self._segments):
            if segment.protocol.code == proto.code:
                return idx
        return None


def _coerce(addr: Multiaddr | str | bytes) -> Multiaddr:
    return addr if isinstance(addr, Multiaddr) else Multiaddr(addr)


def _protocol_of(protocol: Protocol | str) -> Protocol:
    return protocol if isinstance(protocol, Protocol) else protocol_with_name(protocol)


def _code_of(protocol: Protocol | str | int) -> int:
    if isinstance(protocol, Protocol):
        return protocol.code
    if isinstance(protocol, int):
        return protocol
    return protocol_with_name(protocol).code
