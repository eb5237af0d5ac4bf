"""A single (protocol, address) unit of a multiaddr."""

from . import varint
from .constants import PATH_SEPARATOR, SizePolicy
from .errors import AddressEncodingError
from .protocols import Protocol
from .transcoders import get_transcoder


class Segment:
    """One protocol component with its optional address payload.

    Only one of ``address`` / ``address_bytes`` has to be supplied; the other
    is derived on demand through the protocol's transcoder.

    Args:
        protocol: Protocol descriptor
        address: String form of the address
        address_bytes: Binary form of the address
    """

    __slots__ = ("protocol", "_address", "_address_bytes")

    def __init__(
        self, protocol: Protocol, address: str | None = None, address_bytes: bytes | None = None
    ) -> None:
        self.protocol = protocol
        self._address = address
        self._address_bytes = address_bytes

    @property
    def address(self) -> str | None:
        """String form of the address, or None for a payload-less segment."""
        if self._address is None and self._address_bytes is not None:
            try:
                self._address = get_transcoder(self.protocol.code).to_string(self._address_bytes)
            except ValueError as exc:
                raise AddressEncodingError(self.protocol.name, str(exc)) from exc
        return self._address

    @property
    def address_bytes(self) -> bytes | None:
        """Binary form of the address, or None for a payload-less segment."""
        if self._address_bytes is None and self._address is not None:
            if self.protocol.size_policy is SizePolicy.ZERO:
                raise AddressEncodingError(self.protocol.name, "protocol takes no address")
            try:
                self._address_bytes = get_transcoder(self.protocol.code).to_bytes(self._address)
            except ValueError as exc:
                raise AddressEncodingError(self.protocol.name, str(exc)) from exc
        return self._address_bytes

    def resolve(self) -> "Segment":
        """Derive both address forms now instead of on first use.

        Raises:
            AddressEncodingError: If the supplied form does not transcode
        """
        if self._address is None:
            self.address
        else:
            self.address_bytes
        return self

    def to_bytes(self) -> bytes:
        """Encode as ``varint(code) [varint(len)] payload``.

        Raises:
            AddressEncodingError: If the payload does not fit the size policy
        """
        proto = self.protocol
        head = varint.encode(proto.code)
        payload = self.address_bytes

        if proto.size_policy is SizePolicy.ZERO:
            if payload:
                raise AddressEncodingError(proto.name, "protocol takes no address")
            return head
        if payload is None:
            raise AddressEncodingError(proto.name, "missing address")
        if proto.size_policy is SizePolicy.FIXED:
            if len(payload) != proto.byte_size:
                raise AddressEncodingError(proto.name, f"expected {proto.byte_size} bytes, got {len(payload)}")
            return head + payload
        return head + varint.encode(len(payload)) + payload

    def __str__(self) -> str:
        address = self.address
        if address:
            return f"{PATH_SEPARATOR}{self.protocol.name}{PATH_SEPARATOR}{address}"
        return f"{PATH_SEPARATOR}{self.protocol.name}"

    def __repr__(self) -> str:
        return f"Segment({self.protocol.name!r}, {self.address!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Segment):
            return NotImplemented
        return (self.protocol, self.address) == (other.protocol, other.address)

    def __hash__(self) -> int:
        return hash((self.protocol, self.address))
