"""Exception hierarchy for multiaddr parsing and encoding."""

from .constants import ErrorCode


class MultiaddrError(ValueError):
    """Base class for all multiaddr failures."""

    code: ErrorCode = ErrorCode.OK


class InvalidFormatError(MultiaddrError):
    """Malformed string or binary input."""

    code = ErrorCode.ERR_INVALID_FORMAT


class AddressEncodingError(InvalidFormatError):
    """An address payload could not be converted for its protocol."""

    code = ErrorCode.ERR_ADDRESS_ENCODING

    def __init__(self, protocol: str, reason: str):
        super().__init__(f"Invalid address for /{protocol}: {reason}")
        self.protocol = protocol
        self.reason = reason


class UnknownProtocolError(MultiaddrError):
    """A protocol code or name is not in the registry."""

    code = ErrorCode.ERR_UNKNOWN_PROTOCOL


class UnknownCodecError(MultiaddrError):
    """No segment (or transcoder) exists for the requested protocol."""

    code = ErrorCode.ERR_UNKNOWN_CODEC
