"""UTF-8 text transcoder for name- and path-valued protocols."""

from .base import Transcoder


class TextTranscoder(Transcoder):
    """UTF-8 text <-> raw bytes.

    Only path-valued protocols (``unix``) may carry ``/`` in their address;
    for every other text protocol a slash would be ambiguous in the string form.
    """

    def __init__(self, allow_slash: bool = False):
        self.allow_slash = allow_slash

    def to_bytes(self, address: str) -> bytes:
        self._check(address)
        return address.encode("utf-8")

    def to_string(self, data: bytes) -> str:
        address = data.decode("utf-8")
        self._check(address)
        return address

    def _check(self, address: str) -> None:
        if not address:
            raise ValueError("address must not be empty")
        if not self.allow_slash and "/" in address:
            raise ValueError(f"address must not contain '/': {address!r}")
