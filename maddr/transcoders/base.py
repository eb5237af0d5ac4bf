"""Base transcoder interface."""

from abc import ABC, abstractmethod


class Transcoder(ABC):
    """Converts a protocol's address between its string and binary forms."""

    @abstractmethod
    def to_bytes(self, address: str) -> bytes:
        """Encode the string form of an address to bytes."""
        pass

    @abstractmethod
    def to_string(self, data: bytes) -> str:
        """Decode the binary form of an address to a string."""
        pass
