"""Peer identity transcoder (p2p and its legacy name ipfs)."""

import base58

from .base import Transcoder


class PeerIDTranscoder(Transcoder):
    """Base58btc text <-> raw peer id bytes."""

    def to_bytes(self, address: str) -> bytes:
        data = base58.b58decode(address)
        if not data:
            raise ValueError("peer id must not be empty")
        # b58decode tolerates surrounding whitespace
        if base58.b58encode(data).decode("ascii") != address:
            raise ValueError(f"peer id is not canonical base58: {address!r}")
        return data

    def to_string(self, data: bytes) -> str:
        if not data:
            raise ValueError("peer id must not be empty")
        return base58.b58encode(data).decode("ascii")
