"""Tests for the unsigned varint primitive."""

import pytest

from maddr import MAX_VARINT_VALUE, varint


@pytest.mark.parametrize(
    "value,encoded",
    [
        (0, b"\x00"),
        (1, b"\x01"),
        (127, b"\x7f"),
        (128, b"\x80\x01"),
        (300, b"\xac\x02"),
        (421, b"\xa5\x03"),
        (MAX_VARINT_VALUE, b"\xff" * 8 + b"\x7f"),
    ],
)
def test_encode_decode(value: int, encoded: bytes) -> None:
    """Test known encodings in both directions."""
    assert varint.encode(value) == encoded
    assert varint.decode(encoded) == (value, len(encoded))


def test_decode_at_offset() -> None:
    """Test decoding from the middle of a buffer reports bytes consumed."""
    buf = b"\x04\x90\x03\xff"
    assert varint.decode(buf, 1) == (400, 2)


def test_encode_rejects_out_of_range() -> None:
    """Test negative and oversized values."""
    with pytest.raises(ValueError):
        varint.encode(-1)
    with pytest.raises(ValueError):
        varint.encode(MAX_VARINT_VALUE + 1)


def test_decode_truncated() -> None:
    """Test a buffer that ends mid-varint."""
    with pytest.raises(ValueError, match="truncated"):
        varint.decode(b"\x80")
    with pytest.raises(ValueError, match="truncated"):
        varint.decode(b"")


def test_decode_too_long() -> None:
    """Test that more than nine bytes are rejected."""
    with pytest.raises(ValueError, match="longer than"):
        varint.decode(b"\xff" * 9 + b"\x01")


def test_decode_non_minimal() -> None:
    """Test that padded encodings are rejected so the wire form stays canonical."""
    with pytest.raises(ValueError, match="minimally"):
        varint.decode(b"\x81\x00")
