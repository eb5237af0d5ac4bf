"""Tests for the Segment model."""

import pytest

from maddr import AddressEncodingError, Segment, protocol_with_name


def test_address_bytes_derived_from_string() -> None:
    """Test the binary form is computed from the string form on demand."""
    segment = Segment(protocol_with_name("tcp"), address="80")
    assert segment.address_bytes == b"\x00\x50"
    assert segment.to_bytes() == b"\x06\x00\x50"
    assert str(segment) == "/tcp/80"


def test_address_derived_from_bytes() -> None:
    """Test the string form is computed from the binary form on demand."""
    segment = Segment(protocol_with_name("tcp"), address_bytes=b"\x1f\x90")
    assert segment.address == "8080"
    assert str(segment) == "/tcp/8080"


def test_variable_size_prefix() -> None:
    """Test variable-size payloads carry a varint length."""
    segment = Segment(protocol_with_name("dns4"), address="example.com")
    assert segment.to_bytes() == b"\x36\x0b" + b"example.com"


def test_zero_size_protocol() -> None:
    """Test marker protocols encode to just their code."""
    segment = Segment(protocol_with_name("quic"))
    assert segment.address is None
    assert segment.to_bytes() == b"\xcc\x03"
    assert str(segment) == "/quic"


def test_zero_size_protocol_rejects_address() -> None:
    """Test a payload on a marker protocol fails to encode."""
    segment = Segment(protocol_with_name("quic"), address="foo")
    with pytest.raises(AddressEncodingError, match="takes no address"):
        segment.to_bytes()


def test_sized_protocol_requires_address() -> None:
    """Test a missing payload on a sized protocol fails to encode."""
    with pytest.raises(AddressEncodingError, match="missing address"):
        Segment(protocol_with_name("ip4")).to_bytes()


def test_fixed_size_mismatch() -> None:
    """Test raw bytes of the wrong length are rejected."""
    segment = Segment(protocol_with_name("ip4"), address_bytes=b"\x01\x02\x03")
    with pytest.raises(AddressEncodingError):
        segment.to_bytes()
    with pytest.raises(AddressEncodingError):
        segment.address


def test_transcoding_error_is_wrapped() -> None:
    """Test transcoder failures surface as AddressEncodingError with context."""
    segment = Segment(protocol_with_name("tcp"), address="http")
    with pytest.raises(AddressEncodingError) as exc_info:
        segment.to_bytes()
    assert exc_info.value.protocol == "tcp"
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_resolve() -> None:
    """Test resolve derives the missing form or raises right away."""
    segment = Segment(protocol_with_name("tcp"), address_bytes=b"\x00\x50")
    assert segment.resolve() is segment
    assert segment.address == "80"
    with pytest.raises(AddressEncodingError):
        Segment(protocol_with_name("unix"), address_bytes=b"\xff").resolve()
    with pytest.raises(AddressEncodingError):
        Segment(protocol_with_name("tcp"), address="080").resolve()
    assert Segment(protocol_with_name("quic")).resolve().address is None


def test_equality_and_hash() -> None:
    """Test segments compare on protocol and resolved address."""
    tcp = protocol_with_name("tcp")
    a = Segment(tcp, address="80")
    b = Segment(tcp, address_bytes=b"\x00\x50")
    c = Segment(protocol_with_name("udp"), address="80")
    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert len({a, b, c}) == 2
