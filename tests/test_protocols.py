"""Tests for the protocol registry and transcoders."""

import pytest

from maddr import (
    ProtocolCode,
    SizePolicy,
    UnknownCodecError,
    UnknownProtocolError,
    get_transcoder,
    is_protocol_name,
    list_protocols,
    list_transcoders,
    protocol_with_code,
    protocol_with_name,
)
from maddr.protocols import Protocol


def test_lookup_by_code_and_name() -> None:
    """Test that both lookups return the same descriptor."""
    tcp = protocol_with_name("tcp")
    assert tcp.code == ProtocolCode.TCP
    assert tcp.size_policy is SizePolicy.FIXED
    assert tcp.bits == 16
    assert tcp.byte_size == 2
    assert protocol_with_code(6) == tcp


def test_peer_id_alias() -> None:
    """Test that ipfs shares p2p's code but p2p is canonical for binary lookups."""
    assert protocol_with_name("ipfs").code == protocol_with_name("p2p").code == 421
    assert protocol_with_code(421).name == "p2p"


def test_unknown_protocol() -> None:
    """Test lookups of unregistered codes and names."""
    with pytest.raises(UnknownProtocolError):
        protocol_with_code(0x3F)
    with pytest.raises(UnknownProtocolError):
        protocol_with_name("carrier-pigeon")
    assert not is_protocol_name("carrier-pigeon")
    assert not is_protocol_name("")
    assert is_protocol_name("quic-v1")


def test_every_sized_protocol_has_transcoder() -> None:
    """Test that only zero-size protocols lack a transcoder."""
    codes = set(list_transcoders())
    for proto in list_protocols():
        if proto.size_policy is SizePolicy.ZERO:
            assert proto.code not in codes
        else:
            assert proto.code in codes
    with pytest.raises(UnknownCodecError):
        get_transcoder(ProtocolCode.QUIC)


def test_descriptor_validation() -> None:
    """Test that size policy and bit size must agree."""
    with pytest.raises(ValueError):
        Protocol(code=1, name="broken", size_policy=SizePolicy.FIXED, bits=0)
    with pytest.raises(ValueError):
        Protocol(code=1, name="broken", size_policy=SizePolicy.FIXED, bits=12)
    with pytest.raises(ValueError):
        Protocol(code=1, name="broken", size_policy=SizePolicy.VARIABLE, bits=8)


@pytest.mark.parametrize(
    "name,text,packed",
    [
        ("ip4", "127.0.0.1", b"\x7f\x00\x00\x01"),
        ("ip6", "::1", b"\x00" * 15 + b"\x01"),
        ("tcp", "9090", b"\x23\x82"),
        ("udp", "0", b"\x00\x00"),
        ("dns4", "example.com", b"example.com"),
        ("unix", "tmp/socket", b"tmp/socket"),
        ("memory", "258", b"\x00" * 6 + b"\x01\x02"),
    ],
)
def test_transcoder_round_trip(name: str, text: str, packed: bytes) -> None:
    """Test string <-> bytes for each transcoder family."""
    transcoder = get_transcoder(protocol_with_name(name).code)
    assert transcoder.to_bytes(text) == packed
    assert transcoder.to_string(packed) == text


def test_peer_id_transcoder() -> None:
    """Test base58 peer ids survive a round trip."""
    transcoder = get_transcoder(ProtocolCode.P2P)
    peer = "QmNnooDu7bfjPFoTZYxMNLWUQJyrVwtbZg5gBMjTezGAJN"
    packed = transcoder.to_bytes(peer)
    assert packed[:2] == b"\x12\x20"  # sha2-256 multihash header
    assert len(packed) == 34
    assert transcoder.to_string(packed) == peer


def test_onion3_transcoder() -> None:
    """Test v3 onion addresses use 35 id bytes plus the port."""
    transcoder = get_transcoder(ProtocolCode.ONION3)
    text = "vww6ybal4bd7szmgncyruucpgfkqahzddi37ktceo3ah7ngmcopnpyyd:1234"
    packed = transcoder.to_bytes(text)
    assert len(packed) == 37
    assert packed[-2:] == b"\x04\xd2"
    assert transcoder.to_string(packed) == text


@pytest.mark.parametrize(
    "name,text",
    [
        ("ip4", "256.0.0.1"),
        ("ip4", "1.2.3"),
        ("ip6", "fe80::1%eth0"),
        ("tcp", "http"),
        ("tcp", "65536"),
        ("udp", "-1"),
        ("dns4", ""),
        ("dns4", "a/b"),
        ("p2p", "0OIl"),
        ("onion", "timaq4ygg2iegci7"),
        ("onion", "timaq4ygg2iegci7:0"),
        ("onion", "short:80"),
        ("memory", "18446744073709551616"),
        ("ip4", "1.2.3.04"),
        ("ip6", "0:0::1"),
        ("ip6", "2001:DB8::1"),
        ("tcp", "080"),
        ("tcp", "\u0668\u0660"),
        ("udp", "+80"),
        ("memory", "007"),
        ("p2p", "QmPeer "),
        ("onion", "TIMAQ4YGG2IEGCI7:80"),
    ],
)
def test_transcoder_rejects(name: str, text: str) -> None:
    """Test malformed addresses raise ValueError."""
    transcoder = get_transcoder(protocol_with_name(name).code)
    with pytest.raises(ValueError):
        transcoder.to_bytes(text)


def test_transcoder_rejects_wrong_length() -> None:
    """Test fixed-size decoders check their input length."""
    with pytest.raises(ValueError):
        get_transcoder(ProtocolCode.IP4).to_string(b"\x01\x02\x03")
    with pytest.raises(ValueError):
        get_transcoder(ProtocolCode.TCP).to_string(b"\x01")
    with pytest.raises(ValueError):
        get_transcoder(ProtocolCode.DNS).to_string(b"\xff\xfe")


def test_onion_transcoder() -> None:
    """Test v2 onion addresses use 10 id bytes plus the port."""
    transcoder = get_transcoder(ProtocolCode.ONION)
    packed = transcoder.to_bytes("timaq4ygg2iegci7:80")
    assert len(packed) == 12
    assert packed[-2:] == b"\x00\x50"
    assert transcoder.to_string(packed) == "timaq4ygg2iegci7:80"
