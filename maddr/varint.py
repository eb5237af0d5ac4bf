"""Unsigned base-128 varint encoding.

Values are written little-endian, seven bits per byte, with the high bit set on
every byte except the last. Encodings are capped at ``MAX_VARINT_BYTES`` and
must be minimal, so every value has exactly one wire form.
"""

from .constants import MAX_VARINT_BYTES, MAX_VARINT_VALUE


def encode(value: int) -> bytes:
    """Encode a non-negative integer as a varint.

    Args:
        value: Integer in ``[0, MAX_VARINT_VALUE]``

    Returns:
        Varint bytes

    Raises:
        ValueError: If the value is negative or too large
    """
    if value < 0:
        raise ValueError("varint must be non-negative")
    if value > MAX_VARINT_VALUE:
        raise ValueError(f"varint exceeds {MAX_VARINT_BYTES} bytes: {value}")

    out = bytearray()
    while value >= 0x80:
        out.append((value & 0x7F) | 0x80)
        value >>= 7
    out.append(value)
    return bytes(out)


def decode(buf: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode a varint starting at ``offset``.

    Args:
        buf: Buffer to read from
        offset: Index of the first varint byte

    Returns:
        Tuple of (value, number of bytes consumed)

    Raises:
        ValueError: If the varint is truncated, too long or not minimal
    """
    value = 0
    shift = 0
    i = offset
    while True:
        if i - offset >= MAX_VARINT_BYTES:
            raise ValueError(f"varint longer than {MAX_VARINT_BYTES} bytes")
        if i >= len(buf):
            raise ValueError("truncated varint")
        b = buf[i]
        i += 1
        value |= (b & 0x7F) << shift
        if not b & 0x80:
            if b == 0 and i - offset > 1:
                raise ValueError("varint is not minimally encoded")
            return value, i - offset
        shift += 7
