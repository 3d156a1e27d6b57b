"""
Base64 Encoding

Standard base64 (RFC 4648 alphabet, '=' padding, no line breaks). Input is
taken three bytes at a time into a 24-bit accumulator and written out as four
6-bit characters, most significant first.
"""

import logging
from typing import Optional, Union

from .constants import B64_ALPHABET, B64_GROUP_BYTES, B64_GROUP_CHARS, B64_PAD
from .errors import BufferTooSmallError

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


def _as_bytes(data: BytesLike, func: str) -> bytes:
    # bytes(n) would build n zero bytes from an int
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"{func}() needs a bytes-like object, not {type(data).__name__}")
    return bytes(data)


def b64_encoded_size(inlen: int) -> int:
    """
    Length of the base64 text for inlen input bytes.

    Examples:
        >>> [b64_encoded_size(n) for n in (0, 1, 3, 4)]
        [0, 4, 4, 8]
    """
    if inlen < 0:
        raise ValueError("input length must be non-negative")
    return -(-inlen // B64_GROUP_BYTES) * B64_GROUP_CHARS


def _encode(data: bytes) -> str:
    length = len(data)
    chars = []

    for i in range(0, length, B64_GROUP_BYTES):
        v = data[i] << 16
        if i + 1 < length:
            v |= data[i + 1] << 8
        if i + 2 < length:
            v |= data[i + 2]

        chars.append(B64_ALPHABET[(v >> 18) & 0x3F])
        chars.append(B64_ALPHABET[(v >> 12) & 0x3F])
        chars.append(B64_ALPHABET[(v >> 6) & 0x3F] if i + 1 < length else B64_PAD)
        chars.append(B64_ALPHABET[v & 0x3F] if i + 2 < length else B64_PAD)

    return "".join(chars)


def b64_encode(data: BytesLike) -> Optional[str]:
    """
    Encode bytes as base64 text.

    Args:
        data: Bytes to encode

    Returns:
        The encoded text, or None when data is empty

    Raises:
        TypeError: If data is not bytes, bytearray or memoryview

    Examples:
        >>> b64_encode(b"Man")
        'TWFu'
        >>> b64_encode(b"M")
        'TQ=='
        >>> b64_encode(b"") is None
        True
    """
    data = _as_bytes(data, "b64_encode")
    if not data:
        logger.debug("b64_encode called with empty input, no output")
        return None
    return _encode(data)


def b64_encode_into(out: bytearray, data: BytesLike) -> Optional[int]:
    """
    Encode bytes as base64 ASCII into a caller-supplied buffer.

    Empty input returns None without touching out. Otherwise out must hold
    at least b64_encoded_size(len(data)) bytes; no NUL terminator is added.

    Returns:
        Number of bytes written, or None for empty input

    Raises:
        BufferTooSmallError: If out is shorter than the encoded size
        TypeError: If data is not bytes, bytearray or memoryview
    """
    data = _as_bytes(data, "b64_encode_into")
    if not data:
        logger.debug("b64_encode_into called with empty input, buffer untouched")
        return None

    required = b64_encoded_size(len(data))
    if len(out) < required:
        raise BufferTooSmallError(required, len(out))

    out[:required] = _encode(data).encode("ascii")
    return required
