"""
Hex String Utilities

This module converts strings of hexadecimal digits such as "A489B1" into raw
bytes such as b'\\xa4\\x89\\xb1', two digits per byte, high nibble first.

Odd-length input is decoded as if a '0' were prepended: the first character
becomes the low nibble of a byte on its own and the rest follow in pairs.
Characters outside 0-9, a-f and A-F decode as 0 unless strict mode is on.
"""

import logging
from typing import Optional

from .config import get_config
from .constants import HEX_DIGITS
from .errors import BufferTooSmallError, InvalidHexError

logger = logging.getLogger(__name__)

# Input characters quoted in warnings
_LOG_PREFIX_CHARS = 16


def nibble(c: str) -> int:
    """
    Decode one hex character into a value 0-15.

    Args:
        c: A single character

    Returns:
        The nibble value, or 0 if c is not a hex digit

    Raises:
        ValueError: If c is not exactly one character

    Examples:
        >>> nibble("7")
        7
        >>> nibble("b")
        11
        >>> nibble("z")
        0
    """
    if len(c) != 1:
        raise ValueError(f"nibble() expects a single character, got {c!r}")

    if "0" <= c <= "9":
        return ord(c) - ord("0")
    if "a" <= c <= "f":
        return ord(c) - ord("a") + 10
    if "A" <= c <= "F":
        return ord(c) - ord("A") + 10

    # Not a valid hexadecimal character
    return 0


def hex_decoded_size(hex_len: int) -> int:
    """Number of bytes produced from hex_len digits."""
    if hex_len < 0:
        raise ValueError("hex length must be non-negative")
    return (hex_len + 1) // 2


def _decode(hex_str: str, strict: bool) -> bytes:
    # Odd total length flips which indices carry the high nibble
    high_parity = len(hex_str) & 1

    out = bytearray()
    current = 0
    invalid = 0

    for index, char in enumerate(hex_str):
        if char not in HEX_DIGITS:
            if strict:
                raise InvalidHexError(index, char)
            invalid += 1

        if (index & 1) == high_parity:
            current = nibble(char) << 4
        else:
            out.append(current | nibble(char))
            current = 0

    if invalid:
        logger.warning(
            f"Decoded {invalid} invalid hex character(s) as 0 in {len(hex_str)}-digit input "
            f"starting {hex_str[:_LOG_PREFIX_CHARS]!r}"
        )

    return bytes(out)


def _resolve_strict(strict: Optional[bool]) -> bool:
    if strict is None:
        return get_config().strict_hex
    return strict


def hex_to_bytes(hex_str: str, strict: Optional[bool] = None) -> bytes:
    """
    Convert a hex digit string to bytes.

    Args:
        hex_str: Hex digits without any '0x' prefix
        strict: Raise on invalid digits instead of decoding them as 0.
            None uses the NETSTRUTILS_STRICT_HEX setting.

    Returns:
        ceil(len(hex_str) / 2) bytes

    Raises:
        InvalidHexError: In strict mode, on the first non-hex character

    Examples:
        >>> hex_to_bytes("A489B1")
        b'\\xa4\\x89\\xb1'
        >>> hex_to_bytes("F")
        b'\\x0f'
        >>> hex_to_bytes("ABC")
        b'\\n\\xbc'
    """
    return _decode(hex_str, _resolve_strict(strict))


def hex_to_bytes_into(out: bytearray, hex_str: str, strict: Optional[bool] = None) -> int:
    """
    Decode hex digits into a caller-supplied buffer.

    The buffer is checked against hex_decoded_size() before anything is
    written, and bytes past the decoded length are left untouched.

    Args:
        out: Destination buffer
        hex_str: Hex digits to decode
        strict: See hex_to_bytes()

    Returns:
        Number of bytes written

    Raises:
        BufferTooSmallError: If out cannot hold the decoded bytes
        InvalidHexError: In strict mode, on the first non-hex character
    """
    required = hex_decoded_size(len(hex_str))
    if len(out) < required:
        raise BufferTooSmallError(required, len(out))

    decoded = _decode(hex_str, _resolve_strict(strict))
    out[:required] = decoded
    return required
