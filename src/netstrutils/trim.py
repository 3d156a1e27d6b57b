"""
Whitespace trimming helpers.

Whitespace here is the C isspace() set: space, tab, newline, vertical tab,
form feed and carriage return.
"""

from .constants import WHITESPACE, WHITESPACE_BYTES


def trimr(buffer: bytearray) -> None:
    """
    Remove trailing whitespace from buffer in place.

    Args:
        buffer: Mutable byte buffer; an empty buffer is left as is

    Raises:
        TypeError: If buffer is not a bytearray

    Examples:
        >>> buf = bytearray(b"  hello   ")
        >>> trimr(buf)
        >>> buf
        bytearray(b'  hello')
    """
    if not isinstance(buffer, bytearray):
        raise TypeError(f"trimr() needs a bytearray, not {type(buffer).__name__}")

    end = len(buffer)
    while end > 0 and buffer[end - 1] in WHITESPACE_BYTES:
        end -= 1
    del buffer[end:]


def trimr_str(text: str) -> str:
    """Return text without trailing whitespace."""
    return text.rstrip(WHITESPACE)
