"""
Exception types raised by netstrutils.

Every error derives from StrUtilsError and also from ValueError, so callers
that only catch ValueError keep working.
"""


class StrUtilsError(Exception):
    """Base class for all netstrutils errors."""
    pass


class MalformedURLError(StrUtilsError, ValueError):
    """Exception raised when a URL cannot be split into its parts."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Malformed URL {url!r}: {reason}")


class InvalidHexError(StrUtilsError, ValueError):
    """Exception raised in strict mode when a non-hex character is decoded."""

    def __init__(self, index: int, char: str):
        self.index = index
        self.char = char
        super().__init__(f"Invalid hex character {char!r} at index {index}")


class BufferTooSmallError(StrUtilsError, ValueError):
    """Exception raised when a caller-supplied output buffer is undersized."""

    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(
            f"Output buffer too small: need {required} bytes, got {available}"
        )
