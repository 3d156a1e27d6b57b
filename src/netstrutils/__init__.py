"""
netstrutils

Low-level string and byte helpers for network-facing tools.

Key features:
- URL splitting into scheme, host, port and path
- Hex digit string to bytes conversion (lenient or strict)
- Standard base64 encoding with '=' padding
- Right-trimming of trailing whitespace

Modules:
- constants: Alphabets, whitespace set and default ports
- errors: Exception hierarchy
- config: Environment-driven settings
- models: UrlInfo descriptor
- url: URL splitter
- hex_helpers: Hex decoding
- encoding: Base64 encoding
- trim: Whitespace trimming

Usage:
    from netstrutils import split_url

    info = split_url("https://foo/bar")
    # info.scheme == "https", info.host == "foo", info.port == 443, info.path == "/bar"
"""

from .config import Config, configure_logging, get_config
from .constants import B64_ALPHABET, DEFAULT_PORTS
from .encoding import b64_encode, b64_encode_into, b64_encoded_size
from .errors import BufferTooSmallError, InvalidHexError, MalformedURLError, StrUtilsError
from .hex_helpers import hex_decoded_size, hex_to_bytes, hex_to_bytes_into, nibble
from .models import UrlInfo
from .trim import trimr, trimr_str
from .url import parse_port, split_url

__version__ = "0.1.0"

__all__ = [
    # URL splitting
    'split_url',
    'parse_port',
    'UrlInfo',
    'DEFAULT_PORTS',

    # Hex decoding
    'nibble',
    'hex_decoded_size',
    'hex_to_bytes',
    'hex_to_bytes_into',

    # Base64
    'B64_ALPHABET',
    'b64_encoded_size',
    'b64_encode',
    'b64_encode_into',

    # Trimming
    'trimr',
    'trimr_str',

    # Errors
    'StrUtilsError',
    'MalformedURLError',
    'InvalidHexError',
    'BufferTooSmallError',

    # Configuration
    'Config',
    'get_config',
    'configure_logging',
]
