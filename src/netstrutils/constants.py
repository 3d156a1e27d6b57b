"""
String Utility Constants

This module contains the fixed tables used by the URL splitter, the hex
converter, the base64 encoder and the trim helpers.

References:
- RFC 4648 (Base64 alphabet): https://datatracker.ietf.org/doc/html/rfc4648#section-4
"""

# ====================
# URL Splitting
# ====================

# Delimiter separating the scheme from the rest of the URL
SCHEME_DELIMITER = "://"

# Path used when the URL carries no '/' after the authority
DEFAULT_PATH = "/"

# Port value meaning "no explicit port and no known default"
UNKNOWN_PORT = 0

# Ports applied when a URL has no explicit (or a zero) port
DEFAULT_PORTS = {
    "http": 80,
    "https": 443,
}

MAX_PORT = 65535

# ====================
# Hex Decoding
# ====================

HEX_DIGITS = "0123456789abcdefABCDEF"

# ====================
# Base64 Encoding
# ====================

B64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

B64_PAD = "="

# Input bytes consumed / output characters produced per base64 group
B64_GROUP_BYTES = 3
B64_GROUP_CHARS = 4

# ====================
# Whitespace
# ====================

# Same set the C locale isspace() accepts
WHITESPACE = " \t\n\v\f\r"
WHITESPACE_BYTES = frozenset(WHITESPACE.encode("ascii"))
