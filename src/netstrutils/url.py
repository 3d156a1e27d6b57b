"""
URL Splitting

Decomposes a URL of the form scheme://host[:port][/path][#fragment] into a
UrlInfo descriptor. Only the scheme is case folded; host and path are kept
verbatim. Query strings, userinfo and IPv6 literals get no special treatment.
"""

import logging
import re

from .constants import DEFAULT_PATH, DEFAULT_PORTS, MAX_PORT, SCHEME_DELIMITER, UNKNOWN_PORT
from .errors import MalformedURLError
from .models import UrlInfo

logger = logging.getLogger(__name__)

# atoi(): optional leading whitespace and sign, then the longest digit run
_ATOI_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?)0*([0-9]+)")

# Digit runs longer than this cannot be a valid port
_MAX_PORT_DIGITS = len(str(MAX_PORT))


def _ascii_lower(text: str) -> str:
    return "".join(chr(ord(c) + 32) if "A" <= c <= "Z" else c for c in text)


def parse_port(text: str) -> int:
    """
    Parse a port the way C atoi() does.

    Leading whitespace and a sign are accepted and trailing garbage is
    ignored. Text with no leading digits yields 0. Digit runs too long to
    be a port are clamped to MAX_PORT + 1 (keeping the sign) instead of
    being converted.

    Examples:
        >>> parse_port("8443")
        8443
        >>> parse_port("80abc")
        80
        >>> parse_port("")
        0
    """
    match = _ATOI_RE.match(text)
    if not match:
        return 0
    sign, digits = match.groups()
    if len(digits) > _MAX_PORT_DIGITS:
        value = MAX_PORT + 1
    else:
        value = int(digits)
    return -value if sign == "-" else value


def split_url(url: str) -> UrlInfo:
    """
    Split a URL into scheme, host, port and path.

    The first '/' after "://" starts the path; without one the path is "/".
    A '#' in an explicit path cuts off the fragment. The first ':' in the
    host segment introduces the port. A missing or zero port falls back to
    80 for http and 443 for https, and stays 0 for any other scheme.

    Args:
        url: URL text containing "://"

    Returns:
        UrlInfo with owned copies of each part

    Raises:
        TypeError: If url is not a string
        MalformedURLError: If "://" is missing or the port is out of range

    Examples:
        >>> split_url("https://example.com:8443/a/b#frag")
        UrlInfo(scheme='https', host='example.com', port=8443, path='/a/b')
    """
    if not isinstance(url, str):
        raise TypeError(f"url must be str, not {type(url).__name__}")

    scheme, sep, rest = url.partition(SCHEME_DELIMITER)
    if not sep:
        raise MalformedURLError(url, f"missing {SCHEME_DELIMITER!r} delimiter")
    scheme = _ascii_lower(scheme)

    slash = rest.find("/")
    if slash >= 0:
        authority = rest[:slash]
        path = rest[slash:].split("#", 1)[0]
    else:
        authority = rest
        path = DEFAULT_PATH

    host, colon, port_text = authority.partition(":")
    port = parse_port(port_text) if colon else UNKNOWN_PORT

    if port < 0 or port > MAX_PORT:
        raise MalformedURLError(url, f"port out of range 0-{MAX_PORT}")

    if port == UNKNOWN_PORT:
        port = DEFAULT_PORTS.get(scheme, UNKNOWN_PORT)

    logger.debug(f"Split {url!r} into scheme={scheme} host={host} port={port} path={path}")
    return UrlInfo(scheme=scheme, host=host, port=port, path=path)
