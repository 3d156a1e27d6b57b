"""
URL Descriptor Model

This module defines the Pydantic model returned by split_url(). Fields are
independent copies of the relevant parts of the input URL, so the descriptor
stays valid whatever happens to the original string.
"""

from pydantic import BaseModel, Field, field_validator

from .constants import DEFAULT_PATH, DEFAULT_PORTS, MAX_PORT, SCHEME_DELIMITER, UNKNOWN_PORT


class UrlInfo(BaseModel):
    """
    Structural parts of a URL.

    Attributes:
        scheme: Lowercased protocol token (e.g. "https")
        host: Host name, case preserved
        port: Explicit port, the scheme default, or 0 when unknown
        path: Path beginning with '/', fragment removed
    """
    scheme: str = Field(..., description="Lowercased scheme")
    host: str = Field(..., description="Host name")
    port: int = Field(default=UNKNOWN_PORT, ge=0, le=MAX_PORT, description="TCP port, 0 if unknown")
    path: str = Field(default=DEFAULT_PATH, description="Path starting with '/'")

    @field_validator('path')
    @classmethod
    def validate_path(cls, v):
        """Path must be absolute."""
        if not v.startswith("/"):
            raise ValueError("Path must start with '/'")
        return v

    @property
    def netloc(self) -> str:
        """Host, with ':port' appended unless the port is implied by the scheme."""
        if self.port == UNKNOWN_PORT or DEFAULT_PORTS.get(self.scheme) == self.port:
            return self.host
        return f"{self.host}:{self.port}"

    def geturl(self) -> str:
        """
        Reassemble the descriptor into a URL string.

        Examples:
            >>> UrlInfo(scheme="https", host="foo", port=443, path="/bar").geturl()
            'https://foo/bar'
        """
        return f"{self.scheme}{SCHEME_DELIMITER}{self.netloc}{self.path}"
