"""
Type definitions and exceptions for SIP URLs.

This module centralizes the exceptions raised by the URL accessors, the
transport address value type derived from a URL, and common type aliases.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass

from ._utils import SIP_PORT, SIPS_PORT

if typing.TYPE_CHECKING:
    from ._url import SipURL


# =============================================================================
# Transport Address
# =============================================================================


@dataclass
class TransportAddress:
    """Transport address (host, port, protocol) used to reach a SIP URL."""

    host: str
    port: int = SIP_PORT
    protocol: str = "UDP"  # UDP, TCP, TLS or SCTP

    def __str__(self) -> str:
        return f"{self.protocol}:{self.host}:{self.port}"

    @property
    def is_secure(self) -> bool:
        """Check if transport uses TLS."""
        return self.protocol == "TLS"

    @classmethod
    def from_url(cls, url: SipURL) -> TransportAddress:
        """
        Build a transport address from a SIP URL.

        The protocol comes from the ``transport`` parameter (UDP when absent)
        and the port falls back to 5061 for TLS and 5060 otherwise when the
        URL has none.

        Examples:
            sip:user@host:5080;transport=tcp -> TCP:host:5080
            sip:host;transport=tls           -> TLS:host:5061
        """
        transport = url.get_transport()
        address = cls(
            host=url.get_host(),
            protocol=transport.upper() if transport else "UDP",
        )
        port = url.get_port()
        if port >= 0:
            address.port = port
        elif address.is_secure:
            address.port = SIPS_PORT
        return address


# =============================================================================
# URL Exceptions
# =============================================================================


class URLError(Exception):
    """Base exception for SIP URL errors."""

    pass


class InvalidPortError(URLError, ValueError):
    """Raised when the port of a SIP URL is not a decimal integer."""

    def __init__(self, value: str, url: str) -> None:
        super().__init__(f"Invalid port {value!r} in {url!r}")
        self.value = value
        self.url = url


# =============================================================================
# Type Aliases
# =============================================================================

# Anything accepted where a URL is expected
URLLike = typing.Union["SipURL", str]

# (name, value) pair of a URI parameter; value is None for flag parameters
ParameterItem = typing.Tuple[str, typing.Optional[str]]


__all__ = [
    # Transport types
    "TransportAddress",
    # Exceptions
    "URLError",
    "InvalidPortError",
    # Type aliases
    "URLLike",
    "ParameterItem",
]
