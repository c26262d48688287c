"""sipaddr - SIP URL parsing and manipulation for Python."""

from __future__ import annotations

# URL model
from ._url import SipURL

# Scanner primitive
from ._scanner import Scanner

# Types and exceptions
from ._types import (
    InvalidPortError,
    ParameterItem,
    TransportAddress,
    URLError,
    URLLike,
)

# Constants
from ._utils import (
    DEFAULT_TTL,
    LR_PARAM,
    MADDR_PARAM,
    SCHEME_PREFIX,
    TRANSPORT_PARAM,
    TTL_PARAM,
    console,
    logger,
)

__version__ = "0.1.0"

__all__ = [
    # URL
    "SipURL",
    # Scanner
    "Scanner",
    # Types
    "TransportAddress",
    "URLLike",
    "ParameterItem",
    # Exceptions
    "URLError",
    "InvalidPortError",
    # Constants
    "SCHEME_PREFIX",
    "TRANSPORT_PARAM",
    "MADDR_PARAM",
    "TTL_PARAM",
    "LR_PARAM",
    "DEFAULT_TTL",
    # Logging
    "console",
    "logger",
]
