"""Utilities and constants for SIP URLs."""

import logging
from rich.console import Console
from rich.logging import RichHandler

# Rich Console for pretty printing
console = Console()

# Configure logging with RichHandler
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
)

# Get logger for the package
logger = logging.getLogger("sipaddr")

SCHEME_PREFIX = "sip:"

# Well-known URI parameters (RFC 3261 Section 19.1.1)
TRANSPORT_PARAM = "transport"
MADDR_PARAM = "maddr"
TTL_PARAM = "ttl"
LR_PARAM = "lr"

# Value returned for ttl when the parameter is missing or unreadable
DEFAULT_TTL = 1

# Characters that end the host part
HOST_TERMINATORS = ":;?"
# Characters that end the port part
PORT_TERMINATORS = ";?"
# Characters that end a parameter name
PARAM_SEPARATORS = "=;?, \t\r\n"

# Default ports (RFC 3261 Section 19.1.2)
SIP_PORT = 5060
SIPS_PORT = 5061
