"""
SIP URL implementation.

A SIP URL is kept as a single string of the form::

    sip:[user@]host[:port][;name[=value]]*

Every accessor rescans that string and every mutator rewrites it, so the
string is always the authoritative representation of the URL.
"""

from __future__ import annotations

import re
import typing

from ._scanner import Scanner
from ._types import InvalidPortError, ParameterItem, TransportAddress, URLLike
from ._utils import (
    DEFAULT_TTL,
    HOST_TERMINATORS,
    LR_PARAM,
    MADDR_PARAM,
    PARAM_SEPARATORS,
    PORT_TERMINATORS,
    SCHEME_PREFIX,
    TRANSPORT_PARAM,
    TTL_PARAM,
    logger,
)

# Decimal integer as written in a URL: optional sign, ASCII digits only
_INT_RE = re.compile(r"[+-]?[0-9]+")


class SipURL:
    """
    SIP URL stored as its raw string.

    The input is lowercased once at construction and prefixed with ``sip:``
    when needed. Nothing is validated up front: a malformed port only raises
    when :meth:`get_port` reads it.

    Parameters are read first-match and written append-only, so adding a
    parameter that already exists does not change what :meth:`get_parameter`
    returns. Parameter text added after construction is stored verbatim,
    without lowering.

    Examples:
        >>> url = SipURL("SIP:Alice@Example.com:5060")
        >>> url.get_user_name(), url.get_host(), url.get_port()
        ('alice', 'example.com', 5060)
        >>> str(url.add_transport("TCP").add_lr())
        'sip:alice@example.com:5060;transport=tcp;lr'
    """

    __slots__ = ("_url",)

    def __init__(self, url: URLLike) -> None:
        """
        Initialize from a full SIP URL or a bare ``[user@]host[:port]``.

        Args:
            url: URL text, or another SipURL to copy
        """
        if isinstance(url, SipURL):
            self._url = url._url
            return
        if not isinstance(url, str):
            raise TypeError("url must be str or SipURL")

        url = url.lower()
        if url.startswith(SCHEME_PREFIX):
            self._url = url
        else:
            self._url = SCHEME_PREFIX + url

    @classmethod
    def parse(cls, url: str) -> SipURL:
        """Build a SipURL from text; same as calling the class."""
        return cls(url)

    @classmethod
    def from_parts(
        cls,
        user: str | None,
        host: str,
        port: int | None = -1,
    ) -> SipURL:
        """
        Build a SipURL from its components.

        The components are used as given (no lowering). A port of None, or
        of zero or less, means no port.

        Args:
            user: User part, or None
            host: Host name or address
            port: Port number, or None / -1 for none

        Example:
            >>> str(SipURL.from_parts("bob", "biloxi.com", 5080))
            'sip:bob@biloxi.com:5080'
        """
        parts = [SCHEME_PREFIX]
        if user is not None:
            parts.append(f"{user}@")
        parts.append(host)
        if port is not None and port > 0:
            parts.append(f":{port}")

        instance = cls.__new__(cls)
        instance._url = "".join(parts)
        return instance

    def copy(self) -> SipURL:
        """Create an independent copy of this URL."""
        return SipURL(self)

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        """Compare URLs by their exact raw text."""
        if not isinstance(other, SipURL):
            return NotImplemented
        return self._url == other._url

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self._url

    def __repr__(self) -> str:
        return f"SipURL({self._url!r})"

    # ------------------------------------------------------------------
    # Structural accessors
    # ------------------------------------------------------------------

    def _user_end(self) -> int:
        """Position of the '@' closing the user part, or -1."""
        scanner = Scanner(self._url, len(SCHEME_PREFIX))
        end = scanner.index_of("@" + PORT_TERMINATORS)
        if end >= 0 and self._url[end] == "@":
            return end
        return -1

    def _host_begin(self) -> int:
        end = self._user_end()
        return len(SCHEME_PREFIX) if end < 0 else end + 1

    def get_user_name(self) -> str | None:
        """Return the user part, or None when the URL has none."""
        end = self._user_end()
        if end < 0:
            return None
        return self._url[len(SCHEME_PREFIX) : end]

    def get_host(self) -> str:
        """Return the host part (empty if the URL has no host)."""
        begin = self._host_begin()
        end = Scanner(self._url, begin).index_of(HOST_TERMINATORS)
        if end < 0:
            return self._url[begin:]
        return self._url[begin:end]

    def get_port(self) -> int:
        """
        Return the port, or -1 when the URL has none.

        Only the host-port section is searched: a ':' inside the user part
        (``user:password@``) or inside parameters (``maddr=fe80::1``) is
        ignored.

        Raises:
            InvalidPortError: If the text after ':' is not an integer
        """
        scanner = Scanner(self._url, self._host_begin())
        colon = scanner.index_of(":" + PORT_TERMINATORS)
        if colon < 0 or self._url[colon] != ":":
            return -1

        end = scanner.set_pos(colon + 1).index_of(PORT_TERMINATORS)
        value = self._url[colon + 1 :] if end < 0 else self._url[colon + 1 : end]
        if not _INT_RE.fullmatch(value):
            raise InvalidPortError(value, self._url)
        return int(value)

    def has_user_name(self) -> bool:
        return self.get_user_name() is not None

    def has_port(self) -> bool:
        return self.get_port() >= 0

    @property
    def user(self) -> str | None:
        """User part, or None."""
        return self.get_user_name()

    @property
    def host(self) -> str:
        """Host part."""
        return self.get_host()

    @property
    def port(self) -> int:
        """Port number, or -1."""
        return self.get_port()

    # ------------------------------------------------------------------
    # Generic parameters
    # ------------------------------------------------------------------

    def _segments(self) -> typing.Iterator[tuple[str, str | None, int, int]]:
        """
        Walk the parameter segments left to right.

        Yields (name, value, begin, end) where ``begin`` is the position of the
        segment's leading ';' and ``end`` is the position of the next unquoted
        ';' (or the end of the URL).
        """
        scanner = Scanner(self._url).go_to(";")
        while scanner.has_more():
            begin = scanner.pos
            name = scanner.skip_char().get_word(PARAM_SEPARATORS)
            value = None
            if scanner.peek() == "=":
                start = scanner.skip_char().pos
                value = self._url[start : scanner.go_to_skipping_quoted(";").pos]
            else:
                scanner.go_to_skipping_quoted(";")
            yield name, value, begin, scanner.pos

    def has_parameters(self) -> bool:
        """Check whether the URL carries any parameter."""
        return ";" in self._url

    def get_parameters(self) -> list[str]:
        """Return parameter names in order (empty list if none)."""
        return [name for name, _, _, _ in self._segments()]

    def get_parameter_items(self) -> list[ParameterItem]:
        """Return (name, value) pairs in order; value is None for flags."""
        return [(name, value) for name, value, _, _ in self._segments()]

    def has_parameter(self, name: str) -> bool:
        return any(found == name for found, _, _, _ in self._segments())

    def get_parameter(self, name: str) -> str | None:
        """
        Return the value of the first parameter called ``name``.

        Returns:
            The value verbatim (quotes kept), or None if the parameter is
            missing or has no value
        """
        for found, value, _, _ in self._segments():
            if found == name:
                return value
        return None

    def add_parameter(self, name: str, value: str | None = None) -> SipURL:
        """Append ``;name`` or ``;name=value`` to the URL."""
        if value is None:
            self._url = f"{self._url};{name}"
        else:
            self._url = f"{self._url};{name}={value}"
        return self

    def remove_parameters(self) -> SipURL:
        """Drop every parameter."""
        index = self._url.find(";")
        if index >= 0:
            self._url = self._url[:index]
        return self

    def remove_parameter(self, name: str) -> SipURL:
        """
        Remove the first parameter called ``name``.

        Quoted values are skipped as a whole, so a ';' inside quotes does not
        end the segment. The URL is unchanged if nothing matches.
        """
        for found, _, begin, end in self._segments():
            if found == name:
                self._url = self._url[:begin] + self._url[end:]
                logger.debug(f"Removed parameter {name!r}: {self._url}")
                return self
        logger.debug(f"Parameter {name!r} not present in {self._url}")
        return self

    # ------------------------------------------------------------------
    # Well-known parameters
    # ------------------------------------------------------------------

    def get_transport(self) -> str | None:
        return self.get_parameter(TRANSPORT_PARAM)

    def has_transport(self) -> bool:
        return self.has_parameter(TRANSPORT_PARAM)

    def add_transport(self, proto: str) -> SipURL:
        """Append a transport parameter (lowercased)."""
        return self.add_parameter(TRANSPORT_PARAM, proto.lower())

    def get_maddr(self) -> str | None:
        return self.get_parameter(MADDR_PARAM)

    def has_maddr(self) -> bool:
        return self.has_parameter(MADDR_PARAM)

    def add_maddr(self, maddr: str) -> SipURL:
        return self.add_parameter(MADDR_PARAM, maddr)

    def get_ttl(self) -> int:
        """
        Return the ttl parameter as an integer.

        Falls back to DEFAULT_TTL when the parameter is missing or is not
        a plain decimal integer (no spaces or underscores).
        """
        value = self.get_parameter(TTL_PARAM)
        if value is None:
            return DEFAULT_TTL
        if not _INT_RE.fullmatch(value):
            logger.debug(f"Unreadable ttl {value!r} in {self._url}, using {DEFAULT_TTL}")
            return DEFAULT_TTL
        return int(value)

    def has_ttl(self) -> bool:
        return self.has_parameter(TTL_PARAM)

    def add_ttl(self, ttl: int) -> SipURL:
        return self.add_parameter(TTL_PARAM, str(ttl))

    def has_lr(self) -> bool:
        """Check for the loose-routing flag."""
        return self.has_parameter(LR_PARAM)

    def add_lr(self) -> SipURL:
        return self.add_parameter(LR_PARAM)

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def to_transport_address(self) -> TransportAddress:
        """
        Derive the transport address to reach this URL.

        Raises:
            InvalidPortError: If the URL has a malformed port
        """
        return TransportAddress.from_url(self)


__all__ = ["SipURL"]
