"""Resolved socket addresses and literal address parsing."""

from __future__ import annotations

import ipaddress
import re
from dataclasses import dataclass
from functools import total_ordering
from typing import Union

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

MAX_PORT = 65535
MAX_SCOPE_ID = 2**32 - 1

# Port segment of a "host:port" string: optional '+', ASCII digits only.
_PORT_RE = re.compile(r"^\+?[0-9]+$")
_V4_SOCKET_RE = re.compile(r"^([0-9.]+):([0-9]+)$")
_V6_SOCKET_RE = re.compile(r"^\[([0-9A-Fa-f:.]+)(?:%([0-9]+))?\]:([0-9]+)$")


def validate_port(port: int) -> int:
    """Check that *port* is an int in the unsigned 16-bit range."""
    if isinstance(port, bool) or not isinstance(port, int):
        raise TypeError(f"Port must be an int, got {type(port).__name__}")
    if not 0 <= port <= MAX_PORT:
        raise ValueError(f"Port out of range: {port}")
    return port


def parse_port(text: str) -> int | None:
    """Parse an unsigned 16-bit port number, returning None if invalid."""
    if not _PORT_RE.match(text):
        return None
    port = int(text)
    if port > MAX_PORT:
        return None
    return port


def parse_ipv4(text: str) -> ipaddress.IPv4Address | None:
    """Parse a dotted-quad IPv4 literal."""
    try:
        return ipaddress.IPv4Address(text)
    except ValueError:
        return None


def parse_ipv6(text: str) -> ipaddress.IPv6Address | None:
    """Parse an IPv6 literal. Zone-qualified forms (``fe80::1%eth0``) are not literals."""
    if "%" in text:
        return None
    try:
        return ipaddress.IPv6Address(text)
    except ValueError:
        return None


@total_ordering
@dataclass(frozen=True)
class ResolvedAddress:
    """
    A concrete IP address and port.

    Instances are immutable and hashable. IPv4 addresses sort before
    IPv6 addresses; within a family the order is (ip, port).
    """

    ip: IPAddress
    port: int

    def __post_init__(self) -> None:
        if isinstance(self.ip, str):
            # Accept strings for convenience, normalize to ipaddress objects
            object.__setattr__(self, "ip", ipaddress.ip_address(self.ip))
        elif not isinstance(self.ip, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
            raise TypeError(f"Expected an IP address, got {type(self.ip).__name__}")
        validate_port(self.port)

    @classmethod
    def parse(cls, text: str) -> ResolvedAddress:
        """
        Parse a socket address literal.

        Accepts ``a.b.c.d:port`` and ``[v6]:port`` (optionally with a
        numeric scope id, ``[fe80::1%2]:port``).

        Raises:
            ValueError: if *text* is not a socket address literal.
        """
        addr = parse_socket_address(text)
        if addr is None:
            raise ValueError(f"Invalid socket address: {text!r}")
        return addr

    @property
    def version(self) -> int:
        return self.ip.version

    @property
    def is_ipv4(self) -> bool:
        return self.ip.version == 4

    @property
    def is_ipv6(self) -> bool:
        return self.ip.version == 6

    def to_tuple(self) -> tuple:
        """Return the address in the form the ``socket`` module expects."""
        if self.is_ipv4:
            return (str(self.ip), self.port)
        scope = self.ip.scope_id
        scope_id = int(scope) if scope and scope.isdigit() else 0
        return (str(self.ip).split("%", 1)[0], self.port, 0, scope_id)

    def _sort_key(self) -> tuple[int, int, int]:
        return (self.ip.version, int(self.ip), self.port)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ResolvedAddress):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        if self.is_ipv6:
            return f"[{self.ip}]:{self.port}"
        return f"{self.ip}:{self.port}"

    def __repr__(self) -> str:
        return f"ResolvedAddress({self})"


def parse_socket_address(text: str) -> ResolvedAddress | None:
    """Parse *text* as a whole socket address, or return None."""
    match = _V4_SOCKET_RE.match(text)
    if match:
        ip = parse_ipv4(match.group(1))
        port = parse_port(match.group(2))
        if ip is None or port is None:
            return None
        return ResolvedAddress(ip, port)

    match = _V6_SOCKET_RE.match(text)
    if match:
        host, scope, port_text = match.groups()
        ip6 = parse_ipv6(host)
        port = parse_port(port_text)
        if ip6 is None or port is None:
            return None
        if scope is not None:
            if int(scope) > MAX_SCOPE_ID:
                return None
            ip6 = ipaddress.IPv6Address(f"{host}%{scope}")
        return ResolvedAddress(ip6, port)

    return None
