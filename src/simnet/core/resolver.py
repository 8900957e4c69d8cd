"""Address resolution over the closed set of address shapes."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from simnet.core.address import (
    ResolvedAddress,
    parse_ipv4,
    parse_ipv6,
    parse_port,
    parse_socket_address,
)
from simnet.core.dns import DnsTable, current_dns
from simnet.core.future import OneOrMore, Ready
from simnet.core.shapes import (
    AddrListSpec,
    HostPortSpec,
    HostPortStringSpec,
    IpPortSpec,
    SocketAddrSpec,
    to_address_spec,
)

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    """Classification of recoverable resolution failures."""

    INVALID_INPUT = "invalid_input"


class ResolutionError(Exception):
    """Raised when an address cannot be resolved."""

    def __init__(self, message: str, kind: ErrorKind) -> None:
        super().__init__(message)
        self.kind = kind


class UnresolvableHostError(ResolutionError):
    """The host is neither an IP literal nor a registered DNS name."""

    def __init__(self, host: str, port: int) -> None:
        super().__init__("invalid IP address or host", ErrorKind.INVALID_INPUT)
        self.host = host
        self.port = port

    def __str__(self) -> str:
        return f"invalid IP address or host: {self.host}:{self.port}"


class MalformedPortError(ValueError):
    """
    A ``host:port`` string has no port or a port that is not a u16.

    This is a programming error in the caller, not a resolution failure,
    so it is raised immediately and never carried by the returned future.
    """

    pass


def resolve(spec: Any, dns: DnsTable | None = None) -> Ready:
    """
    Resolve an address shape to one or more socket addresses.

    Args:
        spec: An AddressSpec variant or any value accepted by
            ``to_address_spec``.
        dns: DNS table to consult for hostnames. Defaults to the table
            installed with ``use_dns``.

    Returns:
        An already-completed future holding a OneOrMore of
        ResolvedAddress, or an UnresolvableHostError.

    Raises:
        MalformedPortError: for a host string with a missing or invalid port
        TypeError: for values that are not a supported shape
    """
    spec = to_address_spec(spec)

    if isinstance(spec, SocketAddrSpec):
        return Ready.ok(OneOrMore.one(spec.address))
    if isinstance(spec, IpPortSpec):
        return Ready.ok(OneOrMore.one(ResolvedAddress(spec.ip, spec.port)))
    if isinstance(spec, AddrListSpec):
        return Ready.ok(OneOrMore.more(spec.addresses))
    if isinstance(spec, HostPortStringSpec):
        return _resolve_host_port_string(spec.text, dns)
    if isinstance(spec, HostPortSpec):
        return _resolve_host_port(spec.host, spec.port, dns)
    raise TypeError(f"Unsupported address shape: {spec!r}")  # pragma: no cover


def lookup_host(host: Any, dns: DnsTable | None = None) -> Ready:
    """
    Perform a (simulated) DNS resolution.

    Examples:
        addrs = await lookup_host("madsim.io:1")
        addrs = await lookup_host(("localhost", 8080), dns=table)
    """
    return resolve(host, dns)


def _resolve_host_port_string(text: str, dns: DnsTable | None) -> Ready:
    # The whole string may already be a socket address, e.g. "[::1]:80"
    addr = parse_socket_address(text)
    if addr is not None:
        logger.debug("Resolved %r as socket address literal", text)
        return Ready.ok(OneOrMore.one(addr))

    host, sep, port_text = text.rpartition(":")
    if not sep:
        raise MalformedPortError(f"invalid address: {text!r}")
    port = parse_port(port_text)
    if port is None:
        raise MalformedPortError(f"invalid port: {text!r}")
    return _resolve_host_port(host, port, dns)


def _resolve_host_port(host: str, port: int, dns: DnsTable | None) -> Ready:
    # Literal parsing always wins over the DNS table
    ip4 = parse_ipv4(host)
    if ip4 is not None:
        logger.debug("Resolved %r as IPv4 literal", host)
        return Ready.ok(OneOrMore.one(ResolvedAddress(ip4, port)))

    ip6 = parse_ipv6(host)
    if ip6 is not None:
        logger.debug("Resolved %r as IPv6 literal", host)
        return Ready.ok(OneOrMore.one(ResolvedAddress(ip6, port)))

    table = dns if dns is not None else current_dns()
    ip = table.lookup_host_ip(host)
    if ip is not None:
        logger.debug("Resolved %r via DNS -> %s", host, ip)
        return Ready.ok(OneOrMore.one(ResolvedAddress(ip, port)))

    logger.debug("No DNS record for %r", host)
    return Ready.err(UnresolvableHostError(host, port))
