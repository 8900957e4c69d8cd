"""The closed set of address shapes accepted by the resolver."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from typing import Any, Union

from simnet.core.address import IPAddress, ResolvedAddress, validate_port


@dataclass(frozen=True)
class SocketAddrSpec:
    """An exact socket address (IPv4 or IPv6)."""

    address: ResolvedAddress


@dataclass(frozen=True)
class IpPortSpec:
    """An (IP, port) pair."""

    ip: IPAddress
    port: int

    def __post_init__(self) -> None:
        if not isinstance(self.ip, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
            raise TypeError(f"Expected an IP address, got {type(self.ip).__name__}")
        validate_port(self.port)


@dataclass(frozen=True)
class AddrListSpec:
    """An ordered, non-empty collection of exact socket addresses."""

    addresses: tuple[ResolvedAddress, ...]

    def __post_init__(self) -> None:
        # Copy so later mutation of the caller's list is not observed
        addresses = tuple(self.addresses)
        if not addresses:
            raise ValueError("Address collection must not be empty")
        for addr in addresses:
            if not isinstance(addr, ResolvedAddress):
                raise TypeError(f"Expected ResolvedAddress, got {type(addr).__name__}")
        object.__setattr__(self, "addresses", addresses)


@dataclass(frozen=True)
class HostPortStringSpec:
    """A ``host:port`` string, e.g. ``example.com:80`` or ``[::1]:80``."""

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError(f"Expected a host string, got {type(self.text).__name__}")


@dataclass(frozen=True)
class HostPortSpec:
    """A (host, port) pair where host is an IP literal or a hostname."""

    host: str
    port: int

    def __post_init__(self) -> None:
        if not isinstance(self.host, str):
            raise TypeError(f"Expected a host string, got {type(self.host).__name__}")
        validate_port(self.port)


AddressSpec = Union[SocketAddrSpec, IpPortSpec, AddrListSpec, HostPortStringSpec, HostPortSpec]

SPEC_TYPES = (SocketAddrSpec, IpPortSpec, AddrListSpec, HostPortStringSpec, HostPortSpec)


def to_address_spec(value: Any) -> AddressSpec:
    """
    Classify a plain value as one of the supported address shapes.

    Accepted values:
        - an AddressSpec variant (returned unchanged)
        - a ResolvedAddress
        - a "host:port" string
        - an (ipaddress, port) tuple
        - a (host string, port) tuple
        - a list or tuple of ResolvedAddress

    Raises:
        TypeError: if the value matches none of the shapes
    """
    if isinstance(value, SPEC_TYPES):
        return value
    if isinstance(value, ResolvedAddress):
        return SocketAddrSpec(value)
    if isinstance(value, str):
        return HostPortStringSpec(value)
    if isinstance(value, tuple) and len(value) == 2 and not isinstance(value[0], ResolvedAddress):
        host, port = value
        if isinstance(host, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
            return IpPortSpec(host, port)
        if isinstance(host, str):
            return HostPortSpec(host, port)
    if isinstance(value, (list, tuple)) and all(isinstance(v, ResolvedAddress) for v in value):
        return AddrListSpec(tuple(value))
    raise TypeError(f"Unsupported address shape: {value!r}")
