"""Core resolution machinery."""

from simnet.core.address import ResolvedAddress
from simnet.core.dns import DnsTable, DnsTableError, NoDnsTableError, current_dns, use_dns
from simnet.core.future import ConsumedError, OneOrMore, Ready
from simnet.core.resolver import (
    ErrorKind,
    MalformedPortError,
    ResolutionError,
    UnresolvableHostError,
    lookup_host,
    resolve,
)
from simnet.core.shapes import (
    AddressSpec,
    AddrListSpec,
    HostPortSpec,
    HostPortStringSpec,
    IpPortSpec,
    SocketAddrSpec,
    to_address_spec,
)

__all__ = [
    "ResolvedAddress",
    "DnsTable",
    "DnsTableError",
    "NoDnsTableError",
    "current_dns",
    "use_dns",
    "ConsumedError",
    "OneOrMore",
    "Ready",
    "ErrorKind",
    "MalformedPortError",
    "ResolutionError",
    "UnresolvableHostError",
    "lookup_host",
    "resolve",
    "AddressSpec",
    "AddrListSpec",
    "HostPortSpec",
    "HostPortStringSpec",
    "IpPortSpec",
    "SocketAddrSpec",
    "to_address_spec",
]
