"""
Simnet - Deterministic address resolution for network simulation.

This package provides tools for:
- Resolving host strings, (host, port) pairs, IP literals and address
  lists to socket addresses
- Presenting resolution through always-ready futures that can be awaited
  like a real asynchronous resolver
- Controlling hostname lookups with a simulated DNS table
"""

__version__ = "0.1.0"

from simnet.core.address import ResolvedAddress
from simnet.core.dns import DnsTable, use_dns
from simnet.core.resolver import ResolutionError, lookup_host, resolve

__all__ = [
    "__version__",
    "ResolvedAddress",
    "DnsTable",
    "use_dns",
    "ResolutionError",
    "lookup_host",
    "resolve",
]
