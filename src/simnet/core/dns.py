"""Simulated DNS table consulted by the resolver."""

from __future__ import annotations

import contextvars
import ipaddress
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator

import yaml
from pydantic import ValidationError

from simnet.core.address import IPAddress
from simnet.core.schema import DnsTableSchema, validate_hostname

logger = logging.getLogger(__name__)

LOCALHOST = "localhost"
LOCALHOST_IP = ipaddress.IPv4Address("127.0.0.1")

_current: contextvars.ContextVar[DnsTable | None] = contextvars.ContextVar(
    "simnet_dns_table", default=None
)


class DnsTableError(ValueError):
    """Raised when a DNS record or table file is invalid."""

    pass


class NoDnsTableError(RuntimeError):
    """Raised when a DNS lookup is needed but no table is in scope."""

    pass


class DnsTable:
    """
    In-memory hostname -> IP mapping.

    Lookups are exact string matches. A new table holds a
    ``localhost -> 127.0.0.1`` record unless ``seed_localhost`` is False;
    the seed is an ordinary record and can be replaced or removed.
    """

    def __init__(self, records: dict[str, IPAddress] | None = None, seed_localhost: bool = True) -> None:
        self._records: dict[str, IPAddress] = {}
        self.lookup_count = 0
        if seed_localhost:
            self._records[LOCALHOST] = LOCALHOST_IP
        for hostname, ip in (records or {}).items():
            self.add_dns_record(hostname, ip)

    @classmethod
    def load(cls, path: str | Path) -> DnsTable:
        """Load a DNS table from a YAML file."""
        path = Path(path)
        try:
            with path.open() as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise DnsTableError(f"Invalid YAML in {path}: {e}") from e
        return cls.from_dict(data if data is not None else {})

    @classmethod
    def from_dict(cls, data: Any) -> DnsTable:
        """Create a DNS table from a dictionary. Other values raise DnsTableError."""
        try:
            schema = DnsTableSchema.model_validate(data)
        except ValidationError as e:
            raise DnsTableError(str(e)) from e
        return cls(
            {host: ipaddress.ip_address(ip) for host, ip in schema.records.items()},
            seed_localhost=schema.seed_localhost,
        )

    def add_dns_record(self, hostname: str, ip: IPAddress | str) -> None:
        """Insert or replace the record for *hostname*."""
        if not isinstance(hostname, str) or not validate_hostname(hostname):
            raise DnsTableError(f"Invalid hostname: {hostname!r}")
        if isinstance(ip, str):
            try:
                ip = ipaddress.ip_address(ip)
            except ValueError:
                raise DnsTableError(f"Invalid IP address for {hostname}: {ip!r}") from None
        elif not isinstance(ip, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
            raise DnsTableError(f"Invalid IP address for {hostname}: {ip!r}")
        logger.debug("DNS record %s -> %s", hostname, ip)
        self._records[hostname] = ip

    def remove_dns_record(self, hostname: str) -> bool:
        """Remove the record for *hostname*. Returns False if absent."""
        if self._records.pop(hostname, None) is None:
            return False
        logger.debug("DNS record %s removed", hostname)
        return True

    def lookup_host_ip(self, hostname: str) -> IPAddress | None:
        """Return the IP registered for *hostname*, if any."""
        self.lookup_count += 1
        return self._records.get(hostname)

    def records(self) -> list[tuple[str, IPAddress]]:
        """All records sorted by hostname."""
        return sorted(self._records.items())

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._records))

    def __contains__(self, hostname: object) -> bool:
        return hostname in self._records

    def __repr__(self) -> str:
        return f"DnsTable({len(self)} records)"


def current_dns() -> DnsTable:
    """Return the DNS table installed for the current context."""
    table = _current.get()
    if table is None:
        raise NoDnsTableError("No DNS table in scope; pass dns= or use use_dns()")
    return table


@contextmanager
def use_dns(table: DnsTable) -> Iterator[DnsTable]:
    """Install *table* as the current DNS table for the enclosed block."""
    token = _current.set(table)
    try:
        yield table
    finally:
        _current.reset(token)
