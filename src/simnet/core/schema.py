"""Pydantic schemas for DNS table files."""

from __future__ import annotations

import ipaddress

from pydantic import BaseModel, Field, field_validator


def validate_hostname(hostname: str) -> bool:
    """Validate hostname format (loose check)."""
    if not hostname or hostname != hostname.strip():
        return False
    return not any(c.isspace() for c in hostname)


class DnsTableSchema(BaseModel):
    """
    Schema for a simulated DNS table file.

    Records map hostnames to IP addresses:

        seed_localhost: true
        records:
          madsim.io: 8.8.8.8
          db.internal: "fd00::10"
    """

    records: dict[str, str] = Field(default_factory=dict)
    seed_localhost: bool = True
    notes: str | None = None

    @field_validator("records", mode="before")
    @classmethod
    def normalize_records(cls, v: object) -> object:
        """Treat an empty ``records:`` key as no records."""
        if v is None:
            return {}
        return v

    @field_validator("records")
    @classmethod
    def validate_records(cls, v: dict[str, str]) -> dict[str, str]:
        """Validate record hostnames and IP addresses."""
        for hostname, ip in v.items():
            if not validate_hostname(hostname):
                raise ValueError(f"Invalid hostname: {hostname!r}")
            try:
                ipaddress.ip_address(ip)
            except ValueError:
                raise ValueError(f"Invalid IP address for {hostname}: {ip!r}") from None
        return v
