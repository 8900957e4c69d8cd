"""Tests for address module."""

import ipaddress

import pytest

from simnet.core.address import (
    ResolvedAddress,
    parse_ipv4,
    parse_ipv6,
    parse_port,
    parse_socket_address,
)


class TestParsePort:
    """Tests for port parsing."""

    @pytest.mark.parametrize("text,expected", [("0", 0), ("80", 80), ("65535", 65535), ("+8080", 8080)])
    def test_valid_ports(self, text, expected):
        """Test ports in the u16 range."""
        assert parse_port(text) == expected

    @pytest.mark.parametrize("text", ["", "65536", "-1", "http", "8_0", " 80", "８０"])
    def test_invalid_ports(self, text):
        """Test values that are not u16 port numbers."""
        assert parse_port(text) is None


class TestParseLiterals:
    """Tests for IP literal parsing."""

    def test_ipv4(self):
        """Test IPv4 literal parsing."""
        assert parse_ipv4("10.0.0.1") == ipaddress.IPv4Address("10.0.0.1")
        assert parse_ipv4("madsim.io") is None
        assert parse_ipv4("::1") is None

    def test_ipv6(self):
        """Test IPv6 literal parsing."""
        assert parse_ipv6("::1") == ipaddress.IPv6Address("::1")
        assert parse_ipv6("10.0.0.1") is None

    def test_ipv6_zone_is_not_literal(self):
        """Test that zone-qualified IPv6 text is rejected."""
        assert parse_ipv6("fe80::1%eth0") is None


class TestParseSocketAddress:
    """Tests for whole-string socket address parsing."""

    def test_ipv4(self):
        """Test IPv4 socket address."""
        addr = parse_socket_address("127.0.0.1:1")
        assert addr == ResolvedAddress(ipaddress.IPv4Address("127.0.0.1"), 1)

    def test_bracketed_ipv6(self):
        """Test bracketed IPv6 socket address."""
        addr = parse_socket_address("[::1]:443")
        assert addr == ResolvedAddress(ipaddress.IPv6Address("::1"), 443)

    def test_ipv6_numeric_scope(self):
        """Test bracketed IPv6 with a numeric scope id."""
        addr = parse_socket_address("[fe80::1%3]:80")
        assert addr is not None
        assert addr.to_tuple() == ("fe80::1", 80, 0, 3)

    def test_ipv6_scope_bounds(self):
        """Test that the scope id must fit in 32 bits."""
        addr = parse_socket_address("[fe80::1%4294967295]:80")
        assert addr is not None
        assert addr.to_tuple() == ("fe80::1", 80, 0, 4294967295)
        assert parse_socket_address("[fe80::1%4294967296]:80") is None
        assert parse_socket_address("[::1%99999999999]:80") is None

    @pytest.mark.parametrize(
        "text",
        ["localhost:80", "::1:80", "[::1]", "1.2.3.4", "1.2.3.4:99999", "[madsim]:1", "300.1.1.1:80"],
    )
    def test_not_socket_addresses(self, text):
        """Test strings that need host/port splitting or are invalid."""
        assert parse_socket_address(text) is None


class TestResolvedAddress:
    """Tests for ResolvedAddress class."""

    def test_string_ip_is_normalized(self):
        """Test that a string IP becomes an ipaddress object."""
        addr = ResolvedAddress("8.8.8.8", 53)
        assert addr.ip == ipaddress.IPv4Address("8.8.8.8")
        assert addr.is_ipv4
        assert not addr.is_ipv6

    def test_str(self):
        """Test string formatting for both families."""
        assert str(ResolvedAddress("8.8.8.8", 53)) == "8.8.8.8:53"
        assert str(ResolvedAddress("::1", 53)) == "[::1]:53"

    def test_to_tuple(self):
        """Test socket-module tuples."""
        assert ResolvedAddress("8.8.8.8", 53).to_tuple() == ("8.8.8.8", 53)
        assert ResolvedAddress("::1", 53).to_tuple() == ("::1", 53, 0, 0)

    def test_port_validation(self):
        """Test invalid ports are rejected."""
        with pytest.raises(ValueError):
            ResolvedAddress("8.8.8.8", 70000)
        with pytest.raises(TypeError):
            ResolvedAddress("8.8.8.8", True)

    def test_immutable_and_hashable(self):
        """Test immutability and hashing."""
        addr = ResolvedAddress("8.8.8.8", 53)
        with pytest.raises(AttributeError):
            addr.port = 54
        assert len({addr, ResolvedAddress("8.8.8.8", 53)}) == 1

    def test_ordering(self):
        """Test IPv4 sorts before IPv6, then by ip and port."""
        addrs = [
            ResolvedAddress("::1", 1),
            ResolvedAddress("10.0.0.2", 1),
            ResolvedAddress("10.0.0.1", 2),
            ResolvedAddress("10.0.0.1", 1),
        ]
        assert [str(a) for a in sorted(addrs)] == ["10.0.0.1:1", "10.0.0.1:2", "10.0.0.2:1", "[::1]:1"]

    def test_parse(self):
        """Test parse classmethod."""
        assert ResolvedAddress.parse("1.2.3.4:5") == ResolvedAddress("1.2.3.4", 5)
        with pytest.raises(ValueError):
            ResolvedAddress.parse("madsim.io:1")
