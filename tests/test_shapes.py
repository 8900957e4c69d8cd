"""Tests for shapes module."""

import ipaddress

import pytest

from simnet.core.address import ResolvedAddress
from simnet.core.shapes import (
    AddrListSpec,
    HostPortSpec,
    HostPortStringSpec,
    IpPortSpec,
    SocketAddrSpec,
    to_address_spec,
)


class TestToAddressSpec:
    """Tests for shape classification."""

    def test_variant_passthrough(self):
        """Test that variants are returned unchanged."""
        spec = HostPortSpec("madsim.io", 1)
        assert to_address_spec(spec) is spec

    def test_resolved_address(self):
        """Test exact socket addresses."""
        addr = ResolvedAddress("10.0.0.1", 1)
        assert to_address_spec(addr) == SocketAddrSpec(addr)

    def test_string(self):
        """Test host:port strings."""
        assert to_address_spec("madsim.io:1") == HostPortStringSpec("madsim.io:1")

    @pytest.mark.parametrize("ip", [ipaddress.IPv4Address("10.0.0.1"), ipaddress.IPv6Address("::1")])
    def test_ip_port_pair(self, ip):
        """Test (ip, port) pairs for both families."""
        assert to_address_spec((ip, 80)) == IpPortSpec(ip, 80)

    def test_host_port_pair(self):
        """Test (host, port) pairs."""
        assert to_address_spec(("localhost", 80)) == HostPortSpec("localhost", 80)

    def test_address_list(self):
        """Test collections of addresses."""
        addrs = [ResolvedAddress("10.0.0.1", 1), ResolvedAddress("10.0.0.2", 2)]
        spec = to_address_spec(addrs)
        assert isinstance(spec, AddrListSpec)
        assert spec.addresses == tuple(addrs)

    def test_address_pair_tuple_is_list(self):
        """Test that a 2-tuple of addresses is a collection, not a pair."""
        addrs = (ResolvedAddress("10.0.0.1", 1), ResolvedAddress("10.0.0.2", 2))
        assert isinstance(to_address_spec(addrs), AddrListSpec)

    def test_address_list_is_copied(self):
        """Test that later mutation of the input list is not observed."""
        addrs = [ResolvedAddress("10.0.0.1", 1)]
        spec = to_address_spec(addrs)
        addrs.append(ResolvedAddress("10.0.0.2", 2))
        assert len(spec.addresses) == 1

    def test_empty_list_rejected(self):
        """Test that an empty collection cannot produce an empty success."""
        with pytest.raises(ValueError):
            to_address_spec([])

    @pytest.mark.parametrize("value", [42, None, b"madsim.io:1", ("madsim.io",), ({"host": 1}, 80), [1, 2]])
    def test_unsupported_shapes(self, value):
        """Test that the shape set is closed."""
        with pytest.raises(TypeError):
            to_address_spec(value)

    @pytest.mark.parametrize("port", [-1, 65536])
    def test_port_out_of_range(self, port):
        """Test port range validation on pairs."""
        with pytest.raises(ValueError):
            to_address_spec(("localhost", port))

    @pytest.mark.parametrize("host", [123, None, b"localhost"])
    def test_non_string_host_rejected(self, host):
        """Test that host pairs require a string host."""
        with pytest.raises(TypeError):
            HostPortSpec(host, 80)

    def test_non_string_text_rejected(self):
        """Test that host strings must be str."""
        with pytest.raises(TypeError):
            HostPortStringSpec(123)

    def test_bool_port_rejected(self):
        """Test that bool is not accepted as a port."""
        with pytest.raises(TypeError):
            to_address_spec(("localhost", True))
