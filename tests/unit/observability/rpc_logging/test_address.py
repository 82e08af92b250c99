"""Unit tests for the peer address codec."""
from __future__ import annotations

import ipaddress

import pytest

from rpc_observability.observability.rpc_logging import Address, AddressType, address_to_structured


# ---------------------------------------------------------------------------
# IP addresses
# ---------------------------------------------------------------------------


class TestIpAddresses:
    def test_ipv4_socket_tuple(self) -> None:
        assert address_to_structured(("127.0.0.1", 12345)) == Address(
            type=AddressType.IPV4, address="127.0.0.1", ip_port=12345
        )

    def test_ipv6_is_rfc5952_canonical(self) -> None:
        result = address_to_structured(("2001:0db8:0:0:0:0:0002:0001", 12345, 0, 0))
        assert result == Address(type=AddressType.IPV6, address="2001:db8::2:1", ip_port=12345)

    def test_ipv6_upper_case_is_lowered(self) -> None:
        result = address_to_structured(("2001:DB8:0:0:1:0:0:1", 80))
        assert result.address == "2001:db8::1:0:0:1"

    def test_ipv6_longest_zero_run_is_compressed(self) -> None:
        result = address_to_structured(("2001:0:0:1:0:0:0:1", 80))
        assert result.address == "2001:0:0:1::1"

    def test_ipv4_mapped_ipv6_reported_as_ipv4(self) -> None:
        result = address_to_structured(("::ffff:10.1.2.3", 443, 0, 0))
        assert result == Address(type=AddressType.IPV4, address="10.1.2.3", ip_port=443)

    def test_ipaddress_object_has_no_port(self) -> None:
        result = address_to_structured(ipaddress.ip_address("10.0.0.1"))
        assert result == Address(type=AddressType.IPV4, address="10.0.0.1")

    def test_encoding_is_idempotent(self) -> None:
        once = address_to_structured(("2001:0db8::0002:0001", 1))
        assert address_to_structured(once) == once
        again = address_to_structured((once.address, once.ip_port))
        assert again == once


# ---------------------------------------------------------------------------
# Peer strings
# ---------------------------------------------------------------------------


class TestPeerStrings:
    def test_ipv4_peer_string(self) -> None:
        assert address_to_structured("ipv4:192.168.0.7:50051") == Address(
            type=AddressType.IPV4, address="192.168.0.7", ip_port=50051
        )

    def test_ipv6_peer_string(self) -> None:
        assert address_to_structured("ipv6:[2001:db8:0:0:0:0:2:1]:443") == Address(
            type=AddressType.IPV6, address="2001:db8::2:1", ip_port=443
        )

    def test_ipv6_peer_string_percent_encoded(self) -> None:
        assert address_to_structured("ipv6:%5B::1%5D:8080") == Address(
            type=AddressType.IPV6, address="::1", ip_port=8080
        )

    def test_unix_peer_string(self) -> None:
        assert address_to_structured("unix:/run/app.sock") == Address(
            type=AddressType.UNIX, address="/run/app.sock"
        )

    @pytest.mark.parametrize("peer", ["ipv4:not-an-ip:80", "ipv6:::1:80", "ipv4:10.0.0.1:http"])
    def test_malformed_peer_string_is_unknown(self, peer: str) -> None:
        assert address_to_structured(peer) == Address(type=AddressType.UNKNOWN, address=peer)


# ---------------------------------------------------------------------------
# Fallbacks
# ---------------------------------------------------------------------------


class TestUnknownAddresses:
    def test_none_gives_default_instance(self) -> None:
        assert address_to_structured(None) == Address()
        assert Address().type is AddressType.UNKNOWN
        assert Address().ip_port is None

    def test_arbitrary_object_uses_str(self) -> None:
        class _SomeSocketAddress:
            def __str__(self) -> str:
                return "some-socket-address"

        assert address_to_structured(_SomeSocketAddress()) == Address(
            type=AddressType.UNKNOWN, address="some-socket-address"
        )

    def test_hostname_tuple_is_unknown(self) -> None:
        result = address_to_structured(("localhost", 80))
        assert result.type is AddressType.UNKNOWN
        assert result.ip_port is None
