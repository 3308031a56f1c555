import ipaddress
import struct

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tunkit.ifconstants import AddressFamily
from tunkit.sockaddr import IPAddressPrefix, RawSockaddrInet, RouteData


def test_raw_sockaddr_inet_size_is_28():
    sa = RawSockaddrInet()
    sa.set_addr("10.1.2.3")
    assert len(sa.to_bytes()) == 28


def test_raw_sockaddr_inet_empty_size_is_28():
    assert RawSockaddrInet().to_bytes() == bytes(28)


def test_raw_sockaddr_inet_data_offset_is_2():
    sa = RawSockaddrInet()
    sa.set_addr_port("10.1.2.3", 0x1234)
    raw = sa.to_bytes()
    assert raw[0:2] == struct.pack("<H", 2)
    assert raw[2:4] == b"\x12\x34"
    assert raw[4:8] == bytes([10, 1, 2, 3])


def test_ip_address_prefix_size_and_length_offset():
    prefix = IPAddressPrefix()
    prefix.set_prefix("192.168.0.0/16")
    raw = prefix.to_bytes()
    assert len(raw) == 32
    assert raw[28] == 16


def test_ipv4_set_addr_port():
    sa = RawSockaddrInet()
    sa.set_addr_port(ipaddress.IPv4Address("1.2.3.4"), 53)
    assert sa.family == AddressFamily.INET
    assert sa.addr() == ipaddress.IPv4Address("1.2.3.4")
    assert sa.port() == 53
    assert sa.addr_port() == (ipaddress.IPv4Address("1.2.3.4"), 53)


def test_ipv6_layout():
    sa = RawSockaddrInet()
    sa.set_addr_port("2001:db8::1", 443)
    raw = sa.to_bytes()
    assert raw[0:2] == struct.pack("<H", 23)
    assert raw[2:4] == (443).to_bytes(2, "big")
    assert raw[4:8] == bytes(4)
    assert raw[8:24] == ipaddress.IPv6Address("2001:db8::1").packed
    assert raw[24:28] == bytes(4)


def test_ipv6_numeric_zone_becomes_scope_id():
    sa = RawSockaddrInet()
    sa.set_addr("fe80::1%7")
    assert sa.scope_id == 7
    assert str(sa.addr()) == "fe80::1%7"
    assert sa.to_bytes()[24:28] == struct.pack("<I", 7)


def test_ipv6_named_zone_gives_zero_scope_id():
    sa = RawSockaddrInet()
    sa.set_addr("fe80::1%eth0")
    assert sa.scope_id == 0
    assert str(sa.addr()) == "fe80::1"


def test_ipv4_mapped_is_ipv6_family():
    sa = RawSockaddrInet()
    sa.set_addr("::ffff:1.2.3.4")
    assert sa.family == AddressFamily.INET6
    assert sa.addr() == ipaddress.IPv6Address("::ffff:1.2.3.4")


def test_set_addr_none_is_invalid():
    with pytest.raises(ValueError):
        RawSockaddrInet().set_addr(None)


def test_set_addr_garbage_is_invalid():
    with pytest.raises(ValueError):
        RawSockaddrInet().set_addr("not-an-address")


def test_unknown_family_has_no_address_and_zero_port():
    sa = RawSockaddrInet(family=AddressFamily.UNSPEC, network_port=80)
    assert sa.addr() is None
    assert sa.port() == 0


def test_from_bytes_too_short():
    with pytest.raises(ValueError):
        RawSockaddrInet.from_bytes(bytes(27))


def test_from_bytes_ipv6_round_trip():
    sa = RawSockaddrInet()
    sa.set_addr_port("fe80::abcd%12", 8080)
    parsed = RawSockaddrInet.from_bytes(sa.to_bytes())
    assert parsed == sa
    assert str(parsed.addr()) == "fe80::abcd%12"
    assert parsed.port() == 8080


@given(st.integers(min_value=0, max_value=2**32 - 1), st.integers(min_value=0, max_value=0xFFFF))
def test_ipv4_round_trip(value, port):
    address = ipaddress.IPv4Address(value)
    sa = RawSockaddrInet()
    sa.set_addr_port(address, port)
    parsed = RawSockaddrInet.from_bytes(sa.to_bytes())
    assert parsed.addr_port() == (address, port)


@given(st.integers(min_value=0, max_value=2**128 - 1), st.integers(min_value=0, max_value=0xFFFF))
def test_ipv6_round_trip(value, port):
    address = ipaddress.IPv6Address(value)
    sa = RawSockaddrInet()
    sa.set_addr_port(address, port)
    parsed = RawSockaddrInet.from_bytes(sa.to_bytes())
    assert parsed.addr_port() == (address, port)


def test_prefix_keeps_host_bits():
    prefix = IPAddressPrefix()
    prefix.set_prefix("10.1.2.3/8")
    assert prefix.prefix_length == 8
    assert prefix.prefix() == ipaddress.IPv4Interface("10.1.2.3/8")


def test_prefix_from_network_object():
    prefix = IPAddressPrefix()
    prefix.set_prefix(ipaddress.ip_network("2001:db8::/32"))
    assert prefix.raw_prefix.family == AddressFamily.INET6
    assert prefix.prefix() == ipaddress.IPv6Interface("2001:db8::/32")


def test_prefix_drops_zone():
    prefix = IPAddressPrefix()
    prefix.set_prefix(ipaddress.IPv6Interface("fe80::1/64"))
    prefix.raw_prefix.scope_id = 5
    assert str(prefix.prefix()) == "fe80::1/64"


def test_prefix_unknown_family_is_none():
    assert IPAddressPrefix().prefix() is None


def test_prefix_bad_length_is_none():
    prefix = IPAddressPrefix()
    prefix.set_prefix("1.2.3.4/32")
    prefix.prefix_length = 40
    assert prefix.prefix() is None


def test_prefix_round_trip():
    prefix = IPAddressPrefix()
    prefix.set_prefix("172.16.5.0/24")
    parsed = IPAddressPrefix.from_bytes(prefix.to_bytes())
    assert parsed == prefix
    assert parsed.prefix() == ipaddress.IPv4Interface("172.16.5.0/24")


def test_prefix_from_bytes_too_short():
    with pytest.raises(ValueError):
        IPAddressPrefix.from_bytes(bytes(31))


def test_route_data_str():
    route = RouteData("10.0.0.0/8", "10.0.0.1", 5)
    assert str(route) == "{Destination:10.0.0.0/8 NextHop:10.0.0.1 Metric:5}"


def test_route_data_parses_strings():
    route = RouteData("::/0", "fe80::1")
    assert route.destination == ipaddress.IPv6Interface("::/0")
    assert route.next_hop == ipaddress.IPv6Address("fe80::1")
    assert route.metric == 0