import ipaddress

from hypothesis import given
from hypothesis import strategies as st

from tunkit.checksum import checksum
from tunkit.ipv4 import IPProtocol
from tunkit.ipv6 import IPV6_MINIMUM_SIZE, IPv6Packet, ip_version

SRC = ipaddress.IPv6Address("2001:db8::1")
DST = ipaddress.IPv6Address("2001:db8::2")
PAYLOAD = b"\x12\x34\x56\x78\x00\x14\x00\x00hello world!"


def make_packet(payload: bytes = PAYLOAD) -> IPv6Packet:
    header = bytearray(IPV6_MINIMUM_SIZE)
    header[0] = 0x60
    header[4:6] = len(payload).to_bytes(2, "big")
    header[6] = IPProtocol.UDP
    header[7] = 64
    header[8:24] = SRC.packed
    header[24:40] = DST.packed
    return IPv6Packet(header + payload)


def test_header_fields():
    pkt = make_packet()
    assert pkt.payload_length == len(PAYLOAD)
    assert pkt.next_header == IPProtocol.UDP
    assert pkt.protocol == IPProtocol.UDP
    assert pkt.hop_limit == 64
    assert pkt.source_ip == SRC
    assert pkt.destination_ip == DST
    assert bytes(pkt.payload) == PAYLOAD


def test_payload_limited_by_payload_length():
    pkt = make_packet()
    pkt.payload_length = 4
    assert bytes(pkt.payload) == PAYLOAD[:4]


def test_payload_shares_buffer():
    pkt = make_packet()
    pkt.payload[0] = 0xEE
    assert pkt.data[IPV6_MINIMUM_SIZE] == 0xEE


@given(st.integers(min_value=0, max_value=255), st.integers(min_value=0, max_value=0xFFFFF))
def test_tos_round_trip(traffic_class, flow_label):
    pkt = make_packet()
    pkt.set_tos(traffic_class, flow_label)
    assert pkt.tos() == (traffic_class, flow_label)
    assert ip_version(pkt.data) == 6


def test_set_tos_masks_flow_label():
    pkt = make_packet()
    pkt.set_tos(0, 0x1FFFFF)
    assert pkt.tos() == (0, 0xFFFFF)


def test_source_ip_round_trip_and_ipv4_ignored():
    pkt = make_packet()
    pkt.source_ip = "2001:db8::abcd"
    assert pkt.source_ip == ipaddress.IPv6Address("2001:db8::abcd")
    pkt.source_ip = ipaddress.IPv4Address("10.0.0.1")
    assert pkt.source_ip == ipaddress.IPv6Address("2001:db8::abcd")


def test_destination_ip_round_trip_and_ipv4_ignored():
    pkt = make_packet()
    pkt.destination_ip = ipaddress.IPv4Address("10.0.0.1")
    assert pkt.destination_ip == DST
    pkt.destination_ip = SRC
    assert pkt.destination_ip == SRC


def test_dec_time_to_live_wraps():
    pkt = make_packet()
    pkt.hop_limit = 0
    pkt.dec_time_to_live()
    assert pkt.hop_limit == 255


@given(st.integers(min_value=1, max_value=255))
def test_dec_time_to_live(limit):
    pkt = make_packet()
    pkt.hop_limit = limit
    pkt.dec_time_to_live()
    assert pkt.hop_limit == limit - 1


def test_checksum_is_absent():
    pkt = make_packet()
    before = bytes(pkt)
    pkt.checksum = 0x1234
    pkt.reset_checksum()
    assert pkt.checksum == 0
    assert bytes(pkt) == before


def test_pseudo_sum_ignores_hop_limit():
    pkt = make_packet()
    before = pkt.pseudo_sum()
    pkt.hop_limit = 1
    assert pkt.pseudo_sum() == before


def test_pseudo_sum_tracks_protocol():
    pkt = make_packet()
    before = pkt.pseudo_sum()
    pkt.protocol = IPProtocol.TCP
    assert pkt.pseudo_sum() - before == IPProtocol.TCP - IPProtocol.UDP


def test_pseudo_sum_yields_verifiable_udp_checksum():
    pkt = make_packet()
    udp = pkt.payload
    udp[6:8] = checksum(pkt.pseudo_sum(), udp)
    assert checksum(pkt.pseudo_sum(), udp) == b"\x00\x00"


def test_is_valid():
    assert make_packet().is_valid()
    assert not IPv6Packet(bytes(make_packet())[:50]).is_valid()
    assert not IPv6Packet(b"\x60" * 10).is_valid()


def test_ip_version():
    assert ip_version(b"") == -1
    assert ip_version(bytes.fromhex("4500")) == 4
    assert ip_version(bytes(make_packet())) == 6