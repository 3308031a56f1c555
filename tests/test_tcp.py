import pytest
from hypothesis import given
from hypothesis import strategies as st

from tunkit.checksum import checksum
from tunkit.ipv4 import InvalidChecksumError, IPProtocol, IPv4Packet
from tunkit.tcp import TCPFlag, TCPPacket


def _segment(payload: bytes = b"") -> bytearray:
    header = bytearray(20)
    header[12] = 5 << 4
    header[13] = TCPFlag.SYN | TCPFlag.ACK
    return header + payload


def _ipv4_with(segment: bytes) -> IPv4Packet:
    ip = IPv4Packet(bytearray(20) + segment)
    ip.data[0] = 0x45
    ip.total_length = len(ip.data)
    ip.protocol = IPProtocol.TCP
    ip.time_to_live = 64
    ip.source_ip = "10.0.0.1"
    ip.destination_ip = "10.0.0.2"
    return ip


def test_ports_round_trip():
    packet = TCPPacket(_segment())
    packet.source_port = 12345
    packet.destination_port = 443
    assert packet.source_port == 12345
    assert packet.destination_port == 443
    assert bytes(packet.data[2:4]) == b"\x01\xbb"


def test_flags_read_from_header():
    packet = TCPPacket(_segment())
    assert packet.flags == TCPFlag.SYN | TCPFlag.ACK
    assert TCPFlag.SYN in packet.flags
    assert TCPFlag.FIN not in packet.flags


def test_flags_fold_low_bit_of_byte_12():
    packet = TCPPacket(_segment())
    packet.data[12] |= 0x1
    assert TCPFlag.FIN in packet.flags


def test_checksum_property():
    packet = TCPPacket(_segment())
    packet.checksum = 0x1234
    assert bytes(packet.data[16:18]) == b"\x12\x34"
    assert packet.checksum == 0x1234


def test_is_valid():
    assert TCPPacket(bytes(20)).is_valid()
    assert not TCPPacket(bytes(19)).is_valid()


@given(st.binary(max_size=64))
def test_reset_checksum_then_verify(payload):
    ip = _ipv4_with(_segment(payload))
    tcp = TCPPacket(ip.payload)
    tcp.reset_checksum(ip.pseudo_sum())
    tcp.verify(ip.source_ip, ip.destination_ip)
    assert checksum(ip.pseudo_sum(), tcp.data) == b"\x00\x00"


def test_verify_accepts_string_and_bytes_addresses():
    ip = _ipv4_with(_segment(b"data"))
    tcp = TCPPacket(ip.payload)
    tcp.reset_checksum(ip.pseudo_sum())
    tcp.verify("10.0.0.1", bytes([10, 0, 0, 2]))
    assert tcp.checksum == ip.data[36] << 8 | ip.data[37]


def test_verify_detects_corruption_and_restores_checksum():
    ip = _ipv4_with(_segment(b"payload"))
    tcp = TCPPacket(ip.payload)
    tcp.reset_checksum(ip.pseudo_sum())
    before = tcp.checksum
    tcp.data[-1] ^= 0xFF
    with pytest.raises(InvalidChecksumError):
        tcp.verify(ip.source_ip, ip.destination_ip)
    assert tcp.checksum == before


def test_verify_detects_wrong_address():
    ip = _ipv4_with(_segment(b"payload"))
    tcp = TCPPacket(ip.payload)
    tcp.reset_checksum(ip.pseudo_sum())
    with pytest.raises(InvalidChecksumError):
        tcp.verify("10.0.0.3", ip.destination_ip)


def test_segment_shares_buffer_with_ip_packet():
    ip = _ipv4_with(_segment())
    tcp = TCPPacket(ip.payload)
    tcp.destination_port = 8080
    assert ip.data[22:24] == bytearray(b"\x1f\x90")