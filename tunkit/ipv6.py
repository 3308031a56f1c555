"""A mutable view over an IPv6 packet held in a byte buffer."""

from __future__ import annotations

import ipaddress
from typing import Union

from tunkit.checksum import sum16

IPV6_PAYLOAD_LENGTH_OFFSET = 4
IPV6_NEXT_HEADER_OFFSET = 6
_HOP_LIMIT = 7
_SRC_ADDR = 8
IPV6_ADDRESS_SIZE = 16
_DST_ADDR = _SRC_ADDR + IPV6_ADDRESS_SIZE
IPV6_FIXED_HEADER_SIZE = _DST_ADDR + IPV6_ADDRESS_SIZE
IPV6_MINIMUM_SIZE = IPV6_FIXED_HEADER_SIZE
IPV6_VERSION = 6
IPV6_MINIMUM_MTU = 1280

IPV4_IHL_STRIDE = 4
_IP_VERSION_SHIFT = 4

Address = Union[ipaddress.IPv4Address, ipaddress.IPv6Address, str]


def ip_version(data) -> int:
    """Return the IP version nibble of ``data``, or -1 if it is empty."""
    if len(data) < 1:
        return -1
    return data[0] >> _IP_VERSION_SHIFT


class IPv6Packet:
    """Reads and edits IPv6 fixed-header fields in place.

    Mutable buffers (``bytearray`` or writable ``memoryview``) are shared;
    anything else is copied into a new ``bytearray``.
    """

    def __init__(self, data) -> None:
        if isinstance(data, (bytearray, memoryview)):
            self.data = data
        else:
            self.data = bytearray(data)

    def __bytes__(self) -> bytes:
        return bytes(self.data)

    def __len__(self) -> int:
        return len(self.data)

    @property
    def payload_length(self) -> int:
        offset = IPV6_PAYLOAD_LENGTH_OFFSET
        return int.from_bytes(self.data[offset:offset + 2], "big")

    @payload_length.setter
    def payload_length(self, length: int) -> None:
        offset = IPV6_PAYLOAD_LENGTH_OFFSET
        self.data[offset:offset + 2] = (length & 0xFFFF).to_bytes(2, "big")

    @property
    def hop_limit(self) -> int:
        return self.data[_HOP_LIMIT]

    @hop_limit.setter
    def hop_limit(self, value: int) -> None:
        self.data[_HOP_LIMIT] = value

    @property
    def next_header(self) -> int:
        return self.data[IPV6_NEXT_HEADER_OFFSET]

    @next_header.setter
    def next_header(self, value: int) -> None:
        self.data[IPV6_NEXT_HEADER_OFFSET] = value

    @property
    def protocol(self) -> int:
        return self.next_header

    @protocol.setter
    def protocol(self, value: int) -> None:
        self.next_header = value

    @property
    def payload(self) -> memoryview:
        """The payload as declared by the payload length, sharing the buffer."""
        start = IPV6_MINIMUM_SIZE
        return memoryview(self.data)[start:start + self.payload_length]

    @property
    def source_ip(self) -> ipaddress.IPv6Address:
        return ipaddress.IPv6Address(bytes(self.data[_SRC_ADDR:_SRC_ADDR + IPV6_ADDRESS_SIZE]))

    @source_ip.setter
    def source_ip(self, value: Address) -> None:
        address = ipaddress.ip_address(value)
        if isinstance(address, ipaddress.IPv6Address):
            self.data[_SRC_ADDR:_SRC_ADDR + IPV6_ADDRESS_SIZE] = address.packed

    @property
    def destination_ip(self) -> ipaddress.IPv6Address:
        return ipaddress.IPv6Address(bytes(self.data[_DST_ADDR:_DST_ADDR + IPV6_ADDRESS_SIZE]))

    @destination_ip.setter
    def destination_ip(self, value: Address) -> None:
        address = ipaddress.ip_address(value)
        if isinstance(address, ipaddress.IPv6Address):
            self.data[_DST_ADDR:_DST_ADDR + IPV6_ADDRESS_SIZE] = address.packed

    @property
    def checksum(self) -> int:
        """IPv6 has no header checksum: always 0."""
        return 0

    @checksum.setter
    def checksum(self, value: int) -> None:
        """Accept any 16-bit value and store nothing; the header has no field for it."""
        if not 0 <= value <= 0xFFFF:
            raise ValueError(f"checksum out of 16-bit range: {value}")

    def tos(self) -> tuple[int, int]:
        """Return ``(traffic_class, flow_label)``."""
        word = int.from_bytes(self.data[0:4], "big")
        return (word >> 20) & 0xFF, word & 0xFFFFF

    def set_tos(self, traffic_class: int, flow_label: int) -> None:
        """Write version 6, the traffic class and the flow label."""
        word = (6 << 28) | ((traffic_class & 0xFF) << 20) | (flow_label & 0xFFFFF)
        self.data[0:4] = word.to_bytes(4, "big")

    def dec_time_to_live(self) -> None:
        """Decrement the hop limit, wrapping from 0 to 255."""
        self.data[_HOP_LIMIT] = (self.data[_HOP_LIMIT] - 1) & 0xFF

    def reset_checksum(self) -> None:
        """Reset the header checksum; the IPv6 header carries none, so the buffer is unchanged."""
        self.checksum = 0

    def pseudo_sum(self) -> int:
        """Return the unfolded pseudo-header sum used by upper-layer checksums."""
        total = (
            sum16(self.data[_SRC_ADDR:IPV6_FIXED_HEADER_SIZE])
            + self.protocol
            + self.payload_length
        )
        return total & 0xFFFFFFFF

    def is_valid(self) -> bool:
        return (
            len(self.data) >= IPV6_MINIMUM_SIZE
            and len(self.data) >= self.payload_length + IPV6_MINIMUM_SIZE
        )