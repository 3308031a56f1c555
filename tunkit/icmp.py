"""Mutable views over ICMP (IPv4) and ICMPv6 messages held in a byte buffer."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from tunkit.checksum import ZERO_CHECKSUM
from tunkit.checksum import checksum as internet_checksum

ICMPV6_HEADER_SIZE = 4
ICMPV6_MINIMUM_SIZE = 8
ICMPV6_PAYLOAD_OFFSET = 8
ICMPV6_ECHO_MINIMUM_SIZE = 8
ICMPV6_ERROR_HEADER_SIZE = 8
ICMPV6_DST_UNREACHABLE_MINIMUM_SIZE = ICMPV6_MINIMUM_SIZE
ICMPV6_PACKET_TOO_BIG_MINIMUM_SIZE = ICMPV6_MINIMUM_SIZE
ICMPV6_CHECKSUM_OFFSET = 2
NDP_HOP_LIMIT = 255

_POINTER_OFFSET = 4
_MTU_OFFSET = 4
_IDENT_OFFSET = 4
_SEQUENCE_OFFSET = 6


def _as_buffer(data) -> Union[bytearray, memoryview]:
    if isinstance(data, (bytearray, memoryview)):
        return data
    return bytearray(data)


class ICMPType(IntEnum):
    """ICMP (IPv4) message types used for ping."""

    PING_REQUEST = 0x8
    PING_RESPONSE = 0x0


class ICMPPacket:
    """Reads and edits an ICMP (IPv4) message in place."""

    def __init__(self, data) -> None:
        self.data = _as_buffer(data)

    def __bytes__(self) -> bytes:
        return bytes(self.data)

    def __len__(self) -> int:
        return len(self.data)

    @property
    def type(self) -> int:
        return self.data[0]

    @type.setter
    def type(self, value: int) -> None:
        self.data[0] = value

    @property
    def code(self) -> int:
        return self.data[1]

    @property
    def checksum(self) -> int:
        return int.from_bytes(self.data[2:4], "big")

    @checksum.setter
    def checksum(self, value: int) -> None:
        self.data[2:4] = (value & 0xFFFF).to_bytes(2, "big")

    def reset_checksum(self) -> None:
        """Recompute the checksum over the whole message."""
        self.data[2:4] = ZERO_CHECKSUM
        self.data[2:4] = internet_checksum(0, self.data)


class ICMPv6Type(IntEnum):
    """ICMPv6 message types. Unknown values become unnamed members."""

    DST_UNREACHABLE = 1
    PACKET_TOO_BIG = 2
    TIME_EXCEEDED = 3
    PARAM_PROBLEM = 4
    ECHO_REQUEST = 128
    ECHO_REPLY = 129
    MULTICAST_LISTENER_QUERY = 130
    MULTICAST_LISTENER_REPORT = 131
    MULTICAST_LISTENER_DONE = 132
    ROUTER_SOLICIT = 133
    ROUTER_ADVERT = 134
    NEIGHBOR_SOLICIT = 135
    NEIGHBOR_ADVERT = 136
    REDIRECT_MSG = 137

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, int) and 0 <= value <= 0xFF:
            member = int.__new__(cls, value)
            member._name_ = f"UNKNOWN_{value}"
            member._value_ = value
            return member
        return None

    def is_error(self) -> bool:
        """Error messages are those with the high bit of the type clear."""
        return self.value & 0x80 == 0


class ICMPv6Code(IntEnum):
    """ICMPv6 codes; several share a value across message types."""

    NETWORK_UNREACHABLE = 0
    PROHIBITED = 1
    BEYOND_SCOPE = 2
    ADDRESS_UNREACHABLE = 3
    PORT_UNREACHABLE = 4
    POLICY = 5
    REJECT_ROUTE = 6

    HOP_LIMIT_EXCEEDED = 0
    REASSEMBLY_TIMEOUT = 1

    ERRONEOUS_HEADER = 0
    UNKNOWN_HEADER = 1
    UNKNOWN_OPTION = 2

    UNUSED = 0


class ICMPv6Packet:
    """Reads and edits an ICMPv6 message in place."""

    def __init__(self, data) -> None:
        self.data = _as_buffer(data)

    def __bytes__(self) -> bytes:
        return bytes(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def _u16(self, offset: int) -> int:
        return int.from_bytes(self.data[offset:offset + 2], "big")

    def _put_u16(self, offset: int, value: int) -> None:
        self.data[offset:offset + 2] = (value & 0xFFFF).to_bytes(2, "big")

    def _u32(self, offset: int) -> int:
        return int.from_bytes(self.data[offset:offset + 4], "big")

    def _put_u32(self, offset: int, value: int) -> None:
        self.data[offset:offset + 4] = (value & 0xFFFFFFFF).to_bytes(4, "big")

    @property
    def type(self) -> ICMPv6Type:
        return ICMPv6Type(self.data[0])

    @type.setter
    def type(self, value: int) -> None:
        self.data[0] = int(value)

    @property
    def code(self) -> int:
        return self.data[1]

    @code.setter
    def code(self, value: int) -> None:
        self.data[1] = int(value)

    @property
    def type_specific(self) -> int:
        return self._u32(_POINTER_OFFSET)

    @type_specific.setter
    def type_specific(self, value: int) -> None:
        self._put_u32(_POINTER_OFFSET, value)

    @property
    def checksum(self) -> int:
        return self._u16(ICMPV6_CHECKSUM_OFFSET)

    @checksum.setter
    def checksum(self, value: int) -> None:
        self._put_u16(ICMPV6_CHECKSUM_OFFSET, value)

    @property
    def source_port(self) -> int:
        """ICMPv6 has no ports: always 0, and assignments are ignored."""
        return 0

    @source_port.setter
    def source_port(self, value: int) -> None:
        pass

    @property
    def destination_port(self) -> int:
        """ICMPv6 has no ports: always 0, and assignments are ignored."""
        return 0

    @destination_port.setter
    def destination_port(self, value: int) -> None:
        pass

    @property
    def mtu(self) -> int:
        return self._u32(_MTU_OFFSET)

    @mtu.setter
    def mtu(self, value: int) -> None:
        self._put_u32(_MTU_OFFSET, value)

    @property
    def ident(self) -> int:
        return self._u16(_IDENT_OFFSET)

    @ident.setter
    def ident(self, value: int) -> None:
        self._put_u16(_IDENT_OFFSET, value)

    @property
    def sequence(self) -> int:
        return self._u16(_SEQUENCE_OFFSET)

    @sequence.setter
    def sequence(self, value: int) -> None:
        self._put_u16(_SEQUENCE_OFFSET, value)

    @property
    def message_body(self) -> memoryview:
        """Everything after the 4-byte header, sharing the buffer."""
        return memoryview(self.data)[ICMPV6_HEADER_SIZE:]

    @property
    def payload(self) -> memoryview:
        """Everything after the 8-byte header, sharing the buffer."""
        return memoryview(self.data)[ICMPV6_PAYLOAD_OFFSET:]

    def reset_checksum(self, pseudo_sum: int) -> None:
        """Recompute the checksum seeded with the IPv6 pseudo-header sum."""
        offset = ICMPV6_CHECKSUM_OFFSET
        self.data[offset:offset + 2] = ZERO_CHECKSUM
        self.data[offset:offset + 2] = internet_checksum(pseudo_sum, self.data)