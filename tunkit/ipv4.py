"""A mutable view over an IPv4 packet held in a byte buffer."""

from __future__ import annotations

import ipaddress
from enum import IntEnum
from typing import Union

from tunkit.checksum import ZERO_CHECKSUM, checksum, sum16

IPV4_HEADER_SIZE = 20
IPV4_VERSION = 4
IPV4_OPTIONS_OFFSET = 20
IPV4_PACKET_MIN_LENGTH = IPV4_OPTIONS_OFFSET

FLAG_DONT_FRAGMENT = 1 << 1
FLAG_MORE_FRAGMENT = 1 << 2

Address = Union[ipaddress.IPv4Address, ipaddress.IPv6Address, str]


class IPProtocol(IntEnum):
    """Transport protocol numbers carried in the IP header."""

    ICMP = 0x01
    TCP = 0x06
    UDP = 0x11
    ICMPV6 = 0x3A


class PacketError(ValueError):
    """Base class for malformed packets."""


class InvalidLengthError(PacketError):
    def __init__(self, message: str = "invalid packet length") -> None:
        super().__init__(message)


class InvalidIPVersionError(PacketError):
    def __init__(self, message: str = "invalid ip version") -> None:
        super().__init__(message)


class InvalidChecksumError(PacketError):
    def __init__(self, message: str = "invalid checksum") -> None:
        super().__init__(message)


def _as_buffer(data) -> Union[bytearray, memoryview]:
    if isinstance(data, (bytearray, memoryview)):
        return data
    return bytearray(data)


class IPv4Packet:
    """Reads and edits IPv4 header fields in place.

    Mutable buffers (``bytearray`` or writable ``memoryview``) are shared;
    anything else is copied into a new ``bytearray``.
    """

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

    @property
    def total_length(self) -> int:
        return self._u16(2)

    @total_length.setter
    def total_length(self, length: int) -> None:
        self._put_u16(2, length)

    @property
    def header_length(self) -> int:
        return (self.data[0] & 0x0F) * 4

    @header_length.setter
    def header_length(self, length: int) -> None:
        self.data[0] = (self.data[0] & 0xF0) | ((length // 4) & 0xFF)

    @property
    def type_of_service(self) -> int:
        return self.data[1]

    @type_of_service.setter
    def type_of_service(self, tos: int) -> None:
        self.data[1] = tos

    @property
    def identification(self) -> int:
        return self._u16(4)

    @identification.setter
    def identification(self, ident: int) -> None:
        self._put_u16(4, ident)

    @property
    def flags(self) -> int:
        return self.data[6] >> 5

    @flags.setter
    def flags(self, flags: int) -> None:
        self.data[6] = (self.data[6] & 0x1F) | ((flags << 5) & 0xFF)

    @property
    def fragment_offset(self) -> int:
        return (((self.data[6] & 0x7) << 8) | self.data[7]) * 8

    @fragment_offset.setter
    def fragment_offset(self, offset: int) -> None:
        flags = self.flags
        self._put_u16(6, offset // 8)
        self.flags = flags

    @property
    def data_length(self) -> int:
        return (self.total_length - self.header_length) & 0xFFFF

    @property
    def payload(self) -> memoryview:
        """The bytes between the header and the total length, sharing the buffer."""
        return memoryview(self.data)[self.header_length:self.total_length]

    @property
    def protocol(self) -> int:
        return self.data[9]

    @protocol.setter
    def protocol(self, protocol: int) -> None:
        self.data[9] = protocol

    @property
    def time_to_live(self) -> int:
        return self.data[8]

    @time_to_live.setter
    def time_to_live(self, ttl: int) -> None:
        self.data[8] = ttl

    @property
    def checksum(self) -> int:
        return self._u16(10)

    @checksum.setter
    def checksum(self, value: int) -> None:
        self._put_u16(10, value)

    @property
    def source_ip(self) -> ipaddress.IPv4Address:
        return ipaddress.IPv4Address(bytes(self.data[12:16]))

    @source_ip.setter
    def source_ip(self, value: Address) -> None:
        address = ipaddress.ip_address(value)
        if isinstance(address, ipaddress.IPv6Address):
            address = address.ipv4_mapped
            if address is None:
                return
        self.data[12:16] = address.packed

    @property
    def destination_ip(self) -> ipaddress.IPv4Address:
        return ipaddress.IPv4Address(bytes(self.data[16:20]))

    @destination_ip.setter
    def destination_ip(self, value: Address) -> None:
        address = ipaddress.ip_address(value)
        if isinstance(address, ipaddress.IPv4Address):
            self.data[16:20] = address.packed

    def dec_time_to_live(self) -> None:
        """Decrement the TTL, wrapping from 0 to 255."""
        self.data[8] = (self.data[8] - 1) & 0xFF

    def reset_checksum(self) -> None:
        """Recompute the header checksum."""
        self.data[10:12] = ZERO_CHECKSUM
        self.data[10:12] = checksum(0, self.data[:self.header_length])

    def pseudo_sum(self) -> int:
        """Return the unfolded pseudo-header sum used by TCP and UDP checksums."""
        total = sum16(self.data[12:20]) + self.protocol + self.data_length
        return total & 0xFFFFFFFF

    def is_valid(self) -> bool:
        return (
            len(self.data) >= IPV4_HEADER_SIZE
            and self.total_length >= self.header_length
            and (len(self.data) & 0xFFFF) >= self.total_length
        )

    def verify(self) -> None:
        """Check length, version and header checksum; raise a ``PacketError`` if bad."""
        if len(self.data) < IPV4_PACKET_MIN_LENGTH:
            raise InvalidLengthError()

        saved = bytes(self.data[10:12])
        header_length = (self.data[0] & 0x0F) * 4
        packet_length = self._u16(2)

        if self.data[0] >> 4 != IPV4_VERSION:
            raise InvalidIPVersionError()

        if (len(self.data) & 0xFFFF) < packet_length or packet_length < header_length:
            raise InvalidLengthError()

        self.data[10:12] = ZERO_CHECKSUM
        try:
            answer = checksum(0, self.data[:header_length])
        finally:
            self.data[10:12] = saved

        if answer != saved:
            raise InvalidChecksumError()