"""A mutable view over a TCP segment held in a byte buffer."""

from __future__ import annotations

import ipaddress
from enum import IntFlag
from typing import Union

from tunkit.checksum import ZERO_CHECKSUM
from tunkit.checksum import checksum as internet_checksum
from tunkit.checksum import sum16
from tunkit.ipv4 import InvalidChecksumError, IPProtocol

TCP_HEADER_SIZE = 20

Address = Union[ipaddress.IPv4Address, ipaddress.IPv6Address, str, bytes, bytearray]


class TCPFlag(IntFlag):
    """TCP control bits."""

    FIN = 1 << 0
    SYN = 1 << 1
    RST = 1 << 2
    PSH = 1 << 3
    ACK = 1 << 4
    URG = 1 << 5
    ECE = 1 << 6
    CWR = 1 << 7
    NS = 1 << 8


def _packed(address: Address) -> bytes:
    if isinstance(address, (bytes, bytearray, memoryview)):
        return bytes(address)
    return ipaddress.ip_address(address).packed


class TCPPacket:
    """Reads and edits a TCP segment in place.

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

    def _u16(self, offset: int) -> int:
        return int.from_bytes(self.data[offset:offset + 2], "big")

    def _put_u16(self, offset: int, value: int) -> None:
        self.data[offset:offset + 2] = (value & 0xFFFF).to_bytes(2, "big")

    @property
    def source_port(self) -> int:
        return self._u16(0)

    @source_port.setter
    def source_port(self, port: int) -> None:
        self._put_u16(0, port)

    @property
    def destination_port(self) -> int:
        return self._u16(2)

    @destination_port.setter
    def destination_port(self, port: int) -> None:
        self._put_u16(2, port)

    @property
    def flags(self) -> TCPFlag:
        """The flag byte, with the low bit of byte 12 folded into bit 0."""
        return TCPFlag(self.data[13] | (self.data[12] & 0x1))

    @property
    def checksum(self) -> int:
        return self._u16(16)

    @checksum.setter
    def checksum(self, value: int) -> None:
        self._put_u16(16, value)

    def reset_checksum(self, pseudo_sum: int) -> None:
        """Recompute the checksum seeded with the IP pseudo-header sum."""
        self.data[16:18] = ZERO_CHECKSUM
        self.data[16:18] = internet_checksum(pseudo_sum, self.data)

    def is_valid(self) -> bool:
        return len(self.data) >= TCP_HEADER_SIZE

    def verify(self, source: Address, destination: Address) -> None:
        """Check the checksum against the given addresses.

        Raises ``InvalidChecksumError`` on mismatch; the buffer is left unchanged.
        """
        saved = bytes(self.data[16:18])
        seed = (
            sum16(_packed(source))
            + sum16(_packed(destination))
            + IPProtocol.TCP
            + len(self.data)
        ) & 0xFFFFFFFF
        self.data[16:18] = ZERO_CHECKSUM
        try:
            expected = internet_checksum(seed, self.data)
        finally:
            self.data[16:18] = saved
        if expected != saved:
            raise InvalidChecksumError()