"""A mutable view over a UDP datagram held in a byte buffer."""

from __future__ import annotations

from tunkit.checksum import ZERO_CHECKSUM
from tunkit.checksum import checksum as internet_checksum

UDP_HEADER_SIZE = 8


class UDPPacket:
    """Reads and edits a UDP datagram in place.

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
    def length(self) -> int:
        return self._u16(4)

    @length.setter
    def length(self, length: int) -> None:
        self._put_u16(4, length)

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
    def payload(self) -> memoryview:
        """The bytes between the header and the declared length, sharing the buffer."""
        return memoryview(self.data)[UDP_HEADER_SIZE:self.length]

    @property
    def checksum(self) -> int:
        return self._u16(6)

    @checksum.setter
    def checksum(self, value: int) -> None:
        self._put_u16(6, value)

    def reset_checksum(self, pseudo_sum: int) -> None:
        """Recompute the checksum seeded with the IP pseudo-header sum."""
        self.data[6:8] = ZERO_CHECKSUM
        self.data[6:8] = internet_checksum(pseudo_sum, self.data)

    def is_valid(self) -> bool:
        return (
            len(self.data) >= UDP_HEADER_SIZE
            and (len(self.data) & 0xFFFF) >= self.length
        )