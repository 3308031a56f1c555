"""Internet checksum arithmetic shared by the IP, TCP, UDP and ICMP packet views."""

from __future__ import annotations

from typing import Union

Buffer = Union[bytes, bytearray, memoryview]

_MASK32 = 0xFFFFFFFF

ZERO_CHECKSUM = b"\x00\x00"


def sum16(data: Buffer) -> int:
    """Return the 32-bit sum of ``data`` taken as big-endian 16-bit words.

    An odd trailing byte is treated as the high byte of a final word. The
    result is not folded; it wraps at 32 bits.
    """
    view = memoryview(data).cast("B")
    even = len(view) & ~1
    total = sum(
        (high << 8) | low for high, low in zip(view[0:even:2], view[1:even:2])
    )
    if len(view) & 1:
        total += view[even] << 8
    return total & _MASK32


def checksum(initial: int, data: Buffer) -> bytes:
    """Return the two-byte Internet checksum of ``data`` seeded with ``initial``."""
    total = (initial + sum16(data)) & _MASK32
    total = (total >> 16) + (total & 0xFFFF)
    total += total >> 16
    total = ~total & 0xFFFF
    return bytes((total >> 8, total & 0xFF))


def set_ipv4(packet: Union[bytearray, memoryview]) -> None:
    """Force the version nibble of ``packet`` to 4, keeping the low nibble."""
    packet[0] = (packet[0] & 0x0F) | (4 << 4)