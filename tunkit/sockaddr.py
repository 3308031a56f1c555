"""Socket address, address prefix and route descriptions in the IP Helper layout.

``RawSockaddrInet`` is a 28-byte ``SOCKADDR_INET`` and ``IPAddressPrefix`` is a
32-byte ``IP_ADDRESS_PREFIX``. Both convert to and from those layouts with
``to_bytes`` and ``from_bytes``.
"""

from __future__ import annotations

import ipaddress
import re
import struct
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from tunkit.ifconstants import AddressFamily

RAW_SOCKADDR_INET_SIZE = 28
RAW_SOCKADDR_INET_DATA_OFFSET = 2
IP_ADDRESS_PREFIX_SIZE = 32
IP_ADDRESS_PREFIX_LENGTH_OFFSET = 28

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]
AddressLike = Union[IPAddress, str]
Network = Union[
    ipaddress.IPv4Network,
    ipaddress.IPv6Network,
    ipaddress.IPv4Interface,
    ipaddress.IPv6Interface,
    str,
]
Interface = Union[ipaddress.IPv4Interface, ipaddress.IPv6Interface]

_ZONE_NUMBER = re.compile(r"[0-9]+")


def _family(value: int) -> int:
    try:
        return AddressFamily(value)
    except ValueError:
        return value


def _parse_address(address: Optional[AddressLike]) -> IPAddress:
    if address is None:
        raise ValueError("invalid parameter: no address")
    if isinstance(address, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        return address
    return ipaddress.ip_address(address)


def _zone_to_scope_id(address: ipaddress.IPv6Address) -> int:
    zone = address.scope_id
    if zone and _ZONE_NUMBER.fullmatch(zone):
        number = int(zone)
        if number <= 0xFFFFFFFF:
            return number
    return 0


@dataclass
class RawSockaddrInet:
    """An IPv4 or IPv6 socket address, or a bare address family."""

    family: int = AddressFamily.UNSPEC
    packed_address: bytes = b""
    network_port: int = 0
    flowinfo: int = 0
    scope_id: int = 0

    def set_addr_port(self, address: Optional[AddressLike], port: int) -> None:
        """Set family, address and port; the other members are zeroed.

        Raises ``ValueError`` if ``address`` is neither IPv4 nor IPv6.
        """
        parsed = _parse_address(address)
        if isinstance(parsed, ipaddress.IPv4Address):
            self.family = AddressFamily.INET
            self.packed_address = parsed.packed
            self.network_port = port & 0xFFFF
            self.flowinfo = 0
            self.scope_id = 0
        elif isinstance(parsed, ipaddress.IPv6Address):
            self.family = AddressFamily.INET6
            self.packed_address = parsed.packed
            self.network_port = port & 0xFFFF
            self.flowinfo = 0
            self.scope_id = _zone_to_scope_id(parsed)
        else:
            raise ValueError("invalid parameter: unsupported address")

    def set_addr(self, address: Optional[AddressLike]) -> None:
        """Set family and address with port 0."""
        self.set_addr_port(address, 0)

    def addr(self) -> Optional[IPAddress]:
        """Return the address, with the scope id as its zone, or None for other families."""
        if self.family == AddressFamily.INET:
            return ipaddress.IPv4Address(bytes(self.packed_address[:4]).ljust(4, b"\x00"))
        if self.family == AddressFamily.INET6:
            base = ipaddress.IPv6Address(bytes(self.packed_address[:16]).ljust(16, b"\x00"))
            if self.scope_id:
                return ipaddress.IPv6Address(f"{base}%{self.scope_id}")
            return base
        return None

    def port(self) -> int:
        """Return the port for IPv4 or IPv6 addresses, 0 otherwise."""
        if self.family in (AddressFamily.INET, AddressFamily.INET6):
            return self.network_port
        return 0

    def addr_port(self) -> Tuple[Optional[IPAddress], int]:
        return self.addr(), self.port()

    def to_bytes(self) -> bytes:
        """Serialise to the 28-byte ``SOCKADDR_INET`` layout."""
        head = struct.pack("<H", int(self.family) & 0xFFFF)
        if self.family == AddressFamily.INET:
            body = (
                struct.pack(">H", self.network_port)
                + bytes(self.packed_address[:4]).ljust(4, b"\x00")
                + bytes(8)
            )
        elif self.family == AddressFamily.INET6:
            body = (
                struct.pack(">H", self.network_port)
                + struct.pack(">I", self.flowinfo & 0xFFFFFFFF)
                + bytes(self.packed_address[:16]).ljust(16, b"\x00")
                + struct.pack("<I", self.scope_id & 0xFFFFFFFF)
            )
        else:
            body = b""
        return (head + body).ljust(RAW_SOCKADDR_INET_SIZE, b"\x00")

    @classmethod
    def from_bytes(cls, data) -> "RawSockaddrInet":
        """Parse the first 28 bytes of ``data``; raise ``ValueError`` if shorter."""
        raw = bytes(data)
        if len(raw) < RAW_SOCKADDR_INET_SIZE:
            raise ValueError("invalid parameter: sockaddr too short")
        (family,) = struct.unpack_from("<H", raw, 0)
        family = _family(family)
        if family == AddressFamily.INET:
            (port,) = struct.unpack_from(">H", raw, 2)
            return cls(family=family, packed_address=raw[4:8], network_port=port)
        if family == AddressFamily.INET6:
            port, flowinfo = struct.unpack_from(">HI", raw, 2)
            (scope_id,) = struct.unpack_from("<I", raw, 24)
            return cls(
                family=family,
                packed_address=raw[8:24],
                network_port=port,
                flowinfo=flowinfo,
                scope_id=scope_id,
            )
        return cls(family=family)


def _split_network(network: Network) -> Tuple[IPAddress, int]:
    if isinstance(network, (ipaddress.IPv4Interface, ipaddress.IPv6Interface)):
        return network.ip, network.network.prefixlen
    if isinstance(network, (ipaddress.IPv4Network, ipaddress.IPv6Network)):
        return network.network_address, network.prefixlen
    if network is None:
        raise ValueError("invalid parameter: no prefix")
    interface = ipaddress.ip_interface(network)
    return interface.ip, interface.network.prefixlen


@dataclass
class IPAddressPrefix:
    """An address together with a prefix length."""

    raw_prefix: RawSockaddrInet = field(default_factory=RawSockaddrInet)
    prefix_length: int = 0

    def set_prefix(self, network: Network) -> None:
        """Set address and length; host bits of the address are kept."""
        address, bits = _split_network(network)
        self.raw_prefix.set_addr(address)
        self.prefix_length = bits & 0xFF

    def prefix(self) -> Optional[Interface]:
        """Return the prefix without zone, or None for other families or bad lengths."""
        if self.raw_prefix.family == AddressFamily.INET:
            packed = bytes(self.raw_prefix.packed_address[:4]).ljust(4, b"\x00")
            address: IPAddress = ipaddress.IPv4Address(packed)
        elif self.raw_prefix.family == AddressFamily.INET6:
            packed = bytes(self.raw_prefix.packed_address[:16]).ljust(16, b"\x00")
            address = ipaddress.IPv6Address(packed)
        else:
            return None
        try:
            return ipaddress.ip_interface((address, self.prefix_length))
        except ValueError:
            return None

    def to_bytes(self) -> bytes:
        """Serialise to the 32-byte ``IP_ADDRESS_PREFIX`` layout."""
        return self.raw_prefix.to_bytes() + bytes((self.prefix_length & 0xFF,)) + bytes(3)

    @classmethod
    def from_bytes(cls, data) -> "IPAddressPrefix":
        """Parse the first 32 bytes of ``data``; raise ``ValueError`` if shorter."""
        raw = bytes(data)
        if len(raw) < IP_ADDRESS_PREFIX_SIZE:
            raise ValueError("invalid parameter: prefix too short")
        return cls(
            raw_prefix=RawSockaddrInet.from_bytes(raw[:RAW_SOCKADDR_INET_SIZE]),
            prefix_length=raw[IP_ADDRESS_PREFIX_LENGTH_OFFSET],
        )


@dataclass
class RouteData:
    """A route to add: destination prefix, next hop and metric."""

    destination: Network
    next_hop: AddressLike
    metric: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.destination, str):
            self.destination = ipaddress.ip_interface(self.destination)
        if isinstance(self.next_hop, str):
            self.next_hop = ipaddress.ip_address(self.next_hop)

    def __str__(self) -> str:
        return (
            f"{{Destination:{self.destination} NextHop:{self.next_hop} "
            f"Metric:{self.metric}}}"
        )