# tunkit

tunkit gives you light, mutable views over raw IP packets, the kind a TUN
device reads and writes. It also provides the Internet checksum and value
types that describe interfaces, addresses and routes.

Each packet class keeps the buffer it is given. A `bytearray` or writable
`memoryview` is shared, so edits go straight into it. Any other bytes-like
value (such as `bytes`) is first copied into a new `bytearray`. The buffer is
available as the `data` attribute, and `bytes(packet)` returns a copy.

## Installation

```
pip install tunkit
```

To install the test tools as well:

```
pip install "tunkit[test]"
```

tunkit needs Python 3.10 or later and has no runtime dependencies.

## Modules

| Module | Contents |
| --- | --- |
| `tunkit.checksum` | `sum16`, `checksum` and `set_ipv4` |
| `tunkit.ipv4` | `IPv4Packet`, `IPProtocol` and the errors `PacketError`, `InvalidLengthError`, `InvalidIPVersionError`, `InvalidChecksumError` |
| `tunkit.ipv6` | `IPv6Packet` and `ip_version` |
| `tunkit.icmp` | `ICMPPacket`, `ICMPType`, `ICMPv6Packet`, `ICMPv6Type`, `ICMPv6Code` |
| `tunkit.tcp` | `TCPPacket` and `TCPFlag` |
| `tunkit.udp` | `UDPPacket` |
| `tunkit.ifconstants` | Enumerations for interface types, statuses, address and route origins, flags and DNS settings |
| `tunkit.sockaddr` | `RawSockaddrInet`, `IPAddressPrefix` and `RouteData` |

## Checksums

`sum16(data)` adds the bytes up as big-endian 16-bit words. If the length is
odd, the last byte counts as the high byte of a final word. The sum is not
folded and wraps at 32 bits.

`checksum(initial, data)` adds `initial` (for example a pseudo-header sum) to
that sum. It then folds the total, complements it and returns the two
checksum bytes.

```python
from tunkit.checksum import checksum

header = bytes.fromhex("45000073000040004011" "0000" "c0a80001c0a800c7")
assert checksum(0, header) == bytes.fromhex("b861")
```

`set_ipv4(packet)` sets the version nibble of a buffer to 4 and leaves the
low nibble alone.

## IPv4

`IPv4Packet` exposes these header fields as properties that you can read and
assign:

- `total_length`, `header_length`, `type_of_service`
- `identification`, `flags`, `fragment_offset`
- `protocol`, `time_to_live`, `checksum`
- `source_ip`, `destination_ip`

`data_length` and `payload` are read-only. `payload` is a `memoryview` that
shares the packet's buffer.

```python
from tunkit.ipv4 import IPv4Packet, PacketError

buffer = bytearray.fromhex("45000073000040004011b861c0a80001c0a800c7") + bytes(95)
packet = IPv4Packet(buffer)
if packet.is_valid():
    packet.dec_time_to_live()
    packet.reset_checksum()
    try:
        packet.verify()
    except PacketError as error:
        print("bad packet:", error)
```

`verify` leaves the buffer unchanged and raises:

- `InvalidLengthError` when the buffer is too short or the lengths do not add up.
- `InvalidIPVersionError` when the version nibble is not 4.
- `InvalidChecksumError` when the header checksum is wrong.

All three are subclasses of `PacketError`, which is a `ValueError`.

`source_ip` accepts an IPv4 address or an IPv4-mapped IPv6 address and
ignores anything else. `destination_ip` accepts IPv4 addresses only and
ignores anything else. `pseudo_sum()` returns the pseudo-header sum that TCP
and UDP checksums start from. `dec_time_to_live()` wraps from 0 to 255.

## IPv6

```python
from tunkit.ipv6 import IPv6Packet, ip_version

raw = bytearray(40)
raw[0] = 0x60
if ip_version(raw) == 6:
    packet = IPv6Packet(raw)
    packet.set_tos(0x12, 0x34567)
    assert packet.tos() == (0x12, 0x34567)
```

`ip_version` returns -1 for an empty buffer.

`IPv6Packet` has the following properties:

- `payload_length`
- `hop_limit`
- `next_header` (also available as `protocol`)
- `source_ip` and `destination_ip`, which accept IPv6 addresses only
- `payload`

The IPv6 header has no checksum. `checksum` always reads 0, and
`reset_checksum()` leaves the buffer as it is.

## Transport headers

`TCPPacket`, `UDPPacket` and `ICMPv6Packet` recompute their checksum from a
pseudo-header sum. `ICMPPacket` (ICMP over IPv4) recomputes its checksum
over the message alone.

```python
from tunkit.ipv4 import IPv4Packet
from tunkit.udp import UDPPacket

ip = IPv4Packet(buffer)          # a bytearray holding an IPv4/UDP packet
udp = UDPPacket(ip.payload)      # shares the same bytes
udp.reset_checksum(ip.pseudo_sum())
```

Each class has the following members:

- **`TCPPacket`**
  - `source_port`, `destination_port`, `checksum`
  - `flags`, a `TCPFlag`
  - `is_valid()`
  - `verify(source, destination)`, which checks the segment against the addresses it was sent between. The addresses may be `ipaddress` objects, strings or packed bytes. It raises `InvalidChecksumError` on a mismatch.
- **`UDPPacket`**
  - `length`, `source_port`, `destination_port`, `checksum`
  - `payload`
  - `is_valid()`
- **`ICMPPacket`**
  - `type`, `code`, `checksum`
  - `ICMPType` holds the ping request and response types.
- **`ICMPv6Packet`**
  - `type`, `code`, `checksum`
  - `type_specific`, `mtu`, `ident`, `sequence`
  - `message_body`, `payload`
  - Its `source_port` and `destination_port` always read 0.
  - `type` returns an `ICMPv6Type`. `ICMPv6Type.is_error()` is true for types with the high bit clear.

## Interface and route types

`tunkit.sockaddr` holds the following types:

- **`RawSockaddrInet`** holds either an IPv4 or an IPv6 socket address.
  - `set_addr_port` and `set_addr` fill it in from an address. A numeric IPv6 zone becomes the scope id.
  - `addr`, `port` and `addr_port` read it back.
  - `addr()` returns `None` for families other than IPv4 and IPv6.
  - `to_bytes()` and `from_bytes()` convert to and from the 28-byte `SOCKADDR_INET` layout.
- **`IPAddressPrefix`** pairs an address with a prefix length.
  - `set_prefix(network)` takes a network, an interface or a string, and keeps the host bits.
  - `prefix()` returns an `ipaddress` interface object, or `None`.
  - `to_bytes()` and `from_bytes()` use the 32-byte `IP_ADDRESS_PREFIX` layout.
- **`RouteData`** describes a route: a destination, a next hop and a metric. String arguments are parsed into `ipaddress` objects.

`tunkit.ifconstants` collects the matching enumerations:

- `AddressFamily`, `IfType`, `IfOperStatus`
- `NdisMedium`, `NdisPhysicalMedium`
- `DadState`, `PrefixOrigin`, `SuffixOrigin`
- `RouteOrigin`, `RouteProtocol`
- `MibNotificationType`, `TunnelType`, `ScopeLevel`
- the flag types `IPAAFlags`, `GAAFlags` and `DnsInterfaceSettingsFlag`

## What tunkit does not do

tunkit only reads, edits and checks packets and records that are already in
memory. It does not:

- open or read a TUN device;
- send or receive packets;
- run a TCP/IP stack;
- change the system's addresses, routes, DNS settings or firewall rules.

The interface and route types describe such settings but do not apply them.
There is no command-line tool.

## Running the tests

```
pytest
```