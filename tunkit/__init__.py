"""In-place views over IPv4, IPv6, ICMP, TCP and UDP packets, Internet checksums, and interface, address and route types."""

__version__ = "0.1.0"