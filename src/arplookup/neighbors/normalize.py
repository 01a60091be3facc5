"""
IP address canonicalization for neighbor lookups.

The kernel may report an IPv4 neighbor in an IPv4-in-IPv6 spelling, so
lookup keys are collapsed to plain IPv4 wherever an equivalent exists.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import ipaddress

from arplookup.neighbors.models import IPAddress


def normalize_ip(ip: str | IPAddress) -> IPAddress:
    """Return the canonical form of an IP address.

    IPv4 addresses pass through. IPv4-mapped (::ffff:a.b.c.d) and
    IPv4-compatible (::a.b.c.d) IPv6 addresses become plain IPv4.
    Everything else passes through.

    Raises:
        ValueError: If a string argument is not an IP address
    """
    addr = ipaddress.ip_address(ip)
    if addr.version == 4:
        return addr

    if addr.ipv4_mapped is not None:
        return addr.ipv4_mapped

    # :: and ::1 keep their IPv6 meaning (unspecified, loopback) rather
    # than becoming 0.0.0.0 and 0.0.0.1 like the rest of ::/96
    packed = addr.packed
    if packed[:12] == bytes(12) and int(addr) > 1:
        return ipaddress.IPv4Address(packed[12:])

    return addr
