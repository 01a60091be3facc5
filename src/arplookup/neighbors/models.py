"""
Data models for neighbor table entries.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import ipaddress
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from arplookup.neighbors.errors import DecodeError

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address

# Colon separated hex octets (Ethernet, InfiniBand, FireWire, ...)
_HEX_LLADDR_RE = re.compile(r"^[0-9a-fA-F]{1,2}(:[0-9a-fA-F]{1,2})+$")


class ReachabilityState(str, Enum):
    """Neighbor Unreachability Detection state reported by the kernel."""
    DELAY = "DELAY"
    FAILED = "FAILED"
    INCOMPLETE = "INCOMPLETE"
    REACHABLE = "REACHABLE"
    STALE = "STALE"

    @classmethod
    def from_token(cls, token: Any) -> "ReachabilityState":
        """Parse a state token, case-insensitively.

        Raises:
            DecodeError: If the token is not one of the known states
        """
        if not isinstance(token, str):
            raise DecodeError(f"State token must be a string, got {token!r}")
        try:
            return cls(token.upper())
        except ValueError:
            raise DecodeError(f"Unknown neighbor state: {token!r}") from None


@dataclass(frozen=True)
class LinkLayerAddress:
    """A hardware address, stored lowercased.

    Equality and hashing use the lowercased form, so two spellings that
    differ only in case compare equal.
    """
    value: str

    def __post_init__(self):
        object.__setattr__(self, "value", self.value.lower())

    def __str__(self) -> str:
        return self.value


def is_valid_lladdr(text: str) -> bool:
    """Check the syntax of a hardware address as printed by `ip`.

    Tunnel devices report their peer as an IP address: a dotted IPv4
    quad for ipip and gre, an IPv6 address for ip6gre and ip6tnl.
    """
    if _HEX_LLADDR_RE.match(text):
        return True
    try:
        ipaddress.ip_address(text)
    except ValueError:
        return False
    return True


@dataclass(frozen=True)
class NeighborEntry:
    """A single row of the kernel neighbor table."""
    dst: IPAddress
    dev: str
    lladdr: LinkLayerAddress | None = None
    state: tuple[ReachabilityState, ...] = field(default_factory=tuple)

    @property
    def is_resolved(self) -> bool:
        """Whether the entry carries a link-layer address."""
        return self.lladdr is not None

    @classmethod
    def from_record(cls, data: Any) -> "NeighborEntry":
        """Create a NeighborEntry from one `ip --json neighbor` record.

        Raises:
            DecodeError: If the record is missing fields or has bad values
        """
        if not isinstance(data, dict):
            raise DecodeError(f"Neighbor record must be an object, got {type(data).__name__}")

        dst = data.get("dst")
        if not isinstance(dst, str):
            raise DecodeError("Neighbor record is missing 'dst'")
        try:
            dst_addr = ipaddress.ip_address(dst)
        except ValueError:
            raise DecodeError(f"Malformed destination address: {dst!r}") from None

        dev = data.get("dev")
        if not isinstance(dev, str):
            raise DecodeError(f"Neighbor record for {dst} is missing 'dev'")

        lladdr = None
        raw_lladdr = data.get("lladdr")
        if raw_lladdr is not None:
            if not isinstance(raw_lladdr, str) or not is_valid_lladdr(raw_lladdr):
                raise DecodeError(f"Malformed link-layer address for {dst}: {raw_lladdr!r}")
            lladdr = LinkLayerAddress(raw_lladdr)

        states = data.get("state")
        if not isinstance(states, list) or not states:
            raise DecodeError(f"Neighbor record for {dst} has no 'state'")

        return cls(
            dst=dst_addr,
            dev=dev,
            lladdr=lladdr,
            state=tuple(ReachabilityState.from_token(s) for s in states),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "dst": str(self.dst),
            "dev": self.dev,
            "lladdr": str(self.lladdr) if self.lladdr else None,
            "state": [s.value for s in self.state],
        }
