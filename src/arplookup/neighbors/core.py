"""
Neighbor table aggregation and IP to link-layer address lookup.

Every public call reads the table afresh; nothing is cached between
calls, so concurrent callers share no state.

Lookups compare normalized addresses on both sides: the query and each
entry's destination are collapsed to plain IPv4 where an IPv4 equivalent
exists. The mapping returned by neighbors() keeps each destination as
the kernel reported it.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
from typing import Iterable

from arplookup.neighbors.config import NeighborConfig
from arplookup.neighbors.models import IPAddress, LinkLayerAddress, NeighborEntry
from arplookup.neighbors.normalize import normalize_ip
from arplookup.neighbors.parser import parse_neighbors
from arplookup.neighbors.source import NeighborTableSource, default_source

logger = logging.getLogger(__name__)


def build_table(entries: Iterable[NeighborEntry]) -> dict[IPAddress, LinkLayerAddress]:
    """Map each resolved destination to its link-layer address.

    Entries without a link-layer address are skipped. When a destination
    appears more than once the later entry wins.
    """
    table: dict[IPAddress, LinkLayerAddress] = {}
    for entry in entries:
        if entry.lladdr is None:
            continue
        previous = table.get(entry.dst)
        if previous is not None and previous != entry.lladdr:
            logger.debug(f"Duplicate entry for {entry.dst}: {previous} replaced by {entry.lladdr}")
        table[entry.dst] = entry.lladdr
    return table


def find_lladdr(entries: Iterable[NeighborEntry], ip: str | IPAddress) -> LinkLayerAddress | None:
    """Return the link-layer address of the first entry matching ip."""
    target = normalize_ip(ip)
    for entry in entries:
        if normalize_ip(entry.dst) != target:
            continue
        if entry.lladdr is not None:
            return entry.lladdr
    return None


class NeighborResolver:
    """Resolve IP addresses to link-layer addresses via the neighbor table."""

    def __init__(
        self,
        source: NeighborTableSource | None = None,
        config: NeighborConfig | None = None,
    ):
        """Initialize resolver.

        Args:
            source: Table source (default: `ip --json neighbor`)
            config: Configuration for the default source

        Raises:
            UnsupportedPlatformError: If no source is given and the
                platform has no supported neighbor table
        """
        self.source = source if source is not None else default_source(config)

    def entries(self) -> list[NeighborEntry]:
        """Fetch and parse a fresh snapshot of the neighbor table."""
        return parse_neighbors(self.source.fetch())

    def neighbors(self) -> dict[IPAddress, LinkLayerAddress]:
        """Get the current IP to link-layer address mapping."""
        table = build_table(self.entries())
        logger.debug(f"Neighbor table has {len(table)} resolved entries")
        return table

    def lookup(self, ip: str | IPAddress) -> LinkLayerAddress | None:
        """Get the link-layer address currently answering for ip.

        Returns:
            The address, or None if no resolved entry matches

        Raises:
            ValueError: If ip is not a valid IP address
            NeighborLookupError: If the table cannot be read or decoded
        """
        # Validate before running anything
        target = normalize_ip(ip)
        lladdr = find_lladdr(self.entries(), target)
        if lladdr is None:
            logger.debug(f"No neighbor found for {target}")
        return lladdr


def neighbors(config: NeighborConfig | None = None) -> dict[IPAddress, LinkLayerAddress]:
    """Get the current neighbor mapping using the default source."""
    return NeighborResolver(config=config).neighbors()


def lookup(ip: str | IPAddress, config: NeighborConfig | None = None) -> LinkLayerAddress | None:
    """Look up one IP address using the default source."""
    return NeighborResolver(config=config).lookup(ip)
