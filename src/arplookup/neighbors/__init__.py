"""
Neighbor table (ARP / NDP cache) lookups.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from arplookup.neighbors.config import NeighborConfig
from arplookup.neighbors.core import (
    NeighborResolver,
    build_table,
    find_lladdr,
    lookup,
    neighbors,
)
from arplookup.neighbors.errors import (
    DecodeError,
    EncodingError,
    ErrorKind,
    NeighborLookupError,
    SourceUnavailableError,
    TextEncodingError,
    UnsupportedPlatformError,
)
from arplookup.neighbors.models import (
    LinkLayerAddress,
    NeighborEntry,
    ReachabilityState,
)
from arplookup.neighbors.normalize import normalize_ip
from arplookup.neighbors.parser import parse_neighbors
from arplookup.neighbors.source import (
    IPCommandSource,
    NeighborTableSource,
    default_source,
    is_supported_platform,
)

__all__ = [
    "NeighborConfig",
    "NeighborResolver",
    "build_table",
    "find_lladdr",
    "lookup",
    "neighbors",
    "DecodeError",
    "EncodingError",
    "ErrorKind",
    "NeighborLookupError",
    "SourceUnavailableError",
    "TextEncodingError",
    "UnsupportedPlatformError",
    "LinkLayerAddress",
    "NeighborEntry",
    "ReachabilityState",
    "normalize_ip",
    "parse_neighbors",
    "IPCommandSource",
    "NeighborTableSource",
    "default_source",
    "is_supported_platform",
]
