"""
arplookup - resolve local network neighbors from the kernel neighbor table.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

__version__ = "0.1.0"

from arplookup.neighbors import (
    LinkLayerAddress,
    NeighborEntry,
    NeighborLookupError,
    NeighborResolver,
    ReachabilityState,
    lookup,
    neighbors,
)

__all__ = [
    "__version__",
    "LinkLayerAddress",
    "NeighborEntry",
    "NeighborLookupError",
    "NeighborResolver",
    "ReachabilityState",
    "lookup",
    "neighbors",
]
