"""
Parser for `ip --json neighbor` output.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import json
import logging

from arplookup.neighbors.errors import DecodeError, TextEncodingError
from arplookup.neighbors.models import NeighborEntry

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


def parse_neighbors(raw: bytes) -> list[NeighborEntry]:
    """Decode a raw neighbor table snapshot into entries.

    Either every record decodes or the whole snapshot is rejected.

    Args:
        raw: Bytes produced by the neighbor table source

    Returns:
        Entries in the order the table listed them

    Raises:
        TextEncodingError: If the bytes are not valid UTF-8
        DecodeError: If the text is not an array of valid neighbor records
    """
    try:
        text = raw.decode(ENCODING)
    except UnicodeDecodeError as e:
        raise TextEncodingError(f"Neighbor table is not valid {ENCODING}: {e}") from e

    try:
        records = json.loads(text)
    except (ValueError, RecursionError) as e:
        raise DecodeError(f"Neighbor table is not valid JSON: {e}") from e

    if not isinstance(records, list):
        raise DecodeError(f"Neighbor table must be a JSON array, got {type(records).__name__}")

    entries = []
    for index, record in enumerate(records):
        try:
            entries.append(NeighborEntry.from_record(record))
        except DecodeError as e:
            raise DecodeError(f"Record {index}: {e}") from e

    logger.debug(f"Parsed {len(entries)} neighbor entries from {len(raw)} bytes")
    return entries
