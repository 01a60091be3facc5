"""
Neighbor table source backed by iproute2.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
import subprocess
import sys
from typing import Protocol

from arplookup.neighbors.config import NeighborConfig
from arplookup.neighbors.errors import SourceUnavailableError, UnsupportedPlatformError

logger = logging.getLogger(__name__)


class NeighborTableSource(Protocol):
    """Anything that can produce a raw JSON snapshot of the neighbor table."""

    def fetch(self) -> bytes:
        ...


def is_supported_platform(platform: str | None = None) -> bool:
    """Check whether the platform exposes `ip --json neighbor`."""
    return (platform or sys.platform).startswith("linux")


class IPCommandSource:
    """Reads the neighbor table by running `ip --json neighbor`."""

    def __init__(self, config: NeighborConfig | None = None):
        self.config = config or NeighborConfig.from_env()

    def fetch(self) -> bytes:
        """Run the ip command and return its stdout.

        Raises:
            SourceUnavailableError: If the command cannot run or fails
        """
        cmd = self.config.command()
        logger.debug(f"Running {' '.join(cmd)}")

        try:
            result = subprocess.run(cmd, capture_output=True)
        except OSError as e:
            logger.error(f"Failed to run {cmd[0]}: {e}")
            raise SourceUnavailableError(f"Failed to run {cmd[0]}: {e}") from e

        stderr = result.stderr.decode("utf-8", errors="replace")
        if result.returncode != 0:
            logger.error(f"{cmd[0]} exited with status {result.returncode}")
            raise SourceUnavailableError(
                f"{cmd[0]} exited with status {result.returncode}",
                returncode=result.returncode,
                stderr=stderr,
            )

        if stderr.strip():
            logger.warning(f"{cmd[0]} reported: {stderr.strip()}")

        logger.debug(f"Read {len(result.stdout)} bytes of neighbor table")
        return result.stdout


def default_source(config: NeighborConfig | None = None) -> IPCommandSource:
    """Create the platform's neighbor table source.

    Raises:
        UnsupportedPlatformError: If the platform has no supported table
    """
    if not is_supported_platform():
        raise UnsupportedPlatformError(
            f"Neighbor table lookups are not supported on {sys.platform}"
        )
    return IPCommandSource(config)
