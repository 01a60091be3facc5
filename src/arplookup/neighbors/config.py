"""
Configuration for the neighbor table source.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import os
import shlex
import shutil
from dataclasses import dataclass, field
from typing import Any


@dataclass
class NeighborConfig:
    """Configuration for reading the neighbor table."""

    # iproute2 binary, name on PATH or absolute path
    ip_command: str = "ip"

    # Extra global options placed before the "neighbor" object (e.g. -4, -n blue)
    extra_args: list[str] = field(default_factory=list)

    @classmethod
    def from_env(cls) -> "NeighborConfig":
        """Load configuration from environment variables."""
        return cls(
            ip_command=os.environ.get("ARPLOOKUP_IP_COMMAND", "ip"),
            extra_args=shlex.split(os.environ.get("ARPLOOKUP_IP_ARGS", "")),
        )

    def command(self) -> list[str]:
        """Build the argument vector that dumps the table as JSON."""
        return [self.ip_command, "--json", *self.extra_args, "neighbor"]

    def validate(self) -> list[str]:
        """Validate configuration. Returns list of errors."""
        errors = []

        if not self.ip_command:
            errors.append("ip command must not be empty")
        elif shutil.which(self.ip_command) is None:
            errors.append(f"ip command not found: {self.ip_command}")

        if "neighbor" in self.extra_args or "neigh" in self.extra_args:
            errors.append("extra args must not name the neighbor object")

        return errors

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "ip_command": self.ip_command,
            "extra_args": list(self.extra_args),
            "command": self.command(),
        }
