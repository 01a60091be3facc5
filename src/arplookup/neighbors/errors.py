"""
Error taxonomy for neighbor table lookups.

Every failure is tagged with an ErrorKind so callers can tell a table
source that could not run (worth retrying) from output that could not
be decoded (usually fatal).

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Kind of lookup failure."""
    IO = "io"
    ENCODING = "encoding"
    DECODE = "decode"
    UNSUPPORTED = "unsupported"


class NeighborLookupError(Exception):
    """Base class for all neighbor lookup failures."""

    kind: ErrorKind


class SourceUnavailableError(NeighborLookupError):
    """The neighbor table source could not produce output."""

    kind = ErrorKind.IO

    def __init__(
        self,
        message: str,
        returncode: int | None = None,
        stderr: str = "",
    ):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr

    def __str__(self) -> str:
        message = super().__str__()
        if self.stderr:
            return f"{message}: {self.stderr.strip()}"
        return message


class TextEncodingError(NeighborLookupError):
    """The table output was not valid UTF-8 text."""

    kind = ErrorKind.ENCODING


# Name used by callers that think of this as the "encoding" failure kind
EncodingError = TextEncodingError


class DecodeError(NeighborLookupError):
    """The table text did not match the expected record structure."""

    kind = ErrorKind.DECODE


class UnsupportedPlatformError(NeighborLookupError):
    """The current platform exposes no supported neighbor table."""

    kind = ErrorKind.UNSUPPORTED
