"""Custom exception hierarchy for the room-scan checks.

The geometry engine itself never raises on bad scan content; these errors
belong to the edges (configuration and document loading).
"""

from __future__ import annotations


class RoomScanError(Exception):
    """Base exception for all roomscan-specific errors."""

    def __init__(self, message: str, details: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(RoomScanError):
    """Raised when configuration is invalid or missing."""
    pass


class ScanLoadError(RoomScanError):
    """Raised when a scan document cannot be read."""
    pass


class ScanParseError(ScanLoadError):
    """Raised when a scan document is not valid JSON or not RawScan-shaped."""
    pass
