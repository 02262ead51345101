"""
Validation Metrics Collection

Tallies rule outcomes across a batch of scans for the summary report.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

from roomscan.validate.scan_validator import FLAG_KEYS, ScanFlags


@dataclass
class ValidationMetrics:
    """
    Pass/fail statistics over many scans.

    Flag counts are keyed by the upstream report names so the summary lines up
    with per-scan output.
    """

    # Input statistics
    total_files: int = 0
    scans_processed: int = 0
    skipped_files: int = 0

    # Outcome statistics
    scans_with_errors: int = 0
    flag_counts: dict[str, int] = field(default_factory=lambda: {key: 0 for key in FLAG_KEYS.values()})

    # Performance (seconds)
    time_total: float = 0.0

    errors: list[str] = field(default_factory=list)

    def record(self, flags: ScanFlags) -> None:
        """Fold one scan's flags into the tallies."""
        self.total_files += 1
        self.scans_processed += 1
        for f in fields(flags):
            if getattr(flags, f.name):
                key = FLAG_KEYS[f.name]
                self.flag_counts[key] = self.flag_counts.get(key, 0) + 1
        if flags.has_errors:
            self.scans_with_errors += 1

    def record_skipped(self, message: str) -> None:
        """Count a file that could not be loaded."""
        self.total_files += 1
        self.skipped_files += 1
        self.errors.append(message)

    @property
    def pass_rate(self) -> float:
        if self.scans_processed == 0:
            return 0.0
        return (self.scans_processed - self.scans_with_errors) / self.scans_processed

    def to_dict(self) -> dict[str, Any]:
        """Convert metrics to dictionary for serialization."""
        return {
            "input": {
                "total": self.total_files,
                "processed": self.scans_processed,
                "skipped": self.skipped_files,
            },
            "results": {
                "passed": self.scans_processed - self.scans_with_errors,
                "with_errors": self.scans_with_errors,
                "pass_rate": self.pass_rate,
                "flags": dict(self.flag_counts),
            },
            "performance": {
                "total": self.time_total,
            },
            "errors": {
                "total": len(self.errors),
                "list": self.errors,
            },
        }


__all__ = ["ValidationMetrics"]
