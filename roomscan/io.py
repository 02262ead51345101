"""Loading RawScan documents from disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterator

from loguru import logger
from pydantic import ValidationError

from roomscan.exceptions import ScanLoadError, ScanParseError
from roomscan.schema import RawScan

RAW_SCAN_FILENAME = "rawScan.json"


def parse_raw_scan(payload: Any) -> RawScan:
    """Validate a decoded JSON document into a ``RawScan``.

    Raises:
        ScanParseError: If the document is not an object or does not match
            the RawScan shape.
    """
    if not isinstance(payload, dict):
        raise ScanParseError(
            "RawScan document must be a JSON object",
            {"type": type(payload).__name__},
        )
    try:
        return RawScan.model_validate(payload)
    except ValidationError as exc:
        raise ScanParseError(
            f"Document does not match the RawScan shape: {exc.error_count()} error(s)",
            {"errors": str(exc)},
        ) from exc


def load_raw_scan(path: Path) -> RawScan:
    """Read and parse one scan file.

    Raises:
        ScanLoadError: If the file cannot be read.
        ScanParseError: If the content is not valid JSON or not RawScan-shaped.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ScanLoadError(f"Cannot read scan file: {path}", {"path": str(path)}) from exc
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ScanParseError(f"Invalid JSON in {path}: {exc.msg}", {"path": str(path)}) from exc
    scan = parse_raw_scan(payload)
    logger.debug(
        "Loaded {}: {} walls, {} objects, {} doors",
        path,
        len(scan.walls),
        len(scan.objects),
        len(scan.doors),
    )
    return scan


def discover_scan_files(paths: list[Path]) -> Iterator[Path]:
    """Expand directories into the JSON files they contain.

    Directories holding ``rawScan.json`` files yield only those; otherwise
    every ``*.json`` below the directory is returned. Plain file paths pass
    through unchanged.
    """
    for path in paths:
        if path.is_dir():
            candidates = sorted(path.rglob(RAW_SCAN_FILENAME)) or sorted(path.rglob("*.json"))
            yield from candidates
        else:
            yield path


__all__ = ["discover_scan_files", "load_raw_scan", "parse_raw_scan"]
