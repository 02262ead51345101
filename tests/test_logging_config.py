from __future__ import annotations

import json
from pathlib import Path

from loguru import logger

from roomscan.logging_config import JSONFormatter, configure_from_settings, setup_logging
from roomscan.settings import LoggingSettings


def test_json_formatter_escapes_braces_for_loguru(tmp_path: Path) -> None:
    captured: list[str] = []
    logger.remove()
    logger.add(captured.append, format=JSONFormatter(), level="INFO")
    try:
        logger.bind(scan="a/rawScan.json").info("Wall {} flagged", "{w0}")
    finally:
        logger.remove()

    entry = json.loads(captured[0])
    assert entry["message"] == "Wall {w0} flagged"
    assert entry["level"] == "INFO"
    assert entry["scan"] == "a/rawScan.json"


def test_setup_logging_creates_log_directory(tmp_path: Path) -> None:
    log_file = tmp_path / "nested" / "roomscan.log"
    setup_logging(level="DEBUG", log_file=log_file)
    logger.debug("hello")
    assert log_file.parent.is_dir()
    assert "hello" in log_file.read_text(encoding="utf-8")


def test_cli_overrides_win_over_configured_logging(tmp_path: Path) -> None:
    configured = LoggingSettings(level="warning", json_format=False)
    log_file = tmp_path / "override.log"
    effective = configure_from_settings(configured, level="debug", json_format=True, log_file=log_file)
    try:
        logger.debug("override active")
        assert (effective.level, effective.json_format, effective.log_file) == ("DEBUG", True, log_file)
        entry = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
        assert entry["message"] == "override active"
    finally:
        logger.remove()


def test_configured_logging_used_without_overrides() -> None:
    configured = LoggingSettings(level="error")
    try:
        assert configure_from_settings(configured) == configured
    finally:
        logger.remove()
