from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, ValidationInfo, field_validator

from roomscan.exceptions import ConfigurationError
from roomscan.geometry import contract

# Load .env file from project root
_env_path = Path(__file__).parent.parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path)


class ToleranceSettings(BaseModel):
    """Calibration constants for the rule checks (meters / radians)."""

    object_inner_tolerance_m: float = Field(contract.OBJECT_INNER_TOLERANCE, ge=0.0)
    door_clearance_m: float = Field(contract.DOOR_CLEARANCE, gt=0.0)
    door_width_shrink_m: float = Field(contract.DOOR_WIDTH_SHRINK, ge=0.0)
    toilet_gap_max_m: float = Field(contract.TOILET_GAP_MAX, ge=0.0)
    tub_gap_min_m: float = Field(contract.TUB_GAP_MIN, ge=0.0)
    tub_gap_max_m: float = Field(contract.TUB_GAP_MAX, ge=0.0)
    wall_gap_min_m: float = Field(contract.WALL_GAP_MIN, ge=0.0)
    wall_gap_max_m: float = Field(contract.WALL_GAP_MAX, ge=0.0)
    nib_wall_max_m: float = Field(contract.NIB_WALL_MAX_LENGTH, gt=0.0)
    colinear_touch_m: float = Field(contract.COLINEAR_TOUCH_THRESHOLD, ge=0.0)
    colinear_parallel_cosine: float = Field(contract.COLINEAR_PARALLEL_COSINE, gt=0.0, le=1.0)
    crooked_min_rad: float = Field(contract.CROOKED_MIN_DEVIATION, ge=0.0)
    crooked_max_rad: float = Field(contract.CROOKED_MAX_DEVIATION, ge=0.0)
    exterior_perimeter_m: float = Field(contract.EXTERIOR_PERIMETER_THRESHOLD, gt=0.0)

    @field_validator("tub_gap_max_m", "wall_gap_max_m", "crooked_max_rad")
    @classmethod
    def _band_ordered(cls, value: float, info: ValidationInfo) -> float:  # noqa: D401
        lower_field = {
            "tub_gap_max_m": "tub_gap_min_m",
            "wall_gap_max_m": "wall_gap_min_m",
            "crooked_max_rad": "crooked_min_rad",
        }[info.field_name]
        lower = info.data.get(lower_field)
        if lower is not None and value < lower:
            raise ValueError(f"{info.field_name} must not be below {lower_field}")
        return value


class LoggingSettings(BaseModel):
    level: str = "INFO"
    json_format: bool = False
    log_file: Path | None = None

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:  # noqa: D401
        if isinstance(value, str):
            return value.upper()
        return value


class Settings(BaseModel):
    tolerances: ToleranceSettings = Field(default_factory=ToleranceSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def load(cls, path: Path | None = None) -> "Settings":
        """Load settings from YAML configuration file.

        Args:
            path: Optional path to configuration file. If not provided, uses
                ROOMSCAN_CONFIG environment variable or defaults to config/default.yaml.
                A missing default file yields the built-in defaults.

        Returns:
            Settings instance with loaded configuration.

        Raises:
            ConfigurationError: If an explicit file is missing or the configuration is invalid.
        """
        explicit = path or (Path(os.environ["ROOMSCAN_CONFIG"]) if os.getenv("ROOMSCAN_CONFIG") else None)
        config_path = explicit or Path("config/default.yaml")
        if not config_path.exists():
            if explicit is not None:
                raise ConfigurationError(
                    f"Configuration file not found: {config_path}",
                    {"path": str(config_path)},
                )
            return cls()
        with config_path.open("r", encoding="utf-8") as fp:
            try:
                payload = yaml.safe_load(fp) or {}
            except yaml.YAMLError as exc:
                raise ConfigurationError(f"Invalid YAML in {config_path}: {exc}", {"path": str(config_path)}) from exc
        try:
            return cls(**payload)
        except (TypeError, ValidationError) as exc:
            raise ConfigurationError(f"Invalid configuration: {exc}", {"path": str(config_path)}) from exc


@lru_cache(maxsize=1)
def get_settings(path: str | None = None) -> Settings:
    return Settings.load(Path(path) if path else None)


__all__ = [
    "LoggingSettings",
    "Settings",
    "ToleranceSettings",
    "get_settings",
]
