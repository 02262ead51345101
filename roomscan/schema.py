"""Input schema for raw room-scan documents."""

from __future__ import annotations

from typing import Any, FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ScanEntity(BaseModel):
    """Common placement fields for every scanned element."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    transform: List[float] = Field(default_factory=list, description="Row-major 4x4 affine matrix")
    dimensions: List[float] = Field(default_factory=list, description="Local [length, height, depth] in meters")
    story: Optional[int] = None
    identifier: Optional[str] = None

    @field_validator("transform", "dimensions", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        if value is None:
            return []
        return value


class Wall(ScanEntity):
    """Wall surface; ``polygonCorners`` are local (X, Z) points when present."""

    polygonCorners: Optional[List[List[float]]] = None
    curve: Optional[Any] = None


class ObjectItem(ScanEntity):
    """Furniture or fixture tagged with capability categories."""

    category: FrozenSet[str] = Field(default_factory=frozenset)
    parentIdentifier: Optional[str] = None

    @field_validator("category", mode="before")
    @classmethod
    def _category_tags(cls, value: Any) -> Any:
        # Upstream encodes tags as keys: {"toilet": {}}
        if value is None:
            return frozenset()
        if isinstance(value, dict):
            return frozenset(value.keys())
        if isinstance(value, str):
            return frozenset([value])
        return value

    def has_category(self, tag: str) -> bool:
        return tag in self.category


class Door(ScanEntity):
    parentIdentifier: Optional[str] = None


class Window(ScanEntity):
    parentIdentifier: Optional[str] = None


class Opening(ScanEntity):
    """Opening cut into a wall; ``parentIdentifier`` names the host wall."""

    parentIdentifier: Optional[str] = None


class Floor(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    polygonCorners: List[List[float]] = Field(default_factory=list)
    story: Optional[int] = None

    @field_validator("polygonCorners", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        if value is None:
            return []
        return value


class RawScan(BaseModel):
    """One scan artifact as produced by the capture app."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    story: int = 0
    walls: List[Wall] = Field(default_factory=list)
    objects: List[ObjectItem] = Field(default_factory=list)
    doors: List[Door] = Field(default_factory=list)
    windows: List[Window] = Field(default_factory=list)
    openings: List[Opening] = Field(default_factory=list)
    floors: List[Floor] = Field(default_factory=list)

    def find_wall(self, identifier: str) -> Wall | None:
        for wall in self.walls:
            if wall.identifier == identifier:
                return wall
        return None


__all__ = ["Door", "Floor", "ObjectItem", "Opening", "RawScan", "ScanEntity", "Wall", "Window"]
