"""Validated tile map settings and their on-disk location.

Settings are stored as JSON in the per-user configuration directory
reported by :func:`platformdirs.user_config_dir`.  Writes go through a
temporary file which then replaces the target, so a crash never leaves a
half-written file behind.
"""

from __future__ import annotations

from pathlib import Path
from typing import Tuple

from platformdirs import user_config_dir
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .transform import GridTransform, Placement

SETTINGS_FILENAME = "tile_map.json"


def default_settings_path() -> Path:
    return Path(user_config_dir("hex_tiles")) / SETTINGS_FILENAME


class TileMapSettings(BaseModel):
    """Global parameters shared by every tile of a map."""

    model_config = ConfigDict(extra="forbid")

    hex_width: float = Field(default=1.0, gt=0.0, allow_inf_nan=False)
    origin: Tuple[float, float, float] = Field(default=(0.0, 0.0, 0.0))
    yaw_degrees: float = Field(default=0.0)
    # When false, removing a tile leaves stale side pieces on its neighbours.
    refresh_neighbors_on_remove: bool = Field(default=True)

    @field_validator("hex_width", "yaw_degrees")
    @classmethod
    def _coerce_float(cls, value: float) -> float:
        return float(value)

    def placement(self) -> Placement:
        return Placement(origin=self.origin, yaw_degrees=self.yaw_degrees)

    def grid_transform(self) -> GridTransform:
        return GridTransform(self.hex_width, self.placement())


def load_settings(path: Path | None = None) -> TileMapSettings:
    """Read settings from ``path``; a missing file yields the defaults.

    Malformed content raises :class:`pydantic.ValidationError`.
    """

    path = path or default_settings_path()
    if not path.exists():
        return TileMapSettings()
    return TileMapSettings.model_validate_json(path.read_text(encoding="utf-8"))


def save_settings(settings: TileMapSettings, path: Path | None = None) -> Path:
    path = path or default_settings_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_suffix(path.suffix + ".tmp")
    temp_path.write_text(settings.model_dump_json(indent=2), encoding="utf-8")
    temp_path.replace(path)
    return path


__all__ = [
    "SETTINGS_FILENAME",
    "TileMapSettings",
    "default_settings_path",
    "load_settings",
    "save_settings",
]
