"""Hex tile map: axial coordinates, tile index and side-piece consistency."""

from .errors import (
    HexTileError,
    InternalInvariantViolation,
    InvalidArgumentError,
    TileAlreadyExistsError,
    TileNotFoundError,
)
from .hexgrid import Axial, Cube, Offset
from .tile_index import TileIndex
from .tiles import Tile, TileRenderer
from .transform import GridTransform, Placement
from .config import TileMapSettings, load_settings, save_settings
from .tile_map import TileMap
from .scene import InMemoryScene

__version__ = "0.1.0"

__all__ = [
    "Axial",
    "Cube",
    "GridTransform",
    "HexTileError",
    "InMemoryScene",
    "InternalInvariantViolation",
    "InvalidArgumentError",
    "Offset",
    "Placement",
    "Tile",
    "TileAlreadyExistsError",
    "TileIndex",
    "TileMap",
    "TileMapSettings",
    "TileNotFoundError",
    "TileRenderer",
    "load_settings",
    "save_settings",
]
