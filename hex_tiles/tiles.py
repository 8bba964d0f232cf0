"""Tile records and the renderer capability set the tile map drives."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Protocol, Tuple

from .hexgrid import Axial

Vec3 = Tuple[float, float, float]
TileHandle = Hashable


class TileRenderer(Protocol):
    """Visual side of a tile, owned by the host scene.

    Implementations must not mutate the tile map from inside these calls.
    """

    def spawn(self, coord: Axial, world_position: Vec3) -> TileHandle:
        ...

    def destroy(self, handle: TileHandle) -> None:
        ...

    def move(self, handle: TileHandle, world_position: Vec3) -> None:
        ...

    def set_diameter(self, handle: TileHandle, width: float) -> None:
        ...

    def set_material(self, handle: TileHandle, material: Any) -> None:
        ...

    def generate_mesh(self, handle: TileHandle, coord: Axial) -> None:
        ...

    def add_side_piece(self, handle: TileHandle, direction: Axial, height: float) -> None:
        ...

    def remove_side_piece(self, handle: TileHandle, direction: Axial) -> None:
        ...


@dataclass(slots=True, eq=False)
class Tile:
    """A placed tile.

    ``elevation`` may be changed by the host, after which
    :meth:`~hex_tiles.tile_map.TileMap.set_up_side_pieces` must be called for
    the tile and each of its neighbours.
    """

    coord: Axial
    handle: TileHandle
    elevation: float = 0.0
    material: Any = None
    diameter: float = 1.0
    side_pieces: dict[Axial, float] = field(default_factory=dict)

    def has_side_piece(self, direction: Axial) -> bool:
        return direction in self.side_pieces

    def matches(self, elevation: float, material: Any) -> bool:
        return self.elevation == elevation and self.material == material


__all__ = ["Tile", "TileHandle", "TileRenderer", "Vec3"]
