"""Headless tile renderer that keeps visuals as plain records."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from itertools import count
from typing import Any, Dict, List

from .errors import InvalidArgumentError, TileNotFoundError
from .hexgrid import Axial, HexMesh, build_hex_mesh
from .tiles import Vec3

logger = logging.getLogger(__name__)


@dataclass
class TileVisual:
    """Everything the scene knows about one spawned tile."""

    name: str
    coord: Axial
    position: Vec3
    diameter: float = 1.0
    material: Any = None
    mesh: HexMesh | None = None
    side_pieces: Dict[Axial, float] = field(default_factory=dict)
    mesh_generations: int = 0


class InMemoryScene:
    """A :class:`~hex_tiles.tiles.TileRenderer` with no engine behind it.

    Handles are integers.  Destroyed visuals are dropped; their handles are
    kept in :attr:`destroyed` in destruction order.
    """

    def __init__(self) -> None:
        self.visuals: Dict[int, TileVisual] = {}
        self.destroyed: List[int] = []
        self._ids = count(1)

    def __len__(self) -> int:
        return len(self.visuals)

    def visual(self, handle: int) -> TileVisual:
        try:
            return self.visuals[handle]
        except KeyError as exc:
            raise TileNotFoundError(f"no visual with handle {handle}") from exc

    # ------------------------------------------------------------------
    def spawn(self, coord: Axial, world_position: Vec3) -> int:
        handle = next(self._ids)
        self.visuals[handle] = TileVisual(
            name=f"Tile [{coord.q}, {coord.r}]",
            coord=coord,
            position=tuple(world_position),  # type: ignore[arg-type]
        )
        return handle

    def destroy(self, handle: int) -> None:
        self.visual(handle)
        del self.visuals[handle]
        self.destroyed.append(handle)

    def move(self, handle: int, world_position: Vec3) -> None:
        self.visual(handle).position = tuple(world_position)  # type: ignore[assignment]

    def set_diameter(self, handle: int, width: float) -> None:
        self.visual(handle).diameter = width

    def set_material(self, handle: int, material: Any) -> None:
        self.visual(handle).material = material

    def generate_mesh(self, handle: int, coord: Axial) -> None:
        visual = self.visual(handle)
        visual.mesh = build_hex_mesh(visual.diameter)
        visual.mesh_generations += 1
        logger.debug("Generated mesh for %s", visual.name)

    def add_side_piece(self, handle: int, direction: Axial, height: float) -> None:
        if height <= 0:
            raise InvalidArgumentError("side piece height must be positive")
        self.visual(handle).side_pieces[direction] = height

    def remove_side_piece(self, handle: int, direction: Axial) -> None:
        self.visual(handle).side_pieces.pop(direction, None)


__all__ = ["InMemoryScene", "TileVisual"]
