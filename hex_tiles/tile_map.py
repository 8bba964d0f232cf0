"""Tile placement and neighbour consistency for a hex tile map.

Every structural edit goes through :class:`TileMap`, which keeps the
coordinate index and the renderer's visuals in step.  A tile shows a side
piece on each edge whose neighbour sits strictly lower; adding (and, unless
disabled, removing) a tile recomputes the side pieces of all six neighbours.

The map is single threaded.  Renderer callbacks must not call back into a
mutating operation; doing so raises :class:`InternalInvariantViolation`.
"""

from __future__ import annotations

import logging
import math
from contextlib import contextmanager
from typing import Any, Iterable, Iterator, List, Sequence, Tuple

from .config import TileMapSettings
from .errors import InternalInvariantViolation, InvalidArgumentError
from .hexgrid import AXIAL_DIRECTIONS, Axial
from .tile_index import TileIndex
from .tiles import Tile, TileRenderer, Vec3
from .transform import GridTransform, Placement

logger = logging.getLogger(__name__)


class TileMap:
    """Owns the authoritative coordinate -> tile association."""

    def __init__(
        self,
        renderer: TileRenderer,
        *,
        hex_width: float = 1.0,
        placement: Placement | None = None,
        tiles: Iterable[Tile] = (),
        refresh_neighbors_on_remove: bool = True,
    ) -> None:
        self.renderer = renderer
        self.transform = GridTransform(hex_width, placement)
        self.refresh_neighbors_on_remove = refresh_neighbors_on_remove
        self._tiles: TileIndex[Tile] = TileIndex()
        self._active: str | None = None

        # Tiles that already exist in the host scene join at the map's width.
        for tile in tiles:
            if not math.isfinite(tile.elevation):
                raise InvalidArgumentError(f"elevation of tile at {tile.coord} must be finite")
            self._tiles.add(tile.coord, tile)
            tile.diameter = self.hex_width
            self.renderer.set_diameter(tile.handle, self.hex_width)

    @classmethod
    def from_settings(
        cls,
        renderer: TileRenderer,
        settings: TileMapSettings,
        *,
        tiles: Iterable[Tile] = (),
    ) -> "TileMap":
        return cls(
            renderer,
            hex_width=settings.hex_width,
            placement=settings.placement(),
            tiles=tiles,
            refresh_neighbors_on_remove=settings.refresh_neighbors_on_remove,
        )

    # ------------------------------------------------------------------
    @property
    def tiles(self) -> TileIndex[Tile]:
        """Read access to the index; mutate only through this map."""

        return self._tiles

    @property
    def hex_width(self) -> float:
        return self.transform.hex_width

    @hex_width.setter
    def hex_width(self, value: float) -> None:
        # Existing tiles keep their geometry until regenerate_all_tiles().
        self.transform.hex_width = value

    def quantize(self, world_pos: Sequence[float]) -> Axial:
        return self.transform.quantize(world_pos)

    def place(self, coord: Axial, elevation: float) -> Vec3:
        return self.transform.place(coord, elevation)

    def snap(self, world_pos: Sequence[float]) -> Vec3:
        return self.transform.snap(world_pos)

    def tile_at(self, world_pos: Sequence[float]) -> Tile | None:
        return self._tiles.try_get(self.quantize(world_pos))

    def occupied_neighbors(self, coord: Axial) -> List[Tuple[Axial, Tile]]:
        """``(direction, tile)`` for each occupied neighbour, in direction order."""

        found: List[Tuple[Axial, Tile]] = []
        for direction in AXIAL_DIRECTIONS:
            neighbor = self._tiles.try_get(coord + direction)
            if neighbor is not None:
                found.append((direction, neighbor))
        return found

    # ------------------------------------------------------------------
    def create_and_add_tile(self, coord: Axial, elevation: float, material: Any) -> Tile:
        """Add a tile and return it.

        An identical tile already at ``coord`` is returned unchanged; a tile
        with a different elevation or material is replaced.
        """

        if not math.isfinite(elevation):
            raise InvalidArgumentError("elevation must be finite")

        with self._exclusive("create_and_add_tile"):
            existing = self._tiles.try_get(coord)
            if existing is not None:
                if existing.matches(elevation, material):
                    return existing
                self._remove(coord)

            handle = self.renderer.spawn(coord, self.place(coord, elevation))
            tile = Tile(coord=coord, handle=handle, elevation=elevation, material=material)
            tile.diameter = self.hex_width
            try:
                self.renderer.set_diameter(handle, tile.diameter)
                self._tiles.add(coord, tile)
            except Exception:
                # A spawned handle is either indexed or destroyed.
                self.renderer.destroy(handle)
                raise
            logger.debug("Added tile at %s with elevation %s", coord, elevation)

            # Neighbours may gain or lose side pieces now that this cell is filled.
            self._refresh_neighbors(coord)
            self._set_up_side_pieces(tile)
            self._generate_mesh(tile)

            self.renderer.set_material(handle, material)
            return tile

    def try_removing_tile(self, coord: Axial) -> bool:
        """Remove the tile at ``coord``; ``False`` if there was none."""

        with self._exclusive("try_removing_tile"):
            return self._remove(coord)

    def set_up_side_pieces(self, coord: Axial) -> None:
        """Recompute the side pieces of the tile at ``coord``.

        Call this for a tile and its neighbours after changing its elevation.
        """

        with self._exclusive("set_up_side_pieces"):
            tile = self._tiles.try_get(coord)
            if tile is None:
                raise InternalInvariantViolation(
                    f"Tried to set up side pieces for non-existent tile at {coord}"
                )
            self._set_up_side_pieces(tile)

    def regenerate_all_tiles(self) -> None:
        """Re-position and re-generate geometry for all tiles.

        Needed after changing settings that affect every tile, such as the
        hex width.  Side pieces are left as they are.
        """

        with self._exclusive("regenerate_all_tiles"):
            coords = self._tiles.keys()
            for coord in coords:
                tile = self._tiles.get(coord)
                tile.diameter = self.hex_width
                self.renderer.set_diameter(tile.handle, tile.diameter)
                self.renderer.move(tile.handle, self.place(coord, tile.elevation))
                self._generate_mesh(tile)
            logger.info("Regenerated %d tiles at width %s", len(coords), self.hex_width)

    def clear_all_tiles(self) -> None:
        """Destroy every tile and empty the index."""

        with self._exclusive("clear_all_tiles"):
            # Destroy from a snapshot; the index is emptied first.
            doomed = self._tiles.values()
            self._tiles.clear()
            for tile in doomed:
                self.renderer.destroy(tile.handle)
            logger.info("Cleared %d tiles", len(doomed))

    # ------------------------------------------------------------------
    @contextmanager
    def _exclusive(self, operation: str) -> Iterator[None]:
        if self._active is not None:
            raise InternalInvariantViolation(
                f"{operation} called from a renderer callback during {self._active}"
            )
        self._active = operation
        try:
            yield
        finally:
            self._active = None

    def _remove(self, coord: Axial) -> bool:
        tile = self._tiles.try_get(coord)
        if tile is None:
            return False

        self.renderer.destroy(tile.handle)
        self._tiles.remove(coord)
        logger.debug("Removed tile at %s", coord)

        if self.refresh_neighbors_on_remove:
            self._refresh_neighbors(coord)
        return True

    def _refresh_neighbors(self, coord: Axial) -> None:
        for _, neighbor in self.occupied_neighbors(coord):
            self._set_up_side_pieces(neighbor)
            self._generate_mesh(neighbor)

    def _set_up_side_pieces(self, tile: Tile) -> None:
        for direction in AXIAL_DIRECTIONS:
            if direction in tile.side_pieces:
                self.renderer.remove_side_piece(tile.handle, direction)
                del tile.side_pieces[direction]

            neighbor = self._tiles.try_get(tile.coord + direction)
            if neighbor is not None and neighbor.elevation < tile.elevation:
                height = tile.elevation - neighbor.elevation
                logger.debug(
                    "Adding side piece on side %s of %s with height %s",
                    direction,
                    tile.coord,
                    height,
                )
                self.renderer.add_side_piece(tile.handle, direction, height)
                tile.side_pieces[direction] = height

    def _generate_mesh(self, tile: Tile) -> None:
        self.renderer.generate_mesh(tile.handle, tile.coord)


__all__ = ["TileMap"]
